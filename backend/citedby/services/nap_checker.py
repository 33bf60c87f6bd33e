"""
NAP Consistency Checker
Validates Name, Address, Phone consistency across citation listings
"""

import logging
from typing import Dict, List, Optional, Tuple

from citedby.config import CITATION_STATUS_THRESHOLDS, NAP_SIMILARITY_THRESHOLD
from citedby.models import (
    CitationNapData,
    CitationScore,
    CitationStatus,
    IssueSeverity,
    NapCheckResult,
    NapData,
    NapField,
    NapIssue,
)
from .normalize import (
    normalize_address,
    normalize_business_name,
    normalize_phone_number,
    round_half_up,
    string_similarity,
)

logger = logging.getLogger(__name__)

SEVERITY_ORDER = {
    IssueSeverity.HIGH: 0,
    IssueSeverity.MEDIUM: 1,
    IssueSeverity.LOW: 2,
}

# (field, mismatch message)
FieldMismatch = Tuple[NapField, str]


def calculate_nap_score(
    canonical: NapData,
    listing: CitationNapData,
) -> Tuple[int, List[FieldMismatch]]:
    """
    Compare one listing against the canonical NAP.

    Only fields present on the listing are compared. Name and address use
    bigram similarity, phone uses equality after normalization.

    Returns:
        (score 0-100, list of (field, message) for every mismatch)
    """
    mismatches: List[FieldMismatch] = []
    matches = 0
    total = 0

    if listing.name:
        total += 1
        similarity = string_similarity(canonical.name.lower(), listing.name.lower())
        if similarity >= NAP_SIMILARITY_THRESHOLD:
            matches += 1
        else:
            mismatches.append(
                (NapField.NAME, f'Name mismatch: "{listing.name}" vs "{canonical.name}"')
            )

    if listing.address:
        total += 1
        similarity = string_similarity(
            normalize_address(canonical.address),
            normalize_address(listing.address),
        )
        if similarity >= NAP_SIMILARITY_THRESHOLD:
            matches += 1
        else:
            mismatches.append(
                (NapField.ADDRESS, f'Address mismatch: "{listing.address}" vs "{canonical.address}"')
            )

    if listing.phone:
        total += 1
        if normalize_phone_number(canonical.phone) == normalize_phone_number(listing.phone):
            matches += 1
        else:
            mismatches.append(
                (NapField.PHONE, f'Phone mismatch: "{listing.phone}" vs "{canonical.phone}"')
            )

    score = round_half_up(matches / total * 100) if total > 0 else 0
    return score, mismatches


def determine_severity(field: NapField, score: int) -> IssueSeverity:
    """Phone and name drift is critical, address variation is tolerated more"""
    if field in (NapField.PHONE, NapField.NAME):
        return IssueSeverity.HIGH if score < 50 else IssueSeverity.MEDIUM
    return IssueSeverity.MEDIUM if score < 30 else IssueSeverity.LOW


def check_nap_consistency(
    canonical: NapData,
    citations: List[CitationNapData],
) -> NapCheckResult:
    """
    Check NAP consistency across all citations.

    Args:
        canonical: The business's own NAP
        citations: NAP as claimed by each listing

    Returns:
        NapCheckResult with per-source scores, severity-sorted issues and
        recommendations. No citations yields an overall score of 0.
    """
    issues: List[NapIssue] = []
    citation_scores: List[CitationScore] = []

    for citation in citations:
        score, mismatches = calculate_nap_score(canonical, citation)

        for field, message in mismatches:
            issues.append(NapIssue(
                severity=determine_severity(field, score),
                field=field,
                source=citation.source,
                expected=getattr(canonical, field.value),
                found=getattr(citation, field.value) or "Not provided",
                message=message,
            ))

        citation_scores.append(CitationScore(
            source=citation.source,
            score=score,
            issues=[message for _, message in mismatches],
        ))

    if citation_scores:
        overall_score = round_half_up(sum(c.score for c in citation_scores) / len(citation_scores))
    else:
        overall_score = 0

    issues.sort(key=lambda issue: SEVERITY_ORDER[issue.severity])

    logger.debug(
        f"NAP check for '{canonical.name}': {overall_score} over "
        f"{len(citation_scores)} citations, {len(issues)} issues"
    )

    return NapCheckResult(
        overall_score=overall_score,
        issues=issues,
        citation_scores=citation_scores,
        recommendations=generate_recommendations(issues, overall_score),
    )


def generate_recommendations(issues: List[NapIssue], overall_score: int) -> List[str]:
    """Derive remediation advice from issue patterns and the overall score"""
    recommendations = []

    high_priority = [i for i in issues if i.severity == IssueSeverity.HIGH]
    if high_priority:
        recommendations.append(
            f"Fix {len(high_priority)} critical NAP inconsistencies immediately. "
            "These can confuse AI systems."
        )

    fields = {i.field for i in issues}
    if NapField.PHONE in fields:
        recommendations.append(
            "Standardize phone number format across all listings to +41 XX XXX XX XX format."
        )
    if NapField.NAME in fields:
        recommendations.append(
            "Use your exact legal business name consistently. "
            "Minor variations can fragment your entity identity."
        )
    if NapField.ADDRESS in fields:
        recommendations.append(
            "Standardize address format. Use consistent abbreviations (Str. vs Strasse, etc.)."
        )

    if overall_score < 50:
        recommendations.append(
            "Your NAP consistency is critical. "
            "AI systems may not recognize your business as a single entity."
        )
    elif overall_score < 70:
        recommendations.append(
            "Improve NAP consistency to strengthen your entity identity in AI systems."
        )
    elif overall_score < 90:
        recommendations.append(
            "Good NAP consistency. Focus on the remaining inconsistencies for optimal AI visibility."
        )

    return recommendations


def citation_status_for_score(score: int) -> CitationStatus:
    """Status a citation moves to after a NAP check"""
    if score < CITATION_STATUS_THRESHOLDS["conflict_below"]:
        return CitationStatus.CONFLICT
    if score >= CITATION_STATUS_THRESHOLDS["verified_from"]:
        return CitationStatus.VERIFIED
    return CitationStatus.SUBMITTED


def citation_status_updates(result: NapCheckResult) -> Dict[str, CitationStatus]:
    """
    Status transitions worth persisting: citations with issues, or verified ones.
    Clean citations that are merely "submitted" keep their current status.
    """
    updates = {}
    for citation_score in result.citation_scores:
        status = citation_status_for_score(citation_score.score)
        if citation_score.issues or status == CitationStatus.VERIFIED:
            updates[citation_score.source] = status
    return updates


def build_canonical_nap(
    name: str,
    address_street: Optional[str] = None,
    address_city: Optional[str] = None,
    address_postal: Optional[str] = None,
    address_canton: Optional[str] = None,
    phone: Optional[str] = None,
) -> NapData:
    """Build the canonical NAP from structured business fields"""
    address_parts = []
    if address_street:
        address_parts.append(address_street)
    if address_postal and address_city:
        address_parts.append(f"{address_postal} {address_city}")
    elif address_city:
        address_parts.append(address_city)
    if address_canton:
        address_parts.append(address_canton)

    return NapData(
        name=normalize_business_name(name),
        address=", ".join(address_parts),
        phone=normalize_phone_number(phone) if phone else "",
    )


def format_nap_for_display(nap: NapData) -> str:
    parts = []
    if nap.name:
        parts.append(f"Name: {nap.name}")
    if nap.address:
        parts.append(f"Address: {nap.address}")
    if nap.phone:
        parts.append(f"Phone: {nap.phone}")
    return "\n".join(parts)
