"""
NAP Consistency API Routes
Check a business's Name, Address, Phone against its citation listings
"""

import logging

from fastapi import APIRouter

from citedby.models import CitationNapData
from citedby.schemas import (
    NapCheckRequest,
    NapCheckResponse,
    NapCheckResultResponse,
    NapDataResponse,
)
from citedby.services import (
    build_canonical_nap,
    check_nap_consistency,
    citation_status_updates,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/check", response_model=NapCheckResponse)
async def check_nap(request: NapCheckRequest):
    """
    Run a NAP consistency check.

    The canonical NAP is built from the structured business fields. The
    response also carries the status each citation should move to; storing
    it is left to the caller.
    """
    business = request.business
    canonical = build_canonical_nap(
        name=business.name,
        address_street=business.address_street,
        address_city=business.address_city,
        address_postal=business.address_postal,
        address_canton=business.address_canton,
        phone=business.phone,
    )

    citations = [
        CitationNapData(source=c.source, name=c.name, address=c.address, phone=c.phone)
        for c in request.citations
    ]
    result = check_nap_consistency(canonical, citations)

    logger.info(
        f"NAP check for '{canonical.name}': score {result.overall_score}, "
        f"{len(result.issues)} issues across {len(citations)} citations"
    )

    return NapCheckResponse(
        canonical_nap=NapDataResponse.model_validate(canonical),
        result=NapCheckResultResponse.model_validate(result),
        citation_statuses=citation_status_updates(result),
        message=f"NAP check completed. Score: {result.overall_score}%",
    )
