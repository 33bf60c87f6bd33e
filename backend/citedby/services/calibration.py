"""
Calibration Harness
Businesses with independently verified AI visibility, used to regression-test the scoring engine

Expected score ranges:
- HIGH visibility (70-100): businesses AI assistants do recommend
- MEDIUM visibility (30-75): businesses with partial presence
- LOW visibility (0-30): businesses AI assistants never mention

To verify an entry by hand, ask the assistant three times each:
1. "Recommend a [industry] in [city], Switzerland"
2. "What can you tell me about [business name] in [city]?"
"""

import asyncio
import csv
import logging
from dataclasses import dataclass, field
from enum import Enum as PyEnum
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from citedby.adapters.llm import BaseLLMAdapter, LLMAdapterError
from citedby.models import PromptType
from .normalize import round_half_up
from .scoring_engine import calculate_visibility_score

logger = logging.getLogger(__name__)


class VisibilityTier(str, PyEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CalibrationFixtureError(ValueError):
    """A calibration fixture with an impossible expected range"""
    pass


@dataclass(frozen=True)
class CalibrationBusiness:
    """Ground-truth fixture: a business and the score range it should land in"""
    name: str
    city: str
    industry: str
    expected_visibility: VisibilityTier
    expected_score_min: int
    expected_score_max: int
    notes: str = ""

    def __post_init__(self):
        if self.expected_score_min > self.expected_score_max:
            raise CalibrationFixtureError(
                f"{self.name}: expected_score_min {self.expected_score_min} "
                f"> expected_score_max {self.expected_score_max}"
            )
        if self.expected_score_min < 0 or self.expected_score_max > 100:
            raise CalibrationFixtureError(
                f"{self.name}: expected range must lie within 0-100"
            )


@dataclass
class CalibrationResult:
    """Outcome of scoring one fixture"""
    business: CalibrationBusiness
    actual_score: int
    passed: bool
    deviation: int  # distance to the violated bound, 0 when passed
    details: str


@dataclass
class CalibrationAccuracy:
    """Accuracy summary over a calibration run"""
    total_tests: int
    passed: int
    failed: int
    accuracy: float  # percent
    avg_deviation: float
    failed_tests: List[CalibrationResult] = field(default_factory=list)


@dataclass
class FixtureScore:
    """Per-prompt scores for one fixture and their combination"""
    business: CalibrationBusiness
    local_score: int
    direct_score: int
    overall_score: int
    local_mentioned: bool
    direct_mentioned: bool
    result: CalibrationResult


CALIBRATION_BUSINESSES: List[CalibrationBusiness] = [
    # ============================================
    # HIGH VISIBILITY
    # ============================================

    # Major accounting firms
    CalibrationBusiness(
        name="PwC Switzerland",
        city="Zürich",
        industry="Treuhand",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=80,
        expected_score_max=100,
        notes="Major accounting firm, always mentioned",
    ),
    CalibrationBusiness(
        name="KPMG AG",
        city="Zürich",
        industry="Treuhand",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=80,
        expected_score_max=100,
        notes="Big 4, consistently recommended",
    ),
    CalibrationBusiness(
        name="Deloitte AG",
        city="Zürich",
        industry="Treuhand",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=80,
        expected_score_max=100,
        notes="Big 4, consistently recommended",
    ),

    # Law firms
    CalibrationBusiness(
        name="Homburger AG",
        city="Zürich",
        industry="Rechtsanwalt",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=70,
        expected_score_max=100,
        notes="Leading Swiss law firm",
    ),
    CalibrationBusiness(
        name="Bär & Karrer",
        city="Zürich",
        industry="Rechtsanwalt",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=70,
        expected_score_max=100,
        notes="Top-tier law firm",
    ),

    # Hotels
    CalibrationBusiness(
        name="Baur au Lac",
        city="Zürich",
        industry="Hotel",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=80,
        expected_score_max=100,
        notes="Famous luxury hotel",
    ),
    CalibrationBusiness(
        name="Hotel & Spa Four Seasons Geneva",
        city="Genf",
        industry="Hotel",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=75,
        expected_score_max=100,
        notes="Major international brand",
    ),

    # Restaurants
    CalibrationBusiness(
        name="Restaurant Kronenhalle",
        city="Zürich",
        industry="Restaurant",
        expected_visibility=VisibilityTier.HIGH,
        expected_score_min=70,
        expected_score_max=100,
        notes="Iconic Zürich restaurant",
    ),

    # ============================================
    # MEDIUM VISIBILITY
    # ============================================

    CalibrationBusiness(
        name="BDO AG",
        city="Zürich",
        industry="Treuhand",
        expected_visibility=VisibilityTier.MEDIUM,
        expected_score_min=40,
        expected_score_max=75,
        notes="Mid-tier firm, sometimes mentioned",
    ),
    CalibrationBusiness(
        name="OBT AG",
        city="St. Gallen",
        industry="Treuhand",
        expected_visibility=VisibilityTier.MEDIUM,
        expected_score_min=30,
        expected_score_max=60,
        notes="Regional firm, less known nationally",
    ),
    CalibrationBusiness(
        name="Walder Wyss AG",
        city="Zürich",
        industry="Rechtsanwalt",
        expected_visibility=VisibilityTier.MEDIUM,
        expected_score_min=40,
        expected_score_max=70,
        notes="Respected but less famous than top-tier",
    ),
    CalibrationBusiness(
        name="Hotel Schweizerhof",
        city="Bern",
        industry="Hotel",
        expected_visibility=VisibilityTier.MEDIUM,
        expected_score_min=35,
        expected_score_max=65,
        notes="Good local hotel, moderate recognition",
    ),

    # ============================================
    # LOW VISIBILITY
    # ============================================

    CalibrationBusiness(
        name="Müller Treuhand GmbH",
        city="Aarau",
        industry="Treuhand",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=25,
        notes="Common name, small local firm, not in AI training",
    ),
    CalibrationBusiness(
        name="Hartmann Notar",
        city="Aarau",
        industry="Rechtsanwalt / Notar",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=20,
        notes="Small notary, no AI presence - should NOT get 80!",
    ),
    CalibrationBusiness(
        name="Zahnarztpraxis Dr. Schneider",
        city="Winterthur",
        industry="Zahnarzt",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=20,
        notes="Generic name, small practice",
    ),
    CalibrationBusiness(
        name="Autogarage Brunner AG",
        city="Thun",
        industry="Auto",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=20,
        notes="Small local garage",
    ),
    CalibrationBusiness(
        name="Restaurant Hirschen",
        city="Uster",
        industry="Restaurant",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=25,
        notes="Generic restaurant name, many exist",
    ),
    CalibrationBusiness(
        name="IT Solutions Weber",
        city="Zug",
        industry="IT",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=20,
        notes="Small IT consultancy",
    ),
    CalibrationBusiness(
        name="Immobilien Meier",
        city="Luzern",
        industry="Immobilien",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=20,
        notes="Generic name, small agency",
    ),
    CalibrationBusiness(
        name="Versicherungsberatung Keller",
        city="Basel",
        industry="Versicherung",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=20,
        notes="Independent broker, no AI presence",
    ),

    # ============================================
    # ADVERSARIAL CASES
    # ============================================

    CalibrationBusiness(
        name="Treuhand Zürich AG",
        city="Zürich",
        industry="Treuhand",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=30,
        notes='Generic name that might false-positive match. Scoring should NOT match "Treuhand" generically.',
    ),
    CalibrationBusiness(
        name="Swiss Life Beratung",
        city="Bern",
        industry="Versicherung",
        expected_visibility=VisibilityTier.LOW,
        expected_score_min=0,
        expected_score_max=30,
        notes="Name similar to Swiss Life AG but different. Should not match the big company.",
    ),
]


def validate_score(business: CalibrationBusiness, actual_score: int) -> CalibrationResult:
    """Check an actual score against the fixture's inclusive expected range"""
    low, high = business.expected_score_min, business.expected_score_max
    passed = low <= actual_score <= high

    deviation = 0
    if actual_score < low:
        deviation = low - actual_score
    elif actual_score > high:
        deviation = actual_score - high

    if passed:
        details = f"Score {actual_score} within expected range [{low}-{high}]"
    else:
        details = (
            f"Score {actual_score} outside expected range [{low}-{high}], "
            f"deviation: {deviation}"
        )

    return CalibrationResult(
        business=business,
        actual_score=actual_score,
        passed=passed,
        deviation=deviation,
        details=details,
    )


def calculate_calibration_accuracy(results: List[CalibrationResult]) -> CalibrationAccuracy:
    """Aggregate pass rate and mean deviation; an empty run reports zeros"""
    if not results:
        return CalibrationAccuracy(
            total_tests=0, passed=0, failed=0, accuracy=0.0, avg_deviation=0.0
        )

    passed = sum(1 for r in results if r.passed)
    return CalibrationAccuracy(
        total_tests=len(results),
        passed=passed,
        failed=len(results) - passed,
        accuracy=passed / len(results) * 100,
        avg_deviation=sum(r.deviation for r in results) / len(results),
        failed_tests=[r for r in results if not r.passed],
    )


def combine_prompt_scores(local_score: int, direct_score: int, local_weight: float = 0.6) -> int:
    """Weighted overall score: local search counts more than a direct query"""
    return round_half_up(local_score * local_weight + direct_score * (1 - local_weight))


def score_fixture(
    business: CalibrationBusiness,
    responses: Mapping[str, str],
    local_weight: float = 0.6,
) -> FixtureScore:
    """
    Score one fixture from its recorded responses.

    Args:
        business: The fixture
        responses: {"local_search": text, "direct_query": text}; a missing
            response scores 0
        local_weight: Weight of the local search score in the overall score
    """
    local = calculate_visibility_score(
        responses.get(PromptType.LOCAL_SEARCH.value, ""), business.name, PromptType.LOCAL_SEARCH
    )
    direct = calculate_visibility_score(
        responses.get(PromptType.DIRECT_QUERY.value, ""), business.name, PromptType.DIRECT_QUERY
    )
    overall = combine_prompt_scores(local.total, direct.total, local_weight)

    return FixtureScore(
        business=business,
        local_score=local.total,
        direct_score=direct.total,
        overall_score=overall,
        local_mentioned=local.total > 0,
        direct_mentioned=direct.total > 0,
        result=validate_score(business, overall),
    )


def run_calibration(
    responses_by_name: Mapping[str, Mapping[str, str]],
    businesses: Optional[List[CalibrationBusiness]] = None,
    local_weight: float = 0.6,
) -> List[FixtureScore]:
    """Score every fixture that has recorded responses"""
    businesses = CALIBRATION_BUSINESSES if businesses is None else businesses
    scores = []

    for business in businesses:
        responses = responses_by_name.get(business.name)
        if responses is None:
            logger.warning(f"No recorded responses for '{business.name}', skipping")
            continue
        scores.append(score_fixture(business, responses, local_weight))

    return scores


def tier_averages(scores: List[FixtureScore]) -> Dict[VisibilityTier, float]:
    """Mean overall score per expected tier"""
    averages = {}
    for tier in VisibilityTier:
        tier_scores = [s.overall_score for s in scores if s.business.expected_visibility == tier]
        if tier_scores:
            averages[tier] = sum(tier_scores) / len(tier_scores)
    return averages


# ============ LIVE COLLECTION ============

SYSTEM_PROMPT = (
    "You are a helpful assistant that provides information about local businesses "
    "in Switzerland. Be specific and factual. If you don't have information about a "
    "specific business, clearly say so rather than making up information."
)

PROMPT_TEMPLATES = {
    PromptType.LOCAL_SEARCH: "I need a {industry} in {city}, Switzerland. Can you recommend some options?",
    PromptType.DIRECT_QUERY: "What can you tell me about {name} in {city}, Switzerland?",
}


def build_calibration_prompts(business: CalibrationBusiness) -> Dict[str, str]:
    """The local search and direct query prompts asked for one fixture"""
    return {
        prompt_type.value: template.format(
            name=business.name, city=business.city, industry=business.industry
        )
        for prompt_type, template in PROMPT_TEMPLATES.items()
    }


async def collect_live_responses(
    businesses: List[CalibrationBusiness],
    adapter: BaseLLMAdapter,
    concurrency: int = 4,
) -> Dict[str, Dict[str, str]]:
    """
    Ask the LLM both calibration prompts for every fixture.

    A failed call is logged and recorded as an empty response, which scores 0.

    Returns:
        {business name: {"local_search": text, "direct_query": text}}
    """
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def ask(prompt: str, business_name: str) -> str:
        async with semaphore:
            try:
                response = await adapter.execute(prompt, system_prompt=SYSTEM_PROMPT)
                return response.content
            except LLMAdapterError as e:
                logger.error(f"LLM call failed for '{business_name}': {e}")
                return ""

    async def collect(business: CalibrationBusiness) -> Dict[str, str]:
        prompts = build_calibration_prompts(business)
        answers = await asyncio.gather(
            *(ask(prompt, business.name) for prompt in prompts.values())
        )
        logger.info(f"Collected responses for '{business.name}'")
        return dict(zip(prompts.keys(), answers))

    results = await asyncio.gather(*(collect(b) for b in businesses))
    return {b.name: r for b, r in zip(businesses, results)}


# ============ EXPORT ============

CSV_HEADERS = [
    "Name",
    "City",
    "Industry",
    "Expected Tier",
    "Overall Score",
    "Local Score",
    "Direct Score",
    "Local Mentioned",
    "Direct Mentioned",
]


def write_results_csv(scores: List[FixtureScore], path: Union[str, Path]) -> Path:
    """Export one row per scored fixture"""
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_NONNUMERIC)
        writer.writerow(CSV_HEADERS)
        for s in scores:
            writer.writerow([
                s.business.name,
                s.business.city,
                s.business.industry,
                s.business.expected_visibility.value,
                s.overall_score,
                s.local_score,
                s.direct_score,
                str(s.local_mentioned).lower(),
                str(s.direct_mentioned).lower(),
            ])
    return path
