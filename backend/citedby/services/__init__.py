"""
Business Logic Services
"""

from .scoring_engine import (
    ScoringEngine,
    analyze_response,
    calculate_visibility_score,
    interpret_score,
)
from .normalize import (
    normalize_address,
    normalize_business_name,
    normalize_phone_number,
    round_half_up,
    string_similarity,
)
from .nap_checker import (
    build_canonical_nap,
    calculate_nap_score,
    check_nap_consistency,
    citation_status_for_score,
    citation_status_updates,
    format_nap_for_display,
    generate_recommendations,
)
from .calibration import (
    CALIBRATION_BUSINESSES,
    CalibrationAccuracy,
    CalibrationBusiness,
    CalibrationFixtureError,
    CalibrationResult,
    FixtureScore,
    VisibilityTier,
    calculate_calibration_accuracy,
    collect_live_responses,
    combine_prompt_scores,
    run_calibration,
    tier_averages,
    score_fixture,
    validate_score,
    write_results_csv,
)

__all__ = [
    # Scoring
    "ScoringEngine",
    "analyze_response",
    "calculate_visibility_score",
    "interpret_score",
    # Normalization
    "normalize_address",
    "normalize_business_name",
    "normalize_phone_number",
    "round_half_up",
    "string_similarity",
    # NAP
    "build_canonical_nap",
    "calculate_nap_score",
    "check_nap_consistency",
    "citation_status_for_score",
    "citation_status_updates",
    "format_nap_for_display",
    "generate_recommendations",
    # Calibration
    "CALIBRATION_BUSINESSES",
    "CalibrationAccuracy",
    "CalibrationBusiness",
    "CalibrationFixtureError",
    "CalibrationResult",
    "FixtureScore",
    "VisibilityTier",
    "calculate_calibration_accuracy",
    "collect_live_responses",
    "combine_prompt_scores",
    "run_calibration",
    "tier_averages",
    "score_fixture",
    "validate_score",
    "write_results_csv",
]
