"""
Pydantic Schemas for API Request/Response validation
"""

from .scoring import (
    BusinessContextRequest,
    VisibilityScoreRequest,
    MentionAnalysisResponse,
    ScoreBreakdownResponse,
    ScoreRatingResponse,
    ContextSignalsResponse,
    VisibilityScoreResponse,
)
from .nap import (
    BusinessNapRequest,
    CitationNapRequest,
    NapCheckRequest,
    NapDataResponse,
    NapIssueResponse,
    CitationScoreResponse,
    NapCheckResultResponse,
    NapCheckResponse,
)

__all__ = [
    # Scoring
    "BusinessContextRequest",
    "VisibilityScoreRequest",
    "MentionAnalysisResponse",
    "ScoreBreakdownResponse",
    "ScoreRatingResponse",
    "ContextSignalsResponse",
    "VisibilityScoreResponse",
    # NAP
    "BusinessNapRequest",
    "CitationNapRequest",
    "NapCheckRequest",
    "NapDataResponse",
    "NapIssueResponse",
    "CitationScoreResponse",
    "NapCheckResultResponse",
    "NapCheckResponse",
]
