"""
Domain Models for GetCitedBy
"""

from .scoring import (
    # Enums
    MentionType,
    SentimentLabel,
    PromptType,
    # Data
    BusinessContext,
    NameMention,
    MentionAnalysis,
    ScoreBreakdown,
    ScoreRating,
    ContextSignals,
    VisibilityResult,
)
from .nap import (
    # Enums
    IssueSeverity,
    NapField,
    CitationStatus,
    # Data
    NapData,
    CitationNapData,
    NapIssue,
    CitationScore,
    NapCheckResult,
)

__all__ = [
    # Enums
    "MentionType",
    "SentimentLabel",
    "PromptType",
    "IssueSeverity",
    "NapField",
    "CitationStatus",
    # Scoring
    "BusinessContext",
    "NameMention",
    "MentionAnalysis",
    "ScoreBreakdown",
    "ScoreRating",
    "ContextSignals",
    "VisibilityResult",
    # NAP
    "NapData",
    "CitationNapData",
    "NapIssue",
    "CitationScore",
    "NapCheckResult",
]
