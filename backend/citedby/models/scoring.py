"""
Visibility Scoring Models
Plain data shared by the parsing adapters and the scoring engine
"""

from dataclasses import dataclass, field
from enum import Enum as PyEnum
from typing import List, Optional


# ============================================================================
# ENUMS
# ============================================================================

class MentionType(str, PyEnum):
    EXACT = "exact"
    PARTIAL = "partial"
    NONE = "none"


class SentimentLabel(str, PyEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    UNKNOWN = "unknown"


class PromptType(str, PyEnum):
    LOCAL_SEARCH = "local_search"    # "recommend a Treuhand in Zürich" -> ranked list
    DIRECT_QUERY = "direct_query"    # "what do you know about X" -> single entity


# ============================================================================
# DATA
# ============================================================================

@dataclass(frozen=True)
class BusinessContext:
    """The business a visibility check is run for"""
    name: str
    industry: str = ""
    city: str = ""
    canton: Optional[str] = None
    services: List[str] = field(default_factory=list)


@dataclass
class NameMention:
    """Result of the name matching cascade"""
    mentioned: bool
    mention_type: MentionType
    position: Optional[int] = None  # 1-based rank in a list, None if unknown


@dataclass
class MentionAnalysis:
    """Everything the analyzers found about one response"""
    mentioned: bool
    mention_type: MentionType
    position: Optional[int]
    has_real_info: bool
    sentiment: SentimentLabel
    confidence: int  # 0-100, advisory only

    def __post_init__(self):
        if self.mention_type == MentionType.NONE:
            self.mentioned = False
            self.position = None


@dataclass
class ScoreBreakdown:
    """Complete breakdown of a visibility score"""
    mention_score: int = 0        # 0-40
    position_score: int = 0       # 0-25
    info_quality_score: int = 0   # 0-20
    sentiment_score: int = 0      # 0-15
    total: int = 0                # 0-100
    explanation: str = ""


@dataclass
class ScoreRating:
    """Human-facing interpretation of a total score"""
    rating: str
    color: str
    description: str


@dataclass
class ContextSignals:
    """Secondary signals about the business context in a response"""
    location_match: bool
    services_match: bool
    recommended: bool
    competitors: List[str] = field(default_factory=list)


@dataclass
class VisibilityResult:
    """Full result of scoring one response for one business"""
    analysis: MentionAnalysis
    breakdown: ScoreBreakdown
    rating: ScoreRating
    context: ContextSignals
    prompt_type: PromptType
