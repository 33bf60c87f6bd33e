"""
Visibility Scoring Schemas
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from citedby.models import MentionType, PromptType, SentimentLabel


class BusinessContextRequest(BaseModel):
    """Business the response is scored for"""
    name: str = Field(..., max_length=255)
    industry: str = ""
    city: str = ""
    canton: Optional[str] = None
    services: List[str] = Field(default_factory=list)


class VisibilityScoreRequest(BaseModel):
    """Score one LLM response for one business"""
    response: str = Field(..., description="Raw LLM response text")
    business: BusinessContextRequest
    prompt_type: PromptType = PromptType.LOCAL_SEARCH


class MentionAnalysisResponse(BaseModel):
    """What the analyzers found"""
    mentioned: bool
    mention_type: MentionType
    position: Optional[int] = None
    has_real_info: bool
    sentiment: SentimentLabel
    confidence: int = Field(ge=0, le=100)

    class Config:
        from_attributes = True


class ScoreBreakdownResponse(BaseModel):
    """Detailed score breakdown"""
    mention_score: int = Field(description="Points for the name mention (0-40)")
    position_score: int = Field(description="Points for list position (0-25)")
    info_quality_score: int = Field(description="Points for concrete business details (0-20)")
    sentiment_score: int = Field(description="Points for sentiment (0-15)")
    total: int = Field(ge=0, le=100)
    explanation: str

    class Config:
        from_attributes = True


class ScoreRatingResponse(BaseModel):
    rating: str
    color: str
    description: str

    class Config:
        from_attributes = True


class ContextSignalsResponse(BaseModel):
    """Advisory signals, not part of the score"""
    location_match: bool
    services_match: bool
    recommended: bool
    competitors: List[str] = []

    class Config:
        from_attributes = True


class VisibilityScoreResponse(BaseModel):
    analysis: MentionAnalysisResponse
    breakdown: ScoreBreakdownResponse
    rating: ScoreRatingResponse
    context: ContextSignalsResponse
    prompt_type: PromptType

    class Config:
        from_attributes = True
