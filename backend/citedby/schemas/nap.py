"""
NAP Consistency Schemas
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from citedby.models import CitationStatus, IssueSeverity, NapField


class BusinessNapRequest(BaseModel):
    """Structured business fields the canonical NAP is built from"""
    name: str = Field(..., min_length=1, max_length=255)
    address_street: Optional[str] = None
    address_city: Optional[str] = None
    address_postal: Optional[str] = None
    address_canton: Optional[str] = None
    phone: Optional[str] = None


class CitationNapRequest(BaseModel):
    """NAP as claimed by one listing; omitted fields are not compared"""
    source: str = Field(..., min_length=1)
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None


class NapCheckRequest(BaseModel):
    business: BusinessNapRequest
    citations: List[CitationNapRequest] = Field(default_factory=list)


class NapDataResponse(BaseModel):
    name: str
    address: str
    phone: str

    class Config:
        from_attributes = True


class NapIssueResponse(BaseModel):
    severity: IssueSeverity
    field: NapField
    source: str
    expected: str
    found: str
    message: str

    class Config:
        from_attributes = True


class CitationScoreResponse(BaseModel):
    source: str
    score: int = Field(ge=0, le=100)
    issues: List[str] = []

    class Config:
        from_attributes = True


class NapCheckResultResponse(BaseModel):
    overall_score: int = Field(ge=0, le=100)
    issues: List[NapIssueResponse]
    citation_scores: List[CitationScoreResponse]
    recommendations: List[str]

    class Config:
        from_attributes = True


class NapCheckResponse(BaseModel):
    """Check result plus the status each checked citation should move to"""
    canonical_nap: NapDataResponse
    result: NapCheckResultResponse
    citation_statuses: Dict[str, CitationStatus]
    message: str
