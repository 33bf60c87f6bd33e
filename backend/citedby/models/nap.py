"""
NAP (Name, Address, Phone) Models
"""

from dataclasses import dataclass, field
from enum import Enum as PyEnum
from typing import List, Optional


class IssueSeverity(str, PyEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class NapField(str, PyEnum):
    NAME = "name"
    ADDRESS = "address"
    PHONE = "phone"


class CitationStatus(str, PyEnum):
    CONFLICT = "conflict"
    SUBMITTED = "submitted"
    VERIFIED = "verified"


@dataclass
class NapData:
    """Canonical identity of a business"""
    name: str
    address: str = ""
    phone: str = ""  # +41 XX XXX XX XX when Swiss


@dataclass
class CitationNapData:
    """NAP claimed by one external listing; any field may be missing"""
    source: str
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class NapIssue:
    """A single inconsistency between a listing and the canonical NAP"""
    severity: IssueSeverity
    field: NapField
    source: str
    expected: str
    found: str
    message: str


@dataclass
class CitationScore:
    """Per-source NAP match quality"""
    source: str
    score: int  # 0-100
    issues: List[str] = field(default_factory=list)


@dataclass
class NapCheckResult:
    """Aggregate NAP consistency over all citations"""
    overall_score: int
    issues: List[NapIssue] = field(default_factory=list)
    citation_scores: List[CitationScore] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
