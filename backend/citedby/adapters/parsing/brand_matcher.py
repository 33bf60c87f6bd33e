"""
Business Name Matching Engine
Decides whether an LLM response really refers to a business, not just to its industry words
"""

import logging
import re
from typing import List, Optional

from citedby.config import (
    MAX_ESTIMATED_POSITION,
    MENTION_PROXIMITY_WINDOW,
    MIN_NAME_WORD_LENGTH,
    PARTIAL_MATCH_RATIO,
)
from citedby.models import MentionType, NameMention
from .generic_terms import is_generic_word

logger = logging.getLogger(__name__)

# "3. Foo", "3) Foo", "3: Foo", "- Foo", "• Foo", "* Foo"
LIST_MARKER_PATTERN = re.compile(r"^\s*(?:(\d+)[.):]|[-•*])")

# Capitalised names that look like other businesses
COMPETITOR_PATTERNS = [
    re.compile(r"([A-Z][a-z]+ (?:AG|GmbH|Treuhand|Notar|Partner|Associates))"),
    re.compile(r"([A-Z][a-z]+ & [A-Z][a-z]+)"),
    re.compile(r"([A-Z][a-z]+ [A-Z][a-z]+ (?:AG|GmbH))"),
]
MAX_COMPETITORS = 5


def _not_mentioned() -> NameMention:
    return NameMention(mentioned=False, mention_type=MentionType.NONE, position=None)


class BrandMatcher:
    """
    Matches a business name in free text using a strict cascade:
    1. Exact match (case-insensitive substring of the full name)
    2. Short names (1-2 words): every significant word present, close together
    3. Long names (3+ words): enough significant words present
    Anything else counts as not mentioned.
    """

    def __init__(
        self,
        proximity_window: int = MENTION_PROXIMITY_WINDOW,
        min_match_ratio: float = PARTIAL_MATCH_RATIO,
    ):
        self.proximity_window = proximity_window
        self.min_match_ratio = min_match_ratio

    @staticmethod
    def name_words(name: str) -> List[str]:
        """Lowercase words of a name long enough to be worth matching"""
        return [w for w in name.lower().split() if len(w) >= MIN_NAME_WORD_LENGTH]

    @staticmethod
    def significant_words(words: List[str]) -> List[str]:
        """Words that actually distinguish the business"""
        return [w for w in words if not is_generic_word(w)]

    def find_position_in_list(self, response: str, search_term: str) -> Optional[int]:
        """
        Find the rank of the first line mentioning search_term.

        Numbered lines return their literal number; any other line returns its
        line number capped at MAX_ESTIMATED_POSITION. None if no line matches.
        """
        search_lower = search_term.lower()
        if not search_lower:
            return None

        for index, line in enumerate(response.split("\n")):
            line_lower = line.lower()
            if search_lower not in line_lower:
                continue

            marker = LIST_MARKER_PATTERN.match(line_lower)
            if marker and marker.group(1):
                number = int(marker.group(1))
                if number > 0:
                    return number
            return min(index + 1, MAX_ESTIMATED_POSITION)

        return None

    def match_exact(self, response: str, name_lower: str) -> Optional[NameMention]:
        """Full name appears verbatim"""
        if name_lower in response.lower():
            return NameMention(
                mentioned=True,
                mention_type=MentionType.EXACT,
                position=self.find_position_in_list(response, name_lower),
            )
        return None

    def match_short_name(self, response: str, significant: List[str]) -> Optional[NameMention]:
        """All significant words present; two words must sit within the proximity window"""
        if not significant:
            return None

        response_lower = response.lower()
        if not all(word in response_lower for word in significant):
            return None

        if len(significant) > 1:
            first_pos = response_lower.find(significant[0])
            last_pos = response_lower.rfind(significant[-1])
            if abs(last_pos - first_pos) >= self.proximity_window:
                return None

        return NameMention(
            mentioned=True,
            mention_type=MentionType.PARTIAL,
            position=self.find_position_in_list(response, significant[0]),
        )

    def match_long_name(self, response: str, significant: List[str]) -> Optional[NameMention]:
        """At least two significant words, and a large enough share of them"""
        response_lower = response.lower()
        found = [word for word in significant if word in response_lower]

        if len(found) >= 2 and len(found) >= len(significant) * self.min_match_ratio:
            return NameMention(
                mentioned=True,
                mention_type=MentionType.PARTIAL,
                position=self.find_position_in_list(response, found[0]),
            )
        return None

    def analyze(self, response: str, business_name: str) -> NameMention:
        """
        Determine whether and how business_name is mentioned in response.

        Args:
            response: Raw LLM response text
            business_name: Canonical business name

        Returns:
            NameMention with mention type and list position
        """
        name_lower = (business_name or "").lower().strip()
        if not name_lower or not response:
            return _not_mentioned()

        exact = self.match_exact(response, name_lower)
        if exact:
            logger.debug(f"Exact mention of '{business_name}' at position {exact.position}")
            return exact

        words = self.name_words(name_lower)
        significant = self.significant_words(words)

        if len(words) <= 2:
            partial = self.match_short_name(response, significant)
        else:
            partial = self.match_long_name(response, significant)

        if partial:
            logger.debug(f"Partial mention of '{business_name}' via {significant}")
            return partial

        return _not_mentioned()


_default_matcher = BrandMatcher()


def analyze_name_mention(response: str, business_name: str) -> NameMention:
    """Run the default matching cascade"""
    return _default_matcher.analyze(response, business_name)


def find_position_in_list(response: str, search_term: str) -> Optional[int]:
    return _default_matcher.find_position_in_list(response, search_term)


def extract_competitors(response: str, business_name: str) -> List[str]:
    """Other business-like names in the response, at most MAX_COMPETITORS"""
    name_lower = (business_name or "").lower()
    competitors = []

    for pattern in COMPETITOR_PATTERNS:
        for match in pattern.findall(response or ""):
            if name_lower and name_lower in match.lower():
                continue
            if match not in competitors:
                competitors.append(match)

    return competitors[:MAX_COMPETITORS]
