"""
Entity Normalization Utilities
Canonical forms and fuzzy comparison for business identity fields
"""

import math
import re
from typing import Set

NON_PHONE_CHARS = re.compile(r"[^\d+]")
WHITESPACE = re.compile(r"\s+")


def normalize_phone_number(phone: str) -> str:
    """
    Normalize a phone number to Swiss international format.

    "044 123 45 67", "0041 44 123 45 67" and "+41441234567" all become
    "+41 44 123 45 67". Numbers that are not 9-digit Swiss numbers are
    returned with only digits and '+' kept.
    """
    cleaned = NON_PHONE_CHARS.sub("", phone or "")

    if cleaned.startswith("0041"):
        cleaned = "+41" + cleaned[4:]
    elif cleaned.startswith("0"):
        cleaned = "+41" + cleaned[1:]
    elif cleaned.startswith("41"):
        cleaned = "+" + cleaned

    if cleaned.startswith("+41") and len(cleaned) == 12:
        return f"+41 {cleaned[3:5]} {cleaned[5:8]} {cleaned[8:10]} {cleaned[10:12]}"

    return cleaned


def normalize_address(address: str) -> str:
    """Lowercase, expand Str./Str to strasse, drop punctuation and extra spaces"""
    normalized = (address or "").lower()
    normalized = re.sub(r"str\.", "strasse", normalized)
    normalized = re.sub(r"str$", "strasse", normalized)
    normalized = WHITESPACE.sub(" ", normalized)
    normalized = re.sub(r"[.,]", "", normalized)
    return normalized.strip()


def normalize_business_name(name: str) -> str:
    """Preserve case, trim and collapse whitespace"""
    return WHITESPACE.sub(" ", (name or "").strip())


def _bigrams(value: str) -> Set[str]:
    return {value[i:i + 2] for i in range(len(value) - 1)}


def string_similarity(a: str, b: str) -> float:
    """
    Dice coefficient over character bigrams.

    1.0 for identical strings, 0.0 when either string is too short to
    have a bigram.
    """
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    a_bigrams = _bigrams(a)
    b_bigrams = _bigrams(b)
    intersection = len(a_bigrams & b_bigrams)

    return (2 * intersection) / (len(a_bigrams) + len(b_bigrams))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for scores (round() would round to even)"""
    return int(math.floor(value + 0.5))
