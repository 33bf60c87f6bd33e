"""
Information Quality Detector
Separates responses with concrete business details from deflections and filler
"""

import re

from citedby.config import INFO_MIN_LENGTH, INFO_MIN_LIST_ITEMS

# Any of these means the model admitted it has nothing specific
NO_INFO_PHRASES = (
    "i don't have",
    "i do not have",
    "i couldn't find",
    "i could not find",
    "no specific information",
    "not have information",
    "unable to find",
    "cannot provide specific",
    "don't have access to",
    "no data available",
    "i'm not aware of",
    "i am not aware of",
    "would need to search",
    "recommend checking",
    "suggest visiting",
    "contact them directly",
    "verify this information",
    "as of my knowledge cutoff",
    "my knowledge cutoff",
)

ADDRESS_PATTERN = re.compile(r"\d{4}\s+\w+")  # Swiss postal code + locality
WEBSITE_PATTERN = re.compile(r"\.(ch|com|swiss|org)")
PHONE_PATTERN = re.compile(r"(\+41|0\d{2})[\s.-]?\d")


def has_no_info_phrase(response: str) -> bool:
    response_lower = response.lower()
    return any(phrase in response_lower for phrase in NO_INFO_PHRASES)


def has_contact_details(response: str) -> bool:
    """Address, website or phone pattern present"""
    return bool(
        ADDRESS_PATTERN.search(response)
        or WEBSITE_PATTERN.search(response.lower())
        or PHONE_PATTERN.search(response)
    )


def has_service_list(response: str) -> bool:
    """Comma-separated enumeration of at least INFO_MIN_LIST_ITEMS items"""
    return len(response.split(",")) >= INFO_MIN_LIST_ITEMS


def has_real_business_info(response: str, business_name: str) -> bool:
    """
    Detect whether a response carries real information about a business.

    A deflection phrase always wins, concrete contact details always count,
    and short responses without a service list are treated as filler.
    """
    if not response:
        return False

    if has_no_info_phrase(response):
        return False

    if has_contact_details(response):
        return True

    if len(response) < INFO_MIN_LENGTH and not has_service_list(response):
        return False

    return True
