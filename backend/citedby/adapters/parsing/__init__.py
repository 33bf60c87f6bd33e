"""
Response Parsing Adapters
"""

from .generic_terms import GENERIC_WORDS, is_generic_word
from .brand_matcher import (
    BrandMatcher,
    analyze_name_mention,
    extract_competitors,
    find_position_in_list,
)
from .info_quality import NO_INFO_PHRASES, has_real_business_info
from .sentiment_analyzer import SentimentAnalyzer, SentimentResult, analyze_sentiment

__all__ = [
    "GENERIC_WORDS",
    "is_generic_word",
    "BrandMatcher",
    "analyze_name_mention",
    "extract_competitors",
    "find_position_in_list",
    "NO_INFO_PHRASES",
    "has_real_business_info",
    "SentimentAnalyzer",
    "SentimentResult",
    "analyze_sentiment",
]
