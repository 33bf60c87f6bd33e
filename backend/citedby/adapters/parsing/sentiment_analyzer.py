"""
Sentiment Analyzer
Lexicon-based polarity of the text surrounding a business mention
"""

from dataclasses import dataclass, field
from typing import List

from citedby.config import SENTIMENT_CONTEXT_WINDOW
from citedby.models import SentimentLabel


@dataclass
class SentimentResult:
    """Result of sentiment analysis around a mention"""
    polarity: SentimentLabel
    context: str = ""
    matched_indicators: List[str] = field(default_factory=list)


class SentimentAnalyzer:
    """
    Rule-based sentiment for the window around the first mention of a business.
    Negative language dominates: a single negative term marks the mention negative.
    """

    POSITIVE_WORDS = (
        "recommend", "excellent", "trusted", "reliable", "professional",
        "quality", "reputable", "highly", "best", "top", "leading",
        "experienced", "specialized", "expert",
    )

    NEGATIVE_WORDS = (
        "avoid", "poor", "bad", "negative", "complaints", "issues",
        "problems", "unreliable", "not recommended",
    )

    # Positive hits needed for a positive label
    POSITIVE_THRESHOLD = 2

    def __init__(self, context_window: int = SENTIMENT_CONTEXT_WINDOW):
        self.context_window = context_window

    def get_context(self, response: str, business_name: str) -> str:
        """Lowercased text around the first occurrence of the name, '' if absent"""
        response_lower = response.lower()
        name_lower = business_name.lower()
        if not name_lower:
            return ""

        index = response_lower.find(name_lower)
        if index == -1:
            return ""

        start = max(0, index - self.context_window)
        end = min(len(response_lower), index + len(name_lower) + self.context_window)
        return response_lower[start:end]

    def analyze(self, response: str, business_name: str) -> SentimentResult:
        """
        Analyze sentiment around a business mention.

        Args:
            response: Full LLM response
            business_name: Name whose surrounding context is scored

        Returns:
            SentimentResult, UNKNOWN when the name does not occur
        """
        context = self.get_context(response or "", business_name or "")
        if not context:
            return SentimentResult(polarity=SentimentLabel.UNKNOWN)

        positives = [w for w in self.POSITIVE_WORDS if w in context]
        negatives = [w for w in self.NEGATIVE_WORDS if w in context]

        if negatives:
            polarity = SentimentLabel.NEGATIVE
        elif len(positives) >= self.POSITIVE_THRESHOLD:
            polarity = SentimentLabel.POSITIVE
        else:
            polarity = SentimentLabel.NEUTRAL

        return SentimentResult(
            polarity=polarity,
            context=context,
            matched_indicators=positives + negatives,
        )


_default_analyzer = SentimentAnalyzer()


def analyze_sentiment(response: str, business_name: str) -> SentimentLabel:
    return _default_analyzer.analyze(response, business_name).polarity
