"""
Tests for sentiment around a business mention.
"""
from citedby.adapters.parsing import SentimentAnalyzer, analyze_sentiment
from citedby.models import SentimentLabel


def test_two_positive_words_are_positive():
    assert analyze_sentiment("KPMG AG is highly recommended.", "KPMG AG") == SentimentLabel.POSITIVE


def test_single_positive_word_is_neutral():
    assert analyze_sentiment("KPMG AG is reliable.", "KPMG AG") == SentimentLabel.NEUTRAL


def test_negative_word_dominates():
    response = "KPMG AG is highly recommended, though some clients report complaints."
    assert analyze_sentiment(response, "KPMG AG") == SentimentLabel.NEGATIVE


def test_plain_description_is_neutral():
    assert analyze_sentiment("KPMG AG is an audit firm.", "KPMG AG") == SentimentLabel.NEUTRAL


def test_absent_name_is_unknown():
    assert analyze_sentiment("Deloitte AG is excellent and trusted.", "KPMG AG") == SentimentLabel.UNKNOWN
    assert analyze_sentiment("", "KPMG AG") == SentimentLabel.UNKNOWN


def test_words_outside_the_context_window_are_ignored():
    response = "KPMG AG is an audit firm." + " " * 150 + "Excellent and highly trusted."
    assert analyze_sentiment(response, "KPMG AG") == SentimentLabel.NEUTRAL


def test_result_carries_context_and_indicators():
    result = SentimentAnalyzer().analyze("Here KPMG AG is excellent and trusted.", "kpmg ag")
    assert result.polarity == SentimentLabel.POSITIVE
    assert "kpmg ag" in result.context
    assert set(result.matched_indicators) == {"excellent", "trusted"}


def test_smaller_window_narrows_context():
    analyzer = SentimentAnalyzer(context_window=5)
    result = analyzer.analyze("Excellent and trusted: KPMG AG.", "KPMG AG")
    assert result.polarity == SentimentLabel.NEUTRAL
