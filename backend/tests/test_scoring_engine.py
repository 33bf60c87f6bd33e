"""
Tests for the visibility score, its explanation and full response analysis.
"""
import pytest

from citedby.models import BusinessContext, MentionType, PromptType, SentimentLabel
from citedby.services import ScoringEngine, analyze_response, calculate_visibility_score, interpret_score


def test_not_mentioned_scores_zero_everywhere():
    response = "Here are some notaries in Aarau: Notariat Meier, Kanzlei Huber."
    breakdown = calculate_visibility_score(response, "Hartmann Notar", "local_search")

    assert breakdown.total == 0
    assert breakdown.mention_score == 0
    assert breakdown.position_score == 0
    assert breakdown.info_quality_score == 0
    assert breakdown.sentiment_score == 0
    assert breakdown.explanation == "Business was not mentioned in AI response."


def test_major_firm_direct_query_scores_high():
    response = (
        "PwC Switzerland is a leading audit firm. I recommend PwC Switzerland for "
        "their professional, trusted services. Visit pwc.ch."
    )
    breakdown = calculate_visibility_score(response, "PwC Switzerland", PromptType.DIRECT_QUERY)

    assert 80 <= breakdown.total <= 100
    assert breakdown.mention_score == 40
    assert breakdown.position_score == 15
    assert breakdown.info_quality_score == 20
    assert breakdown.sentiment_score == 15


def test_top_listed_firm_with_details(kpmg_response):
    breakdown = calculate_visibility_score(kpmg_response, "KPMG AG", "local_search")

    assert breakdown.total >= 80
    assert breakdown.total == 100
    assert breakdown.explanation == (
        "Business name found exactly. Listed as #1 recommendation. "
        "AI has real information about the business. Positive sentiment."
    )


def test_partial_mention_with_unknown_sentiment():
    response = "For a notary in Aarau, Hartmann is experienced with contracts."
    breakdown = calculate_visibility_score(response, "Hartmann Notar", "local_search")

    assert breakdown.mention_score == 25
    assert breakdown.position_score == 25
    assert breakdown.info_quality_score == 5
    assert breakdown.sentiment_score == 5
    assert breakdown.total == 60
    assert breakdown.explanation == (
        "Business name partially matched. Listed as #1 recommendation. "
        "AI has limited or generic information. Sentiment could not be determined."
    )


@pytest.mark.parametrize("position,points", [(2, 20), (3, 15), (4, 10), (5, 10), (7, 5)])
def test_position_ladder(position, points):
    response = f"{position}. KPMG AG"
    breakdown = calculate_visibility_score(response, "KPMG AG", "local_search")
    assert breakdown.position_score == points


def test_position_below_top_five_explanation():
    breakdown = calculate_visibility_score("7. KPMG AG", "KPMG AG", "local_search")
    assert "Listed but not in top recommendations." in breakdown.explanation


def test_direct_query_position_is_flat():
    breakdown = calculate_visibility_score("7. KPMG AG", "KPMG AG", "direct_query")
    assert breakdown.position_score == 15
    assert "Direct query, list position not ranked." in breakdown.explanation


def test_negative_sentiment_scores_zero_points():
    response = "1. KPMG AG has had complaints from clients."
    breakdown = calculate_visibility_score(response, "KPMG AG", "local_search")
    assert breakdown.sentiment_score == 0
    assert "Negative sentiment detected." in breakdown.explanation


def test_total_is_sum_of_components_and_bounded(kpmg_response):
    for prompt_type in PromptType:
        breakdown = calculate_visibility_score(kpmg_response, "KPMG AG", prompt_type)
        assert breakdown.total == (
            breakdown.mention_score
            + breakdown.position_score
            + breakdown.info_quality_score
            + breakdown.sentiment_score
        )
        assert 0 <= breakdown.total <= 100


def test_scoring_is_idempotent(kpmg_response):
    engine = ScoringEngine()
    first = engine.calculate(kpmg_response, "KPMG AG", "local_search")
    second = engine.calculate(kpmg_response, "KPMG AG", "local_search")
    assert first == second


def test_unknown_prompt_type_is_rejected():
    with pytest.raises(ValueError):
        calculate_visibility_score("KPMG AG", "KPMG AG", "brand_query")


@pytest.mark.parametrize("score,rating", [
    (100, "excellent"),
    (80, "excellent"),
    (79, "good"),
    (60, "good"),
    (40, "fair"),
    (20, "poor"),
    (19, "invisible"),
    (0, "invisible"),
])
def test_interpret_score_bands(score, rating):
    assert interpret_score(score).rating == rating


def test_analyze_response_for_exact_mention(kpmg_response):
    context = BusinessContext(name="KPMG AG", industry="Treuhand", city="Zürich", services=["audit"])
    result = analyze_response(kpmg_response, context, "local_search")

    assert result.analysis.mentioned
    assert result.analysis.mention_type == MentionType.EXACT
    assert result.analysis.position == 1
    assert result.analysis.has_real_info
    assert result.analysis.sentiment == SentimentLabel.POSITIVE
    assert result.analysis.confidence == 95
    assert result.breakdown.total == 100
    assert result.rating.rating == "excellent"
    assert result.context.location_match
    assert not result.context.services_match
    assert result.context.recommended


def test_analyze_response_partial_confidence_uses_context():
    response = "For a notary in Aarau, Hartmann is experienced with contracts."
    context = BusinessContext(name="Hartmann Notar", city="Aarau", services=["Contracts"])
    result = analyze_response(response, context, "local_search")

    assert result.analysis.mention_type == MentionType.PARTIAL
    assert result.analysis.confidence == 90
    assert result.analysis.sentiment == SentimentLabel.UNKNOWN
    assert not result.context.recommended

    no_context = analyze_response(response, BusinessContext(name="Hartmann Notar"), "local_search")
    assert no_context.analysis.confidence == 60


def test_analyze_response_not_mentioned():
    context = BusinessContext(name="Treuhand Zürich AG", city="Zürich")
    response = "There are many Treuhand firms in Zürich. Weber & Partner is one option."
    result = analyze_response(response, context, "local_search")

    assert not result.analysis.mentioned
    assert result.analysis.mention_type == MentionType.NONE
    assert result.analysis.position is None
    assert result.analysis.sentiment == SentimentLabel.UNKNOWN
    assert not result.analysis.has_real_info
    assert result.analysis.confidence == 0
    assert result.breakdown.total == 0
    assert result.rating.rating == "invisible"
    assert result.context.location_match
    assert result.context.competitors == ["Weber & Partner"]


def test_recommended_firm_with_address_and_website():
    response = (
        "I recommend KPMG AG, a leading accounting firm in Zürich with offices at "
        "Bahnhofstrasse 1, 8001 Zürich, website kpmg.ch."
    )
    context = BusinessContext(name="KPMG AG", city="Zürich")
    result = analyze_response(response, context, "local_search")

    assert result.analysis.mention_type == MentionType.EXACT
    assert result.analysis.has_real_info
    assert result.analysis.sentiment == SentimentLabel.POSITIVE
    # A single unnumbered line counts as rank 1
    assert result.breakdown.position_score == 25
    assert result.breakdown.total >= 80
