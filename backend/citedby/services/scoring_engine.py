"""
Visibility Scoring Engine
Calculates transparent, explainable visibility scores for a single LLM response
"""

import logging
from typing import Optional, Tuple, Union

from citedby.adapters.parsing import (
    BrandMatcher,
    SentimentAnalyzer,
    extract_competitors,
    has_real_business_info,
)
from citedby.config import (
    POSITION_FLOOR_SCORE,
    POSITION_LADDER,
    SCORE_RATING_BANDS,
    VISIBILITY_SCORE_WEIGHTS,
)
from citedby.models import (
    BusinessContext,
    ContextSignals,
    MentionAnalysis,
    MentionType,
    NameMention,
    PromptType,
    ScoreBreakdown,
    ScoreRating,
    SentimentLabel,
    VisibilityResult,
)

logger = logging.getLogger(__name__)

NOT_MENTIONED_EXPLANATION = "Business was not mentioned in AI response."

RECOMMENDATION_PHRASES = (
    "recommend",
    "suggest",
    "consider",
    "good option",
    "trusted",
    "reliable",
    "reputable",
)


class ScoringEngine:
    """
    Calculates visibility scores with full transparency.

    Scoring Model (0-100):
    - Mention (0-40): exact name 40, partial name 25
    - Position (0-25): local search rank #1 25, #2 20, #3 15, #4-5 10, lower 5;
      direct queries get a flat 15
    - Info quality (0-20): real details 20, generic filler 5
    - Sentiment (0-15): positive 15, neutral 10, negative 0, unknown 5

    A response that does not mention the business scores 0 across the board.
    """

    def __init__(
        self,
        matcher: Optional[BrandMatcher] = None,
        sentiment_analyzer: Optional[SentimentAnalyzer] = None,
    ):
        self.matcher = matcher or BrandMatcher()
        self.sentiment_analyzer = sentiment_analyzer or SentimentAnalyzer()

    def _calculate_mention_score(self, mention: NameMention) -> Tuple[int, str]:
        if mention.mention_type == MentionType.EXACT:
            return VISIBILITY_SCORE_WEIGHTS["exact_mention"], "Business name found exactly."
        return VISIBILITY_SCORE_WEIGHTS["partial_mention"], "Business name partially matched."

    def _calculate_position_score(
        self,
        mention: NameMention,
        prompt_type: PromptType,
    ) -> Tuple[int, str]:
        if prompt_type == PromptType.DIRECT_QUERY:
            return (
                VISIBILITY_SCORE_WEIGHTS["direct_query_position"],
                "Direct query, list position not ranked.",
            )

        position = mention.position
        if position is None or position not in POSITION_LADDER:
            return POSITION_FLOOR_SCORE, "Listed but not in top recommendations."

        return POSITION_LADDER[position], f"Listed as #{position} recommendation."

    def _calculate_info_quality_score(self, has_real_info: bool) -> Tuple[int, str]:
        if has_real_info:
            return VISIBILITY_SCORE_WEIGHTS["real_info"], "AI has real information about the business."
        return VISIBILITY_SCORE_WEIGHTS["generic_info"], "AI has limited or generic information."

    def _calculate_sentiment_score(self, sentiment: SentimentLabel) -> Tuple[int, str]:
        if sentiment == SentimentLabel.POSITIVE:
            return VISIBILITY_SCORE_WEIGHTS["positive_sentiment"], "Positive sentiment."
        if sentiment == SentimentLabel.NEUTRAL:
            return VISIBILITY_SCORE_WEIGHTS["neutral_sentiment"], "Neutral sentiment."
        if sentiment == SentimentLabel.NEGATIVE:
            return VISIBILITY_SCORE_WEIGHTS["negative_sentiment"], "Negative sentiment detected."
        return VISIBILITY_SCORE_WEIGHTS["unknown_sentiment"], "Sentiment could not be determined."

    def build_breakdown(
        self,
        mention: NameMention,
        has_real_info: bool,
        sentiment: SentimentLabel,
        prompt_type: PromptType,
    ) -> ScoreBreakdown:
        """Combine the analyzer signals into a score, one clause per component"""
        if not mention.mentioned:
            return ScoreBreakdown(explanation=NOT_MENTIONED_EXPLANATION)

        mention_score, mention_clause = self._calculate_mention_score(mention)
        position_score, position_clause = self._calculate_position_score(mention, prompt_type)
        info_score, info_clause = self._calculate_info_quality_score(has_real_info)
        sentiment_score, sentiment_clause = self._calculate_sentiment_score(sentiment)

        explanation = " ".join([mention_clause, position_clause, info_clause, sentiment_clause])

        return ScoreBreakdown(
            mention_score=mention_score,
            position_score=position_score,
            info_quality_score=info_score,
            sentiment_score=sentiment_score,
            total=mention_score + position_score + info_score + sentiment_score,
            explanation=explanation,
        )

    def calculate(
        self,
        response: str,
        business_name: str,
        prompt_type: Union[PromptType, str],
    ) -> ScoreBreakdown:
        """
        Score one LLM response for one business.

        Args:
            response: Raw LLM response text
            business_name: Canonical business name
            prompt_type: local_search or direct_query

        Returns:
            ScoreBreakdown with sub-scores and explanation
        """
        prompt_type = PromptType(prompt_type)
        mention = self.matcher.analyze(response, business_name)
        if not mention.mentioned:
            logger.debug(f"'{business_name}' not mentioned, score 0")
            return ScoreBreakdown(explanation=NOT_MENTIONED_EXPLANATION)

        has_real_info = has_real_business_info(response, business_name)
        sentiment = self.sentiment_analyzer.analyze(response, business_name).polarity

        breakdown = self.build_breakdown(mention, has_real_info, sentiment, prompt_type)
        logger.debug(f"'{business_name}' scored {breakdown.total} ({prompt_type.value})")
        return breakdown

    def analyze_response(
        self,
        response: str,
        context: BusinessContext,
        prompt_type: Union[PromptType, str],
    ) -> VisibilityResult:
        """Full analysis: mention details, score, rating and context signals"""
        prompt_type = PromptType(prompt_type)
        response = response or ""
        mention = self.matcher.analyze(response, context.name)

        if mention.mentioned:
            has_real_info = has_real_business_info(response, context.name)
            sentiment = self.sentiment_analyzer.analyze(response, context.name).polarity
        else:
            has_real_info = False
            sentiment = SentimentLabel.UNKNOWN

        signals = self._context_signals(response, context, mention.mentioned)
        analysis = MentionAnalysis(
            mentioned=mention.mentioned,
            mention_type=mention.mention_type,
            position=mention.position,
            has_real_info=has_real_info,
            sentiment=sentiment,
            confidence=self._confidence(mention, signals),
        )
        breakdown = self.build_breakdown(mention, has_real_info, sentiment, prompt_type)

        return VisibilityResult(
            analysis=analysis,
            breakdown=breakdown,
            rating=interpret_score(breakdown.total),
            context=signals,
            prompt_type=prompt_type,
        )

    def _context_signals(
        self,
        response: str,
        context: BusinessContext,
        mentioned: bool,
    ) -> ContextSignals:
        response_lower = response.lower()
        city = (context.city or "").lower()
        services = [s.lower() for s in context.services if s and s.strip()]

        return ContextSignals(
            location_match=bool(city) and city in response_lower,
            services_match=any(s in response_lower for s in services),
            recommended=mentioned and any(p in response_lower for p in RECOMMENDATION_PHRASES),
            competitors=extract_competitors(response, context.name),
        )

    def _confidence(self, mention: NameMention, signals: ContextSignals) -> int:
        """Advisory certainty that the matched text refers to this business"""
        if mention.mention_type == MentionType.EXACT:
            return 95
        if mention.mention_type == MentionType.PARTIAL:
            confidence = 60
            if signals.location_match:
                confidence += 15
            if signals.services_match:
                confidence += 15
            return confidence
        return 0


def interpret_score(score: int) -> ScoreRating:
    """Map a 0-100 score to a rating band"""
    for lower_bound, rating, color, description in SCORE_RATING_BANDS:
        if score >= lower_bound:
            return ScoreRating(rating=rating, color=color, description=description)
    _, rating, color, description = SCORE_RATING_BANDS[-1]
    return ScoreRating(rating=rating, color=color, description=description)


_default_engine = ScoringEngine()


def calculate_visibility_score(
    response: str,
    business_name: str,
    prompt_type: Union[PromptType, str],
) -> ScoreBreakdown:
    return _default_engine.calculate(response, business_name, prompt_type)


def analyze_response(
    response: str,
    context: BusinessContext,
    prompt_type: Union[PromptType, str],
) -> VisibilityResult:
    return _default_engine.analyze_response(response, context, prompt_type)
