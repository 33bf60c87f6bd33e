"""
Visibility Scoring API Routes
Score a single LLM response for a business, with a full explanation
"""

import logging

from fastapi import APIRouter

from citedby.models import BusinessContext
from citedby.schemas import VisibilityScoreRequest, VisibilityScoreResponse
from citedby.services import analyze_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/score", response_model=VisibilityScoreResponse)
async def score_response(request: VisibilityScoreRequest):
    """
    Score an LLM response for one business.

    Returns the mention analysis, the 0-100 score breakdown with its
    explanation, the rating band, and advisory context signals.
    """
    context = BusinessContext(
        name=request.business.name,
        industry=request.business.industry,
        city=request.business.city,
        canton=request.business.canton,
        services=list(request.business.services),
    )

    result = analyze_response(request.response, context, request.prompt_type)
    logger.info(
        f"Scored '{context.name}' ({result.prompt_type.value}): "
        f"{result.breakdown.total} {result.rating.rating}"
    )

    return VisibilityScoreResponse.model_validate(result)
