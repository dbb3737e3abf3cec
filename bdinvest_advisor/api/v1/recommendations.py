"""POST /v1/recommendations - Personalised investment recommendations"""

import time
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from bdinvest_advisor.api.dependencies import get_request_id, get_settings
from bdinvest_advisor.api.v1.schemas import (
    AllocationSchema,
    FinancialProfileRequest,
    OptimalPortfolioRequest,
    OptimalPortfolioResponse,
    RecommendationSchema,
    RecommendationSummary,
    RecommendationsResponse,
)
from bdinvest_advisor.config import Settings
from bdinvest_advisor.domain.allocation import calculate_allocation
from bdinvest_advisor.domain.exceptions import InvalidInputError
from bdinvest_advisor.domain.recommendations import calculate_optimal_portfolio, generate_recommendations
from bdinvest_advisor.infrastructure.observability.logging import log_recommendation_run
from bdinvest_advisor.infrastructure.observability.metrics import record_recommendation_run

router = APIRouter()


@router.post("/recommendations", response_model=RecommendationsResponse)
def create_recommendations(
    request_body: FinancialProfileRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Rank catalog instruments for the submitted profile.

    Flow:
    1. Build the financial context from the request
    2. Generate recommendations above the configured suitability threshold
    3. Attach the target allocation and a short summary
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        context = request_body.to_context()
        recommendations = generate_recommendations(context, min_score=settings.min_suitability_score)
        allocation = calculate_allocation(context.age, context.risk_tolerance)

    except InvalidInputError as e:
        logging.warning(f"Invalid profile: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_recommendation_run(context.risk_tolerance.value, recommendations)
    log_recommendation_run(request_id, context.risk_tolerance.value, len(recommendations), duration_ms)

    average = (
        sum(r.suitability_score for r in recommendations) / len(recommendations)
        if recommendations
        else 0.0
    )

    return RecommendationsResponse(
        recommendations=[RecommendationSchema.model_validate(r) for r in recommendations],
        allocation=AllocationSchema.model_validate(allocation),
        summary=RecommendationSummary(
            total_recommendations=len(recommendations),
            average_suitability_score=round(average, 1),
        ),
    )


@router.post("/portfolio/optimal", response_model=OptimalPortfolioResponse)
def create_optimal_portfolio(
    request_body: OptimalPortfolioRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """Recommendations with their amount-weighted projected return"""
    request_id = get_request_id(request)

    try:
        portfolio = calculate_optimal_portfolio(
            request_body.profile.to_context(),
            request_body.target_amount,
            min_score=settings.min_suitability_score,
        )
    except InvalidInputError as e:
        logging.warning(f"Invalid portfolio request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return OptimalPortfolioResponse.model_validate(portfolio)
