"""POST /v1/portfolio/metrics - Dashboard figures for current holdings"""

from fastapi import APIRouter

from bdinvest_advisor.api.v1.schemas import PortfolioMetricsRequest, PortfolioMetricsResponse
from bdinvest_advisor.domain.portfolio import calculate_portfolio_metrics

router = APIRouter()


@router.post("/portfolio/metrics", response_model=PortfolioMetricsResponse)
def get_portfolio_metrics(request_body: PortfolioMetricsRequest):
    """Totals, returns, savings rate, emergency cover and diversity for the holdings"""
    holdings = [h.to_holding() for h in request_body.holdings]
    metrics = calculate_portfolio_metrics(holdings, request_body.profile.to_context())
    return PortfolioMetricsResponse.model_validate(metrics)
