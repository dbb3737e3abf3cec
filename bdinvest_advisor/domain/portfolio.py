"""Portfolio metrics for the investments a user already holds"""

from typing import List

from bdinvest_advisor.domain.models import Holding, InvestmentType, PortfolioMetrics, UserFinancialContext


def calculate_portfolio_metrics(holdings: List[Holding], context: UserFinancialContext) -> PortfolioMetrics:
    """
    Summarise holdings against the user's monthly cash flow.

    Ratios with a zero denominator (no holdings, no income, no expenses)
    are reported as 0.
    """
    total_investment = sum(h.amount for h in holdings)
    total_current_value = sum(h.current_value for h in holdings)
    total_return = total_current_value - total_investment
    return_percentage = total_return / total_investment * 100 if total_investment > 0 else 0.0

    monthly_savings = context.monthly_income - context.monthly_expenses
    savings_rate = monthly_savings / context.monthly_income * 100 if context.monthly_income > 0 else 0.0
    emergency_fund_months = (
        context.current_savings / context.monthly_expenses if context.monthly_expenses > 0 else 0.0
    )

    weighted_return = (
        sum(h.expected_return * h.amount for h in holdings) / total_investment
        if total_investment > 0
        else 0.0
    )

    # Share of the catalog's instrument types represented in the portfolio
    unique_types = {InvestmentType(h.type) for h in holdings}
    diversity_score = len(unique_types) / len(InvestmentType) * 100

    return PortfolioMetrics(
        total_investment=total_investment,
        total_current_value=total_current_value,
        total_return=total_return,
        return_percentage=return_percentage,
        monthly_savings=monthly_savings,
        savings_rate=savings_rate,
        emergency_fund_months=emergency_fund_months,
        weighted_expected_return=weighted_return,
        diversity_score=diversity_score,
    )
