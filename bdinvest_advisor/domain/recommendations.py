"""Recommendation engine - core business logic for investment suggestions"""

import logging
from typing import Iterable, List, Optional, Sequence

from bdinvest_advisor.domain.allocation import calculate_allocation
from bdinvest_advisor.domain.catalog import all_instruments
from bdinvest_advisor.domain.exceptions import InvalidInputError
from bdinvest_advisor.domain.models import (
    AssetAllocation,
    Instrument,
    InstrumentCategory,
    OptimalPortfolio,
    Recommendation,
    RiskLevel,
    RiskTolerance,
    UserFinancialContext,
)
from bdinvest_advisor.domain.suitability import calculate_suitability_score, generate_reasoning

logger = logging.getLogger(__name__)

MIN_SUITABILITY_SCORE = 60
DEFAULT_CATEGORY_PCT = 10

_ALLOWED_RISK_LEVELS = {
    RiskTolerance.CONSERVATIVE: {RiskLevel.LOW},
    RiskTolerance.MODERATE: {RiskLevel.LOW, RiskLevel.MEDIUM},
    RiskTolerance.AGGRESSIVE: {RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH},
}


def filter_by_risk_tolerance(
    instruments: Iterable[Instrument],
    risk_tolerance: RiskTolerance,
) -> List[Instrument]:
    """Keep instruments whose risk tier the tolerance allows, in catalog order"""
    allowed = _ALLOWED_RISK_LEVELS[RiskTolerance(risk_tolerance)]
    return [inst for inst in instruments if inst.risk_level in allowed]


def allocation_pct_for(category: InstrumentCategory, allocation: AssetAllocation) -> float:
    """Map an instrument category onto its allocation bucket"""
    if category == InstrumentCategory.GOVERNMENT:
        return allocation.government
    elif category == InstrumentCategory.BANK:
        return allocation.bank
    elif category in (InstrumentCategory.STOCK, InstrumentCategory.MUTUAL_FUND):
        return allocation.stocks
    return DEFAULT_CATEGORY_PCT


def calculate_recommended_amount(
    instrument: Instrument,
    available_amount: float,
    allocation: AssetAllocation,
) -> float:
    """
    Share of the monthly surplus for this instrument, floored at its minimum.

    A negative surplus counts as zero capacity. Because of the floor, a user
    with nothing to invest is still shown the minimum ticket size.
    """
    capacity = max(available_amount, 0)
    pct = allocation_pct_for(instrument.category, allocation)
    return max(capacity * pct / 100, instrument.min_investment)


def generate_recommendations(
    context: UserFinancialContext,
    instruments: Optional[Sequence[Instrument]] = None,
    min_score: int = MIN_SUITABILITY_SCORE,
) -> List[Recommendation]:
    """
    Main entry point: rank catalog instruments for one investor.

    Flow:
    1. Filter the catalog by risk tolerance
    2. Score each remaining instrument, dropping those below min_score
    3. Size each survivor from the age/tolerance allocation
    4. Sort by suitability, highest first (ties keep catalog order)
    """
    catalog = all_instruments() if instruments is None else instruments
    allocation = calculate_allocation(context.age, context.risk_tolerance)
    available_amount = context.available_amount

    recommendations: List[Recommendation] = []
    for instrument in filter_by_risk_tolerance(catalog, context.risk_tolerance):
        score = calculate_suitability_score(instrument, context)
        if score < min_score:
            logger.debug(
                "Instrument below suitability threshold",
                extra={"investment_type": instrument.type.value, "score": score},
            )
            continue

        amount = calculate_recommended_amount(instrument, available_amount, allocation)
        if amount < instrument.min_investment:
            continue

        recommendations.append(
            Recommendation(
                investment_type=instrument.type,
                name=instrument.name,
                recommended_amount=amount,
                expected_return=instrument.expected_return,
                risk_level=instrument.risk_level,
                suitability_score=score,
                reasoning=generate_reasoning(instrument, context.age, score),
                pros=list(instrument.pros),
                cons=list(instrument.cons),
            )
        )

    # sorted() is stable, so equal scores stay in catalog order
    return sorted(recommendations, key=lambda r: r.suitability_score, reverse=True)


def calculate_optimal_portfolio(
    context: UserFinancialContext,
    target_amount: float,
    instruments: Optional[Sequence[Instrument]] = None,
    min_score: int = MIN_SUITABILITY_SCORE,
) -> OptimalPortfolio:
    """
    Recommendations plus their amount-weighted expected return.

    Each recommendation is weighted by recommended_amount / target_amount and
    the weighted sum is renormalised, so the result is independent of
    target_amount as long as it is positive.
    """
    if target_amount <= 0:
        raise InvalidInputError("target_amount must be positive")

    recommendations = generate_recommendations(context, instruments, min_score=min_score)
    allocation = calculate_allocation(context.age, context.risk_tolerance)

    total_weight = 0.0
    weighted_return = 0.0
    for rec in recommendations:
        weight = rec.recommended_amount / target_amount
        total_weight += weight
        weighted_return += rec.expected_return * weight

    projected_return = weighted_return / total_weight if total_weight > 0 else 0.0

    return OptimalPortfolio(
        allocation=allocation,
        recommendations=recommendations,
        projected_return=projected_return,
    )
