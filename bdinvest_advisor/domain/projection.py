"""Future value projections and interest calculators"""

import math
from typing import List

from bdinvest_advisor.domain.catalog import get_instrument
from bdinvest_advisor.domain.exceptions import InvalidInputError
from bdinvest_advisor.domain.models import InvestmentType, ProjectionResult, YearlyProjection


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going towards +infinity"""
    return math.floor(value + 0.5)


def _growth_factor(base: float, exponent: float) -> float:
    try:
        factor = base ** exponent
    except OverflowError:
        raise InvalidInputError("Result is too large to represent") from None
    if not math.isfinite(factor):
        raise InvalidInputError("Result is too large to represent")
    return factor


def calculate_projection(
    initial_amount: float,
    annual_return_pct: float,
    years: int,
    monthly_contribution: float = 0,
) -> ProjectionResult:
    """
    Project a lump sum plus optional monthly contributions year by year.

    A year's contributions are added at once and compound annually together
    with the running balance. Non-positive years give an empty breakdown and
    future_value equal to initial_amount.

    Example:
        calculate_projection(100000, 8.5, 5)
        year 1 -> 108500, year 5 -> 150366, total_investment 100000

    Raises:
        InvalidInputError: If the balance grows beyond a finite float
    """
    total_investment = initial_amount
    current_value = initial_amount
    yearly_contribution = monthly_contribution * 12
    growth = 1 + annual_return_pct / 100

    breakdown: List[YearlyProjection] = []
    for year in range(1, max(years, 0) + 1):
        total_investment += yearly_contribution
        current_value = (current_value + yearly_contribution) * growth
        if not math.isfinite(current_value):
            raise InvalidInputError(f"Projection overflows in year {year}")

        breakdown.append(
            YearlyProjection(
                year=year,
                investment=total_investment,
                value=round_half_up(current_value),
                return_amount=round_half_up(current_value - total_investment),
            )
        )

    future_value = round_half_up(current_value) if breakdown else initial_amount

    return ProjectionResult(
        future_value=future_value,
        total_investment=total_investment,
        total_return=round_half_up(future_value - total_investment),
        yearly_breakdown=breakdown,
    )


def project_instrument(
    investment_type: InvestmentType | str,
    amount: float,
    years: int,
    monthly_contribution: float = 0,
) -> ProjectionResult:
    """
    Project an investment in a catalog instrument at its expected return.

    Raises:
        UnknownInstrumentError: If the type is not in the catalog
        InvalidInputError: If amount is below the instrument minimum
    """
    instrument = get_instrument(investment_type)
    if amount < instrument.min_investment:
        raise InvalidInputError(
            f"Minimum investment for {instrument.name_en} is {instrument.min_investment:g}"
        )
    return calculate_projection(amount, instrument.expected_return, years, monthly_contribution)


def compound_interest(principal: float, rate: float, years: float, frequency: int = 1) -> float:
    """Value of principal compounded `frequency` times per year"""
    if frequency <= 0:
        raise InvalidInputError("frequency must be positive")
    return principal * _growth_factor(1 + rate / (100 * frequency), frequency * years)


def simple_interest(principal: float, rate: float, years: float) -> float:
    return principal * (1 + rate * years / 100)


def sip_amount(target_amount: float, annual_return: float, years: int) -> float:
    """Monthly instalment needed to reach target_amount"""
    months = years * 12
    if months <= 0:
        raise InvalidInputError("years must be positive")

    monthly_return = annual_return / (12 * 100)
    if monthly_return == 0:
        return target_amount / months

    return target_amount * monthly_return / (_growth_factor(1 + monthly_return, months) - 1)


def sip_future_value(monthly_amount: float, annual_return: float, years: int) -> float:
    """Future value of a monthly systematic investment plan"""
    months = max(years, 0) * 12
    monthly_return = annual_return / (12 * 100)
    if monthly_return == 0:
        return monthly_amount * months

    return monthly_amount * (_growth_factor(1 + monthly_return, months) - 1) / monthly_return
