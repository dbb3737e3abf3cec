"""Suitability scoring - how well one instrument fits one investor"""

import logging
from dataclasses import dataclass

from bdinvest_advisor.domain.models import (
    Instrument,
    RiskLevel,
    RiskTolerance,
    UserFinancialContext,
)

logger = logging.getLogger(__name__)

MAX_SUITABILITY_SCORE = 100

# Points by risk level, per age band and per tolerance
_AGE_RISK_POINTS = {
    "young": {RiskLevel.HIGH: 25, RiskLevel.MEDIUM: 20, RiskLevel.LOW: 15},
    "middle": {RiskLevel.MEDIUM: 25, RiskLevel.LOW: 20, RiskLevel.HIGH: 15},
    "senior": {RiskLevel.LOW: 25, RiskLevel.MEDIUM: 15, RiskLevel.HIGH: 10},
}

_TOLERANCE_POINTS = {
    RiskTolerance.CONSERVATIVE: {RiskLevel.LOW: 25, RiskLevel.MEDIUM: 0, RiskLevel.HIGH: 0},
    RiskTolerance.MODERATE: {RiskLevel.MEDIUM: 25, RiskLevel.LOW: 20, RiskLevel.HIGH: 10},
    RiskTolerance.AGGRESSIVE: {RiskLevel.HIGH: 25, RiskLevel.MEDIUM: 20, RiskLevel.LOW: 15},
}


@dataclass
class SuitabilityBreakdown:
    """Individual sub-scores; total is clamped to 100"""

    age_fit: int
    tolerance_fit: int
    income: int
    savings_rate: int
    dependents: int
    emergency_fund: int

    @property
    def total(self) -> int:
        raw = (
            self.age_fit
            + self.tolerance_fit
            + self.income
            + self.savings_rate
            + self.dependents
            + self.emergency_fund
        )
        return min(raw, MAX_SUITABILITY_SCORE)


def _age_band(age: int) -> str:
    if age < 30:
        return "young"
    elif age < 50:
        return "middle"
    return "senior"


def age_risk_points(age: int, risk_level: RiskLevel) -> int:
    """Age/risk fit, 0-25"""
    return _AGE_RISK_POINTS[_age_band(age)][RiskLevel(risk_level)]


def tolerance_points(tolerance: RiskTolerance, risk_level: RiskLevel) -> int:
    """Risk tolerance fit, 0-25"""
    return _TOLERANCE_POINTS[RiskTolerance(tolerance)][RiskLevel(risk_level)]


def income_points(monthly_income: float) -> int:
    """Income tier, 5-20"""
    if monthly_income >= 100_000:
        return 20
    elif monthly_income >= 50_000:
        return 15
    elif monthly_income >= 25_000:
        return 10
    return 5


def savings_rate(monthly_income: float, monthly_expenses: float) -> float:
    """Share of income left after expenses; 0.0 when there is no income"""
    if monthly_income <= 0:
        return 0.0
    return (monthly_income - monthly_expenses) / monthly_income


def savings_rate_points(monthly_income: float, monthly_expenses: float) -> int:
    """Savings capacity tier, 3-15. Negative rates land in the bottom tier."""
    rate = savings_rate(monthly_income, monthly_expenses)
    if rate >= 0.3:
        return 15
    elif rate >= 0.2:
        return 12
    elif rate >= 0.1:
        return 8
    return 3


def dependents_points(dependents: int) -> int:
    """Dependents tier, 3-10"""
    if dependents == 0:
        return 10
    elif dependents <= 2:
        return 7
    return 3


def emergency_fund_points(current_savings: float, monthly_expenses: float) -> int:
    """
    Emergency fund tier, 1-5.

    With no monthly expenses any savings cover an unlimited number of months,
    so the fund counts as adequate.
    """
    if monthly_expenses <= 0:
        return 5

    months = current_savings / monthly_expenses
    if months >= 6:
        return 5
    elif months >= 3:
        return 3
    return 1


def score_breakdown(instrument: Instrument, context: UserFinancialContext) -> SuitabilityBreakdown:
    """Compute every sub-score for one instrument"""
    return SuitabilityBreakdown(
        age_fit=age_risk_points(context.age, instrument.risk_level),
        tolerance_fit=tolerance_points(context.risk_tolerance, instrument.risk_level),
        income=income_points(context.monthly_income),
        savings_rate=savings_rate_points(context.monthly_income, context.monthly_expenses),
        dependents=dependents_points(context.dependents),
        emergency_fund=emergency_fund_points(context.current_savings, context.monthly_expenses),
    )


def calculate_suitability_score(instrument: Instrument, context: UserFinancialContext) -> int:
    """
    Score 0-100 for how well an instrument suits the investor.

    Scoring weights (simple sum, clamped to 100):
    - 25: age vs instrument risk
    - 25: risk tolerance vs instrument risk
    - 20: monthly income
    - 15: savings rate
    - 10: number of dependents
    - 5:  months of expenses covered by savings
    """
    breakdown = score_breakdown(instrument, context)
    logger.debug(
        "Suitability scored",
        extra={"investment_type": instrument.type.value, "score": breakdown.total},
    )
    return breakdown.total


def generate_reasoning(instrument: Instrument, age: int, suitability_score: int) -> str:
    """Human-readable (Bengali) explanation attached to a recommendation"""
    if age < 30:
        age_group = "তরুণ"
    elif age < 50:
        age_group = "মধ্যবয়সী"
    else:
        age_group = "প্রবীণ"

    if suitability_score >= 80:
        fit = "অত্যন্ত উপযুক্ত বিনিয়োগ। "
    elif suitability_score >= 70:
        fit = "ভালো বিনিয়োগ বিকল্প। "
    else:
        fit = "মাঝারি উপযুক্ত বিনিয়োগ। "

    risk_word = {RiskLevel.LOW: "কম", RiskLevel.MEDIUM: "মাঝারি", RiskLevel.HIGH: "উচ্চ"}[instrument.risk_level]

    return (
        f"আপনার {age_group} বয়স এবং আর্থিক প্রোফাইলের জন্য {instrument.name} একটি "
        f"{fit}"
        f"এই বিনিয়োগে {instrument.expected_return:g}% বার্ষিক রিটার্ন প্রত্যাশিত এবং "
        f"ঝুঁকির মাত্রা {risk_word}।"
    )
