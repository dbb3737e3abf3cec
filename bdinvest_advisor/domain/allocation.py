"""Target asset allocation from age and risk tolerance"""

from bdinvest_advisor.domain.exceptions import InvalidInputError
from bdinvest_advisor.domain.models import AssetAllocation, RiskTolerance

MIN_EQUITY_PCT = 10
MAX_EQUITY_PCT = 80


def calculate_allocation(age: int, risk_tolerance: RiskTolerance) -> AssetAllocation:
    """
    Derive percentage targets using the "100 minus age" rule.

    Steps:
    - equity starts at 100 - age
    - conservative shifts it down 20 points, aggressive up 20
    - equity is held within [10, 80]
    - the fixed-income remainder splits 60/40 between government and bank,
      capped at 40 and 30 points

    The caps leave headroom, so the buckets need not sum to 100.
    """
    if not 18 <= age <= 100:
        raise InvalidInputError(f"age must be between 18 and 100, got {age}")

    equity_pct = 100 - age
    tolerance = RiskTolerance(risk_tolerance)

    if tolerance == RiskTolerance.CONSERVATIVE:
        equity_pct = equity_pct - 20
    elif tolerance == RiskTolerance.AGGRESSIVE:
        equity_pct = equity_pct + 20

    equity_pct = min(max(equity_pct, MIN_EQUITY_PCT), MAX_EQUITY_PCT)
    fixed_income_pct = 100 - equity_pct

    return AssetAllocation(
        stocks=equity_pct,
        bonds=fixed_income_pct,
        government=min(fixed_income_pct * 0.6, 40),
        bank=min(fixed_income_pct * 0.4, 30),
    )
