"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from bdinvest_advisor.domain.exceptions import InvalidInputError


class RiskLevel(str, Enum):
    """Risk tier of a single instrument"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskTolerance(str, Enum):
    """Investor appetite for risk, derived from the questionnaire"""

    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class InvestmentType(str, Enum):
    """Instrument identifiers in the catalog"""

    SANCHAYAPATRA = "sanchayapatra"  # government savings certificate
    DPS = "dps"  # deposit pension scheme
    FIXED_DEPOSIT = "fixed_deposit"
    MUTUAL_FUND = "mutual_fund"
    STOCK = "stock"
    BOND = "bond"  # government treasury bond


class InstrumentCategory(str, Enum):
    """Bucket used to map an instrument onto the asset allocation"""

    GOVERNMENT = "government"
    BANK = "bank"
    STOCK = "stock"
    MUTUAL_FUND = "mutual_fund"
    BOND = "bond"


@dataclass(frozen=True)
class Instrument:
    """Catalog entry for one investment product. Never mutated after load."""

    type: InvestmentType
    name: str
    name_en: str
    description: str
    expected_return: float  # annual %
    min_investment: float
    risk_level: RiskLevel
    liquidity_days: int
    tax_benefit: bool
    category: InstrumentCategory
    provider: str
    max_investment: Optional[float] = None
    features: tuple[str, ...] = ()
    pros: tuple[str, ...] = ()
    cons: tuple[str, ...] = ()
    eligibility: tuple[str, ...] = ()


@dataclass
class UserFinancialContext:
    """Per-request snapshot of the user's profile and risk tolerance"""

    age: int
    monthly_income: float
    monthly_expenses: float
    current_savings: float
    dependents: int
    risk_tolerance: RiskTolerance

    def __post_init__(self) -> None:
        if not 18 <= self.age <= 100:
            raise InvalidInputError(f"age must be between 18 and 100, got {self.age}")
        for name in ("monthly_income", "monthly_expenses", "current_savings", "dependents"):
            if getattr(self, name) < 0:
                raise InvalidInputError(f"{name} must be non-negative")
        self.risk_tolerance = RiskTolerance(self.risk_tolerance)

    @property
    def available_amount(self) -> float:
        """Monthly disposable income; may be negative"""
        return self.monthly_income - self.monthly_expenses


@dataclass(frozen=True)
class QuestionOption:
    value: str
    label: str
    score: int


@dataclass(frozen=True)
class Question:
    """One risk questionnaire item with four scored options"""

    id: str
    text: str
    options: tuple[QuestionOption, ...]


@dataclass
class RiskAssessmentAnswer:
    """Selected option for a single question"""

    question_id: str
    selected_option_value: str
    score: int


@dataclass
class RiskAssessmentResult:
    """Output of the questionnaire scorer"""

    raw_score: int
    max_score: int
    score_percentage: float
    tolerance: RiskTolerance
    answers: List[RiskAssessmentAnswer] = field(default_factory=list)


@dataclass
class AssetAllocation:
    """Target split in percentage points. Not normalised to 100."""

    stocks: float
    bonds: float
    government: float
    bank: float


@dataclass
class Recommendation:
    """Ranked suggestion for one instrument"""

    investment_type: InvestmentType
    name: str
    recommended_amount: float
    expected_return: float
    risk_level: RiskLevel
    suitability_score: int
    reasoning: str
    pros: List[str]
    cons: List[str]


@dataclass
class YearlyProjection:
    year: int
    investment: float
    value: float
    return_amount: float


@dataclass
class ProjectionResult:
    """Year-by-year compounding forecast"""

    future_value: float
    total_investment: float
    total_return: float
    yearly_breakdown: List[YearlyProjection]


@dataclass
class OptimalPortfolio:
    """Allocation, recommendations and their amount-weighted return"""

    allocation: AssetAllocation
    recommendations: List[Recommendation]
    projected_return: float


@dataclass
class Holding:
    """An investment the user already owns"""

    type: InvestmentType
    amount: float
    current_value: float
    expected_return: float


@dataclass
class PortfolioMetrics:
    """Dashboard figures for a set of holdings"""

    total_investment: float
    total_current_value: float
    total_return: float
    return_percentage: float
    monthly_savings: float
    savings_rate: float
    emergency_fund_months: float
    weighted_expected_return: float
    diversity_score: float
