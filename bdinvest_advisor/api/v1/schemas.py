"""Pydantic schemas for API request/response validation"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bdinvest_advisor.domain.models import (
    Holding,
    InstrumentCategory,
    InvestmentType,
    RiskLevel,
    RiskTolerance,
    UserFinancialContext,
)

# Upper bounds keep compounded values within float range
MAX_AMOUNT = 1e12
MAX_RETURN_PCT = 100


class FinancialProfileRequest(BaseModel):
    """User profile plus questionnaire outcome"""

    age: int = Field(..., ge=18, le=100)
    monthly_income: float = Field(..., ge=0, description="Monthly income in BDT")
    monthly_expenses: float = Field(..., ge=0, description="Monthly expenses in BDT")
    current_savings: float = Field(0, ge=0)
    dependents: int = Field(0, ge=0)
    risk_tolerance: RiskTolerance

    def to_context(self) -> UserFinancialContext:
        return UserFinancialContext(
            age=self.age,
            monthly_income=self.monthly_income,
            monthly_expenses=self.monthly_expenses,
            current_savings=self.current_savings,
            dependents=self.dependents,
            risk_tolerance=self.risk_tolerance,
        )


class InstrumentSchema(BaseModel):
    """Catalog entry"""

    model_config = ConfigDict(from_attributes=True)

    type: InvestmentType
    name: str
    name_en: str
    description: str
    expected_return: float
    min_investment: float
    max_investment: Optional[float] = None
    risk_level: RiskLevel
    liquidity_days: int
    tax_benefit: bool
    category: InstrumentCategory
    provider: str
    features: List[str]
    pros: List[str]
    cons: List[str]
    eligibility: List[str]


class QuestionOptionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    value: str
    label: str
    score: int


class QuestionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    text: str
    options: List[QuestionOptionSchema]


class RiskAssessmentRequest(BaseModel):
    """Selected option value keyed by question id"""

    answers: Dict[str, str] = Field(..., description="e.g. {'q1': 'under25'}")


class RiskAssessmentAnswerSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    question_id: str
    selected_option_value: str
    score: int


class RiskAssessmentResponse(BaseModel):
    """Response for POST /v1/risk-assessment"""

    model_config = ConfigDict(from_attributes=True)

    raw_score: int
    max_score: int
    score_percentage: float
    tolerance: RiskTolerance
    answers: List[RiskAssessmentAnswerSchema]


class AllocationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    stocks: float
    bonds: float
    government: float
    bank: float


class RecommendationSchema(BaseModel):
    """Single ranked recommendation"""

    model_config = ConfigDict(from_attributes=True)

    investment_type: InvestmentType
    name: str
    recommended_amount: float
    expected_return: float
    risk_level: RiskLevel
    suitability_score: int
    reasoning: str
    pros: List[str]
    cons: List[str]


class RecommendationSummary(BaseModel):
    total_recommendations: int
    average_suitability_score: float


class RecommendationsResponse(BaseModel):
    """Response for POST /v1/recommendations"""

    recommendations: List[RecommendationSchema]
    allocation: AllocationSchema
    summary: RecommendationSummary


class OptimalPortfolioRequest(BaseModel):
    profile: FinancialProfileRequest
    target_amount: float = Field(..., gt=0)


class OptimalPortfolioResponse(BaseModel):
    """Response for POST /v1/portfolio/optimal"""

    model_config = ConfigDict(from_attributes=True)

    allocation: AllocationSchema
    recommendations: List[RecommendationSchema]
    projected_return: float


class ProjectionRequest(BaseModel):
    """Either an investment_type from the catalog or an explicit annual return, not both"""

    initial_amount: float = Field(..., ge=0, le=MAX_AMOUNT)
    years: Optional[int] = Field(None, ge=0)
    monthly_contribution: float = Field(0, ge=0, le=MAX_AMOUNT)
    investment_type: Optional[InvestmentType] = None
    annual_return_pct: Optional[float] = Field(None, ge=0, le=MAX_RETURN_PCT)

    @model_validator(mode="after")
    def check_return_source(self) -> "ProjectionRequest":
        if self.investment_type is None and self.annual_return_pct is None:
            raise ValueError("Provide investment_type or annual_return_pct")
        if self.investment_type is not None and self.annual_return_pct is not None:
            raise ValueError("Provide only one of investment_type and annual_return_pct")
        return self


class YearlyProjectionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    investment: float
    value: float
    return_amount: float


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    model_config = ConfigDict(from_attributes=True)

    future_value: float
    total_investment: float
    total_return: float
    yearly_breakdown: List[YearlyProjectionSchema]


class SipRequest(BaseModel):
    target_amount: float = Field(..., gt=0, le=MAX_AMOUNT)
    annual_return: float = Field(..., ge=0, le=MAX_RETURN_PCT)
    years: int = Field(..., gt=0, le=100)


class SipResponse(BaseModel):
    """Monthly instalment for a target and what that instalment grows to"""

    monthly_amount: float
    future_value: float


class SimpleInterestRequest(BaseModel):
    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    rate: float = Field(..., ge=0, le=MAX_RETURN_PCT, description="Annual rate in percent")
    years: float = Field(..., ge=0, le=100)


class CompoundInterestRequest(SimpleInterestRequest):
    frequency: int = Field(1, ge=1, le=365, description="Compounding periods per year")


class InterestResponse(BaseModel):
    """Value at maturity and the interest earned on top of the principal"""

    future_value: float
    interest: float


class HoldingSchema(BaseModel):
    type: InvestmentType
    amount: float = Field(..., ge=0)
    current_value: float = Field(..., ge=0)
    expected_return: float = Field(..., ge=0)

    def to_holding(self) -> Holding:
        return Holding(
            type=self.type,
            amount=self.amount,
            current_value=self.current_value,
            expected_return=self.expected_return,
        )


class PortfolioMetricsRequest(BaseModel):
    profile: FinancialProfileRequest
    holdings: List[HoldingSchema]


class PortfolioMetricsResponse(BaseModel):
    """Response for POST /v1/portfolio/metrics"""

    model_config = ConfigDict(from_attributes=True)

    total_investment: float
    total_current_value: float
    total_return: float
    return_percentage: float
    monthly_savings: float
    savings_rate: float
    emergency_fund_months: float
    weighted_expected_return: float
    diversity_score: float
