"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from bdinvest_advisor.api.main import create_app
from bdinvest_advisor.domain.models import RiskTolerance, UserFinancialContext


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def make_context():
    """Factory for financial contexts with sensible defaults"""

    def _make(
        age: int = 25,
        monthly_income: float = 50_000,
        monthly_expenses: float = 30_000,
        current_savings: float = 200_000,
        dependents: int = 0,
        risk_tolerance: RiskTolerance = RiskTolerance.AGGRESSIVE,
    ) -> UserFinancialContext:
        return UserFinancialContext(
            age=age,
            monthly_income=monthly_income,
            monthly_expenses=monthly_expenses,
            current_savings=current_savings,
            dependents=dependents,
            risk_tolerance=risk_tolerance,
        )

    return _make


@pytest.fixture
def young_professional(make_context) -> UserFinancialContext:
    """25 years old, 40% savings rate, 6+ months of savings, aggressive"""
    return make_context()


@pytest.fixture
def conservative_retiree(make_context) -> UserFinancialContext:
    """60 years old, thin margin, three dependents, conservative"""
    return make_context(
        age=60,
        monthly_income=40_000,
        monthly_expenses=35_000,
        current_savings=60_000,
        dependents=3,
        risk_tolerance=RiskTolerance.CONSERVATIVE,
    )


@pytest.fixture
def complete_answers() -> dict[str, str]:
    """Middle-of-the-road questionnaire (raw score 20 of 32)"""
    return {
        "q1": "25to35",  # 3
        "q2": "limited",  # 2
        "q3": "balanced_growth",  # 3
        "q4": "medium_long",  # 3
        "q5": "sell_some",  # 2
        "q6": "low",  # 2
        "q7": "adequate",  # 3
        "q8": "conservative",  # 2
    }


@pytest.fixture
def profile_payload() -> dict:
    """Request body matching the young_professional context"""
    return {
        "age": 25,
        "monthly_income": 50000,
        "monthly_expenses": 30000,
        "current_savings": 200000,
        "dependents": 0,
        "risk_tolerance": "aggressive",
    }
