"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from bdinvest_advisor.api.dependencies import get_settings
from bdinvest_advisor.api.main import create_app
from bdinvest_advisor.config import Settings


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "bdinvest-advisor"}


def test_request_id_header(client: TestClient):
    """Generated when absent, echoed when supplied"""
    assert client.get("/health").headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


def test_metrics_endpoint(client: TestClient, profile_payload: dict):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/recommendations", json=profile_payload)

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "bdinvest_recommendation_runs_total" in response.text
    assert "bdinvest_recommendations_issued_total" in response.text


def test_list_instruments(client: TestClient):
    response = client.get("/v1/instruments")

    assert response.status_code == 200
    data = response.json()
    assert [i["type"] for i in data] == ["sanchayapatra", "dps", "fixed_deposit", "mutual_fund", "stock", "bond"]
    assert data[0]["max_investment"] == 3_000_000
    assert data[1]["max_investment"] is None


def test_get_instrument(client: TestClient):
    response = client.get("/v1/instruments/mutual_fund")

    assert response.status_code == 200
    data = response.json()
    assert data["name_en"] == "Mutual Fund"
    assert data["risk_level"] == "medium"
    assert data["category"] == "mutual_fund"


def test_get_instrument_not_found(client: TestClient):
    response = client.get("/v1/instruments/crypto")
    assert response.status_code == 404


def test_list_questions(client: TestClient):
    response = client.get("/v1/risk-assessment/questions")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 8
    assert all(len(q["options"]) == 4 for q in data)


def test_submit_risk_assessment(client: TestClient, complete_answers: dict):
    response = client.post("/v1/risk-assessment", json={"answers": complete_answers})

    assert response.status_code == 200
    data = response.json()
    assert data["raw_score"] == 20
    assert data["score_percentage"] == 62.5
    assert data["tolerance"] == "moderate"
    assert len(data["answers"]) == 8


def test_submit_risk_assessment_incomplete(client: TestClient, complete_answers: dict):
    del complete_answers["q3"]

    response = client.post("/v1/risk-assessment", json={"answers": complete_answers})

    assert response.status_code == 422
    assert response.json()["detail"]["missing"] == ["q3"]


def test_submit_risk_assessment_invalid_option(client: TestClient, complete_answers: dict):
    complete_answers["q1"] = "ancient"

    response = client.post("/v1/risk-assessment", json={"answers": complete_answers})

    assert response.status_code == 422


def test_recommendations_endpoint(client: TestClient, profile_payload: dict):
    """Test POST /v1/recommendations for an aggressive young investor"""
    response = client.post("/v1/recommendations", json=profile_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["recommendations"][0]["investment_type"] == "stock"
    assert data["recommendations"][0]["suitability_score"] == 95
    assert data["allocation"]["stocks"] == 80
    assert data["summary"]["total_recommendations"] == 6
    assert data["summary"]["average_suitability_score"] == 80.0

    scores = [r["suitability_score"] for r in data["recommendations"]]
    assert scores == sorted(scores, reverse=True)


def test_recommendations_endpoint_validation(client: TestClient, profile_payload: dict):
    profile_payload["age"] = 12
    response = client.post("/v1/recommendations", json=profile_payload)
    assert response.status_code == 422

    profile_payload["age"] = 30
    profile_payload["risk_tolerance"] = "reckless"
    response = client.post("/v1/recommendations", json=profile_payload)
    assert response.status_code == 422


def test_optimal_portfolio_endpoint(client: TestClient, profile_payload: dict):
    response = client.post(
        "/v1/portfolio/optimal",
        json={"profile": profile_payload, "target_amount": 500000},
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["recommendations"]) == 6
    assert 6.5 <= data["projected_return"] <= 15.8


def test_suitability_threshold_applies_to_both_endpoints(profile_payload: dict):
    """A configured threshold filters /recommendations and /portfolio/optimal alike"""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: Settings(min_suitability_score=90)
    client = TestClient(app)

    recommendations = client.post("/v1/recommendations", json=profile_payload).json()
    portfolio = client.post(
        "/v1/portfolio/optimal",
        json={"profile": profile_payload, "target_amount": 500000},
    ).json()

    assert [r["investment_type"] for r in recommendations["recommendations"]] == ["stock"]
    assert [r["investment_type"] for r in portfolio["recommendations"]] == ["stock"]
    assert portfolio["projected_return"] == pytest.approx(15.8)


def test_projection_endpoint_explicit_return(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={"initial_amount": 100000, "annual_return_pct": 8.5, "years": 5},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["future_value"] == 150366
    assert data["total_investment"] == 100000
    assert data["yearly_breakdown"][0]["value"] == 108500
    assert len(data["yearly_breakdown"]) == 5


def test_projection_endpoint_default_years(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={"initial_amount": 10000, "investment_type": "dps", "monthly_contribution": 1000},
    )

    assert response.status_code == 200
    assert len(response.json()["yearly_breakdown"]) == 5


def test_projection_endpoint_below_minimum(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={"initial_amount": 50000, "investment_type": "bond", "years": 3},
    )
    assert response.status_code == 422


def test_projection_endpoint_requires_return_source(client: TestClient):
    response = client.post("/v1/projection", json={"initial_amount": 1000, "years": 3})
    assert response.status_code == 422


def test_projection_endpoint_years_limit(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={"initial_amount": 1000, "annual_return_pct": 5, "years": 500},
    )
    assert response.status_code == 422


def test_projection_endpoint_rejects_overflowing_amount(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={"initial_amount": 1.7e308, "annual_return_pct": 50, "years": 1},
    )
    assert response.status_code == 422


def test_projection_endpoint_rejects_two_return_sources(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={"initial_amount": 10000, "investment_type": "dps", "annual_return_pct": 9, "years": 3},
    )
    assert response.status_code == 422


def test_sip_calculator_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/sip",
        json={"target_amount": 120000, "annual_return": 0, "years": 5},
    )

    assert response.status_code == 200
    assert response.json() == {"monthly_amount": 2000.0, "future_value": 120000.0}


def test_sip_calculator_endpoint_bounds(client: TestClient):
    response = client.post(
        "/v1/calculators/sip",
        json={"target_amount": 120000, "annual_return": 1e6, "years": 5},
    )
    assert response.status_code == 422


def test_compound_interest_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/compound-interest",
        json={"principal": 1000, "rate": 10, "years": 2},
    )

    assert response.status_code == 200
    assert response.json() == {"future_value": 1210.0, "interest": 210.0}


def test_simple_interest_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/simple-interest",
        json={"principal": 1000, "rate": 10, "years": 2},
    )

    assert response.status_code == 200
    assert response.json() == {"future_value": 1200.0, "interest": 200.0}


def test_portfolio_metrics_endpoint(client: TestClient, profile_payload: dict):
    response = client.post(
        "/v1/portfolio/metrics",
        json={
            "profile": profile_payload,
            "holdings": [
                {"type": "sanchayapatra", "amount": 100000, "current_value": 108500, "expected_return": 8.5},
                {"type": "stock", "amount": 50000, "current_value": 45000, "expected_return": 15.8},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_return"] == 3500
    assert data["savings_rate"] == 40
    assert round(data["diversity_score"], 2) == 33.33
