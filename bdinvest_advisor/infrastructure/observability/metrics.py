"""Prometheus metrics for recommendation volume, risk profiles and request latency"""

from typing import List

from prometheus_client import Counter, Histogram

from bdinvest_advisor.domain.models import Recommendation

# Recommendation metrics
recommendation_run_counter = Counter(
    "bdinvest_recommendation_runs_total",
    "Total recommendation runs",
    ["risk_tolerance"],  # conservative | moderate | aggressive
)

recommendations_issued_counter = Counter(
    "bdinvest_recommendations_issued_total",
    "Recommendations returned by instrument",
    ["investment_type"],
)

# Questionnaire metrics
risk_assessment_counter = Counter(
    "bdinvest_risk_assessments_total",
    "Completed risk assessments by resulting tolerance",
    ["tolerance"],
)

# Calculator metrics
projection_counter = Counter(
    "bdinvest_projections_total",
    "Projections calculated",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_recommendation_run(risk_tolerance: str, recommendations: List[Recommendation]) -> None:
    """Record one run and the instruments it surfaced"""
    recommendation_run_counter.labels(risk_tolerance=risk_tolerance).inc()
    for rec in recommendations:
        recommendations_issued_counter.labels(investment_type=rec.investment_type.value).inc()
