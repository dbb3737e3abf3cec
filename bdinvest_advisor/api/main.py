"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bdinvest_advisor.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bdinvest_advisor.api.v1 import instruments, portfolio, projection, recommendations, risk_assessment
from bdinvest_advisor.infrastructure.observability.logging import setup_logging
from bdinvest_advisor.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="BD Invest Advisor",
        description="Risk profiling, investment recommendations and projections for Bangladeshi instruments",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(instruments.router, prefix="/v1", tags=["instruments"])
    app.include_router(risk_assessment.router, prefix="/v1", tags=["risk-assessment"])
    app.include_router(recommendations.router, prefix="/v1", tags=["recommendations"])
    app.include_router(projection.router, prefix="/v1", tags=["projections"])
    app.include_router(portfolio.router, prefix="/v1", tags=["portfolio"])

    return app


app = create_app()
