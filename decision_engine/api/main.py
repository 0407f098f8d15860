"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from decision_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from decision_engine.api.v1 import decision
from decision_engine.infrastructure.observability.logging import setup_logging
from decision_engine.config import settings

setup_logging(settings.log_level)


def health_check() -> dict:
    return {"status": "ok", "service": settings.service_name}


def metrics() -> Response:
    """Prometheus exposition of decision and latency metrics"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def create_app() -> FastAPI:
    """Build the decision service: health, metrics and the versioned decision API"""
    app = FastAPI(
        title="Loan Decision Engine",
        description="Loan eligibility and maximum approvable amount service",
        version="0.1.0",
    )

    # Last added runs first: RequestIDMiddleware wraps MetricsMiddleware
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_api_route("/health", health_check, methods=["GET"])
    app.add_api_route("/metrics", metrics, methods=["GET"])
    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    return app


app = create_app()
