"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fynp_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from fynp_gateway.api.v1 import eligibility, emi, offers, tax
from fynp_gateway.infrastructure.observability.logging import setup_logging
from fynp_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FYNP Loan Calculator Gateway",
        description="EMI, eligibility, comparison and tax-saving calculations for loan screens",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(emi.router, prefix="/v1", tags=["emi"])
    app.include_router(eligibility.router, prefix="/v1", tags=["eligibility"])
    app.include_router(tax.router, prefix="/v1", tags=["tax"])
    app.include_router(offers.router, prefix="/v1", tags=["offers"])

    return app


app = create_app()
