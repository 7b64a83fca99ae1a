"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from spendwise.api.middleware import RequestIDMiddleware, MetricsMiddleware
from spendwise.api.v1 import public, purchases, summary, workspaces
from spendwise.infrastructure.database.session import init_db
from spendwise.infrastructure.observability.logging import setup_logging
from spendwise.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Spendwise",
        description="Shared monthly and weekly budget allowance service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(workspaces.router, prefix="/v1", tags=["workspaces"])
    app.include_router(purchases.router, prefix="/v1", tags=["purchases"])
    app.include_router(summary.router, prefix="/v1", tags=["summary"])
    app.include_router(public.router, prefix="/v1", tags=["public"])

    return app


app = create_app()
