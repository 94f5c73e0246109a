import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from prometheus_fastapi_instrumentator import Instrumentator

from healthcheck.config import HealthConfig
from healthcheck.health.resources import HealthResources
from healthcheck.health.router import router as health_router
from healthcheck.logging_config import setup_logging

logger = structlog.get_logger()


def create_app(config: HealthConfig | None = None) -> FastAPI:
    """Build the health service around an explicit configuration."""
    config = config or HealthConfig.from_env()
    resources = HealthResources(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        resources.close()

    app = FastAPI(
        title="Health Check Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.health = resources

    # Prometheus metrics: auto-instruments all endpoints
    Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    app.include_router(health_router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request with structlog context."""
        start = time.monotonic()
        response = await call_next(request)
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(
            "request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round(elapsed_ms, 2),
        )
        return response

    return app


setup_logging(service="healthcheck")
app = create_app()
