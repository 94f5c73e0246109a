from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from healthcheck.health.aggregator import HealthAggregator, http_status_for
from healthcheck.schemas.health import HealthReport, ShallowHealthResponse

router = APIRouter(prefix="/health", tags=["health"])


def get_aggregator(request: Request) -> HealthAggregator:
    return request.app.state.health.aggregator


@router.get("", response_model=ShallowHealthResponse)
async def health() -> ShallowHealthResponse:
    """Liveness probe for load balancers. Never touches a dependency."""
    return ShallowHealthResponse()


@router.get(
    "/details",
    response_model=HealthReport,
    responses={503: {"model": HealthReport, "description": "A required dependency is DOWN"}},
)
def health_details(aggregator: HealthAggregator = Depends(get_aggregator)) -> JSONResponse:
    """Detailed health check with database, Redis and disk components.

    Probes block on I/O, so this runs in the threadpool.
    """
    report = aggregator.run()
    return JSONResponse(
        status_code=http_status_for(report.status),
        content=report.model_dump(mode="json", by_alias=True, exclude_none=True),
    )
