from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(str, Enum):
    UP = "UP"
    WARNING = "WARNING"
    DOWN = "DOWN"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    HealthStatus.UP: 0,
    HealthStatus.WARNING: 1,
    HealthStatus.DOWN: 2,
}


class ComponentStatus(BaseModel):
    """Health status of an individual component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: HealthStatus
    response_time: str | None = Field(default=None, alias="responseTime")
    message: str | None = None


class HealthReport(BaseModel):
    """Snapshot returned by the detailed health endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    status: HealthStatus
    time: datetime
    runtime_version: str = Field(alias="goVersion")
    environment: str
    components: dict[str, ComponentStatus] = {}


class ShallowHealthResponse(BaseModel):
    status: HealthStatus = HealthStatus.UP
