"""Shared fixtures for health service tests."""

import pytest
from fastapi.testclient import TestClient

from healthcheck.config import HealthConfig
from healthcheck.exceptions import DependencyConnectionError, ResourceExhaustionError
from healthcheck.health.aggregator import HealthAggregator
from healthcheck.health.router import get_aggregator
from healthcheck.main import create_app
from healthcheck.probes import Probe
from healthcheck.schemas.health import HealthStatus


class StaticProbe(Probe):
    """Probe that reports a fixed status without touching anything."""

    def __init__(self, name, status, message=None, required=True):
        self.name = name
        self.status = status
        self.message = message
        self.required = required
        self.calls = 0

    def _probe(self):
        self.calls += 1
        if self.status == HealthStatus.UP:
            return self.message
        raise _STATUS_ERRORS[self.status](self.message or f"{self.name} is {self.status.value}")


_STATUS_ERRORS = {
    HealthStatus.DOWN: DependencyConnectionError,
    HealthStatus.WARNING: ResourceExhaustionError,
}


def make_probes(database=HealthStatus.UP, cache=HealthStatus.UP, disk=HealthStatus.UP):
    return [
        StaticProbe("database", database),
        StaticProbe("redis", cache),
        StaticProbe("disk", disk, required=False),
    ]


@pytest.fixture
def config():
    return HealthConfig(
        environment="test",
        database_url="sqlite://",
        redis_addr="redis-test:6380",
        disk_path="/",
    )


@pytest.fixture
def make_client(config):
    """Build a TestClient whose detailed check runs the given probes."""

    def _make(probes):
        app = create_app(config)
        aggregator = HealthAggregator(config, probes)
        app.dependency_overrides[get_aggregator] = lambda: aggregator
        return TestClient(app)

    return _make
