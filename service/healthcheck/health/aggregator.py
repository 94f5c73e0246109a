"""Aggregate health check: runs dependency probes and combines them."""

import platform
import time
from datetime import datetime, timezone
from typing import Iterable

import structlog

from healthcheck.config import HealthConfig
from healthcheck.probes import Probe, format_duration
from healthcheck.schemas.health import ComponentStatus, HealthReport, HealthStatus

logger = structlog.get_logger()

RESPONSE_TIME_KEY = "responseTime"


def worst_status(statuses: Iterable[HealthStatus]) -> HealthStatus:
    """Most severe status, with DOWN > WARNING > UP."""
    return max(statuses, key=lambda s: s.severity, default=HealthStatus.UP)


def contribution(status: HealthStatus, required: bool) -> HealthStatus:
    """What a component status contributes to the overall status."""
    if not required and status == HealthStatus.DOWN:
        return HealthStatus.WARNING
    return status


def http_status_for(status: HealthStatus) -> int:
    return 503 if status == HealthStatus.DOWN else 200


class HealthAggregator:
    """Runs probes sequentially and builds a HealthReport.

    Probes are checked in the order given. Each probe is its own
    exception boundary, so ``run`` always returns a well-formed report.
    """

    def __init__(self, config: HealthConfig, probes: list[Probe]):
        self.config = config
        self.probes = probes

    def run(self) -> HealthReport:
        start = time.monotonic()
        components: dict[str, ComponentStatus] = {}
        contributions: list[HealthStatus] = []

        for probe in self.probes:
            result = probe.check()
            components[probe.name] = result
            contributions.append(contribution(result.status, probe.required))

        elapsed = format_duration(time.monotonic() - start)
        components[RESPONSE_TIME_KEY] = ComponentStatus(
            status=HealthStatus.UP,
            message=elapsed,
        )

        report = HealthReport(
            status=worst_status(contributions),
            time=datetime.now(timezone.utc),
            runtime_version=platform.python_version(),
            environment=self.config.environment,
            components=components,
        )

        log = logger.warning if report.status == HealthStatus.DOWN else logger.info
        log("health_check", status=report.status.value, response_time=elapsed)
        return report
