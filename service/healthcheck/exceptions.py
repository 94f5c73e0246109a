"""Probe failure taxonomy.

Raised inside probes and recovered at the probe boundary, where each
error is turned into a component status. None of them reach the HTTP
layer.
"""

from healthcheck.schemas.health import HealthStatus


class ProbeError(Exception):
    """Base class for dependency probe failures."""

    status = HealthStatus.DOWN


class DependencyConnectionError(ProbeError):
    """The dependency could not be reached."""


class DependencyTimeoutError(ProbeError):
    """The dependency did not answer within the probe timeout."""


class ResourceExhaustionError(ProbeError):
    """The dependency answered but is close to capacity."""

    status = HealthStatus.WARNING
