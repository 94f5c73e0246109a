"""Disk space probe."""

from typing import Callable

import psutil

from healthcheck.exceptions import DependencyConnectionError, ResourceExhaustionError
from healthcheck.probes.base import Probe

DEFAULT_THRESHOLD = 90.0


def _usage_percent(path: str) -> float:
    return psutil.disk_usage(path).percent


class DiskProbe(Probe):
    """Compares the used percentage of a volume against a threshold.

    Not required: disk pressure degrades the service but never takes it
    down.
    """

    name = "disk"
    required = False

    def __init__(
        self,
        path: str = "/",
        threshold: float = DEFAULT_THRESHOLD,
        usage_fn: Callable[[str], float] = _usage_percent,
    ):
        self.path = path
        self.threshold = threshold
        self.usage_fn = usage_fn

    def _probe(self) -> str | None:
        try:
            usage = self.usage_fn(self.path)
        except OSError as exc:
            raise DependencyConnectionError(
                f"Failed to read disk usage for {self.path}: {exc}"
            ) from exc

        if usage > self.threshold:
            raise ResourceExhaustionError(f"Disk usage is high: {usage:.1f}%")
        return f"Disk usage: {usage:.1f}%"
