import time

import structlog

from healthcheck.exceptions import ProbeError
from healthcheck.schemas.health import ComponentStatus, HealthStatus

logger = structlog.get_logger()


def format_duration(seconds: float) -> str:
    """Render an elapsed time as milliseconds, e.g. ``"12.345ms"``."""
    return f"{max(seconds, 0.0) * 1000:.3f}ms"


class Probe:
    """Checks one dependency and reports it as a ComponentStatus.

    Subclasses implement ``_probe``, which returns the success message
    (or None) and raises a ProbeError subclass on failure. ``check`` is
    the exception boundary: it never raises.

    A probe that is not ``required`` can at most push the overall status
    to WARNING.
    """

    name: str = "probe"
    required: bool = True

    def check(self) -> ComponentStatus:
        start = time.monotonic()
        status = HealthStatus.UP
        try:
            message = self._probe()
        except ProbeError as exc:
            self._log_failure(exc)
            status, message = exc.status, str(exc)
        except Exception as exc:
            self._log_failure(exc)
            status, message = HealthStatus.DOWN, f"Unexpected error: {exc}"
        return ComponentStatus(
            status=status,
            response_time=format_duration(time.monotonic() - start),
            message=message,
        )

    def _probe(self) -> str | None:
        raise NotImplementedError

    def _log_failure(self, exc: Exception) -> None:
        logger.warning(
            "probe_failed",
            probe=self.name,
            error_type=type(exc).__name__,
            error=str(exc) or repr(exc),
        )
