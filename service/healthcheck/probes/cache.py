"""Redis probe."""

import redis

from healthcheck.exceptions import DependencyConnectionError, DependencyTimeoutError
from healthcheck.probes.base import Probe


class CacheProbe(Probe):
    """Sends PING over a shared redis client.

    The client carries its own socket timeouts, so a stalled server
    fails the probe instead of hanging the request. There is no WARNING
    state: Redis either answers or it is DOWN.
    """

    name = "redis"

    def __init__(self, client: redis.Redis):
        self.client = client

    def _probe(self) -> str | None:
        try:
            self.client.ping()
        except redis.exceptions.TimeoutError as exc:
            raise DependencyTimeoutError(f"Timed out pinging Redis: {exc}") from exc
        except redis.exceptions.RedisError as exc:
            raise DependencyConnectionError(f"Failed to ping Redis: {exc}") from exc
        return None
