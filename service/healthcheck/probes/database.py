"""Database probe backed by a shared SQLAlchemy engine."""

from sqlalchemy import exc as sa_exc
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from healthcheck.exceptions import (
    DependencyConnectionError,
    DependencyTimeoutError,
    ResourceExhaustionError,
)
from healthcheck.probes.base import Probe


class DatabaseProbe(Probe):
    """Pings the database and inspects connection pool usage.

    The engine is long-lived and owned by the application; the probe
    only checks a connection out of its pool and returns it.
    """

    name = "database"

    def __init__(self, engine: Engine, max_connections: int, high_water: float = 0.9):
        self.engine = engine
        self.max_connections = max_connections
        self.high_water = high_water

    def _probe(self) -> str | None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except sa_exc.TimeoutError as exc:
            raise DependencyTimeoutError(f"Timed out waiting for a database connection: {exc}") from exc
        except sa_exc.SQLAlchemyError as exc:
            raise DependencyConnectionError(f"Failed to ping database: {exc}") from exc

        open_connections = self.open_connections()
        if open_connections is None:
            return "Database connection successful"
        if open_connections >= self.max_connections * self.high_water:
            raise ResourceExhaustionError(
                f"High number of open connections: {open_connections}/{self.max_connections}"
            )
        return f"Database connection pool open connections: {open_connections}"

    def open_connections(self) -> int | None:
        """Connections held by the pool, idle or in use.

        Returns None for pools that keep no statistics (NullPool, the
        SQLite singleton pools).
        """
        pool = self.engine.pool
        if not isinstance(pool, QueuePool):
            return None
        return pool.checkedin() + pool.checkedout()
