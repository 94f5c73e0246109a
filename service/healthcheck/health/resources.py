"""Long-lived dependency handles shared by all health requests."""

import threading

import redis
import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from healthcheck.config import HealthConfig
from healthcheck.health.aggregator import HealthAggregator
from healthcheck.probes import CacheProbe, DatabaseProbe, DiskProbe

logger = structlog.get_logger()


def create_db_engine(config: HealthConfig) -> Engine:
    """Engine with a bounded pool and bounded connect/checkout waits.

    In-memory SQLite keeps its singleton pool. Every other URL, file-backed
    SQLite included, gets a QueuePool sized from the config, which is the
    capacity the database probe measures against.
    """
    url = make_url(config.database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(url)

    connect_args = {}
    if url.get_backend_name() in ("postgresql", "mysql"):
        connect_args["connect_timeout"] = max(int(config.db_timeout), 1)
    return create_engine(
        url,
        poolclass=QueuePool,
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_timeout=config.db_timeout,
        connect_args=connect_args,
    )


def create_redis_client(config: HealthConfig) -> redis.Redis:
    return redis.Redis(
        host=config.redis_host,
        port=config.redis_port,
        password=config.redis_password or None,
        db=config.redis_db,
        socket_timeout=config.redis_timeout,
        socket_connect_timeout=config.redis_timeout,
    )


class HealthResources:
    """Owns the engine and redis client and the aggregator built on them.

    Handles are created on first use and released by ``close``.
    """

    def __init__(self, config: HealthConfig):
        self.config = config
        self._engine: Engine | None = None
        self._redis: redis.Redis | None = None
        self._aggregator: HealthAggregator | None = None
        self._lock = threading.Lock()

    @property
    def aggregator(self) -> HealthAggregator:
        with self._lock:
            if self._aggregator is None:
                self._build()
            return self._aggregator

    def _build(self) -> None:
        self._engine = create_db_engine(self.config)
        self._redis = create_redis_client(self.config)
        self._aggregator = HealthAggregator(
            self.config,
            [
                DatabaseProbe(
                    self._engine,
                    max_connections=self.config.db_max_connections,
                    high_water=self.config.db_pool_high_water,
                ),
                CacheProbe(self._redis),
                DiskProbe(self.config.disk_path, threshold=self.config.disk_threshold),
            ],
        )
        logger.info(
            "health_resources_ready",
            database=self._engine.url.render_as_string(hide_password=True),
            redis=self.config.redis_addr,
            disk_path=self.config.disk_path,
        )

    def close(self) -> None:
        with self._lock:
            if self._redis is not None:
                self._redis.close()
            if self._engine is not None:
                self._engine.dispose()
            self._engine = self._redis = self._aggregator = None
