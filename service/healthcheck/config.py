"""Health service configuration from environment variables."""

import os
from dataclasses import dataclass, field

DEFAULT_REDIS_PORT = 6379


def split_addr(addr: str) -> tuple[str, int]:
    """Split "host:port", "host" or "[ipv6]:port" into host and port.

    Raises ValueError when the port is not a number.
    """
    if addr.startswith("["):
        host, _, rest = addr[1:].partition("]")
        if rest and not rest.startswith(":"):
            raise ValueError(f"Invalid port in Redis address {addr!r}")
        port = rest[1:]
    elif addr.count(":") == 1:
        host, _, port = addr.partition(":")
    else:
        # bare hostname or unbracketed IPv6 literal
        host, port = addr, ""

    if not port:
        return host, DEFAULT_REDIS_PORT
    if not port.isdigit():
        raise ValueError(f"Invalid port in Redis address {addr!r}")
    return host, int(port)


@dataclass
class HealthConfig:
    """Settings for the dependency probes and report metadata."""

    environment: str = ""

    # Database
    database_url: str = "sqlite:///./health.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_timeout: float = 5.0
    db_pool_high_water: float = 0.9

    # Redis
    redis_addr: str = "localhost:6379"
    redis_password: str = ""
    redis_db: int = 0
    redis_timeout: float = 2.0

    # Disk
    disk_path: str = "/"
    disk_threshold: float = 90.0

    redis_host: str = field(init=False)
    redis_port: int = field(init=False)

    @property
    def db_max_connections(self) -> int:
        return self.db_pool_size + self.db_max_overflow

    def __post_init__(self):
        self.redis_host, self.redis_port = split_addr(self.redis_addr)

    @classmethod
    def from_env(cls) -> "HealthConfig":
        return cls(
            environment=os.getenv("APP_ENV", ""),
            database_url=os.getenv("DATABASE_URL", "sqlite:///./health.db"),
            db_pool_size=int(os.getenv("DB_POOL_SIZE", "5")),
            db_max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "10")),
            db_timeout=float(os.getenv("DB_TIMEOUT", "5")),
            db_pool_high_water=float(os.getenv("DB_POOL_HIGH_WATER", "0.9")),
            redis_addr=os.getenv("REDIS_ADDR", "localhost:6379"),
            redis_password=os.getenv("REDIS_PASSWORD", ""),
            redis_db=int(os.getenv("REDIS_DB", "0")),
            redis_timeout=float(os.getenv("REDIS_TIMEOUT", "2")),
            disk_path=os.getenv("DISK_PATH", "/"),
            disk_threshold=float(os.getenv("DISK_THRESHOLD", "90")),
        )
