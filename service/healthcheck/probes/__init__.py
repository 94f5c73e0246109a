from healthcheck.probes.base import Probe, format_duration
from healthcheck.probes.cache import CacheProbe
from healthcheck.probes.database import DatabaseProbe
from healthcheck.probes.disk import DiskProbe

__all__ = ["Probe", "CacheProbe", "DatabaseProbe", "DiskProbe", "format_duration"]
