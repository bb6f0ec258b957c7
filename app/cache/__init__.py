"""Cache layer package for key-value store connectivity boundaries."""

from .client import cache_create_client
from .health import RedisCacheProbe
from .interfaces import CacheProbePort

__all__ = ["CacheProbePort", "RedisCacheProbe", "cache_create_client"]
