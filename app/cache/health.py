"""Cache probe implementations for readiness checks."""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from .interfaces import CacheProbePort


class RedisCacheProbe(CacheProbePort):
    """Cache probe backed by the Redis `PING` command."""

    def __init__(self, client: Redis):
        """Initialize cache probe.

        Args:
            client: Shared asyncio Redis client.

        Raises:
            ValueError: Raised when client is None.
        """

        if client is None:
            raise ValueError("client must not be None")
        self._client = client

    def cache_connection_label(self) -> str:
        """Return host and port of the cache target.

        Returns:
            str: Label in `redis://host:port` form.
        """

        connection_kwargs = self._client.connection_pool.connection_kwargs
        return f"redis://{connection_kwargs.get('host', 'unknown')}:{connection_kwargs.get('port', 'unknown')}"

    async def cache_probe(self) -> bool:
        """Verify cache connectivity with a single `PING` round trip.

        Returns:
            bool: True when the store replied to `PING`.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            reply = await self._client.ping()
        except RedisError as error:
            raise ConnectionError("cache connectivity check failed") from error
        return bool(reply)
