"""Cache client factory for the shared key-value store handle."""

import redis.asyncio as aioredis


def cache_create_client(host: str, port: int, socket_timeout_seconds: float | None = None) -> aioredis.Redis:
    """Create the pooled asyncio Redis client shared by all requests.

    The client connects lazily; creating it performs no network I/O.

    Args:
        host: Cache store host.
        port: Cache store port.
        socket_timeout_seconds: Optional connect and read timeout for each command.

    Returns:
        aioredis.Redis: Configured Redis client backed by a connection pool.

    Raises:
        ValueError: Raised when host is blank or port is out of range.
    """

    if not host.strip():
        raise ValueError("host must not be blank")
    if not 1 <= port <= 65535:
        raise ValueError("port must be between 1 and 65535")

    return aioredis.Redis(
        host=host.strip(),
        port=port,
        socket_timeout=socket_timeout_seconds,
        socket_connect_timeout=socket_timeout_seconds,
    )
