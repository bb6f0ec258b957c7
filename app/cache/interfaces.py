"""Typed interfaces for cache-layer services."""

from typing import Protocol


class CacheProbePort(Protocol):
    """Port definition for key-value store connectivity verification."""

    def cache_connection_label(self) -> str:
        """Return a stable label for the cache connection target.

        Returns:
            str: Cache target label for diagnostics.
        """

    async def cache_probe(self) -> bool:
        """Send one liveness command that requires a round trip to the store.

        Returns:
            bool: True when the store answered the liveness command.

        Raises:
            ConnectionError: Raised when the cache store cannot be reached.
        """
