"""Readiness health service aggregating relational and cache store probes."""

import asyncio
import logging
from typing import Awaitable, Callable

from app.cache import CacheProbePort
from app.db import DatabaseProbePort
from app.domain import HealthReport

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT_SECONDS = 3.0


class ReadinessHealthService:
    """Answer whether the service is ready to serve traffic.

    Both probes run concurrently on every call, each bounded by its own
    timeout. A probe failure of any kind only clears that probe's flag;
    `health_check` itself never raises.
    """

    def __init__(
        self,
        database_probe: DatabaseProbePort,
        cache_probe: CacheProbePort,
        probe_timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
    ):
        """Initialize readiness health service.

        Args:
            database_probe: Relational store probe.
            cache_probe: Cache store probe.
            probe_timeout_seconds: Execution-time bound applied to each probe.

        Raises:
            ValueError: Raised when a probe is None or the timeout is not positive.
        """

        if database_probe is None:
            raise ValueError("database_probe must not be None")
        if cache_probe is None:
            raise ValueError("cache_probe must not be None")
        if probe_timeout_seconds <= 0:
            raise ValueError("probe_timeout_seconds must be positive")
        self._database_probe = database_probe
        self._cache_probe = cache_probe
        self._probe_timeout_seconds = probe_timeout_seconds
        self._database_label = database_probe.db_connection_label()
        self._cache_label = cache_probe.cache_connection_label()

    async def health_check(self) -> HealthReport:
        """Probe both backing stores and aggregate the result.

        Returns:
            HealthReport: Freshly built report; `status` is `ok` only when both probes succeeded.
        """

        postgres_reachable, redis_reachable = await asyncio.gather(
            self._health_run_probe("postgres", self._database_label, self._health_probe_database),
            self._health_run_probe("redis", self._cache_label, self._cache_probe.cache_probe),
        )
        report = HealthReport.from_probes(postgres=postgres_reachable, redis=redis_reachable)
        if report.status != "ok":
            logger.info("Health check degraded: postgres=%s redis=%s", report.postgres, report.redis)
        return report

    async def _health_probe_database(self) -> bool:
        # SQLAlchemy engine is synchronous; keep it off the event loop.
        return await asyncio.to_thread(self._database_probe.db_probe)

    async def _health_run_probe(
        self,
        store_name: str,
        target_label: str,
        probe: Callable[[], Awaitable[bool]],
    ) -> bool:
        try:
            probe_result = await asyncio.wait_for(probe(), timeout=self._probe_timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Health probe for %s (%s) exceeded %.2f seconds",
                store_name,
                target_label,
                self._probe_timeout_seconds,
            )
            return False
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.warning("Health probe for %s (%s) failed: %s", store_name, target_label, error)
            return False
        return probe_result is True
