"""Typed domain models shared across runtime layers.

This module provides simple data contracts for cross-layer communication
between store probes, the health service and HTTP surfaces.
"""

from dataclasses import dataclass
from typing import Literal

HealthState = Literal["ok", "error"]


@dataclass(frozen=True)
class HealthReport:
    """Aggregated readiness result for one health check invocation.

    Attributes:
        status: `ok` only when every backing store probe succeeded, otherwise `error`.
        postgres: Relational store reachability flag.
        redis: Cache store reachability flag.
    """

    status: HealthState
    postgres: bool
    redis: bool

    @classmethod
    def from_probes(cls, postgres: bool, redis: bool) -> "HealthReport":
        """Build a report whose status is the logical AND of both probe flags.

        Args:
            postgres: Relational store probe outcome.
            redis: Cache store probe outcome.

        Returns:
            HealthReport: Report with consistent aggregated status.
        """

        postgres_reachable = postgres is True
        redis_reachable = redis is True
        status: HealthState = "ok" if postgres_reachable and redis_reachable else "error"
        return cls(status=status, postgres=postgres_reachable, redis=redis_reachable)

    def to_payload(self) -> dict[str, str | bool]:
        """Return the JSON-ready health payload.

        Returns:
            dict[str, str | bool]: Mapping with exactly `status`, `postgres` and `redis`.
        """

        return {"status": self.status, "postgres": self.postgres, "redis": self.redis}
