"""Health package composing store probes into one readiness signal."""

from .service import DEFAULT_PROBE_TIMEOUT_SECONDS, ReadinessHealthService

__all__ = ["DEFAULT_PROBE_TIMEOUT_SECONDS", "ReadinessHealthService"]
