"""Domain models used across application layer boundaries."""

from .models import HealthReport, HealthState

__all__ = ["HealthReport", "HealthState"]
