"""API router package for endpoint composition."""

from .health import HealthResponse, HealthServicePort, api_create_health_router

__all__ = ["HealthResponse", "HealthServicePort", "api_create_health_router"]
