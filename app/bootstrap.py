"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from app.api import create_api_application
from app.auth import JwtTokenService
from app.cache import RedisCacheProbe, cache_create_client
from app.config import AppSettings, config_build_database_url, config_load_settings
from app.db import SQLAlchemyDatabaseProbe, db_create_engine
from app.health import ReadinessHealthService


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Store handles are created once here and released by the application
    lifespan on shutdown.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    engine = db_create_engine(
        database_url=config_build_database_url(resolved_settings),
        connect_timeout_seconds=resolved_settings.health_probe_timeout_seconds,
        query_timeout_seconds=resolved_settings.health_probe_timeout_seconds,
    )
    cache_client = cache_create_client(
        host=resolved_settings.redis_host,
        port=resolved_settings.redis_port,
        socket_timeout_seconds=resolved_settings.health_probe_timeout_seconds,
    )
    health_service = ReadinessHealthService(
        database_probe=SQLAlchemyDatabaseProbe(engine=engine),
        cache_probe=RedisCacheProbe(client=cache_client),
        probe_timeout_seconds=resolved_settings.health_probe_timeout_seconds,
    )

    async def bootstrap_close_cache_client() -> None:
        await cache_client.aclose()

    async def bootstrap_dispose_engine() -> None:
        engine.dispose()

    return create_api_application(
        settings=resolved_settings,
        health_service=health_service,
        shutdown_hooks=(bootstrap_close_cache_client, bootstrap_dispose_engine),
    )


def bootstrap_create_token_service(settings: AppSettings | None = None) -> JwtTokenService:
    """Build the token service for non-HTTP surfaces.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        JwtTokenService: Token service using the configured shared secret.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return JwtTokenService(
        secret=resolved_settings.jwt_secret,
        algorithm=resolved_settings.jwt_algorithm,
        default_expires_in_seconds=resolved_settings.jwt_expires_in_seconds,
    )
