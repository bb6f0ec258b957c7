"""FastAPI application factory for the service scaffold.

This module defines API application composition used by the runtime.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Sequence

from fastapi import FastAPI

from app.config import AppSettings

from .routers import HealthServicePort, api_create_health_router

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

ShutdownHook = Callable[[], Awaitable[None]]


def create_api_application(
    settings: AppSettings,
    health_service: HealthServicePort,
    shutdown_hooks: Sequence[ShutdownHook] = (),
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        health_service: Readiness service used by the health endpoint.
        shutdown_hooks: Coroutine factories awaited in order on application shutdown.

    Returns:
        FastAPI: Framework application instance with foundation and health routes.
    """

    registered_shutdown_hooks = tuple(shutdown_hooks)

    @asynccontextmanager
    async def api_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        logger.info("Service starting in %s mode", settings.environment_name)
        yield
        for shutdown_hook in registered_shutdown_hooks:
            await shutdown_hook()
        logger.info("Service stopped")

    application = FastAPI(title="Service Scaffold", lifespan=api_lifespan)

    @application.get("/", tags=["foundation"])
    async def foundation_index() -> dict[str, str]:
        """Return a minimal foundation response for bootstrap verification.

        Returns:
            dict[str, str]: Greeting message.
        """

        return {"message": "Hello from Service Scaffold!"}

    application.include_router(
        api_create_health_router(
            health_service=health_service,
            failure_status_code=settings.health_failure_status_code,
        ),
        prefix=API_V1_PREFIX,
    )

    return application
