"""Health endpoint router composition for backing store readiness checks."""

from typing import Literal, Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.domain import HealthReport


class HealthServicePort(Protocol):
    """Port definition for the readiness check consumed by the router."""

    async def health_check(self) -> HealthReport:
        """Return a fresh aggregated readiness report.

        Returns:
            HealthReport: Report built from one probe of each backing store.
        """


class HealthResponse(BaseModel):
    """Health endpoint response contract."""

    status: Literal["ok", "error"]
    postgres: bool
    redis: bool


def api_create_health_router(
    health_service: HealthServicePort,
    failure_status_code: int = status.HTTP_200_OK,
) -> APIRouter:
    """Create health-check router with backing store reachability status.

    Args:
        health_service: Readiness service answering each request.
        failure_status_code: HTTP status used when the report status is `error`.

    Returns:
        APIRouter: Router exposing the `/health` endpoint.

    Raises:
        ValueError: Raised when health_service is invalid or the status code is unsupported.
    """

    if health_service is None:
        raise ValueError("health_service must not be None")
    if failure_status_code not in (status.HTTP_200_OK, status.HTTP_503_SERVICE_UNAVAILABLE):
        raise ValueError("failure_status_code must be 200 or 503")

    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    async def api_health_status() -> JSONResponse:
        """Return aggregated readiness of the relational and cache stores.

        Returns:
            JSONResponse: Payload with `status`, `postgres` and `redis` fields.
        """

        report = await health_service.health_check()
        response_status_code = status.HTTP_200_OK if report.status == "ok" else failure_status_code
        payload = HealthResponse(**report.to_payload())
        return JSONResponse(content=payload.model_dump(), status_code=response_status_code)

    return router
