"""Typed runtime settings with dotenv support and startup validation."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for HTTP runtime, backing stores and token signing.

    Environment variable names map directly to field names in uppercase.
    Example: `postgres_host` reads from `POSTGRES_HOST`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        postgres_user: Relational store user name.
        postgres_password: Relational store password.
        postgres_db: Relational store database name.
        postgres_host: Relational store host.
        postgres_port: Relational store port.
        redis_host: Cache store host.
        redis_port: Cache store port.
        jwt_secret: Shared secret for bearer token signing.
        jwt_algorithm: Token signing algorithm.
        jwt_expires_in_seconds: Default token lifetime.
        health_probe_timeout_seconds: Execution-time bound applied to each health probe.
        health_failure_status_code: HTTP status used for `error` health reports.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: Literal["development", "production", "test"] = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=3000, ge=1, le=65535)
    postgres_user: str = Field(min_length=1)
    postgres_password: str = Field(min_length=1)
    postgres_db: str = Field(min_length=1)
    postgres_host: str = Field(min_length=1)
    postgres_port: int = Field(ge=1, le=65535)
    redis_host: str = Field(min_length=1)
    redis_port: int = Field(ge=1, le=65535)
    jwt_secret: str = Field(min_length=10)
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256")
    jwt_expires_in_seconds: int = Field(default=3600, gt=0)
    health_probe_timeout_seconds: float = Field(default=3.0, gt=0)
    health_failure_status_code: int = Field(default=200)
    log_level: str = Field(default="INFO")

    @field_validator("postgres_user", "postgres_db", "postgres_host", "redis_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("health_failure_status_code")
    @classmethod
    def _validate_failure_status_code(cls, value: int) -> int:
        if value not in (200, 503):
            raise ValueError("health_failure_status_code must be 200 or 503")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError("log_level must be a standard logging level name")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_build_database_url(settings: AppSettings) -> str:
    """Render the relational store connection URL from discrete settings.

    Args:
        settings: Validated application settings.

    Returns:
        str: SQLAlchemy URL using the psycopg driver with escaped credentials.
    """

    database_url = URL.create(
        drivername="postgresql+psycopg",
        username=settings.postgres_user,
        password=settings.postgres_password,
        host=settings.postgres_host,
        port=settings.postgres_port,
        database=settings.postgres_db,
    )
    return database_url.render_as_string(hide_password=False)
