"""Database engine utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine


def db_create_engine(
    database_url: str,
    connect_timeout_seconds: float | None = None,
    query_timeout_seconds: float | None = None,
) -> Engine:
    """Create the pooled SQLAlchemy engine shared by all requests.

    Args:
        database_url: SQLAlchemy database URL.
        connect_timeout_seconds: Optional driver-level connect timeout.
        query_timeout_seconds: Optional bound on statements and unacknowledged
            socket writes on already open connections. Applied as the PostgreSQL
            `statement_timeout` and the libpq `tcp_user_timeout`.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank or a timeout is not positive.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")

    connect_args: dict[str, int | str] = {}
    if connect_timeout_seconds is not None:
        if connect_timeout_seconds <= 0:
            raise ValueError("connect_timeout_seconds must be positive")
        # libpq only accepts whole seconds
        connect_args["connect_timeout"] = max(1, int(round(connect_timeout_seconds)))
    if query_timeout_seconds is not None:
        if query_timeout_seconds <= 0:
            raise ValueError("query_timeout_seconds must be positive")
        query_timeout_milliseconds = max(1, int(round(query_timeout_seconds * 1000)))
        connect_args["options"] = f"-c statement_timeout={query_timeout_milliseconds}"
        connect_args["tcp_user_timeout"] = query_timeout_milliseconds

    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)
