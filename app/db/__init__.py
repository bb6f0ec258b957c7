"""Database layer package for all SQL and connectivity boundaries."""

from .health import DB_PROBE_EXPECTED_VALUE, DB_PROBE_STATEMENT, SQLAlchemyDatabaseProbe
from .interfaces import DatabaseProbePort
from .session import db_create_engine

__all__ = [
	"DB_PROBE_EXPECTED_VALUE",
	"DB_PROBE_STATEMENT",
	"DatabaseProbePort",
	"SQLAlchemyDatabaseProbe",
	"db_create_engine",
]
