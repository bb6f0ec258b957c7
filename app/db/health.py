"""Database probe implementations for readiness checks."""

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from .interfaces import DatabaseProbePort

DB_PROBE_STATEMENT = "SELECT 1"
DB_PROBE_EXPECTED_VALUE = 1


class SQLAlchemyDatabaseProbe(DatabaseProbePort):
    """Database probe backed by SQLAlchemy engine connectivity checks."""

    def __init__(
        self,
        engine: Engine,
        probe_statement: str = DB_PROBE_STATEMENT,
        expected_value: int = DB_PROBE_EXPECTED_VALUE,
    ):
        """Initialize database probe.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.
            probe_statement: Constant-selecting statement sent on every probe.
            expected_value: Value the first column of the first row must equal.

        Raises:
            ValueError: Raised when engine is None or probe_statement is blank.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        if not probe_statement.strip():
            raise ValueError("probe_statement must not be blank")
        self._engine = engine
        self._probe_statement = probe_statement
        self._expected_value = expected_value

    def db_connection_label(self) -> str:
        """Return the target database URL for diagnostics.

        Returns:
            str: Rendered engine URL string with the password masked.
        """

        return self._engine.url.render_as_string(hide_password=True)

    def db_probe(self) -> bool:
        """Verify connectivity and query execution with a constant round trip.

        The returned value must match the expected sentinel exactly, including
        its type; an empty result or a different value counts as unreachable.

        Returns:
            bool: True when the sentinel value came back unchanged.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(text(self._probe_statement)).first()
        except SQLAlchemyError as error:
            raise ConnectionError("database connectivity check failed") from error

        if row is None or len(row) == 0:
            return False
        probe_value = row[0]
        return type(probe_value) is type(self._expected_value) and probe_value == self._expected_value
