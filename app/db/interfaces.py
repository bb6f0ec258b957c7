"""Typed interfaces for database-layer services.

All SQL and ORM access must remain in the db package and its submodules.
"""

from typing import Protocol


class DatabaseProbePort(Protocol):
    """Port definition for relational store connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_probe(self) -> bool:
        """Run one read-only round trip against the relational store.

        Returns:
            bool: True only when the store answered with the expected sentinel value.

        Raises:
            ConnectionError: Raised when the database cannot be reached.
        """
