"""
repositories/base_repo.py
-------------------------
Common base for all repositories: holds the connection string and
hands out short-lived connections.
"""

from contextlib import AbstractContextManager

from psycopg2.extensions import connection as PgConnection

from db.connection import connect


class BaseRepository:
    """Base class that owns the database configuration for a repository."""

    def __init__(self, database_url: str):
        self._database_url = database_url

    def _connection(self) -> AbstractContextManager[PgConnection]:
        """Open a new connection; use it in a `with` block so it is always closed."""
        return connect(self._database_url)
