"""
db/connection.py
----------------
Opens PostgreSQL connections for the repositories.
Every call gets its own psycopg2 connection, which is closed when the
`with` block exits, whether normally or through an exception.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2.extensions import connection as PgConnection

from utils.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def connect(database_url: str) -> Iterator[PgConnection]:
    """
    Open a connection to the database and close it afterwards.

    Args:
        database_url: libpq connection string or postgresql:// URL.

    Yields:
        An open psycopg2 connection.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(database_url)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to database: {e}")
        raise
    try:
        yield conn
    finally:
        conn.close()
