"""
db/connection.py
----------------
Manages the single PostgreSQL connection shared by the repositories.
Repositories receive the connection at construction and never close it;
the owner of the process calls `close_connection()` on shutdown.
The shared connection runs in autocommit mode. A connection a caller
injects into a repository keeps the transaction mode the caller set.
"""

import psycopg2
from config import DATABASE_URL
from db.exceptions import DatabaseError
from utils.logger import get_logger

logger = get_logger(__name__)

_conn = None


def get_connection(dsn: str | None = None):
    """
    Return the shared connection, opening it on first use.

    Args:
        dsn: Connection string. Defaults to ``config.DATABASE_URL``.

    Returns:
        A psycopg2 connection object.

    Raises:
        DatabaseError: If the database is unreachable.
    """
    global _conn
    if _conn is not None and not _conn.closed:
        return _conn
    try:
        _conn = psycopg2.connect(dsn or DATABASE_URL)
        # Reads must not leave the shared connection idle in a transaction
        _conn.autocommit = True
        logger.info("Database connection opened.")
    except psycopg2.Error as e:
        logger.error(f"Failed to open database connection: {e}")
        raise DatabaseError(str(e)) from e
    return _conn


def close_connection() -> None:
    """Close the shared connection if it is open."""
    global _conn
    if _conn is None:
        return
    try:
        if not _conn.closed:
            _conn.close()
            logger.info("Database connection closed.")
    except psycopg2.Error as e:
        logger.error(f"Failed to close database connection: {e}")
        raise DatabaseError(str(e)) from e
    finally:
        _conn = None
