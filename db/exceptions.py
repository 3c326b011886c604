"""
db/exceptions.py
----------------
Error raised by every data-access operation, and the helper the
repositories use to produce it from a driver failure.
"""

import logging

import psycopg2


class DatabaseError(Exception):
    """
    Wraps any storage or query failure.

    The message is the underlying driver's message; the original exception,
    when there is one, is chained as ``__cause__``.
    """


def wrap_driver_error(conn, action: str, error: psycopg2.Error,
                      logger: logging.Logger) -> DatabaseError:
    """
    Roll back the failed statement, log it, and wrap the driver error.

    Callers raise the result with ``from error`` so the cause is chained.

    Args:
        conn: Connection the failed statement ran on.
        action: Short description for the log line, e.g. "insert seller 'Bob'".
        error: The psycopg2 exception that was caught.
        logger: The calling module's logger.

    Returns:
        A DatabaseError carrying the driver's message.
    """
    try:
        conn.rollback()
    except psycopg2.Error as rollback_error:
        logger.warning(f"Rollback after failed {action} also failed: {rollback_error}")
    logger.error(f"Failed to {action}: {error}")
    return DatabaseError(str(error))
