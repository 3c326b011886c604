"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.exceptions import DatabaseError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Departments: one row per organisational unit
CREATE TABLE IF NOT EXISTS department (
    Id              SERIAL PRIMARY KEY,
    Name            VARCHAR(60) NOT NULL
);

-- Sellers: column order matters, `seller.*` is read positionally
CREATE TABLE IF NOT EXISTS seller (
    Id              SERIAL PRIMARY KEY,
    Name            VARCHAR(60),
    Email           VARCHAR(100),
    BirthDate       DATE,
    BaseSalary      DOUBLE PRECISION,
    DepartmentId    INTEGER NOT NULL REFERENCES department(Id)
);

CREATE INDEX IF NOT EXISTS idx_seller_department ON seller(DepartmentId);
"""


def create_tables(conn) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        conn: An open psycopg2 connection. It is not closed here.
    """
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise DatabaseError(str(e)) from e


if __name__ == "__main__":
    from db.connection import get_connection, close_connection
    create_tables(get_connection())
    close_connection()
    print("Database schema created successfully.")
