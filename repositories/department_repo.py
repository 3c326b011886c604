"""
repositories/department_repo.py
--------------------------------
Data access layer for departments.
"""

from typing import Optional

import psycopg2

from db.exceptions import DatabaseError, wrap_driver_error
from models.department import Department
from utils.logger import get_logger

logger = get_logger(__name__)


class DepartmentRepository:
    """Repository for CRUD operations on the department table."""

    def __init__(self, conn):
        self.conn = conn

    def insert(self, department: Department) -> Department:
        """
        Insert a new department and write the generated key back onto it.

        Raises:
            DatabaseError: On any driver failure, or if no row was inserted.
        """
        sql = "INSERT INTO department (Name) VALUES (%s) RETURNING Id"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department.name,))
                rows_affected = cur.rowcount
                if rows_affected > 0:
                    row = cur.fetchone()
                    if row:
                        department.id = row[0]
            self.conn.commit()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"insert department {department.name!r}", e, logger) from e

        if rows_affected <= 0:
            logger.error(f"Insert of department {department.name!r} affected no rows")
            raise DatabaseError("Unexpected error! No rows were affected!")
        logger.info(f"Inserted department #{department.id} ({department.name})")
        return department

    def update(self, department: Department) -> None:
        """Rename a department. Missing ids are ignored."""
        sql = "UPDATE department SET Name = %s WHERE Id = %s"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department.name, department.id))
            self.conn.commit()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"update department #{department.id}", e, logger) from e
        logger.info(f"Updated department #{department.id}")

    def delete_by_id(self, department_id: int) -> None:
        """
        Delete a department by ID. Missing ids are ignored.

        A department still referenced by sellers violates the foreign key
        and surfaces as DatabaseError.
        """
        sql = "DELETE FROM department WHERE Id = %s"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department_id,))
            self.conn.commit()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"delete department #{department_id}", e, logger) from e
        logger.info(f"Deleted department #{department_id}")

    def find_by_id(self, department_id: int) -> Optional[Department]:
        sql = "SELECT * FROM department WHERE Id = %s"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"find department #{department_id}", e, logger) from e
        return self._row_to_department(row) if row else None

    def find_all(self) -> list[Department]:
        sql = "SELECT * FROM department ORDER BY Name"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_department(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, "list departments", e, logger) from e

    @staticmethod
    def _row_to_department(row: tuple) -> Department:
        """Convert a database row tuple to a Department domain object."""
        return Department(id=row[0], name=row[1])
