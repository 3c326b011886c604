"""
repositories/seller_repo.py
----------------------------
Data access layer for sellers.
All SQL queries related to the `seller` table live here. Every read joins
`department` so each Seller comes back with its Department hydrated.
"""

from typing import Optional

import psycopg2

from db.exceptions import DatabaseError, wrap_driver_error
from models.department import Department
from models.seller import Seller
from utils.logger import get_logger

logger = get_logger(__name__)

_SELECT_JOINED = (
    "SELECT seller.*, department.Name as DepName "
    "FROM seller INNER JOIN department "
    "ON seller.DepartmentId = department.Id "
)


class SellerRepository:
    """
    Repository for CRUD operations on the seller table.

    The connection is owned by the caller; the repository only opens and
    closes cursors on it. Writes commit and failures roll back; a read on a
    non-autocommit connection leaves its transaction for the caller to end.
    """

    def __init__(self, conn):
        self.conn = conn

    # ── CREATE ────────────────────────────────────────────

    def insert(self, seller: Seller) -> Seller:
        """
        Insert a new seller.

        Args:
            seller: The Seller to persist. ``seller.department.id`` must
                reference an existing department.

        Returns:
            The same Seller with its `id` set to the generated key.

        Raises:
            DatabaseError: On any driver failure, or if no row was inserted.
        """
        sql = (
            "INSERT INTO seller "
            "(Name, Email, BirthDate, BaseSalary, DepartmentId) "
            "VALUES "
            "(%s, %s, %s, %s, %s) "
            "RETURNING Id"
        )
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (
                    seller.name, seller.email, seller.birth_date,
                    seller.base_salary, seller.department.id,
                ))
                rows_affected = cur.rowcount
                if rows_affected > 0:
                    row = cur.fetchone()
                    if row:
                        seller.id = row[0]
            self.conn.commit()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"insert seller {seller.name!r}", e, logger) from e

        if rows_affected <= 0:
            logger.error(f"Insert of seller {seller.name!r} affected no rows")
            raise DatabaseError("Unexpected error! No rows were affected!")
        logger.info(f"Inserted seller #{seller.id} ({seller.name})")
        return seller

    # ── UPDATE ────────────────────────────────────────────

    def update(self, seller: Seller) -> None:
        """
        Overwrite every column of an existing seller.

        A seller id with no matching row is not an error; nothing changes.
        """
        sql = (
            "UPDATE seller "
            "SET Name = %s, Email = %s, BirthDate = %s, BaseSalary = %s, DepartmentId = %s "
            "WHERE Id = %s"
        )
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (
                    seller.name, seller.email, seller.birth_date,
                    seller.base_salary, seller.department.id, seller.id,
                ))
            self.conn.commit()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"update seller #{seller.id}", e, logger) from e
        logger.info(f"Updated seller #{seller.id}")

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, seller_id: int) -> None:
        """Delete a seller by ID. Missing ids are ignored."""
        sql = "DELETE FROM seller WHERE id = %s"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (seller_id,))
            self.conn.commit()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"delete seller #{seller_id}", e, logger) from e
        logger.info(f"Deleted seller #{seller_id}")

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, seller_id: int) -> Optional[Seller]:
        """
        Fetch a single seller with its department.

        Returns:
            A Seller or None if no row matches.
        """
        sql = _SELECT_JOINED + "WHERE seller.Id = %s"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (seller_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"find seller #{seller_id}", e, logger) from e

        if row is None:
            return None
        return self._row_to_seller(row, self._row_to_department(row))

    def find_all(self) -> list[Seller]:
        """
        Fetch every seller ordered by name.

        Sellers in the same department share one Department instance
        within the returned list.
        """
        sql = _SELECT_JOINED + "ORDER BY Name"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql)
                rows = cur.fetchall()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, "list sellers", e, logger) from e

        sellers: list[Seller] = []
        departments: dict[int, Department] = {}
        for row in rows:
            department = departments.get(row[5])
            if department is None:
                department = self._row_to_department(row)
                departments[row[5]] = department
            sellers.append(self._row_to_seller(row, department))
        return sellers

    def find_by_department(self, department: Department) -> list[Seller]:
        """
        Fetch the sellers of one department ordered by name.

        Every returned Seller references the same Department instance.
        """
        sql = _SELECT_JOINED + "WHERE DepartmentId = %s ORDER BY Name"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department.id,))
                rows = cur.fetchall()
        except psycopg2.Error as e:
            raise wrap_driver_error(self.conn, f"list sellers of department #{department.id}", e, logger) from e

        shared: Optional[Department] = None
        sellers: list[Seller] = []
        for row in rows:
            if shared is None:
                shared = self._row_to_department(row)
            sellers.append(self._row_to_seller(row, shared))
        return sellers

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_department(row: tuple) -> Department:
        """Build the Department half of a joined row (DepartmentId, DepName)."""
        return Department(id=row[5], name=row[6])

    @staticmethod
    def _row_to_seller(row: tuple, department: Department) -> Seller:
        """Convert a joined row (seller.*, DepName) to a Seller."""
        return Seller(
            id=row[0],
            name=row[1],
            email=row[2],
            birth_date=row[3],
            base_salary=float(row[4]) if row[4] is not None else 0.0,
            department=department,
        )
