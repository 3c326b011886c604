"""
repositories/factory.py
------------------------
Builds repositories bound to a connection.
Callers that manage their own connection pass it in; everyone else gets
the shared connection from `db.connection`.
"""

from db.connection import get_connection
from repositories.department_repo import DepartmentRepository
from repositories.seller_repo import SellerRepository


def create_seller_repository(conn=None) -> SellerRepository:
    """Return a SellerRepository on `conn`, or on the shared connection."""
    return SellerRepository(conn if conn is not None else get_connection())


def create_department_repository(conn=None) -> DepartmentRepository:
    """Return a DepartmentRepository on `conn`, or on the shared connection."""
    return DepartmentRepository(conn if conn is not None else get_connection())
