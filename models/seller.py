"""
models/seller.py
----------------
Domain model for sellers.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from models.department import Department


@dataclass(eq=False)
class Seller:
    """
    Represents a seller and the department they work in.

    Attributes:
        id: Database primary key (None for new records).
        name: Full name.
        email: Contact email.
        birth_date: Date of birth.
        base_salary: Monthly base salary.
        department: The seller's department, hydrated from the join.
    """
    name: str
    email: str
    birth_date: date
    base_salary: float
    department: Department = field(default_factory=Department)
    id: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seller):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Seller #{self.id}: {self.name} <{self.email}> | "
            f"{self.birth_date} | {self.base_salary:.2f} | {self.department.name}"
        )
