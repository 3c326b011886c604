"""
models/department.py
--------------------
Domain model for departments.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Department:
    """
    Represents a department sellers belong to.

    Attributes:
        id: Database primary key (None for new records).
        name: Department name.
    """
    id: Optional[int] = None
    name: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Department):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Department #{self.id}: {self.name}"
