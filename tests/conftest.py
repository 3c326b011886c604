import sys
from datetime import date
from pathlib import Path

# Project root on the path so the top-level packages import as in production
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import pytest

from models.department import Department
from models.seller import Seller
from tests.fakes import FakeConnection


@pytest.fixture
def fake_conn():
    """Fresh fake connection per test"""
    return FakeConnection()


@pytest.fixture
def bob():
    """Unsaved seller in department 1"""
    return Seller(
        name="Bob",
        email="bob@x.com",
        birth_date=date(1992, 5, 21),
        base_salary=3000.0,
        department=Department(id=1),
    )
