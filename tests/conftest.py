"""
Pytest configuration and fixtures.
"""
import pytest
import sys
import os

# Add the parent directory to path so we can import the app modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import Database
from budget_manager import BudgetManager
from recipe_manager import RecipeManager


@pytest.fixture
def db(tmp_path):
    """A fresh database file per test"""
    return Database(str(tmp_path / "test.db"))


@pytest.fixture
def budget(db):
    return BudgetManager(db)


@pytest.fixture
def recipes(db):
    return RecipeManager(db)
