"""Root pytest configuration and shared fixtures.

Test Structure:
    tests/
    └── unit/
        ├── domain/            # Value objects and domain services
        ├── application/       # Queries and the query cache
        ├── presentation/      # Typer CLI
        └── config/            # pydantic-settings configuration

Every time-dependent test passes ``today``/``now`` explicitly, so the
suite does not depend on the wall clock.
"""

from datetime import date

import pytest

from ledgerlens.domain.entries.value_objects import AllEntriesResponse
from ledgerlens_config import clear_settings_cache
from tests.factories import make_expense, make_income

SETTINGS_ENV_VARS = (
    "APP_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "DEFAULT_VIEW_TYPE",
    "LIST_PAGE_SIZE",
    "QUERY_CACHE_SIZE",
    "INCOME_FALLBACK_EMOJI",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Start every test with default settings and a fresh settings cache."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def july_today():
    """A Wednesday in July 2025."""
    return date(2025, 7, 16)


@pytest.fixture
def july_response():
    """One lunch expense and one salary payment in July 2025."""
    return AllEntriesResponse(
        expenses=[make_expense(category="Food", emoji="🍔")],
        income=[make_income()],
    )


@pytest.fixture
def july_payload():
    """The July response as the JSON the entries endpoint delivers."""
    return {
        "expenses": [
            {
                "id": 1,
                "description": "Lunch",
                "date": "2025-07-14",
                "amount": 15,
                "is_income": False,
                "category": {"name": "Food", "emoji": "🍔"},
            }
        ],
        "income": [
            {"id": 2, "description": "Salary", "date": "2025-07-01", "amount": 3000}
        ],
        "budgets": [{"id": 1, "amount": 200, "category": {"name": "🍔 Food"}}],
    }
