"""Shared test fixtures for the hotel CLI test suite."""

import io
from unittest.mock import MagicMock

import pytest

from hotel.connection import HotelDatabase
from hotel.prompt import Prompter


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_cursor():
    """Mock database cursor that tracks executed SQL."""
    cursor = MagicMock()
    cursor.description = [("count",)]
    cursor.fetchone.return_value = None
    cursor.fetchall.return_value = []
    cursor.rowcount = 1
    return cursor


@pytest.fixture
def mock_connection(mock_cursor):
    """Mock psycopg2 connection whose cursor() context yields mock_cursor."""
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = mock_cursor
    return conn


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def db(mock_connection, out):
    """HotelDatabase over a mock connection, printing into `out`."""
    return HotelDatabase(mock_connection, out=out)


@pytest.fixture
def mock_db(out):
    """HotelDatabase stand-in for exercising menu actions in isolation."""
    database = MagicMock(spec=HotelDatabase)
    database.out = out
    database.get_next_id.return_value = 1
    database.execute_query.return_value = 0
    database.fetch_value.return_value = None
    return database


@pytest.fixture
def db_env(monkeypatch):
    """Set database environment variables."""
    monkeypatch.setenv("HOTEL_DB_HOST", "db.example.com")
    monkeypatch.setenv("HOTEL_DB_PASSWORD", "secret")


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------

def make_prompter(*lines, out=None):
    """Prompter reading the given lines, one per prompt."""
    text = "".join(f"{line}\n" for line in lines)
    return Prompter(io.StringIO(text), out if out is not None else io.StringIO())
