"""
Pytest fixtures for heroku_pg tests.

Unit tests never touch a real database: psycopg.connect and
psycopg_pool.ConnectionPool are patched. Tests marked `integration` need a
TLS-enabled PostgreSQL reachable at TEST_DATABASE_URL and are skipped
otherwise.
"""

import os
from unittest.mock import MagicMock

import pytest

from heroku_pg.app import create_app

DATABASE_URL = "postgres://u:p@localhost:5432/testdb"


# =============================================================================
# URL FIXTURES
# =============================================================================


@pytest.fixture
def database_url() -> str:
    return DATABASE_URL


@pytest.fixture
def live_database_url() -> str:
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not set")
    return url


# =============================================================================
# FAKE DATABASE HANDLES
# =============================================================================


@pytest.fixture
def fake_conn():
    """A stand-in for psycopg.Connection whose cursor returns one Ferris row."""
    conn = MagicMock(name="connection")
    cur = conn.cursor.return_value
    cur.__enter__.return_value = cur
    cur.fetchall.return_value = [(1, "Ferris", None)]
    conn.__enter__.return_value = conn
    return conn


@pytest.fixture
def fake_pool(fake_conn):
    """A stand-in for psycopg_pool.ConnectionPool lending fake_conn."""
    pool = MagicMock(name="pool")
    pool.connection.return_value.__enter__.return_value = fake_conn
    return pool


# =============================================================================
# FLASK FIXTURES
# =============================================================================


@pytest.fixture
def app(database_url):
    return create_app("testing", DATABASE_URL=database_url, LOG_LEVEL="WARNING", LOG_FILE="")


@pytest.fixture
def client(app):
    return app.test_client()
