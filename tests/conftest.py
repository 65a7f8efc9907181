"""
Shared test fixtures for TailorBook.

Provides an in-memory database with all schemas and the seeded catalog,
a get_db patch, a Flask test client, and a CLI runner.
"""

import sqlite3
from contextlib import contextmanager
from unittest.mock import patch

import pytest

from tailorbook.catalog.seed import seed_catalog
from tailorbook.core.db import apply_schemas


def _connect() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    conn.row_factory = sqlite3.Row
    return conn


@pytest.fixture
def empty_db():
    """In-memory database with every schema applied but no reference data."""
    conn = _connect()
    apply_schemas(conn)
    yield conn
    conn.close()


@pytest.fixture
def memory_db():
    """In-memory database with all schemas applied and the catalog seeded."""
    conn = _connect()
    apply_schemas(conn)
    seed_catalog(conn)
    yield conn
    conn.close()


@pytest.fixture
def mock_db(memory_db):
    """Patch get_db everywhere to return the in-memory database."""

    @contextmanager
    def _get_db(readonly=False):
        yield memory_db

    with patch("tailorbook.core.db.get_db", _get_db), \
         patch("tailorbook.core.get_db", _get_db), \
         patch("tailorbook.api.customer_manager.get_db", _get_db):
        yield memory_db


@pytest.fixture
def client(mock_db):
    """Flask test client wired to the in-memory database."""
    from tailorbook.api import create_app

    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def seed_customer(memory_db):
    """Insert customer 'Ali'. Returns customer id."""
    cur = memory_db.execute("INSERT INTO customers (name) VALUES ('Ali')")
    memory_db.commit()
    return cur.lastrowid
