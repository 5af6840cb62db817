"""
Shared fixtures for the foodorder test suite.

Run with: pytest tests/ -v

NOTE: pytest, pytest-flask and moto are listed under extras_require["dev"]
in setup.py. Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile

import pytest
from flask import Flask

from foodorder import FoodOrder
from foodorder.core.config import Config
from foodorder.core.store import SqliteDocumentStore

COLLECTION = "FoodOrder"
PIZZA = {"name": "Pizza", "Price": "10", "Quantity": "2"}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for test databases, cleaned up after."""
    d = tempfile.mkdtemp(prefix="foodorder-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_db_dir):
    """Keep database and log files out of the working directory."""
    monkeypatch.setattr(Config, "DB_DIR", tmp_db_dir)
    monkeypatch.setattr(Config, "DOCUMENTS_DB", os.path.join(tmp_db_dir, "documents.db"))
    monkeypatch.setattr(Config, "LOGS_DB", os.path.join(tmp_db_dir, "app_logs.db"))


@pytest.fixture
def store(tmp_db_dir):
    """SQLite document store in the temp directory."""
    return SqliteDocumentStore(os.path.join(tmp_db_dir, "documents.db"))


@pytest.fixture
def make_app(tmp_db_dir):
    """Factory for a Flask app with FoodOrder registered on the given store."""
    def _make(store=None, config=None):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.config["SECRET_KEY"] = "test-secret"
        app.config["DB_DIR"] = tmp_db_dir
        app.config["DOCUMENTS_DB"] = os.path.join(tmp_db_dir, "documents.db")
        app.config["LOGS_DB"] = os.path.join(tmp_db_dir, "app_logs.db")
        FoodOrder(app, config, store=store)
        return app
    return _make


@pytest.fixture
def app(make_app, store):
    """Flask app backed by the SQLite test store."""
    return make_app(store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def pizza(store):
    """The abc123 record: Pizza / 10 / 2."""
    store.set(COLLECTION, "abc123", PIZZA)
    return "abc123"
