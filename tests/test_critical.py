"""
Critical Integration Tests for the FoodOrder extension
=======================================================

Focused tests covering the integration points most likely to break.
Run with: pytest tests/test_critical.py -v
"""

import os
import shutil
import tempfile
import threading
import time

import pytest
from flask import Flask

from foodorder import FoodOrder
from foodorder.core.store import SqliteDocumentStore, create_store


# ---------------------------------------------------------------------------
# 1. Extension initialisation -- FoodOrder(app) does not raise
# ---------------------------------------------------------------------------

def test_extension_initialisation(make_app):
    """FoodOrder(app) boots without errors and stores itself on the app."""
    app = make_app()

    assert "foodorder" in app.extensions
    assert isinstance(app.extensions["foodorder"], FoodOrder)


# ---------------------------------------------------------------------------
# 2. Config resolution -- defaults are seeded and DB paths follow DB_DIR
# ---------------------------------------------------------------------------

def test_config_defaults(tmp_db_dir):
    """Missing keys are filled in; DB files are placed under the app's DB_DIR."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["DB_DIR"] = tmp_db_dir

    FoodOrder(app)

    assert app.config["FOOD_COLLECTION"] == "FoodOrder"
    assert app.config["STORE_BACKEND"] == "sqlite"
    assert app.config["DOCUMENTS_DB"] == os.path.join(tmp_db_dir, "documents.db")
    assert app.config["LOGS_DB"] == os.path.join(tmp_db_dir, "app_logs.db")
    assert app.config["SECRET_KEY"]


def test_store_options_override_app_config(make_app, tmp_db_dir):
    """Store options passed to FoodOrder(app, {...}) win over app.config."""
    target = os.path.join(tmp_db_dir, "other.db")
    app = make_app(config={"store": {"documents_db": target}})

    assert app.config["DOCUMENTS_DB"] == target


# ---------------------------------------------------------------------------
# 3. Blueprint registration -- all expected modules are registered
# ---------------------------------------------------------------------------

EXPECTED_MODULES = [
    "food_single",
    "food_items",
    "food_items_api",
]


def test_all_blueprints_registered(app):
    """Edit page, listing page and API blueprints are registered."""
    registered = app.extensions["foodorder"].get_registered_modules()

    for mod in EXPECTED_MODULES:
        assert mod in registered, (
            f"Module '{mod}' was not registered. Registered: {registered}"
        )
        assert mod in app.blueprints

    assert len(registered) == len(EXPECTED_MODULES)


def test_api_can_be_disabled(make_app):
    """features.api = False leaves the JSON API unregistered."""
    app = make_app(config={"features": {"api": False}})

    assert "food_items_api" not in app.blueprints
    assert "food_items_api" not in app.extensions["foodorder"].get_registered_modules()


# ---------------------------------------------------------------------------
# 4. Routes exist -- edit, listing and API URLs are in the URL map
# ---------------------------------------------------------------------------

def test_routes_exist(app):
    # Several view functions can share one path, so collect methods per path
    rules = {}
    for rule in app.url_map.iter_rules():
        rules.setdefault(rule.rule, set()).update(rule.methods)

    assert "/FoodSingle/<slug>/<item_id>" in rules
    assert "/FoodSingle/<slug>/" in rules
    assert "/GetFoodItems" in rules
    assert "/api/food-items/<item_id>" in rules

    assert "POST" in rules["/FoodSingle/<slug>/<item_id>"]
    assert {"GET", "PATCH", "DELETE"} <= rules["/api/food-items/<item_id>"]


# ---------------------------------------------------------------------------
# 5. Template context -- foodorder_config and brand_name are injected
# ---------------------------------------------------------------------------

def test_template_context_injection(make_app):
    """Context processor injects foodorder_config and brand_name."""
    app = make_app(config={"brand_name": "Test Kitchen"})

    with app.test_request_context("/"):
        ctx = {}
        for func in app.template_context_processors[None]:
            ctx.update(func())

        assert "foodorder_config" in ctx, "foodorder_config missing from template context"
        assert ctx["foodorder_config"]["collection"] == "FoodOrder"
        assert ctx["brand_name"] == "Test Kitchen"


# ---------------------------------------------------------------------------
# 6. Database directory creation -- DB_DIR is created on init
# ---------------------------------------------------------------------------

def test_database_dir_creation():
    """FoodOrder creates the configured DB_DIR on disk."""
    d = tempfile.mkdtemp(prefix="foodorder-dbtest-")
    target = os.path.join(d, "sub", "databases")

    try:
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.config["DB_DIR"] = target

        FoodOrder(app)

        assert os.path.isdir(target), f"DB_DIR was not created at {target}"
    finally:
        shutil.rmtree(d, ignore_errors=True)


# ---------------------------------------------------------------------------
# 7. Store handle -- created lazily once, injected store is used as-is
# ---------------------------------------------------------------------------

def test_store_created_lazily_and_reused(make_app):
    app = make_app()
    ext = app.extensions["foodorder"]

    assert ext._store is None
    first = ext.store
    assert isinstance(first, SqliteDocumentStore)
    assert first.db_path == app.config["DOCUMENTS_DB"]
    assert ext.store is first


def test_concurrent_first_access_builds_one_store(make_app, monkeypatch):
    app = make_app()
    ext = app.extensions["foodorder"]
    built = []

    def slow_create_store(config):
        time.sleep(0.05)
        built.append(config)
        return object()

    monkeypatch.setattr("foodorder.create_store", slow_create_store)
    seen = []
    threads = [threading.Thread(target=lambda: seen.append(ext.store)) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(built) == 1
    assert len(seen) == 8
    assert all(handle is seen[0] for handle in seen)


def test_injected_store_is_used(app, store):
    assert app.extensions["foodorder"].store is store


def test_unknown_store_backend_rejected():
    with pytest.raises(ValueError):
        create_store({"STORE_BACKEND": "firestore"})
