"""
Food Order Editor
=================

A Flask extension serving the food order pages:
- Edit page for one FoodOrder record with Update and Delete
- Listing page of all records
- JSON API over the same collection

Usage:
    from flask import Flask
    from foodorder import FoodOrder

    app = Flask(__name__)
    FoodOrder(app)

The document store is created on first use from app.config
(STORE_BACKEND, DOCUMENTS_DB, DYNAMODB_TABLE, ...). Pass store=... to
use an existing DocumentStore instead.
"""

import os
import threading

from .core.config import Config
from .core.logging_service import LoggingService
from .core.store import create_store

__version__ = '0.1.0'

# app.config keys seeded from Config when the app does not set them
CONFIG_KEYS = [
    'SECRET_KEY',
    'DB_DIR',
    'STORE_BACKEND',
    'DYNAMODB_TABLE',
    'AWS_REGION',
    'DYNAMODB_ENDPOINT_URL',
    'FOOD_COLLECTION',
    'BRAND_NAME',
]


class FoodOrder:
    """Registers the food order blueprints on a Flask app and owns the store handle."""

    def __init__(self, app=None, config=None, store=None):
        self._config = dict(config or {})
        self._store = store
        self._store_lock = threading.Lock()
        self._registered_modules = []
        self.app = None

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.app = app
        self._apply_config_defaults(app)
        self._setup_database_dir(app)
        self._register_blueprints(app)
        self._register_context_processor(app)

        app.extensions['foodorder'] = self
        with app.app_context():
            LoggingService.debug('system', 'FoodOrder extension initialised', {
                'modules': self._registered_modules,
                'store_backend': app.config.get('STORE_BACKEND'),
            })

    @property
    def store(self):
        """Document store, created on first access"""
        if self._store is None:
            with self._store_lock:
                if self._store is None:
                    self._store = create_store(self.app.config)
        return self._store

    @property
    def brand_name(self):
        return self._config.get('brand_name') or self.app.config.get('BRAND_NAME') or 'Food Orders'

    def get_registered_modules(self):
        return list(self._registered_modules)

    def _apply_config_defaults(self, app):
        for key in CONFIG_KEYS:
            if app.config.get(key) is None:
                app.config[key] = getattr(Config, key, None)

        db_dir = app.config['DB_DIR']
        # Database files follow the app's DB_DIR unless set explicitly
        if not app.config.get('DOCUMENTS_DB'):
            app.config['DOCUMENTS_DB'] = os.getenv('DOCUMENTS_DB') or os.path.join(db_dir, 'documents.db')
        if not app.config.get('LOGS_DB'):
            app.config['LOGS_DB'] = os.getenv('LOGS_DB') or os.path.join(db_dir, 'app_logs.db')

        # Store options passed to FoodOrder(app, {...}) win over app.config
        for key, value in self._config.get('store', {}).items():
            app.config[key.upper()] = value

    def _setup_database_dir(self, app):
        db_dir = app.config.get('DB_DIR')
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    def _register_blueprints(self, app):
        from .modules.food_items import food_items_api_bp, food_items_bp, food_single_bp

        features = self._config.get('features', {})
        app.register_blueprint(food_single_bp)
        app.register_blueprint(food_items_bp)
        self._registered_modules.extend(['food_single', 'food_items'])

        if features.get('api', True):
            app.register_blueprint(food_items_api_bp)
            self._registered_modules.append('food_items_api')

    def _register_context_processor(self, app):
        @app.context_processor
        def inject_foodorder_config():
            return {
                'foodorder_config': {
                    'collection': app.config.get('FOOD_COLLECTION'),
                    'store_backend': app.config.get('STORE_BACKEND'),
                    'modules': self.get_registered_modules(),
                },
                'brand_name': self.brand_name,
            }


__all__ = ['FoodOrder', 'Config']
