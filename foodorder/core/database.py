import os
import sqlite3
import threading
from .config import Config


def get_db_config(key):
    """Get a database path from app config, Config or environment (3-tier pattern)"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val:
            return val
    except RuntimeError:
        pass
    return getattr(Config, key, None) or os.getenv(key)


class Database:
    # Serialises schema creation across request threads
    _lock = threading.Lock()
    _initialised = set()

    @staticmethod
    def connect(path):
        return sqlite3.connect(path)

    @classmethod
    def ensure_dir(cls, path):
        db_dir = os.path.dirname(path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    @classmethod
    def init_documents_table(cls, path, table=Config.DOCUMENTS_TABLE):
        """
        Create the JSON documents table if it does not exist.
        One row per (collection, doc_id); the document body is stored as JSON text.
        """
        if (path, table) in cls._initialised:
            return

        with cls._lock:
            cls.ensure_dir(path)
            with cls.connect(path) as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    CREATE TABLE IF NOT EXISTS {table} (
                        collection TEXT NOT NULL,
                        doc_id TEXT NOT NULL,
                        data TEXT NOT NULL DEFAULT '{{}}',
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        PRIMARY KEY (collection, doc_id)
                    )
                """)
                conn.commit()
            cls._initialised.add((path, table))

    @classmethod
    def init_logs_table(cls, path, table=Config.LOGS_TABLE):
        """Ensure the app_logs table exists"""
        if (path, table) in cls._initialised:
            return

        with cls._lock:
            cls.ensure_dir(path)
            with cls.connect(path) as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    CREATE TABLE IF NOT EXISTS {table} (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        timestamp TEXT NOT NULL,
                        level TEXT NOT NULL,
                        source TEXT NOT NULL,
                        message TEXT NOT NULL,
                        details TEXT,
                        ip_address TEXT,
                        user_agent TEXT,
                        request_path TEXT
                    )
                """)

                # Create index for better performance
                cursor.execute(f"""
                    CREATE INDEX IF NOT EXISTS idx_logs_timestamp
                    ON {table}(timestamp DESC)
                """)
                cursor.execute(f"""
                    CREATE INDEX IF NOT EXISTS idx_logs_level
                    ON {table}(level)
                """)
                cursor.execute(f"""
                    CREATE INDEX IF NOT EXISTS idx_logs_source
                    ON {table}(source)
                """)

                conn.commit()
            cls._initialised.add((path, table))
