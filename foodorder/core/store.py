"""
Document Store
==============

Per-key document access for the food order pages.

The store is a process-wide handle created lazily by the FoodOrder
extension and handed to the editor, so tests can swap in their own.

Backends:
- SqliteDocumentStore: JSON documents in a local SQLite file (default)
- DynamoDbDocumentStore: Amazon DynamoDB table (see dynamodb_store.py)
"""

import json
import logging
import sqlite3
from abc import ABC, abstractmethod

from .config import Config
from .database import Database

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the backing store fails a read or write"""

    def __init__(self, message, collection=None, key=None):
        super().__init__(message)
        self.collection = collection
        self.key = key


class DocumentNotFoundError(StoreError):
    """Raised by update() when the target document does not exist"""


class DocumentStore(ABC):
    """Abstract document store keyed by (collection, key)."""

    @abstractmethod
    def get(self, collection, key):
        """Return the document as a dict, or None if it does not exist."""

    @abstractmethod
    def set(self, collection, key, fields):
        """Create or replace a document."""

    @abstractmethod
    def update(self, collection, key, fields):
        """Merge fields into an existing document.

        Raises:
            DocumentNotFoundError: If no document exists at key
        """

    @abstractmethod
    def delete(self, collection, key):
        """Remove a document. Deleting a missing document is not an error."""

    @abstractmethod
    def list(self, collection):
        """Return [(key, document), ...] for every document in collection."""


class SqliteDocumentStore(DocumentStore):
    """Documents stored as JSON text in a SQLite table."""

    def __init__(self, db_path, table=Config.DOCUMENTS_TABLE):
        self.db_path = db_path
        self.table = table
        Database.init_documents_table(db_path, table)
        logger.debug("SQLite document store initialised at %s", db_path)

    def _connect(self):
        return Database.connect(self.db_path)

    def get(self, collection, key):
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    SELECT data FROM {self.table}
                    WHERE collection = ? AND doc_id = ?
                """, (collection, key))
                row = cursor.fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"Error reading document: {e}", collection, key) from e

        if not row:
            return None
        return json.loads(row[0])

    def set(self, collection, key, fields):
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    INSERT INTO {self.table} (collection, doc_id, data)
                    VALUES (?, ?, ?)
                    ON CONFLICT (collection, doc_id) DO UPDATE SET
                        data = excluded.data,
                        updated_at = CURRENT_TIMESTAMP
                """, (collection, key, json.dumps(dict(fields))))
                conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Error writing document: {e}", collection, key) from e

    def update(self, collection, key, fields):
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                # Read-merge-write inside one transaction
                cursor.execute("BEGIN IMMEDIATE")
                cursor.execute(f"""
                    SELECT data FROM {self.table}
                    WHERE collection = ? AND doc_id = ?
                """, (collection, key))
                row = cursor.fetchone()
                if not row:
                    conn.rollback()
                    raise DocumentNotFoundError(
                        f"No document to update: {collection}/{key}", collection, key
                    )

                data = json.loads(row[0])
                data.update(fields)
                cursor.execute(f"""
                    UPDATE {self.table}
                    SET data = ?, updated_at = CURRENT_TIMESTAMP
                    WHERE collection = ? AND doc_id = ?
                """, (json.dumps(data), collection, key))
                conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Error updating document: {e}", collection, key) from e

    def delete(self, collection, key):
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    DELETE FROM {self.table}
                    WHERE collection = ? AND doc_id = ?
                """, (collection, key))
                conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Error deleting document: {e}", collection, key) from e

    def list(self, collection):
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    SELECT doc_id, data FROM {self.table}
                    WHERE collection = ?
                    ORDER BY created_at ASC, doc_id ASC
                """, (collection,))
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Error listing documents: {e}", collection) from e

        return [(row[0], json.loads(row[1])) for row in rows]


def create_store(config):
    """Build the store backend named by config['STORE_BACKEND']"""
    backend = (config.get('STORE_BACKEND') or 'sqlite').lower()

    if backend == 'sqlite':
        return SqliteDocumentStore(config.get('DOCUMENTS_DB') or Config.DOCUMENTS_DB)

    if backend == 'dynamodb':
        from .dynamodb_store import DynamoDbDocumentStore
        return DynamoDbDocumentStore(
            config.get('DYNAMODB_TABLE') or Config.DYNAMODB_TABLE,
            region_name=config.get('AWS_REGION') or Config.AWS_REGION,
            endpoint_url=config.get('DYNAMODB_ENDPOINT_URL'),
        )

    raise ValueError(f"Unknown STORE_BACKEND: {backend}")
