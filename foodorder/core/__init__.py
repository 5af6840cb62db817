"""
Food Order Core
===============

Core utilities and shared functionality for food order modules.
"""

from .config import Config
from .database import Database
from .logging_service import LoggingService, logger
from .store import DocumentNotFoundError, DocumentStore, SqliteDocumentStore, StoreError, create_store

__all__ = [
    'Config', 'Database', 'LoggingService', 'logger',
    'DocumentStore', 'SqliteDocumentStore', 'StoreError', 'DocumentNotFoundError', 'create_store',
]
