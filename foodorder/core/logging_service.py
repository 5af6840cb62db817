"""
Centralized logging service for the food order editor.
Provides structured logging with database storage and easy integration.
"""

import json
import traceback
from datetime import datetime
from flask import request, has_request_context
from .config import Config
from .database import Database, get_db_config


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _get_logs_db():
        return get_db_config('LOGS_DB')

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None

        try:
            ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
            if ip_address and ',' in ip_address:
                ip_address = ip_address.split(',')[0].strip()

            user_agent = request.headers.get('User-Agent', '')
            request_path = request.path

            return ip_address, user_agent, request_path
        except Exception:
            return None, None, None

    @staticmethod
    def log(level, source, message, details=None):
        """
        Log a message to the database

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (food_items, store, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
        """
        try:
            db_path = LoggingService._get_logs_db()
            Database.init_logs_table(db_path)

            ip_address, user_agent, request_path = LoggingService._get_request_context()

            if isinstance(details, dict):
                details = json.dumps(details, indent=2, default=str)

            timestamp = datetime.now().isoformat()

            with Database.connect(db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    INSERT INTO {Config.LOGS_TABLE}
                    (timestamp, level, source, message, details, ip_address, user_agent, request_path)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    timestamp, level.upper(), source, message, details,
                    ip_address, user_agent, request_path
                ))
                conn.commit()

        except Exception as e:
            # Fallback to console logging if database fails
            print(f"[{datetime.now().isoformat()}] [{level.upper()}] [{source}] {message}")
            if details:
                print(f"Details: {details}")
            print(f"Logging service error: {e}")

    @staticmethod
    def debug(source, message, details=None):
        """Log debug message"""
        LoggingService.log('DEBUG', source, message, details)

    @staticmethod
    def info(source, message, details=None):
        """Log info message"""
        LoggingService.log('INFO', source, message, details)

    @staticmethod
    def warning(source, message, details=None):
        """Log warning message"""
        LoggingService.log('WARNING', source, message, details)

    @staticmethod
    def error(source, message, details=None):
        """Log error message"""
        LoggingService.log('ERROR', source, message, details)

    @staticmethod
    def critical(source, message, details=None):
        """Log critical message"""
        LoggingService.log('CRITICAL', source, message, details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def get_recent_logs(source=None, limit=50):
        """Return the newest log entries, optionally filtered by source"""
        db_path = LoggingService._get_logs_db()
        try:
            Database.init_logs_table(db_path)
            with Database.connect(db_path) as conn:
                cursor = conn.cursor()
                if source:
                    cursor.execute(f"""
                        SELECT timestamp, level, source, message, details
                        FROM {Config.LOGS_TABLE} WHERE source = ?
                        ORDER BY id DESC LIMIT ?
                    """, (source, limit))
                else:
                    cursor.execute(f"""
                        SELECT timestamp, level, source, message, details
                        FROM {Config.LOGS_TABLE}
                        ORDER BY id DESC LIMIT ?
                    """, (limit,))
                return [{
                    'timestamp': row[0],
                    'level': row[1],
                    'source': row[2],
                    'message': row[3],
                    'details': row[4],
                } for row in cursor.fetchall()]
        except Exception as e:
            print(f"Error reading logs: {e}")
            return []


# Convenience instance for easy importing
logger = LoggingService()
