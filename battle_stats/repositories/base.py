"""
Base repository providing shared database access.

All domain repositories inherit from this class to get
connection pool access and common validation helpers.
"""

import logging
from contextlib import contextmanager


class BaseRepository:
    """Base class for all repositories. Provides connection pool access."""

    def __init__(self, db_manager):
        """
        Args:
            db_manager: DatabaseManager instance (provides connection pool)
        """
        self._db = db_manager

    @contextmanager
    def get_connection(self):
        """Delegate to DatabaseManager's connection pool."""
        with self._db.get_connection() as conn:
            yield conn

    def _validate_channel_id(self, channel_id, operation_name: str = "database operation") -> str:
        """Normalize channel_id to text and reject empty ids to keep channels isolated."""
        channel_id = str(channel_id).strip() if channel_id is not None else ""
        if not channel_id:
            error_msg = f"Invalid channel_id for {operation_name}. Channel ID must not be empty."
            logging.error(f"❌ {error_msg}")
            raise ValueError(error_msg)
        return channel_id
