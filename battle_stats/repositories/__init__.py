"""
Repository modules for the Battle Stats Bot.

- RecordRepository: per-channel win/lose/games records
"""

from .record_repository import RecordRepository

__all__ = [
    "RecordRepository",
]
