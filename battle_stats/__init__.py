"""
Battle Stats Bot - per-channel win/lose/games records for Discord

Core application package containing bot logic, slash commands, and database operations.
"""

from .bot import StatsBot, setup_bot
from .database import DatabaseManager
from . import config

__version__ = "1.0.0"
__all__ = ["StatsBot", "setup_bot", "DatabaseManager", "config"]
