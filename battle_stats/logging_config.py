#!/usr/bin/env python3
"""
Centralized logging configuration for the Battle Stats Bot.

Console output is colored for local runs; a rotating file keeps a longer
history for hosted deployments. Levels come from the environment.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[41m',   # Red background
        'RESET': '\033[0m'
    }

    def format(self, record):
        # Work on a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}"
                f"{record.levelname:8}"
                f"{self.COLORS['RESET']}"
            )
        return super().format(record)


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    enable_file: bool = True
) -> logging.Logger:
    """
    Setup centralized logging configuration.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (default: battle_stats_bot.log)
        enable_console: Enable console logging
        enable_file: Enable file logging

    Returns:
        Configured root logger
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        log_level, level = "INFO", logging.INFO

    if log_file is None:
        log_file = os.getenv('LOG_FILE', 'battle_stats_bot.log')

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(
            fmt='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if enable_file:
        # Create logs directory if it doesn't exist
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.info(f"📊 Logging initialized at {log_level}" + (f" -> {log_file}" if enable_file else ""))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module (usually ``__name__``)."""
    return logging.getLogger(name)


def log_database_operation(operation: str, table: str = None, count: int = None):
    """
    Log database operations for monitoring and debugging.

    Args:
        operation: Type of operation (SELECT, UPSERT, INCREMENT, DELETE)
        table: Table name (optional)
        count: Number of records affected (optional)
    """
    logger = get_logger('battle_stats.database')

    message = f"🗄️  Database {operation}"
    if table:
        message += f" on {table}"
    if count is not None:
        message += f" ({count} records)"

    logger.debug(message)


def log_discord_command(command: str, user: str, guild: str = None, channel: str = None):
    """
    Log Discord command usage for monitoring.

    Args:
        command: Command name
        user: User who executed the command
        guild: Guild name (optional)
        channel: Channel id or name (optional)
    """
    logger = get_logger('battle_stats.discord')

    message = f"💬 Command '{command}' by {user}"
    if guild:
        message += f" in {guild}"
    if channel:
        message += f" #{channel}"

    logger.info(message)
