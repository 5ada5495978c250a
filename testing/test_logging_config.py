"""Logging setup and module loggers."""

import logging

import pytest

from battle_stats import commands, keepalive
from battle_stats.logging_config import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("BOGUS", enable_console=False, enable_file=False)
    assert root_logger.level == logging.INFO


def test_known_level_applied(root_logger):
    setup_logging("DEBUG", enable_console=False, enable_file=False)
    assert root_logger.level == logging.DEBUG


def test_modules_log_under_package_names():
    assert commands.logger.name == "battle_stats.commands"
    assert keepalive.logger.name == "battle_stats.keepalive"
