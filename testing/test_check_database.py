"""management/check_database.py output against a mocked database."""

import importlib.util
import os
from unittest.mock import MagicMock

import pytest

from battle_stats.types import PlayerRecord

SCRIPT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "management", "check_database.py")


@pytest.fixture
def script(monkeypatch):
    spec = importlib.util.spec_from_file_location("check_database", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    db = MagicMock()
    monkeypatch.setattr(module, "DatabaseManager", MagicMock(return_value=db))
    return module, db


def test_channel_listing(script, capsys):
    module, db = script
    db.records.list_all.return_value = [PlayerRecord("42", "Alice", 2, 1, 3)]

    assert module.main(["channel", "42"]) == 0

    out = capsys.readouterr().out
    assert "Alice" in out
    assert "66.7%" in out
    db.close.assert_called_once()


def test_missing_player(script, capsys):
    module, db = script
    db.records.fetch.return_value = None

    assert module.main(["player", "42", "Nobody", "Here"]) == 0

    db.records.fetch.assert_called_once_with("42", "Nobody Here")
    assert "not found" in capsys.readouterr().out


def test_info_and_bad_command(script, capsys):
    module, db = script
    db.get_database_info.return_value = {"database_type": "PostgreSQL", "record_count": 3, "channel_count": 1}

    assert module.main([]) == 0
    assert "Records: 3" in capsys.readouterr().out
    assert module.main(["bogus"]) == 1
