"""Environment-driven settings."""

import importlib

from battle_stats import config


def test_database_url_preferred_over_public_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://internal/db")
    monkeypatch.setenv("DATABASE_PUBLIC_URL", "postgresql://public/db")
    try:
        assert importlib.reload(config).DATABASE_URL == "postgresql://internal/db"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_public_url_used_when_database_url_missing(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DATABASE_PUBLIC_URL", "postgresql://public/db")
    try:
        assert importlib.reload(config).DATABASE_URL == "postgresql://public/db"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
