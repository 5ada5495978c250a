"""
Shared type definitions for the Battle Stats Bot.

Kept in one module so repositories, commands and utils can share them
without circular imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class PlayerRecord:
    """One player's counters inside a channel, as stored in the records table."""
    channel_id: str
    player_name: str
    win: int = 0
    lose: int = 0
    games: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> PlayerRecord:
        """Build a record from a dict-like database row."""
        return cls(
            channel_id=row["channel_id"],
            player_name=row["player_name"],
            win=row["win"] or 0,
            lose=row["lose"] or 0,
            games=row["games"] or 0,
        )
