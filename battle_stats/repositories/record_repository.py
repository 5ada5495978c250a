"""
Record repository: per-channel win/lose/games counters keyed by player name.
"""

import logging
from typing import List, Optional

from psycopg2.extras import DictCursor

from .base import BaseRepository
from ..logging_config import log_database_operation
from ..types import PlayerRecord


class RecordRepository(BaseRepository):
    """Handles all reads and writes on the records table."""

    def fetch(self, channel_id, player_name: str) -> Optional[PlayerRecord]:
        """Point lookup of one player's record in a channel."""
        channel_id = self._validate_channel_id(channel_id, "fetch")

        with self.get_connection() as conn:
            cursor = conn.cursor(cursor_factory=DictCursor)
            cursor.execute("""
                SELECT channel_id, player_name, win, lose, games
                FROM records
                WHERE channel_id = %s AND player_name = %s
            """, (channel_id, player_name))

            row = cursor.fetchone()
            log_database_operation("SELECT", "records", 1 if row else 0)
            return PlayerRecord.from_row(row) if row else None

    def upsert(self, channel_id, player_name: str, win: int, lose: int, games: int) -> PlayerRecord:
        """Create the record or overwrite all three counters with absolute values."""
        channel_id = self._validate_channel_id(channel_id, "upsert")

        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO records (channel_id, player_name, win, lose, games)
                VALUES (%s, %s, %s, %s, %s)
                ON CONFLICT (channel_id, player_name)
                DO UPDATE SET win = EXCLUDED.win, lose = EXCLUDED.lose, games = EXCLUDED.games
            """, (channel_id, player_name, win, lose, games))
            conn.commit()

        log_database_operation("UPSERT", "records", 1)
        logging.info(f"✅ Set record for {player_name} in channel {channel_id}: {win}W {lose}L {games}G")
        return PlayerRecord(channel_id, player_name, win, lose, games)

    def increment(self, channel_id, player_name: str, win_delta: int = 0, lose_delta: int = 0,
                  games_delta: int = 0) -> PlayerRecord:
        """Add deltas to a player's counters, creating the record from zero if absent.

        Done in a single statement so concurrent increments on the same
        player add up instead of overwriting each other.
        """
        channel_id = self._validate_channel_id(channel_id, "increment")

        with self.get_connection() as conn:
            cursor = conn.cursor(cursor_factory=DictCursor)
            cursor.execute("""
                INSERT INTO records (channel_id, player_name, win, lose, games)
                VALUES (%s, %s, %s, %s, %s)
                ON CONFLICT (channel_id, player_name)
                DO UPDATE SET
                    win = COALESCE(records.win, 0) + EXCLUDED.win,
                    lose = COALESCE(records.lose, 0) + EXCLUDED.lose,
                    games = COALESCE(records.games, 0) + EXCLUDED.games
                RETURNING channel_id, player_name, win, lose, games
            """, (channel_id, player_name, win_delta, lose_delta, games_delta))
            row = cursor.fetchone()
            conn.commit()

        log_database_operation("INCREMENT", "records", 1)
        logging.info(
            f"✅ Incremented {player_name} in channel {channel_id}: "
            f"+{win_delta}W +{lose_delta}L +{games_delta}G"
        )
        return PlayerRecord.from_row(row)

    def delete(self, channel_id, player_name: str) -> bool:
        """Remove a player's record. Returns False when there was nothing to remove."""
        channel_id = self._validate_channel_id(channel_id, "delete")

        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "DELETE FROM records WHERE channel_id = %s AND player_name = %s",
                (channel_id, player_name)
            )
            deleted = cursor.rowcount
            conn.commit()

        log_database_operation("DELETE", "records", deleted)
        if deleted:
            logging.info(f"🗑️ Deleted record for {player_name} in channel {channel_id}")
        else:
            logging.debug(f"No record for {player_name} in channel {channel_id} to delete")
        return deleted > 0

    def list_all(self, channel_id) -> List[PlayerRecord]:
        """All records of a channel, ordered by player name."""
        channel_id = self._validate_channel_id(channel_id, "list_all")

        with self.get_connection() as conn:
            cursor = conn.cursor(cursor_factory=DictCursor)
            cursor.execute("""
                SELECT channel_id, player_name, win, lose, games
                FROM records
                WHERE channel_id = %s
                ORDER BY player_name
            """, (channel_id,))

            rows = cursor.fetchall()
            log_database_operation("SELECT", "records", len(rows))
            return [PlayerRecord.from_row(row) for row in rows]
