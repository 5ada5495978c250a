"""Shared fixtures: in-memory record store and mocked Discord interactions."""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest

# Keep the bot's log file out of the working tree during tests
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "battle_stats_test.log"))

from battle_stats.commands import RecordCommands
from battle_stats.types import PlayerRecord


class FakeRecordRepository:
    """Dict-backed stand-in with the RecordRepository interface."""

    def __init__(self):
        self.rows = {}

    def fetch(self, channel_id, player_name):
        record = self.rows.get((str(channel_id), player_name))
        return PlayerRecord(**vars(record)) if record else None

    def upsert(self, channel_id, player_name, win, lose, games):
        record = PlayerRecord(str(channel_id), player_name, win, lose, games)
        self.rows[(str(channel_id), player_name)] = record
        return record

    def increment(self, channel_id, player_name, win_delta=0, lose_delta=0, games_delta=0):
        current = self.fetch(channel_id, player_name) or PlayerRecord(str(channel_id), player_name)
        return self.upsert(
            channel_id, player_name,
            current.win + win_delta, current.lose + lose_delta, current.games + games_delta,
        )

    def delete(self, channel_id, player_name):
        return self.rows.pop((str(channel_id), player_name), None) is not None

    def list_all(self, channel_id):
        return sorted(
            (r for (cid, _), r in self.rows.items() if cid == str(channel_id)),
            key=lambda r: r.player_name,
        )


def make_interaction(admin: bool = True, in_guild: bool = True, channel_id: int = 1234):
    interaction = MagicMock()
    interaction.channel_id = channel_id
    interaction.guild = MagicMock() if in_guild else None
    if in_guild:
        interaction.guild.name = "Test Guild"
    interaction.user.guild_permissions.administrator = admin
    interaction.user.__str__.return_value = "tester"
    interaction.response.is_done = MagicMock(return_value=False)
    interaction.response.send_message = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction


@pytest.fixture
def records():
    return FakeRecordRepository()


@pytest.fixture
def cog(records):
    return RecordCommands(MagicMock(), records)


@pytest.fixture
def interaction_factory():
    return make_interaction
