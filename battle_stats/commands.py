import functools

import discord
from discord import app_commands
from discord.ext import commands

from .constants import (
    MESSAGE_MAX_LENGTH,
    MSG_ADMIN_ONLY,
    MSG_GAMES_ADDED,
    MSG_NO_DATA,
    MSG_RECORD_ADDED,
    MSG_RECORD_DELETED,
    MSG_RECORD_SET,
)
from .logging_config import get_logger, log_discord_command
from .utils import (
    EmbedBuilder,
    format_error_for_user,
    format_name_list,
    has_admin_permission,
    parse_player_names,
    validate_counts,
    validate_player_name,
)

logger = get_logger(__name__)


def admin_only(func):
    """Decorator that rejects the command privately unless the caller is a guild administrator."""
    @functools.wraps(func)
    async def wrapper(self, interaction: discord.Interaction, *args, **kwargs):
        if not has_admin_permission(interaction):
            logger.info(f"🚫 Rejected {func.__name__} from non-admin {interaction.user}")
            await interaction.response.send_message(MSG_ADMIN_ONLY, ephemeral=True)
            return
        return await func(self, interaction, *args, **kwargs)
    wrapper.admin_only = True
    return wrapper


class RecordCommands(commands.Cog):
    """Slash commands that record and show per-channel win/lose stats."""

    def __init__(self, bot, records):
        """
        Args:
            bot: The running bot
            records: RecordRepository (or anything with the same methods)
        """
        self.bot = bot
        self.records = records

    def get_channel_id(self, interaction: discord.Interaction) -> str:
        """Records are scoped per channel; ids are stored as text."""
        return str(interaction.channel_id)

    def _log_command(self, interaction: discord.Interaction, command: str):
        guild = interaction.guild.name if interaction.guild else None
        log_discord_command(command, str(interaction.user), guild, str(interaction.channel_id))

    async def _send_error(self, interaction: discord.Interaction, error: Exception, context: str):
        message = format_error_for_user(error, context)
        if not interaction.response.is_done():
            await interaction.response.send_message(message, ephemeral=True)
        else:
            await interaction.followup.send(message, ephemeral=True)

    @app_commands.command(name="record", description="勝敗を加算")
    @app_commands.describe(name="プレイヤー名", win="勝ち数", lose="負け数")
    async def record(self, interaction: discord.Interaction, name: str, win: int, lose: int):
        """Add wins and losses to a player."""
        self._log_command(interaction, "record")
        try:
            valid, error = validate_player_name(name)
            if valid:
                valid, error = validate_counts(win=win, lose=lose)
            if not valid:
                await interaction.response.send_message(error, ephemeral=True)
                return

            name = name.strip()
            self.records.increment(self.get_channel_id(interaction), name, win, lose, 0)
            await interaction.response.send_message(MSG_RECORD_ADDED.format(name=name, win=win, lose=lose))

        except Exception as e:
            logger.error(f"Error recording result for {name}: {e}")
            await self._send_error(interaction, e, "勝敗の加算に失敗しました")

    @app_commands.command(name="play", description="試合数を1加算（管理者専用）")
    @app_commands.describe(names="半角スペース区切りで複数指定")
    @admin_only
    async def play(self, interaction: discord.Interaction, names: str):
        """Add one game to each listed player."""
        self._log_command(interaction, "play")
        try:
            player_names = parse_player_names(names)
            if not player_names:
                await interaction.response.send_message("❌ プレイヤー名を指定してください", ephemeral=True)
                return
            for player_name in player_names:
                valid, error = validate_player_name(player_name)
                if not valid:
                    await interaction.response.send_message(error, ephemeral=True)
                    return

            channel_id = self.get_channel_id(interaction)
            for player_name in player_names:
                self.records.increment(channel_id, player_name, 0, 0, 1)

            # Reply content is capped at 2000 characters
            budget = MESSAGE_MAX_LENGTH - len(MSG_GAMES_ADDED.format(names=""))
            await interaction.response.send_message(
                MSG_GAMES_ADDED.format(names=format_name_list(player_names, budget))
            )

        except Exception as e:
            logger.error(f"Error adding games for {names}: {e}")
            await self._send_error(interaction, e, "試合数の加算に失敗しました")

    @app_commands.command(name="set", description="戦績を手動で設定")
    @app_commands.describe(name="プレイヤー名", win="勝ち数", lose="負け数", games="試合数")
    async def set_record(self, interaction: discord.Interaction, name: str, win: int, lose: int, games: int):
        """Overwrite a player's counters with absolute values."""
        self._log_command(interaction, "set")
        try:
            valid, error = validate_player_name(name)
            if valid:
                valid, error = validate_counts(win=win, lose=lose, games=games)
            if not valid:
                await interaction.response.send_message(error, ephemeral=True)
                return

            name = name.strip()
            self.records.upsert(self.get_channel_id(interaction), name, win, lose, games)
            await interaction.response.send_message(
                MSG_RECORD_SET.format(name=name, win=win, lose=lose, games=games)
            )

        except Exception as e:
            logger.error(f"Error setting record for {name}: {e}")
            await self._send_error(interaction, e, "戦績の設定に失敗しました")

    @app_commands.command(name="delete", description="プレイヤーの戦績を削除（管理者専用）")
    @app_commands.describe(name="プレイヤー名")
    @admin_only
    async def delete_record(self, interaction: discord.Interaction, name: str):
        """Remove a player's record from this channel."""
        self._log_command(interaction, "delete")
        try:
            valid, error = validate_player_name(name)
            if not valid:
                await interaction.response.send_message(error, ephemeral=True)
                return

            name = name.strip()
            if not self.records.delete(self.get_channel_id(interaction), name):
                logger.info(f"/delete: no record for {name} in channel {interaction.channel_id}")
            await interaction.response.send_message(MSG_RECORD_DELETED.format(name=name))

        except Exception as e:
            logger.error(f"Error deleting record for {name}: {e}")
            await self._send_error(interaction, e, "戦績の削除に失敗しました")

    @app_commands.command(name="stats", description="戦績を表示する")
    async def stats(self, interaction: discord.Interaction):
        """Show every player's record in this channel."""
        self._log_command(interaction, "stats")
        try:
            rows = self.records.list_all(self.get_channel_id(interaction))
            if not rows:
                await interaction.response.send_message(MSG_NO_DATA)
                return

            messages = EmbedBuilder.stats_messages(rows)
            await interaction.response.send_message(embeds=messages[0])
            for embeds in messages[1:]:
                await interaction.followup.send(embeds=embeds)

        except Exception as e:
            logger.error(f"Error retrieving stats: {e}")
            await self._send_error(interaction, e, "戦績の取得に失敗しました")

