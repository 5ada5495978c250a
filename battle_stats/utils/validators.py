"""
Validation utility functions shared by the slash commands.
"""

from typing import Tuple

import discord

from ..constants import PLAYER_NAME_MAX_LENGTH


def validate_counts(**counts: int) -> Tuple[bool, str]:
    """Validate that every named counter is a non-negative integer.

    Returns:
        (is_valid, error_message) tuple
    """
    for label, value in counts.items():
        if value is None or value < 0:
            return False, f"❌ {label} は0以上の整数で指定してください"
    return True, ""


def validate_player_name(name: str) -> Tuple[bool, str]:
    """Validate a player name after stripping surrounding whitespace.

    Returns:
        (is_valid, error_message) tuple
    """
    name = (name or "").strip()
    if not name:
        return False, "❌ プレイヤー名を指定してください"
    if len(name) > PLAYER_NAME_MAX_LENGTH:
        return False, f"❌ プレイヤー名は{PLAYER_NAME_MAX_LENGTH}文字以内で指定してください"
    return True, ""


def has_admin_permission(interaction: discord.Interaction) -> bool:
    """Check if the user holds the Administrator permission in the current guild."""
    if interaction.guild is None:
        return False
    permissions = getattr(interaction.user, "guild_permissions", None)
    return bool(permissions and permissions.administrator)
