"""Utility modules for the Battle Stats Bot."""

from .embed_builder import EmbedBuilder
from .formatters import calculate_win_rate, format_win_rate, format_record_line, format_name_list, parse_player_names, format_error_for_user
from .validators import validate_counts, validate_player_name, has_admin_permission

__all__ = [
    "EmbedBuilder",
    "calculate_win_rate",
    "format_win_rate",
    "format_record_line",
    "format_name_list",
    "parse_player_names",
    "format_error_for_user",
    "validate_counts",
    "validate_player_name",
    "has_admin_permission",
]
