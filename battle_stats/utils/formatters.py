"""
Formatting utility functions.

Win rate and record lines are presentation only and never stored.
"""

import math
from typing import List, Union

from ..constants import ERROR_MSG_TRUNCATE_LENGTH
from ..types import PlayerRecord


def calculate_win_rate(win: int, lose: int) -> float:
    """Win percentage rounded half-up to one decimal; 0 when no decided games."""
    decided = win + lose
    if decided <= 0:
        return 0.0
    return math.floor(win / decided * 1000 + 0.5) / 10


def format_win_rate(rate: float) -> str:
    """Render a rate without a trailing '.0' (66.7, 50, 0)."""
    if float(rate).is_integer():
        return str(int(rate))
    return str(rate)


def format_record_line(record: PlayerRecord) -> str:
    """One stats line: wins, losses, games and win rate."""
    rate = format_win_rate(calculate_win_rate(record.win, record.lose))
    return f"🏆 {record.win} 勝 / 💀 {record.lose} 敗 / 🎮 {record.games} 試合 / 📈 勝率: {rate}%"


def parse_player_names(text: str) -> List[str]:
    """Split a whitespace-separated list of names, dropping empty tokens."""
    if not text:
        return []
    return text.split()


def format_name_list(names: List[str], max_length: int) -> str:
    """Join names with ", ", cutting the tail to " … ほかN人" when longer than max_length."""
    joined = ", ".join(names)
    if len(joined) <= max_length:
        return joined

    shown = []
    for name in names:
        rest = len(names) - len(shown) - 1
        candidate = ", ".join(shown + [name]) + f" … ほか{rest}人"
        if len(candidate) > max_length:
            break
        shown.append(name)
    return ", ".join(shown) + f" … ほか{len(names) - len(shown)}人"


def format_error_for_user(error: Union[Exception, str], context: str = "") -> str:
    """Convert exception to user-friendly message with technical details.

    Args:
        error: The exception that occurred
        context: Optional context about where the error occurred

    Returns:
        Formatted error message for Discord users
    """
    error_type = type(error).__name__
    error_msg = str(error)

    if len(error_msg) > ERROR_MSG_TRUNCATE_LENGTH:
        error_msg = error_msg[:ERROR_MSG_TRUNCATE_LENGTH] + "..."

    if context:
        return f"❌ {context}: {error_type} - {error_msg}"
    return f"❌ {error_type}: {error_msg}"
