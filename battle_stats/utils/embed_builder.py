"""
Centralized Discord embed creation.
"""

from typing import List, Sequence

import discord

from ..constants import (
    COLOR_STATS,
    EMBED_MAX_FIELDS,
    MESSAGE_MAX_EMBED_CHARS,
    MESSAGE_MAX_EMBEDS,
    STATS_TITLE,
)
from ..types import PlayerRecord
from .formatters import format_record_line

# Room left on every page for the " (n/m)" title suffix
PAGE_TITLE_ROOM = len(STATS_TITLE) + len(" (999/999)")


class EmbedBuilder:
    """Static factory methods for creating consistently-styled Discord embeds."""

    @staticmethod
    def stats_messages(records: Sequence[PlayerRecord]) -> List[List[discord.Embed]]:
        """Build the stats listing, one field per player, grouped into messages.

        Each inner list fits in a single Discord message: at most 10 embeds
        and 6000 embed characters. The first goes out as the reply, the rest
        as followups.
        """
        pages = []
        page, page_chars = [], 0
        for record in records:
            field = (f"👤 {record.player_name}", format_record_line(record))
            size = len(field[0]) + len(field[1])
            if page and (
                len(page) == EMBED_MAX_FIELDS
                or page_chars + size > MESSAGE_MAX_EMBED_CHARS - PAGE_TITLE_ROOM
            ):
                pages.append(page)
                page, page_chars = [], 0
            page.append(field)
            page_chars += size
        if page:
            pages.append(page)

        embeds = []
        for page_number, fields in enumerate(pages, 1):
            title = STATS_TITLE
            if len(pages) > 1:
                title = f"{STATS_TITLE} ({page_number}/{len(pages)})"

            embed = discord.Embed(title=title, color=COLOR_STATS)
            for name, value in fields:
                embed.add_field(name=name, value=value, inline=False)
            embeds.append(embed)

        messages = []
        current, current_chars = [], 0
        for embed in embeds:
            if current and (
                len(current) == MESSAGE_MAX_EMBEDS
                or current_chars + len(embed) > MESSAGE_MAX_EMBED_CHARS
            ):
                messages.append(current)
                current, current_chars = [], 0
            current.append(embed)
            current_chars += len(embed)
        if current:
            messages.append(current)

        return messages
