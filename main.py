#!/usr/bin/env python3
"""
Battle Stats Bot - Main Entry Point

Discord bot that records wins, losses and games per player in each channel.
"""

import asyncio
import logging
import sys

from battle_stats import config
from battle_stats.bot import setup_bot


async def main() -> int:
    """Main entry point for the bot."""

    # Check if Discord token is set
    if not config.DISCORD_TOKEN:
        logging.error("❌ Please set DISCORD_BOT_TOKEN environment variable")
        return 1

    logging.info("📥 Starting Battle Stats Bot...")
    try:
        bot = await setup_bot()
    except Exception as e:
        logging.error(f"❌ 起動中にエラーが発生しました: {e}")
        return 1

    try:
        async with bot:
            await bot.start(config.DISCORD_TOKEN)
    except Exception as e:
        logging.error(f"❌ Bot crashed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logging.info("🛑 Bot stopped by user")
