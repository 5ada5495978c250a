import discord
from discord.ext import commands

from . import config
from .database import DatabaseManager
from .keepalive import start_keepalive
from .logging_config import get_logger, setup_logging

# Setup centralized logging
setup_logging()
logger = get_logger(__name__)


class StatsBot(commands.Bot):
    """
    Discord bot that keeps per-channel win/lose/games records.

    Slash commands live in the RecordCommands cog; this class owns the
    database, command sync and the liveness endpoint.
    """

    def __init__(self, db: DatabaseManager = None):
        # Slash commands only; guild membership is all the bot needs
        intents = discord.Intents.default()

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            application_id=config.APPLICATION_ID,
        )

        self.db = db if db is not None else DatabaseManager()
        self.keepalive_runner = None

    async def setup_hook(self) -> None:
        """Called once before connecting to the gateway."""
        if config.KEEPALIVE_ENABLED:
            self.keepalive_runner = await start_keepalive(config.PORT)

    async def sync_commands(self) -> int:
        """Register slash commands to GUILD_ID if set, globally otherwise."""
        if config.GUILD_ID:
            guild = discord.Object(id=config.GUILD_ID)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            logger.info(f"📥 Registered {len(synced)} slash command(s) to guild {config.GUILD_ID}")
        else:
            synced = await self.tree.sync()
            logger.info(f"📥 Registered {len(synced)} global slash command(s)")
        return len(synced)

    async def on_ready(self) -> None:
        """Event handler called when bot is ready."""
        logger.info(f'✅ Bot起動完了: {self.user}')
        logger.info(f'Bot is in {len(self.guilds)} guilds')
        logger.info(f'🔧 Bot Version: {config.BOT_VERSION}')

        try:
            await self.sync_commands()
        except Exception as e:
            logger.error(f"❌ Failed to sync slash commands: {e}")

        await self.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.watching,
                name="戦績 📊"
            )
        )

    async def close(self) -> None:
        """Stop the liveness server and release database connections on shutdown."""
        if self.keepalive_runner is not None:
            await self.keepalive_runner.cleanup()
            self.keepalive_runner = None
        await super().close()
        self.db.close()


async def setup_bot(db: DatabaseManager = None) -> StatsBot:
    """Create the bot and load the record commands cog."""
    bot = StatsBot(db=db)

    from .commands import RecordCommands
    await bot.add_cog(RecordCommands(bot, bot.db.records))

    return bot
