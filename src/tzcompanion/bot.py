from __future__ import annotations

import inspect
import logging

import discord
from discord.ext import commands

from tzcompanion import __version__
from tzcompanion.config import Config

LOGGER = logging.getLogger(__name__)


async def _sync_commands(bot: commands.Bot, config: Config) -> None:
    """Sync app commands, avoiding global+guild duplicates in target guild mode."""
    target_guild_id = config.active_guild_id

    if target_guild_id is not None:
        guild = discord.Object(id=target_guild_id)
        bot.tree.copy_global_to(guild=guild)
        synced = await bot.tree.sync(guild=guild)
        LOGGER.info("Synced %d app commands to guild %s", len(synced), target_guild_id)

        bot.tree.clear_commands(guild=None)
        cleared = await bot.tree.sync()
        LOGGER.info("Cleared global app commands (remaining: %d)", len(cleared))
    else:
        synced = await bot.tree.sync()
        LOGGER.info("Synced %d global app commands", len(synced))


def create_bot(config: Config) -> commands.Bot:
    intents = discord.Intents.default()
    intents.message_content = True

    bot = commands.Bot(command_prefix=config.command_prefix, intents=intents)
    bot._commands_synced = False  # type: ignore[attr-defined]

    @bot.event
    async def on_ready() -> None:
        env_label = "TEST" if config.is_test else "PRODUCTION"
        LOGGER.info(
            "[%s] Logged in as %s (%s), version %s",
            env_label,
            bot.user,
            bot.user.id if bot.user else "?",
            __version__,
        )

        if bot._commands_synced:  # type: ignore[attr-defined]
            return

        try:
            await _sync_commands(bot, config)
            bot._commands_synced = True  # type: ignore[attr-defined]
        except discord.HTTPException:
            LOGGER.exception("Failed to sync app commands")

    @bot.event
    async def setup_hook() -> None:
        from tzcompanion.firestore_client import init_firestore

        firestore_client = init_firestore(config)
        if firestore_client is None:
            LOGGER.warning("Firebase disabled; timezone commands will be unavailable")
        bot.tzcompanion_firestore = firestore_client  # type: ignore[attr-defined]

        await bot.add_cog(_load_time_conversion_cog(bot, config))

    original_close = bot.close

    @bot.event
    async def close() -> None:
        firestore_client = getattr(bot, "tzcompanion_firestore", None)
        if firestore_client is not None:
            close_fn = getattr(firestore_client, "close", None)
            if callable(close_fn):
                result = close_fn()
                if inspect.isawaitable(result):
                    await result

        await original_close()

    return bot


def _load_time_conversion_cog(bot: commands.Bot, config: Config) -> commands.Cog:
    from tzcompanion.modules.time_conversion.cog import TimeConversionCog

    return TimeConversionCog(bot, date_languages=list(config.date_languages))
