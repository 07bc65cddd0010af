from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands

from tzcompanion.exceptions import StorageError, StorageUnavailableError
from tzcompanion.modules.time_conversion.detection import DetectionPipeline
from tzcompanion.modules.time_conversion.embeds import build_annotation_embed
from tzcompanion.modules.time_conversion.parsing import DateParser
from tzcompanion.modules.time_conversion.resolver import resolve_zones
from tzcompanion.modules.time_conversion.service import (
    register_timezone,
    toggle_time_conversion,
)
from tzcompanion.modules.time_conversion.views.zone_pages import ZonePagesView

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

LOGGER = logging.getLogger(__name__)

_MSG_DB_UNAVAILABLE = "Database not available."
_MSG_FAILED = "Something went wrong while saving that. Please try again."

# Common timezones to show in autocomplete before the user types anything
_COMMON_TIMEZONES = [
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Asia/Tokyo",
    "Asia/Kolkata",
    "Australia/Sydney",
]


async def timezone_autocomplete(  # NOSONAR - discord.py requires async
    interaction: discord.Interaction,
    current: str,
) -> list[app_commands.Choice[str]]:
    """Suggest zone ids for a country, code, or city fragment."""
    if not current.strip():
        return [app_commands.Choice(name=tz, value=tz) for tz in _COMMON_TIMEZONES]

    seen: set[str] = set()
    choices: list[app_commands.Choice[str]] = []
    for zone_id in resolve_zones(current.strip()):
        if zone_id in seen:
            continue
        seen.add(zone_id)
        choices.append(app_commands.Choice(name=zone_id, value=zone_id))
        if len(choices) >= 25:
            break
    return choices


class TimeConversionCog(commands.Cog):
    """Timezone registration and automatic time conversion."""

    def __init__(self, bot: commands.Bot, date_languages: list[str] | None = None) -> None:
        self.bot = bot
        self.parser = DateParser(date_languages or ["en"])

    async def cog_load(self) -> None:
        LOGGER.info("Time Conversion cog loaded")

    @property
    def firestore(self) -> FirestoreClient | None:
        """Access Firestore client from bot instance."""
        return getattr(self.bot, "tzcompanion_firestore", None)

    def _pipeline(self) -> DetectionPipeline | None:
        if self.firestore is None:
            return None
        return DetectionPipeline(self.firestore, parser=self.parser)

    async def cog_check(self, ctx: commands.Context) -> bool:  # NOSONAR
        if self.firestore is None:
            raise StorageUnavailableError()
        return True

    async def cog_command_error(
        self, ctx: commands.Context, error: commands.CommandError
    ) -> None:
        if isinstance(error, StorageUnavailableError):
            await ctx.send(_MSG_DB_UNAVAILABLE, ephemeral=True)
            return
        if isinstance(error, commands.MissingPermissions):
            await ctx.send(
                "You need **Manage Messages** and **Manage Server** to do that.",
                ephemeral=True,
            )
            return
        if isinstance(error, commands.NoPrivateMessage):
            await ctx.send("This command can only be used in a server.", ephemeral=True)
            return
        if isinstance(error, commands.MissingRequiredArgument):
            await ctx.send(f"Usage: `{ctx.prefix}{ctx.command} <{error.param.name}>`")
            return

        original = getattr(error, "original", error)
        if isinstance(original, StorageError):
            LOGGER.exception("Storage failure in %s", ctx.command, exc_info=original)
        else:
            LOGGER.exception("Unhandled error in %s", ctx.command, exc_info=original)
        await ctx.send(_MSG_FAILED, ephemeral=True)

    # --- Commands ---

    @commands.hybrid_command(
        name="settimezone",
        aliases=["setz", "tzset"],
        description="Sets your timezone, used for automatic time conversion. Give it your country.",
    )
    @app_commands.describe(timezone="Your country, country code, or city (e.g. Germany, JP, New York)")
    @app_commands.autocomplete(timezone=timezone_autocomplete)
    async def set_timezone(self, ctx: commands.Context, *, timezone: str) -> None:
        """Register the caller's timezone from free text."""
        outcome = register_timezone(self.firestore, ctx.author.id, timezone)

        if outcome.paginate:
            view = ZonePagesView(outcome.choices, owner_id=ctx.author.id)
            await ctx.send(embed=view.current_embed(), view=view)
            return

        await ctx.send(outcome.message)

    @commands.hybrid_command(
        name="toggletimeconversion",
        aliases=["toggletconv"],
        description=(
            "Toggles automatic time conversion in this channel, "
            "or in every channel with `all`"
        ),
    )
    @commands.guild_only()
    @commands.has_permissions(manage_messages=True, manage_guild=True)
    @app_commands.default_permissions(manage_messages=True, manage_guild=True)
    @app_commands.describe(flags="`all` to toggle every channel, empty for this channel")
    async def toggle_conversion(self, ctx: commands.Context, flags: str = "") -> None:
        """Flip the guild default or the current channel's override."""
        response = toggle_time_conversion(
            self.firestore, ctx.guild.id, ctx.channel.id, flags
        )
        await ctx.send(response)

    # --- Automatic detection ---

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot or message.guild is None or not message.content:
            return

        pipeline = self._pipeline()
        if pipeline is None:
            return

        annotation = await asyncio.to_thread(
            pipeline.detect,
            guild_id=message.guild.id,
            channel_id=message.channel.id,
            author_id=message.author.id,
            text=message.content,
        )
        if annotation is None:
            return

        LOGGER.debug(
            "Annotating message %s: matched=%r zone=%s",
            message.id,
            annotation.matched_text,
            annotation.zone_id,
        )
        try:
            await message.reply(
                embed=build_annotation_embed(annotation),
                mention_author=False,
            )
        except discord.Forbidden:
            LOGGER.debug("Missing permission to annotate in channel %s", message.channel.id)
        except discord.HTTPException:
            LOGGER.exception("Failed to send time annotation")

