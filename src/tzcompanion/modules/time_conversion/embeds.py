"""Embed and message builders for time conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import discord

if TYPE_CHECKING:
    from tzcompanion.modules.time_conversion.models import Annotation

ZONES_PER_PAGE = 10

MSG_UNKNOWN_TIMEZONE = (
    "Unknown timezone, enter a country or timezone (not an abbreviation like CET). "
    "There's a timezone picker here: <http://kevalbhatt.github.io/timezone-picker> "
    "you can use, enter the `Area/City` result."
)


def build_annotation_embed(annotation: Annotation) -> discord.Embed:
    """Embed posted under a message that mentioned a time."""
    unix_ts = int(annotation.instant.timestamp())
    embed = discord.Embed(
        description=f"<t:{unix_ts}:F> (<t:{unix_ts}:R>)",
        color=discord.Color.blurple(),
        timestamp=annotation.instant,
    )
    embed.set_footer(text=f"Above time ({annotation.local_label}) in your local time")
    return embed


def format_zone_choices(descriptions: list[str]) -> str:
    """Inline reply for a handful of ambiguous matches."""
    lines = "\n".join(descriptions)
    return f"More than 1 result, reuse the command with one of the following:\n{lines}"


def build_zone_page_embed(
    descriptions: list[str],
    page: int,
    page_count: int,
) -> discord.Embed:
    """One page of a long list of ambiguous matches."""
    embed = discord.Embed(
        description=(
            "Please redo the command with one of the following:\n"
            + "\n".join(descriptions)
        ),
        color=discord.Color.blurple(),
    )
    embed.set_footer(text=f"Page {page}/{page_count}")
    return embed
