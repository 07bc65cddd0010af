"""Command logic for time conversion, kept free of Discord objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from tzcompanion.exceptions import InvalidZoneError
from tzcompanion.modules.time_conversion import repo
from tzcompanion.modules.time_conversion.config import ChannelVisibilityConfig
from tzcompanion.modules.time_conversion.embeds import (
    MSG_UNKNOWN_TIMEZONE,
    ZONES_PER_PAGE,
    format_zone_choices,
)
from tzcompanion.modules.time_conversion.models import UserTimezone
from tzcompanion.modules.time_conversion.resolver import resolve_zones
from tzcompanion.modules.time_conversion.zones import (
    describe_zone,
    load_zone,
    zone_abbreviation,
)

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

LOGGER = logging.getLogger(__name__)

RegistrationStatus = Literal["unknown", "saved", "ambiguous"]

_ALL_CHANNELS_FLAGS = ("all", "*")


@dataclass(frozen=True)
class RegistrationOutcome:
    """What ``settimezone`` should tell the user."""

    status: RegistrationStatus
    message: str = ""
    zone_id: str | None = None
    matches: list[str] = field(default_factory=list)
    choices: list[str] = field(default_factory=list)

    @property
    def paginate(self) -> bool:
        return self.status == "ambiguous" and len(self.matches) > ZONES_PER_PAGE


def register_timezone(
    firestore: FirestoreClient, user_id: int, query: str
) -> RegistrationOutcome:
    """Resolve ``query`` and store it for ``user_id`` when exactly one zone matches."""
    if not query.strip():
        return RegistrationOutcome(status="unknown", message=MSG_UNKNOWN_TIMEZONE)

    matches = resolve_zones(query.strip())
    if not matches:
        return RegistrationOutcome(status="unknown", message=MSG_UNKNOWN_TIMEZONE)

    if len(matches) > 1:
        choices = [d for d in (describe_zone(z) for z in matches) if d]
        if not choices:
            return RegistrationOutcome(status="unknown", message=MSG_UNKNOWN_TIMEZONE)
        return RegistrationOutcome(
            status="ambiguous",
            message=format_zone_choices(choices),
            matches=matches,
            choices=choices,
        )

    zone_id = matches[0]
    try:
        zone = load_zone(zone_id)
    except InvalidZoneError:
        LOGGER.warning("Resolver returned unloadable zone %r", zone_id)
        return RegistrationOutcome(status="unknown", message="Unknown timezone")

    repo.save_user_timezone(firestore, UserTimezone(user_id=user_id, timezone=zone_id))
    LOGGER.info("User %s set timezone to %s", user_id, zone_id)
    return RegistrationOutcome(
        status="saved",
        message=f"Set your timezone to `{zone_id}`: {zone_abbreviation(zone)}",
        zone_id=zone_id,
        matches=matches,
    )


def toggle_time_conversion(
    firestore: FirestoreClient, guild_id: int, channel_id: int, flags: str = ""
) -> str:
    """Flip conversion for a channel, or for the whole guild with ``all``/``*``."""
    config = repo.get_visibility_config(firestore, guild_id)
    insert = config is None
    if config is None:
        config = ChannelVisibilityConfig(guild_id=guild_id)

    if flags.strip().lower() in _ALL_CHANNELS_FLAGS:
        if config.toggle_all():
            response = (
                "Disabled time conversion in all channels, "
                "including newly created channels."
            )
        else:
            response = "Enabled time conversion in all channels."
    else:
        status = "on" if config.toggle_channel(channel_id) else "off"
        response = f"Automatic time conversion in this channel toggled `{status}`"

    if insert:
        repo.insert_visibility_config(firestore, config)
    else:
        repo.update_visibility_config(firestore, config)

    LOGGER.info(
        "Time conversion toggled in guild=%s channel=%s flags=%r",
        guild_id,
        channel_id,
        flags,
    )
    return response
