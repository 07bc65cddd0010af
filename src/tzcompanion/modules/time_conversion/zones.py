"""Static country to timezone directory and zone loading helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzcompanion.exceptions import InvalidZoneError
from tzcompanion.modules.time_conversion.zone_data import ZONE_TABLE


@dataclass(frozen=True)
class ZoneEntry:
    """A country and the canonical zone ids located in it."""

    country_name: str
    country_code: str
    zone_ids: tuple[str, ...]


ZONE_DIRECTORY: tuple[ZoneEntry, ...] = tuple(
    ZoneEntry(country_name=name, country_code=code, zone_ids=zone_ids)
    for code, name, zone_ids in ZONE_TABLE
)


def load_zone(zone_id: str) -> ZoneInfo:
    """Load a zone from the timezone database.

    Raises:
        InvalidZoneError: If ``zone_id`` is not a loadable IANA key.
    """
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidZoneError(zone_id) from exc


def zone_abbreviation(zone: ZoneInfo, now: datetime | None = None) -> str:
    """Return the abbreviation in effect for ``zone`` at ``now`` (default: current time)."""
    moment = now.astimezone(zone) if now is not None else datetime.now(zone)
    return moment.tzname() or zone.key


def describe_zone(zone_id: str, now: datetime | None = None) -> str:
    """Format a zone as ``"`Area/City`: ABBR"``, or ``""`` if it cannot be loaded."""
    try:
        zone = load_zone(zone_id)
    except InvalidZoneError:
        return ""
    return f"`{zone_id}`: {zone_abbreviation(zone, now)}"
