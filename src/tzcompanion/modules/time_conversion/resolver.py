"""Free-text to zone id resolution over the country directory."""

from __future__ import annotations

from collections.abc import Iterable

from tzcompanion.modules.time_conversion.zones import ZONE_DIRECTORY, ZoneEntry


def resolve_zones(
    query: str,
    directory: Iterable[ZoneEntry] = ZONE_DIRECTORY,
) -> list[str]:
    """Resolve a country name, country code, or city fragment to zone ids.

    A query that is part of a country name, or that equals a country code,
    selects every zone of that country. Any other entry contributes the zones
    whose id contains the query, with spaces read as underscores so that
    ``"new york"`` finds ``America/New_York``.

    Results follow directory order and are not deduplicated. A blank query
    matches every zone; callers are expected to reject it first.
    """
    entries = tuple(directory)
    lower_query = query.lower()
    underscored = lower_query.replace(" ", "_")

    country_codes = {
        entry.country_code
        for entry in entries
        if lower_query in entry.country_name.lower()
    }

    matches: list[str] = []
    for entry in entries:
        if entry.country_code in country_codes or entry.country_code.lower() == lower_query:
            matches.extend(entry.zone_ids)
            continue

        for zone_id in entry.zone_ids:
            if underscored in zone_id.lower():
                matches.append(zone_id)

    return matches
