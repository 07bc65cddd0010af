"""Automatic time detection for chat messages.

A message is parsed twice. The first pass is anchored at the current UTC
instant and only decides whether the text contains a date at all, so that
ordinary chatter never reaches Firestore. If it does, the guild's channel
policy and the author's registered timezone are loaded and the text is parsed
again anchored at "now" on the author's clock, which is what makes relative
expressions like "3pm tomorrow" land on the right absolute instant.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from tzcompanion.exceptions import InvalidZoneError, StorageError
from tzcompanion.modules.time_conversion import repo
from tzcompanion.modules.time_conversion.models import Annotation
from tzcompanion.modules.time_conversion.parsing import DateParser
from tzcompanion.modules.time_conversion.zones import load_zone

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

LOGGER = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DetectionPipeline:
    """Turns an inbound message into at most one :class:`Annotation`."""

    def __init__(
        self,
        firestore: FirestoreClient,
        parser: DateParser | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.firestore = firestore
        self.parser = parser or DateParser()
        self.clock = clock

    def is_channel_active(self, guild_id: int, channel_id: int) -> bool:
        config = repo.get_visibility_config(self.firestore, guild_id)
        if config is None:
            return True
        return config.is_active(channel_id)

    def user_zone_id(self, user_id: int) -> str | None:
        record = repo.get_user_timezone(self.firestore, user_id)
        return record.timezone if record else None

    def detect(
        self,
        *,
        guild_id: int | None,
        channel_id: int,
        author_id: int,
        text: str,
    ) -> Annotation | None:
        """Run both parse passes; ``None`` means nothing should be posted."""
        if guild_id is None:
            return None

        now = self.clock()
        if self.parser.parse(text, now) is None:
            return None

        try:
            if not self.is_channel_active(guild_id, channel_id):
                return None
            zone_id = self.user_zone_id(author_id)
        except StorageError:
            LOGGER.exception(
                "Storage lookup failed for guild=%s channel=%s", guild_id, channel_id
            )
            return None

        if zone_id is None:
            return None

        try:
            zone = load_zone(zone_id)
        except InvalidZoneError:
            LOGGER.error("User %s has an unloadable timezone %r", author_id, zone_id)
            return None

        result = self.parser.parse(text, now.astimezone(zone))
        if result is None:
            return None

        return Annotation(
            instant=result.instant.astimezone(zone),
            zone_id=zone_id,
            matched_text=result.matched_text,
        )
