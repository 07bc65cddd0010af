from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserTimezone:
    """A user's registered timezone, keyed on the Discord user id."""

    user_id: int
    timezone: str

    def to_firestore(self) -> dict:
        return {
            "user_id": self.user_id,
            "timezone": self.timezone,
        }

    @classmethod
    def from_firestore(cls, data: dict) -> UserTimezone:
        return cls(
            user_id=int(data["user_id"]),
            timezone=data["timezone"],
        )


@dataclass(frozen=True)
class Annotation:
    """A detected time expression resolved in the author's timezone."""

    instant: datetime
    zone_id: str
    matched_text: str

    @property
    def local_label(self) -> str:
        """Wall-clock rendering such as ``15:04 EDT``."""
        return self.instant.strftime("%H:%M %Z")
