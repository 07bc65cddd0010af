"""Shared exceptions for tzcompanion."""

from __future__ import annotations

from discord.ext import commands


class TzCompanionError(Exception):
    """Base class for errors raised by tzcompanion."""


class InvalidZoneError(TzCompanionError):
    """Raised when a zone id cannot be loaded from the timezone database."""

    def __init__(self, zone_id: str) -> None:
        self.zone_id = zone_id
        super().__init__(f"Unknown timezone: {zone_id!r}")


class StorageError(TzCompanionError):
    """Raised when a Firestore read or write fails."""


class StorageUnavailableError(commands.CheckFailure):
    """Raised by command checks when Firestore is disabled.

    The command error handler turns this into a short reply instead of
    logging a traceback.
    """

    def __init__(self) -> None:
        super().__init__("Database not available.")
