from __future__ import annotations

from typing import TYPE_CHECKING

from google.api_core import exceptions as gexc

from tzcompanion.exceptions import StorageError
from tzcompanion.modules.time_conversion.config import ChannelVisibilityConfig
from tzcompanion.modules.time_conversion.models import UserTimezone

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient


# Collection names
CONFIGS_COLLECTION = "timezone_guild_configs"
USER_TIMEZONES_COLLECTION = "user_timezones"


def _guild_doc_id(guild_id: int) -> str:
    """Generate document ID for guild-level documents."""
    return str(guild_id)


def _user_doc_id(user_id: int) -> str:
    """Generate document ID for user timezone documents."""
    return str(user_id)


# --- Channel visibility CRUD ---


def get_visibility_config(
    firestore: FirestoreClient, guild_id: int
) -> ChannelVisibilityConfig | None:
    """Get the channel visibility configuration for a guild, if one was stored."""
    try:
        doc = (
            firestore.collection(CONFIGS_COLLECTION)
            .document(_guild_doc_id(guild_id))
            .get()
        )
    except gexc.GoogleAPIError as exc:
        raise StorageError(f"Failed to load config for guild {guild_id}") from exc
    if not doc.exists:
        return None
    return ChannelVisibilityConfig.from_firestore(doc.to_dict())


def insert_visibility_config(
    firestore: FirestoreClient, config: ChannelVisibilityConfig
) -> None:
    """Create the first configuration document for a guild."""
    try:
        firestore.collection(CONFIGS_COLLECTION).document(
            _guild_doc_id(config.guild_id)
        ).create(config.to_firestore())
    except gexc.GoogleAPIError as exc:
        raise StorageError(
            f"Failed to insert config for guild {config.guild_id}"
        ) from exc


def update_visibility_config(
    firestore: FirestoreClient, config: ChannelVisibilityConfig
) -> None:
    """Overwrite a guild's configuration document with the full record."""
    try:
        firestore.collection(CONFIGS_COLLECTION).document(
            _guild_doc_id(config.guild_id)
        ).set(config.to_firestore())
    except gexc.GoogleAPIError as exc:
        raise StorageError(
            f"Failed to update config for guild {config.guild_id}"
        ) from exc


# --- User Timezone CRUD ---


def get_user_timezone(firestore: FirestoreClient, user_id: int) -> UserTimezone | None:
    """Get a user's saved timezone."""
    try:
        doc = (
            firestore.collection(USER_TIMEZONES_COLLECTION)
            .document(_user_doc_id(user_id))
            .get()
        )
    except gexc.GoogleAPIError as exc:
        raise StorageError(f"Failed to load timezone for user {user_id}") from exc
    if not doc.exists:
        return None
    return UserTimezone.from_firestore(doc.to_dict())


def save_user_timezone(firestore: FirestoreClient, user_tz: UserTimezone) -> None:
    """Save or replace a user's timezone."""
    try:
        firestore.collection(USER_TIMEZONES_COLLECTION).document(
            _user_doc_id(user_tz.user_id)
        ).set(user_tz.to_firestore())
    except gexc.GoogleAPIError as exc:
        raise StorageError(
            f"Failed to save timezone for user {user_tz.user_id}"
        ) from exc
