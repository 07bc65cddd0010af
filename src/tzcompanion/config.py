from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

BotEnv = Literal["production", "test"]


def _parse_int_env(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer")


def _parse_list_env(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Config:
    bot_env: BotEnv
    discord_token: str | None
    guild_id: int | None
    test_guild_id: int | None
    command_prefix: str
    log_level: str
    firebase_enabled: bool
    firebase_credentials_path: str | None
    firebase_project_id: str | None
    date_languages: tuple[str, ...] = ("en",)

    @property
    def is_test(self) -> bool:
        """Whether the bot is running in test mode."""
        return self.bot_env == "test"

    @property
    def active_guild_id(self) -> int | None:
        """The guild ID the bot should target for command sync.

        In test mode, returns test_guild_id (falling back to guild_id).
        In production, returns guild_id.
        """
        if self.is_test:
            return self.test_guild_id or self.guild_id
        return self.guild_id


def _load_env_files(bot_env: BotEnv) -> None:
    """Load .env files; in test mode .env.test is read first and wins."""
    if bot_env == "test":
        test_env = Path.cwd() / ".env.test"
        if test_env.is_file():
            load_dotenv(test_env, override=False)
            LOGGER.info("Loaded environment from %s", test_env)
        else:
            LOGGER.warning("BOT_ENV=test but .env.test not found, using .env")
    load_dotenv(Path.cwd() / ".env", override=False)


def load_config() -> Config:
    bot_env_raw = os.getenv("BOT_ENV", "production").strip().lower()
    if bot_env_raw not in ("production", "test"):
        raise ValueError("BOT_ENV must be 'production' or 'test'")
    bot_env: BotEnv = bot_env_raw  # type: ignore[assignment]

    _load_env_files(bot_env)

    firebase_enabled_raw = os.getenv("FIREBASE_ENABLED", "false").strip().lower()

    config = Config(
        bot_env=bot_env,
        discord_token=os.getenv("DISCORD_TOKEN"),
        guild_id=_parse_int_env("GUILD_ID"),
        test_guild_id=_parse_int_env("TEST_GUILD_ID"),
        command_prefix=os.getenv("COMMAND_PREFIX", "!"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        firebase_enabled=firebase_enabled_raw in {"1", "true", "yes", "y", "on"},
        firebase_credentials_path=os.getenv("FIREBASE_CREDENTIALS_PATH") or None,
        firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
        date_languages=_parse_list_env("DATE_LANGUAGES", "en") or ("en",),
    )

    LOGGER.info("Bot environment: %s", bot_env)
    if config.is_test and config.test_guild_id:
        LOGGER.info("Test guild ID: %s", config.test_guild_id)
    return config
