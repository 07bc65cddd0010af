from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the bot process."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=_FORMAT, force=True)
    # discord.py logs every gateway/HTTP exchange at DEBUG
    logging.getLogger("discord.http").setLevel(max(numeric_level, logging.INFO))
    logging.getLogger("discord.gateway").setLevel(max(numeric_level, logging.INFO))
