from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

import dateparser
from dateparser.search import search_dates

LOGGER = logging.getLogger(__name__)

# Punctuation that can trail time expressions and confuse the parser
_TRAILING_PUNCT = "?!.,;:)"

# Prepositions that search_dates keeps at the front of a match
_LEADING_PREPOSITIONS = ("at ", "by ", "from ", "until ", "till ", "around ", "on ")


@dataclass(frozen=True)
class ParsedDate:
    """The first date/time expression found in a text."""

    instant: datetime
    matched_text: str


def _strip_match(matched_text: str) -> str:
    clean = matched_text.strip().rstrip(_TRAILING_PUNCT)
    lowered = clean.lower()
    for prep in _LEADING_PREPOSITIONS:
        if lowered.startswith(prep):
            return clean[len(prep) :]
    return clean


class DateParser:
    """Finds natural language dates in free text using ``dateparser``.

    Relative expressions ("3pm", "tomorrow") resolve against the reference
    instant handed to :meth:`parse`, in that instant's timezone.
    """

    def __init__(self, languages: Sequence[str] = ("en",)) -> None:
        # Pinning languages avoids false positives like "do" -> Portuguese "domingo"
        self.languages = list(languages)

    def _settings(self, reference: datetime) -> dict:
        tzinfo = reference.tzinfo
        tz_name = getattr(tzinfo, "key", None) or (reference.tzname() or "UTC")
        return {
            "PREFER_DATES_FROM": "future",
            "RELATIVE_BASE": reference.replace(tzinfo=None),
            "TIMEZONE": tz_name,
            "RETURN_AS_TIMEZONE_AWARE": True,
        }

    def parse(self, text: str, reference: datetime) -> ParsedDate | None:
        """Return the first expression in ``text`` anchored at ``reference``, if any."""
        if not text or not text.strip():
            return None

        settings = self._settings(reference)
        try:
            results = search_dates(text, languages=self.languages, settings=settings)
        except (ValueError, OverflowError):
            LOGGER.debug("search_dates failed for input_len=%d", len(text), exc_info=True)
            return None

        for matched_text, _ in results or []:
            clean = _strip_match(matched_text)
            if not clean:
                continue

            # search_dates reads "7am" as July; parse() on the fragment gets it right
            try:
                reparsed = dateparser.parse(
                    clean, languages=self.languages, settings=settings
                )
            except (ValueError, OverflowError):
                continue
            if reparsed is None:
                continue
            if reparsed.tzinfo is None:
                reparsed = reparsed.replace(tzinfo=reference.tzinfo)
            return ParsedDate(instant=reparsed, matched_text=clean)

        return None
