from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from tzcompanion.modules.time_conversion.parsing import DateParser, _strip_match

NEW_YORK = ZoneInfo("America/New_York")


@pytest.mark.parametrize(
    ("matched", "expected"),
    [
        ("at 8pm", "8pm"),
        ("tomorrow.", "tomorrow"),
        ("around 7am?!", "7am"),
        ("Friday", "Friday"),
    ],
)
def test_strip_match(matched, expected):
    assert _strip_match(matched) == expected


@pytest.mark.parametrize("text", ["", "   "])
def test_blank_text_is_a_miss(text):
    assert DateParser().parse(text, datetime.now(NEW_YORK)) is None


def test_relative_time_resolves_on_reference_clock():
    reference = datetime(2026, 1, 15, 10, 0, tzinfo=NEW_YORK)

    result = DateParser().parse("see you at 3pm tomorrow", reference)

    assert result is not None
    local = result.instant.astimezone(NEW_YORK)
    assert (local.month, local.day, local.hour, local.minute) == (1, 16, 15, 0)
