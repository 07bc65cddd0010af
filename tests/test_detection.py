import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from tzcompanion.modules.time_conversion import repo
from tzcompanion.modules.time_conversion.config import ChannelVisibilityConfig
from tzcompanion.modules.time_conversion.detection import DetectionPipeline
from tzcompanion.modules.time_conversion.models import UserTimezone

GUILD = 7
CHANNEL = 100
AUTHOR = 42
NOW = datetime(2026, 1, 15, 18, 30, tzinfo=timezone.utc)
NEW_YORK = ZoneInfo("America/New_York")


def _pipeline(firestore, parser) -> DetectionPipeline:
    return DetectionPipeline(firestore, parser=parser, clock=lambda: NOW)


def _detect(pipeline, text="see you at 3pm tomorrow", guild_id=GUILD):
    return pipeline.detect(
        guild_id=guild_id, channel_id=CHANNEL, author_id=AUTHOR, text=text
    )


def _register(firestore, zone_id="America/New_York"):
    repo.save_user_timezone(firestore, UserTimezone(user_id=AUTHOR, timezone=zone_id))


def test_direct_messages_are_ignored(firestore, fake_parser):
    _register(firestore)

    assert _detect(_pipeline(firestore, fake_parser), guild_id=None) is None
    assert fake_parser.references == []


def test_parse_miss_never_touches_storage(broken_firestore, fake_parser):
    assert _detect(_pipeline(broken_firestore, fake_parser), text="hello there") is None
    assert len(fake_parser.references) == 1


def test_end_to_end_annotation_in_author_timezone(firestore, fake_parser):
    _register(firestore)

    annotation = _detect(_pipeline(firestore, fake_parser))

    assert annotation is not None
    assert annotation.zone_id == "America/New_York"
    assert annotation.instant == datetime(2026, 1, 16, 15, 0, tzinfo=NEW_YORK)
    assert annotation.local_label == "15:00 EST"

    first, second = fake_parser.references
    assert first == NOW and first.tzinfo is timezone.utc
    assert second == NOW
    assert second.tzinfo == NEW_YORK


def test_inactive_channel_gets_no_annotation(firestore, fake_parser):
    _register(firestore)
    repo.insert_visibility_config(
        firestore, ChannelVisibilityConfig(guild_id=GUILD, disabled_channels=[CHANNEL])
    )

    assert _detect(_pipeline(firestore, fake_parser)) is None
    assert len(fake_parser.references) == 1


def test_guild_disabled_by_default_blocks_unlisted_channels(firestore, fake_parser):
    _register(firestore)
    config = ChannelVisibilityConfig(guild_id=GUILD)
    config.toggle_all()
    repo.insert_visibility_config(firestore, config)
    pipeline = _pipeline(firestore, fake_parser)

    assert _detect(pipeline) is None

    config.toggle_channel(CHANNEL)
    repo.update_visibility_config(firestore, config)

    assert _detect(pipeline) is not None


def test_author_without_timezone_gets_no_annotation(firestore, fake_parser):
    assert _detect(_pipeline(firestore, fake_parser)) is None
    assert len(fake_parser.references) == 1


def test_second_pass_miss_does_not_fall_back(firestore, fake_parser):
    _register(firestore)
    fake_parser.miss_on_call = 2

    assert _detect(_pipeline(firestore, fake_parser)) is None


def test_unloadable_stored_zone_is_skipped(firestore, fake_parser, caplog):
    _register(firestore, zone_id="Not/AZone")

    with caplog.at_level(logging.ERROR):
        assert _detect(_pipeline(firestore, fake_parser)) is None

    assert "Not/AZone" in caplog.text


def test_storage_failure_is_logged_not_raised(broken_firestore, fake_parser, caplog):
    with caplog.at_level(logging.ERROR):
        assert _detect(_pipeline(broken_firestore, fake_parser)) is None

    assert "Storage lookup failed" in caplog.text


def test_real_parser_anchors_relative_time_to_author_clock(firestore):
    _register(firestore)
    pipeline = DetectionPipeline(
        firestore, clock=lambda: datetime(2026, 1, 15, 15, 0, tzinfo=timezone.utc)
    )

    annotation = _detect(pipeline)

    assert annotation is not None
    assert annotation.instant == datetime(2026, 1, 16, 15, 0, tzinfo=NEW_YORK)
    assert annotation.local_label == "15:00 EST"
