import pytest

from tzcompanion.modules.time_conversion.config import ChannelVisibilityConfig

CHANNEL = 111
OTHER = 222


def _mode_b(**kwargs) -> ChannelVisibilityConfig:
    return ChannelVisibilityConfig(guild_id=1, new_channels_disabled=True, **kwargs)


def test_default_config_is_active_everywhere():
    config = ChannelVisibilityConfig(guild_id=1)

    assert config.is_active(CHANNEL)
    assert config.is_active(OTHER)


def test_mode_a_disabled_channel_is_inactive():
    config = ChannelVisibilityConfig(guild_id=1, disabled_channels=[CHANNEL])

    assert not config.is_active(CHANNEL)
    assert config.is_active(OTHER)


def test_mode_b_only_enabled_channels_are_active():
    config = _mode_b(enabled_channels=[CHANNEL])

    assert config.is_active(CHANNEL)
    assert not config.is_active(OTHER)


@pytest.mark.parametrize(
    "config",
    [
        ChannelVisibilityConfig(guild_id=1),
        ChannelVisibilityConfig(guild_id=1, disabled_channels=[CHANNEL]),
        _mode_b(),
        _mode_b(enabled_channels=[CHANNEL]),
        _mode_b(disabled_channels=[CHANNEL]),
    ],
)
def test_toggle_channel_always_flips_state(config):
    before = config.is_active(CHANNEL)

    after = config.toggle_channel(CHANNEL)

    assert after is not before
    assert config.is_active(CHANNEL) is after
    assert not (
        CHANNEL in config.disabled_channels and CHANNEL in config.enabled_channels
    )


def test_toggle_channel_twice_restores_state_in_both_modes():
    for config in (ChannelVisibilityConfig(guild_id=1), _mode_b()):
        original = config.is_active(CHANNEL)
        config.toggle_channel(CHANNEL)
        config.toggle_channel(CHANNEL)
        assert config.is_active(CHANNEL) is original


def test_mode_a_toggle_disables_then_reenables():
    config = ChannelVisibilityConfig(guild_id=1)

    assert config.toggle_channel(CHANNEL) is False
    assert config.disabled_channels == [CHANNEL]

    assert config.toggle_channel(CHANNEL) is True
    assert config.disabled_channels == []
    assert config.enabled_channels == []


def test_mode_b_reenabling_a_disabled_channel_opts_it_in():
    config = _mode_b(enabled_channels=[CHANNEL])

    assert config.toggle_channel(CHANNEL) is False
    assert config.disabled_channels == [CHANNEL]
    assert config.enabled_channels == []

    assert config.toggle_channel(CHANNEL) is True
    assert config.disabled_channels == []
    assert config.enabled_channels == [CHANNEL]


def test_toggle_all_clears_the_irrelevant_list():
    config = ChannelVisibilityConfig(guild_id=1, disabled_channels=[CHANNEL])

    assert config.toggle_all() is True
    assert config.new_channels_disabled
    assert config.disabled_channels == []
    assert not config.is_active(CHANNEL)

    config.toggle_channel(OTHER)
    assert config.enabled_channels == [OTHER]

    assert config.toggle_all() is False
    assert not config.new_channels_disabled
    assert config.enabled_channels == []


def test_toggle_all_twice_restores_mode_with_empty_lists():
    config = ChannelVisibilityConfig(guild_id=1, disabled_channels=[CHANNEL, OTHER])

    config.toggle_all()
    config.toggle_all()

    assert config.new_channels_disabled is False
    assert config.disabled_channels == []
    assert config.enabled_channels == []


def test_firestore_round_trip_normalises_ids():
    config = ChannelVisibilityConfig.from_firestore(
        {
            "guild_id": "1",
            "new_channels_disabled": True,
            "enabled_channels": ["111"],
        }
    )

    assert config == _mode_b(enabled_channels=[CHANNEL])
    assert ChannelVisibilityConfig.from_firestore(config.to_firestore()) == config
