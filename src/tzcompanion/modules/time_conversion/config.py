from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ChannelVisibilityConfig:
    """Guild-level switch for automatic time conversion.

    With ``new_channels_disabled`` unset, conversion runs everywhere except
    ``disabled_channels``. With it set, conversion runs only in
    ``enabled_channels``. Each list holds the exceptions to the current
    default, and a channel id is never present in both.
    """

    guild_id: int
    new_channels_disabled: bool = False
    disabled_channels: list[int] = field(default_factory=list)
    enabled_channels: list[int] = field(default_factory=list)

    def is_active(self, channel_id: int) -> bool:
        if channel_id in self.disabled_channels:
            return False
        return not (
            self.new_channels_disabled and channel_id not in self.enabled_channels
        )

    def toggle_all(self) -> bool:
        """Flip the guild default. Returns True if conversion is now off by default."""
        if self.new_channels_disabled:
            self.new_channels_disabled = False
            self.enabled_channels = []
        else:
            self.new_channels_disabled = True
            self.disabled_channels = []
        return self.new_channels_disabled

    def toggle_channel(self, channel_id: int) -> bool:
        """Flip conversion for one channel. Returns the channel's new state."""
        if channel_id in self.disabled_channels:
            self.disabled_channels.remove(channel_id)
            if self.new_channels_disabled and channel_id not in self.enabled_channels:
                self.enabled_channels.append(channel_id)
        elif self.new_channels_disabled and channel_id not in self.enabled_channels:
            # Off only because of the guild default, so opt it in.
            self.enabled_channels.append(channel_id)
        else:
            self.disabled_channels.append(channel_id)
            if channel_id in self.enabled_channels:
                self.enabled_channels.remove(channel_id)
        return self.is_active(channel_id)

    def to_firestore(self) -> dict:
        return {
            "guild_id": self.guild_id,
            "new_channels_disabled": self.new_channels_disabled,
            "disabled_channels": list(self.disabled_channels),
            "enabled_channels": list(self.enabled_channels),
        }

    @classmethod
    def from_firestore(cls, data: dict) -> ChannelVisibilityConfig:
        return cls(
            guild_id=int(data["guild_id"]),
            new_channels_disabled=data.get("new_channels_disabled", False),
            disabled_channels=[int(c) for c in data.get("disabled_channels") or []],
            enabled_channels=[int(c) for c in data.get("enabled_channels") or []],
        )
