# Time Conversion Module
# Lets members register a timezone, then annotates messages that mention a
# date or time with that moment rendered on the author's clock.

from tzcompanion.modules.time_conversion.config import ChannelVisibilityConfig
from tzcompanion.modules.time_conversion.models import Annotation, UserTimezone
from tzcompanion.modules.time_conversion.resolver import resolve_zones

__all__ = [
    "Annotation",
    "ChannelVisibilityConfig",
    "UserTimezone",
    "resolve_zones",
]
