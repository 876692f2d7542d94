"""
TaskHub Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class DeviceType(str, Enum):
    """Device class derived from the User-Agent header"""

    mobile = "mobile"
    tablet = "tablet"
    desktop = "desktop"
    unknown = "unknown"


class NotificationKind(str, Enum):
    """Kinds of one-time code emails"""

    verification = "verification"
    password_reset = "password_reset"
