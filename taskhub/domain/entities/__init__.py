"""
TaskHub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import DeviceType, NotificationKind

# Export all entities
from .user import User
from .refresh_token import RefreshToken
from .device_info import DeviceInfo

__all__ = [
    # Enums
    "DeviceType",
    "NotificationKind",
    # Entities
    "User",
    "RefreshToken",
    "DeviceInfo",
]
