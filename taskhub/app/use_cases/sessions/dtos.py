"""
Session Use Case DTOs
"""

from datetime import datetime

from pydantic import BaseModel

UNKNOWN_DEVICE = "Unknown device"
UNKNOWN = "unknown"


class SessionInfo(BaseModel):
    """One active session, as shown to its owner"""

    id: int
    device_name: str
    device_type: str
    browser: str
    ip_address: str
    created_at: datetime
    last_used_at: datetime

    @classmethod
    def from_refresh_token(cls, token) -> "SessionInfo":
        return cls(
            id=token.id,
            device_name=token.device_name or UNKNOWN_DEVICE,
            device_type=token.device_type or UNKNOWN,
            browser=token.browser or UNKNOWN,
            ip_address=token.ip_address or UNKNOWN,
            created_at=token.created_at,
            last_used_at=token.last_used_at or token.created_at,
        )


class RevokeSessionsResponse(BaseModel):
    """Count of sessions revoked by a bulk operation"""

    revoked_count: int


class PurgeSessionsResponse(BaseModel):
    """Count of dead sessions deleted by a sweep"""

    purged_count: int
