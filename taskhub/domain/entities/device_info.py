from typing import Optional

from pydantic import BaseModel


class DeviceInfo(BaseModel):
    """Device descriptor attached to a session"""

    device_name: Optional[str] = None
    device_type: Optional[str] = None
    browser: Optional[str] = None
    ip_address: Optional[str] = None

    @classmethod
    def from_refresh_token(cls, token) -> "DeviceInfo":
        return cls(
            device_name=token.device_name,
            device_type=token.device_type,
            browser=token.browser,
            ip_address=token.ip_address,
        )
