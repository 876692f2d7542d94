"""
Device classification from the User-Agent header.

Pattern-based only: good enough to label sessions for a human
("desktop - Firefox"), not meant for analytics.
"""

import re
from typing import Optional

from taskhub.domain.entities import DeviceInfo, DeviceType

# Order matters: tablets often also advertise "Mobile", and Edge/Opera
# user agents also contain "Chrome" and "Safari".
_DEVICE_PATTERNS = (
    (DeviceType.tablet, re.compile(r"tablet|ipad", re.IGNORECASE)),
    (DeviceType.mobile, re.compile(r"mobile", re.IGNORECASE)),
    (DeviceType.desktop, re.compile(r"windows|macintosh|linux", re.IGNORECASE)),
)

_BROWSER_PATTERNS = (
    ("Edge", re.compile(r"edg(e|a|ios)?/", re.IGNORECASE)),
    ("Opera", re.compile(r"opr/|opera", re.IGNORECASE)),
    ("Firefox", re.compile(r"firefox|fxios", re.IGNORECASE)),
    ("Chrome", re.compile(r"chrome|crios", re.IGNORECASE)),
    ("Safari", re.compile(r"safari", re.IGNORECASE)),
)

UNKNOWN = "unknown"


def classify_device_type(user_agent: str) -> DeviceType:
    for device_type, pattern in _DEVICE_PATTERNS:
        if pattern.search(user_agent):
            return device_type
    return DeviceType.unknown


def classify_browser(user_agent: str) -> str:
    for browser, pattern in _BROWSER_PATTERNS:
        if pattern.search(user_agent):
            return browser
    return UNKNOWN


def extract_device_info(
    user_agent: Optional[str], ip_address: Optional[str] = None
) -> DeviceInfo:
    """Build the session device descriptor for a login request"""
    user_agent = user_agent or ""
    device_type = classify_device_type(user_agent).value
    browser = classify_browser(user_agent)
    return DeviceInfo(
        device_name=f"{device_type} - {browser}",
        device_type=device_type,
        browser=browser,
        ip_address=ip_address,
    )
