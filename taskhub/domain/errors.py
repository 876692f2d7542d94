"""
Domain Error Kinds

Typed failures returned by use cases through Result.
The API layer maps each kind to a transport status; use cases
never know about status codes.
"""

from dataclasses import dataclass

from taskhub.libs.result import Error


@dataclass(frozen=True)
class ValidationError(Error):
    """Malformed or conflicting input (duplicate email, bad code, short password)"""


@dataclass(frozen=True)
class AuthenticationError(Error):
    """Identity or credential failure (login, refresh, access token)"""


@dataclass(frozen=True)
class NotFoundError(Error):
    """Missing resource, or one the caller does not own"""


@dataclass(frozen=True)
class DeliveryError(Error):
    """Notifier could not deliver a one-time code"""
