"""
Session Use Cases
"""

from .session_use_cases import (
    ListActiveSessionsUseCase,
    PurgeExpiredSessionsUseCase,
    RevokeAllOtherSessionsUseCase,
    RevokeSessionUseCase,
)
from .dtos import PurgeSessionsResponse, RevokeSessionsResponse, SessionInfo

__all__ = [
    "ListActiveSessionsUseCase",
    "RevokeSessionUseCase",
    "RevokeAllOtherSessionsUseCase",
    "PurgeExpiredSessionsUseCase",
    "SessionInfo",
    "RevokeSessionsResponse",
    "PurgeSessionsResponse",
]
