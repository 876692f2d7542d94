"""
User Use Cases
"""

from .get_user_use_case import GetUserUseCase

__all__ = [
    "GetUserUseCase",
]
