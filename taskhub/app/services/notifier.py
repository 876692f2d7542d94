from abc import ABC, abstractmethod
from typing import Optional

from taskhub.domain.entities import NotificationKind


class NotificationError(Exception):
    """Raised by a Notifier when a message could not be delivered"""


class Notifier(ABC):
    """Delivers one-time codes to users - application layer"""

    @abstractmethod
    async def send(
        self,
        recipient: str,
        kind: NotificationKind,
        code: str,
        name: Optional[str] = None,
    ) -> None:
        """
        Deliver a one-time code.

        Args:
            recipient: Email address
            kind: Which message template to use
            code: The 6-digit one-time code
            name: Optional display name for the greeting

        Raises:
            NotificationError: If delivery failed
        """
        pass
