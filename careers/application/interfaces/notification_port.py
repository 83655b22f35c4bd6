"""
Notification Port - Abstract interface for applicant notifications.
"""

from abc import ABC, abstractmethod


class NotificationPort(ABC):
    """Abstract interface for sending status emails."""

    @abstractmethod
    async def send(self, recipient: str, subject: str, body: str) -> bool:
        """Send a message. Returns True on success, False on failure."""
        pass
