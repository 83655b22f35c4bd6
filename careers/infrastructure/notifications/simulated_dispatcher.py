"""
Simulated Email Dispatcher - Stands in for a real email provider.

Waits a fixed delay, logs the message and reports success. Swap in any
NotificationPort implementation to deliver real mail.
"""

import asyncio
import logging

from careers.application.interfaces import NotificationPort


logger = logging.getLogger(__name__)


class SimulatedEmailDispatcher(NotificationPort):
    """
    Notification adapter that never leaves the process.

    Features:
    - Fixed simulated delivery delay
    - Message logged at INFO level
    - Keeps a record of sent messages for inspection
    """

    def __init__(self, sender: str, delay_seconds: float = 2.0) -> None:
        """
        Initialize the dispatcher.

        Args:
            sender: From address recorded with each message.
            delay_seconds: Simulated delivery time.
        """
        self.sender = sender
        self.delay_seconds = delay_seconds
        self.sent: list[dict] = []

    async def send(self, recipient: str, subject: str, body: str) -> bool:
        """Simulate sending a message. Always succeeds."""
        await asyncio.sleep(self.delay_seconds)

        self.sent.append({
            "from": self.sender,
            "to": recipient,
            "subject": subject,
            "body": body,
        })
        logger.info(f"Email sent from {self.sender} to {recipient}: {subject}")
        logger.debug(f"Email body:\n{body}")
        return True
