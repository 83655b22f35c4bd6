"""
EmailMessage Value Object - A rendered status notification.
"""

from dataclasses import dataclass

from careers.domain.entities.application import ApplicationStatus


@dataclass(frozen=True)
class EmailMessage:
    """
    Immutable notification ready for dispatch.

    Attributes:
        recipient: Applicant email address
        subject: Subject line fixed per status
        body: Message text, possibly edited by the admin
        applicant_name: Used for logging and display
        status: Status the notification announces
    """

    recipient: str
    subject: str
    body: str
    applicant_name: str
    status: ApplicationStatus

    def __post_init__(self) -> None:
        """Validate message."""
        if not self.recipient:
            raise ValueError("Recipient is required")
        if not self.body.strip():
            raise ValueError("Message body is required")
