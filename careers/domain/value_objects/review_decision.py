"""
ReviewDecision Value Object - Outcome of reviewing an application.

A decision is either Selected or Rejected and carries the message sent
to the applicant, which is also recorded as the review notes.
"""

from dataclasses import dataclass
from typing import ClassVar

from careers.domain.entities.application import ApplicationStatus


@dataclass(frozen=True)
class ReviewDecision:
    """Base class of the two terminal review outcomes."""

    message: str

    status: ClassVar[ApplicationStatus]

    def __post_init__(self) -> None:
        """Validate decision message."""
        if not self.message or not self.message.strip():
            raise ValueError("Review message is required")

    @classmethod
    def for_status(cls, status: ApplicationStatus, message: str) -> "ReviewDecision":
        """
        Build the decision variant matching a terminal status.

        Raises:
            ValueError: If status is not terminal or the message is empty.
        """
        variants = {
            ApplicationStatus.SELECTED: Selected,
            ApplicationStatus.REJECTED: Rejected,
        }
        if status not in variants:
            raise ValueError(f"No review decision for status '{status.value}'")
        return variants[status](message=message)


@dataclass(frozen=True)
class Selected(ReviewDecision):
    """The applicant is offered the position."""

    status: ClassVar[ApplicationStatus] = ApplicationStatus.SELECTED


@dataclass(frozen=True)
class Rejected(ReviewDecision):
    """The applicant is turned down."""

    status: ClassVar[ApplicationStatus] = ApplicationStatus.REJECTED
