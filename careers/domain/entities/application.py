"""
JobApplication Entity - One candidate submission for the posting.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, TYPE_CHECKING

from careers.domain.exceptions import InvalidTransitionError

if TYPE_CHECKING:
    from careers.domain.value_objects import ReviewDecision


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ApplicationStatus(Enum):
    """Review status of an application."""

    PENDING = "pending"
    SELECTED = "selected"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Selected and rejected applications cannot be reviewed again."""
        return self is not ApplicationStatus.PENDING

    @classmethod
    def parse(cls, value: Optional[str]) -> "ApplicationStatus":
        """Parse a stored status, treating a missing value as pending."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.PENDING
        return cls(value)


@dataclass
class JobApplication:
    """
    Application entity representing one submission to the job posting.

    Corresponds to the `job_applications` table in the database schema.

    Attributes:
        name: Applicant full name
        email: Contact email (recipient of review notifications)
        mobile: Contact phone number
        java_experience: Experience bracket (see JAVA_EXPERIENCE_OPTIONS)
        graduation_year: Graduation year as entered
        current_location: Where the applicant lives now
        willing_to_relocate: Relocation confirmation, always True once stored
        id: Store-assigned identifier (None until persisted)
        applied_at: Store-assigned submission timestamp
        status: Review status
        reviewed_at: When the application left pending
        review_notes: Message sent to the applicant at review time
    """

    name: str
    email: str
    mobile: str
    java_experience: str
    graduation_year: str
    current_location: str
    preferred_location: str = ""
    notice_period: str = ""
    previous_company: str = ""
    relevant_skills: str = ""
    additional_comments: str = ""
    willing_to_relocate: bool = True
    id: Optional[str] = None
    applied_at: Optional[datetime] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize status and timestamps loaded as strings."""
        if not isinstance(self.status, ApplicationStatus):
            self.status = ApplicationStatus.parse(self.status)
        if isinstance(self.applied_at, str):
            self.applied_at = datetime.fromisoformat(self.applied_at)
        if isinstance(self.reviewed_at, str):
            self.reviewed_at = datetime.fromisoformat(self.reviewed_at)

    @property
    def is_pending(self) -> bool:
        """Check if the application still awaits review."""
        return self.status == ApplicationStatus.PENDING

    @property
    def is_reviewed(self) -> bool:
        """Check if a terminal status has been recorded."""
        return self.status.is_terminal

    def can_transition_to(self, status: ApplicationStatus) -> bool:
        """Only pending applications may move, and only to a terminal status."""
        return self.is_pending and status.is_terminal

    def reviewed(self, decision: "ReviewDecision", reviewed_at: datetime) -> "JobApplication":
        """
        Return a copy carrying the outcome of a review.

        Status, review time and notes are always set together.

        Raises:
            InvalidTransitionError: If the application is not pending.
        """
        if not self.can_transition_to(decision.status):
            raise InvalidTransitionError(self.id, self.status.value, decision.status.value)
        return replace(
            self,
            status=decision.status,
            reviewed_at=reviewed_at,
            review_notes=decision.message,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for database storage."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "mobile": self.mobile,
            "java_experience": self.java_experience,
            "graduation_year": self.graduation_year,
            "current_location": self.current_location,
            "preferred_location": self.preferred_location,
            "notice_period": self.notice_period,
            "previous_company": self.previous_company,
            "relevant_skills": self.relevant_skills,
            "additional_comments": self.additional_comments,
            "willing_to_relocate": self.willing_to_relocate,
            "applied_at": self.applied_at.isoformat() if self.applied_at else None,
            "status": self.status.value,
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "review_notes": self.review_notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JobApplication":
        """Create JobApplication from dictionary (database row)."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            email=data["email"],
            mobile=data["mobile"],
            java_experience=data["java_experience"],
            graduation_year=str(data["graduation_year"]),
            current_location=data["current_location"],
            preferred_location=data.get("preferred_location") or "",
            notice_period=data.get("notice_period") or "",
            previous_company=data.get("previous_company") or "",
            relevant_skills=data.get("relevant_skills") or "",
            additional_comments=data.get("additional_comments") or "",
            willing_to_relocate=bool(data.get("willing_to_relocate", True)),
            applied_at=data.get("applied_at"),
            status=ApplicationStatus.parse(data.get("status")),
            reviewed_at=data.get("reviewed_at"),
            review_notes=data.get("review_notes"),
        )
