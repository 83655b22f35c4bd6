"""
Storage Port - Abstract interface for the application store.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from careers.domain.entities import JobApplication, ApplicationStatus
from careers.domain.value_objects import ApplicationForm


class StoragePort(ABC):
    """Abstract interface for application persistence."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize storage connection."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close storage connection."""
        pass

    @abstractmethod
    async def create(self, form: ApplicationForm) -> JobApplication:
        """Persist a new pending application; the store assigns id and applied_at."""
        pass

    @abstractmethod
    async def get(self, application_id: str) -> Optional[JobApplication]:
        """Get an application by id."""
        pass

    @abstractmethod
    async def list_applications(self) -> list[JobApplication]:
        """Get all applications, newest submission first."""
        pass

    @abstractmethod
    async def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        reviewed_at: datetime,
        review_notes: str,
        expected_status: Optional[ApplicationStatus] = None,
    ) -> bool:
        """
        Record a review outcome.

        When expected_status is given the write only happens if the stored
        status still matches. Returns False if no record was updated.
        """
        pass
