"""
Submit Application Use Case - Public form submission.

Validates the form before touching the store, then persists a new
pending application in a single attempt.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from careers.application.interfaces import StoragePort
from careers.domain.entities import JobApplication
from careers.domain.exceptions import ApplicationValidationError
from careers.domain.value_objects import ApplicationForm


logger = logging.getLogger(__name__)


class SubmitOutcome(Enum):
    """Result of a submission attempt."""
    SUBMITTED = "submitted"
    INVALID = "invalid"
    ERROR = "error"


@dataclass
class SubmitResult:
    """Detailed result of a submission attempt."""
    outcome: SubmitOutcome
    application: Optional[JobApplication] = None
    errors: dict[str, str] = field(default_factory=dict)
    message: str = ""

    @property
    def is_submitted(self) -> bool:
        return self.outcome == SubmitOutcome.SUBMITTED


class SubmitApplicationUseCase:
    """
    Use case for submitting one application.

    1. Validate required fields and the relocation confirmation
    2. Create the record (store assigns id and applied_at)
    3. Report success, or a readable error leaving the form intact
    """

    GENERIC_ERROR = "An unexpected error occurred"

    def __init__(
        self,
        store: StoragePort,
        graduation_year_min: int = 2015,
        graduation_year_max: int = 2025,
    ) -> None:
        """
        Initialize the use case.

        Args:
            store: Application store.
            graduation_year_min: Earliest accepted graduation year.
            graduation_year_max: Latest accepted graduation year.
        """
        self.store = store
        self.graduation_year_min = graduation_year_min
        self.graduation_year_max = graduation_year_max

    def validate(self, form: ApplicationForm) -> None:
        """
        Check a form without submitting it.

        Raises:
            ApplicationValidationError: If any field is invalid.
        """
        errors = form.validate(self.graduation_year_min, self.graduation_year_max)
        if errors:
            raise ApplicationValidationError(errors)

    async def execute(self, form: ApplicationForm) -> SubmitResult:
        """
        Submit the form.

        Args:
            form: Completed application form.

        Returns:
            SubmitResult with outcome details.
        """
        cleaned = form.cleaned()

        try:
            self.validate(cleaned)
        except ApplicationValidationError as e:
            logger.info(f"Rejected submission: {e}")
            return SubmitResult(
                outcome=SubmitOutcome.INVALID,
                errors=e.errors,
                message="Please correct the highlighted fields",
            )

        try:
            application = await self.store.create(cleaned)
        except Exception as e:
            logger.error(f"Error submitting application: {e}")
            return SubmitResult(
                outcome=SubmitOutcome.ERROR,
                message=str(e) or self.GENERIC_ERROR,
            )

        logger.info(f"Application {application.id} submitted by {application.email}")
        return SubmitResult(
            outcome=SubmitOutcome.SUBMITTED,
            application=application,
            message=(
                "Thank you for your interest. We'll review your application "
                "and get back to you soon."
            ),
        )
