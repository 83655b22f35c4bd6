"""
Review Workflow - Admin review of submitted applications.

Handles the dashboard flow:
- Loading every application, newest first
- Opening a transition with a pre-filled message
- Sending the notification and recording the decision
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from careers.application.interfaces import NotificationPort, StoragePort
from careers.domain.entities import ApplicationStatus, JobApplication, utc_now
from careers.domain.exceptions import InvalidTransitionError
from careers.domain.services import EmailTemplates
from careers.domain.value_objects import ReviewDecision


logger = logging.getLogger(__name__)


@dataclass
class TransitionDraft:
    """A transition awaiting the admin's confirmation."""
    application: JobApplication
    status: ApplicationStatus
    subject: str
    message: str


@dataclass
class ReviewSession:
    """
    Review state owned by one admin session.

    Attributes:
        authenticated: Whether the admin login gate was passed
        applications: Applications as last loaded, newest first
        selected_id: Application shown in the detail view
        draft: Transition being edited, if any
        loading: True while the list is being fetched
        last_error: Message of the last failed operation
    """
    authenticated: bool = False
    applications: list[JobApplication] = field(default_factory=list)
    selected_id: Optional[str] = None
    draft: Optional[TransitionDraft] = None
    loading: bool = False
    last_error: str = ""

    @property
    def selected(self) -> Optional[JobApplication]:
        """Application shown in the detail view."""
        return self.find(self.selected_id) if self.selected_id else None

    def find(self, application_id: str) -> Optional[JobApplication]:
        """Look up a loaded application by id."""
        for application in self.applications:
            if application.id == application_id:
                return application
        return None

    def select(self, application_id: str) -> Optional[JobApplication]:
        """Open the detail view of an application."""
        application = self.find(application_id)
        self.selected_id = application.id if application else None
        return application

    def clear_selection(self) -> None:
        """Close the detail view."""
        self.selected_id = None

    def replace(self, application: JobApplication) -> None:
        """Swap a loaded application for its updated copy."""
        self.applications = [
            application if existing.id == application.id else existing
            for existing in self.applications
        ]

    def counts(self) -> dict[str, int]:
        """Dashboard statistics."""
        counts = {
            "total": len(self.applications),
            ApplicationStatus.PENDING.value: 0,
            ApplicationStatus.SELECTED.value: 0,
            ApplicationStatus.REJECTED.value: 0,
        }
        for application in self.applications:
            counts[application.status.value] += 1
        return counts

    def reset(self) -> None:
        """Forget everything, as on logout."""
        self.authenticated = False
        self.applications = []
        self.selected_id = None
        self.draft = None
        self.loading = False
        self.last_error = ""


class TransitionOutcome(Enum):
    """Result of confirming a transition."""
    COMPLETED = "completed"
    INVALID = "invalid"
    NOTIFICATION_FAILED = "notification_failed"
    CONFLICT = "conflict"
    STORE_ERROR = "store_error"


@dataclass
class TransitionResult:
    """Detailed result of a transition."""
    outcome: TransitionOutcome
    application: Optional[JobApplication] = None
    notified: bool = False
    message: str = ""

    @property
    def is_completed(self) -> bool:
        return self.outcome == TransitionOutcome.COMPLETED


Clock = Callable[[], datetime]


class ReviewWorkflow:
    """
    Use case for reviewing applications.

    Confirming a transition:
    1. Require a non-empty message
    2. Send the notification (subject fixed per status)
    3. Stop here if sending failed and failures must block the review
    4. Write status, reviewed_at and review_notes in one update
    5. Update the session list without re-fetching
    """

    def __init__(
        self,
        store: StoragePort,
        notifier: NotificationPort,
        templates: EmailTemplates,
        commit_on_dispatch_failure: bool = True,
        guard_concurrent_reviews: bool = True,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize the workflow.

        Args:
            store: Application store.
            notifier: Notification dispatcher.
            templates: Status email templates.
            commit_on_dispatch_failure: Record the review even if sending failed.
            guard_concurrent_reviews: Only write if the stored status is still pending.
            clock: Source of review timestamps.
        """
        self.store = store
        self.notifier = notifier
        self.templates = templates
        self.commit_on_dispatch_failure = commit_on_dispatch_failure
        self.guard_concurrent_reviews = guard_concurrent_reviews
        self.clock = clock

    async def load_applications(self, session: ReviewSession) -> list[JobApplication]:
        """
        Fetch every application into the session.

        A failed fetch leaves the list empty and records the error.
        """
        session.loading = True
        session.last_error = ""
        try:
            session.applications = await self.store.list_applications()
        except Exception as e:
            logger.error(f"Error fetching applications: {e}")
            session.applications = []
            session.last_error = str(e) or "Could not load applications"
        finally:
            session.loading = False

        if session.selected_id and not session.find(session.selected_id):
            session.clear_selection()
        logger.info(f"Loaded {len(session.applications)} applications")
        return session.applications

    def begin_transition(
        self,
        session: ReviewSession,
        application: JobApplication,
        status: ApplicationStatus,
    ) -> TransitionDraft:
        """
        Open the notification editor for a transition.

        Raises:
            InvalidTransitionError: If the application was already reviewed
                or status is not terminal.
        """
        if not application.can_transition_to(status):
            raise InvalidTransitionError(application.id, application.status.value, status.value)

        rendered = self.templates.render(status, application.name)
        session.draft = TransitionDraft(
            application=application,
            status=status,
            subject=rendered.subject,
            message=rendered.message,
        )
        return session.draft

    def cancel_transition(self, session: ReviewSession) -> None:
        """Close the notification editor without changes."""
        session.draft = None

    async def confirm_transition(
        self,
        session: ReviewSession,
        message: Optional[str] = None,
    ) -> TransitionResult:
        """
        Notify the applicant and record the decision.

        Args:
            session: Session holding the draft.
            message: Edited message; the draft's message when None.

        Returns:
            TransitionResult with outcome details.
        """
        draft = session.draft
        if draft is None:
            return TransitionResult(
                outcome=TransitionOutcome.INVALID,
                message="No transition in progress",
            )

        text = draft.message if message is None else message
        if not text.strip():
            return TransitionResult(
                outcome=TransitionOutcome.INVALID,
                application=draft.application,
                message="Message is required",
            )

        application = draft.application
        decision = ReviewDecision.for_status(draft.status, text)
        email = self.templates.build_message(application, decision)

        try:
            notified = await self.notifier.send(email.recipient, email.subject, email.body)
        except Exception as e:
            logger.error(f"Error sending email to {email.recipient}: {e}")
            notified = False

        if not notified:
            logger.warning(f"Notification to {email.recipient} failed")
            if not self.commit_on_dispatch_failure:
                session.draft = replace(draft, message=text)
                return TransitionResult(
                    outcome=TransitionOutcome.NOTIFICATION_FAILED,
                    application=application,
                    message="Email could not be sent; the application was not updated",
                )

        reviewed_at = self.clock()
        updated = application.reviewed(decision, reviewed_at)
        expected = ApplicationStatus.PENDING if self.guard_concurrent_reviews else None

        try:
            written = await self.store.update_status(
                application.id,
                decision.status,
                reviewed_at,
                decision.message,
                expected_status=expected,
            )
        except Exception as e:
            logger.error(f"Error updating application status: {e}")
            session.draft = replace(draft, message=text)
            return TransitionResult(
                outcome=TransitionOutcome.STORE_ERROR,
                application=application,
                notified=notified,
                message=str(e) or "Could not update the application",
            )

        if not written:
            if self.guard_concurrent_reviews:
                session.draft = None
                current = await self._refresh(session, application)
                return TransitionResult(
                    outcome=TransitionOutcome.CONFLICT,
                    application=current,
                    notified=notified,
                    message=(
                        "The application was reviewed by someone else"
                        + ("; the email was already sent" if notified else "")
                    ),
                )
            session.draft = replace(draft, message=text)
            return TransitionResult(
                outcome=TransitionOutcome.STORE_ERROR,
                application=application,
                notified=notified,
                message="Application not found",
            )

        session.replace(updated)
        session.draft = None
        logger.info(f"Application {application.id} marked {decision.status.value}")

        return TransitionResult(
            outcome=TransitionOutcome.COMPLETED,
            application=updated,
            notified=notified,
            message=(
                f"Application {decision.status.value}; email sent to {email.recipient}"
                if notified
                else f"Application {decision.status.value}; email could not be sent"
            ),
        )

    async def _refresh(self, session: ReviewSession, application: JobApplication) -> JobApplication:
        """Reload one application after losing a concurrent review."""
        try:
            current = await self.store.get(application.id)
        except Exception as e:
            logger.error(f"Error reloading application {application.id}: {e}")
            return application
        if current is None:
            return application
        session.replace(current)
        return current
