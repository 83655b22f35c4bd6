"""
Unit tests for the admin review workflow.
"""

import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock

from careers.application.use_cases import (
    ReviewSession,
    ReviewWorkflow,
    TransitionOutcome,
)
from careers.domain.entities import ApplicationStatus
from careers.domain.exceptions import InvalidTransitionError, StoreError


REVIEW_TIME = datetime(2025, 6, 5, 15, 30)


@pytest.fixture
def workflow(store, dispatcher, templates) -> ReviewWorkflow:
    return ReviewWorkflow(store, dispatcher, templates, clock=lambda: REVIEW_TIME)


@pytest.fixture
async def loaded_session(workflow, store, valid_form) -> ReviewSession:
    """Session with one pending application loaded."""
    await store.create(valid_form)
    session = ReviewSession(authenticated=True)
    await workflow.load_applications(session)
    return session


class TestLoadApplications:
    """Tests for loading the dashboard list."""

    async def test_loads_newest_first(self, workflow, store, make_form):
        """Applications arrive newest first."""
        await store.create(make_form(name="old"))
        await store.create(make_form(name="new"))
        session = ReviewSession()

        applications = await workflow.load_applications(session)

        assert [app.name for app in applications] == ["new", "old"]
        assert session.loading is False
        assert session.last_error == ""

    async def test_failure_leaves_empty_list(self, dispatcher, templates, loaded_session):
        """A failed fetch clears the list instead of raising."""
        store = AsyncMock()
        store.list_applications.side_effect = StoreError("disk gone")
        workflow = ReviewWorkflow(store, dispatcher, templates)

        applications = await workflow.load_applications(loaded_session)

        assert applications == []
        assert loaded_session.applications == []
        assert loaded_session.last_error == "disk gone"
        assert loaded_session.loading is False

    async def test_drops_stale_selection(self, workflow, loaded_session):
        """Selection of an application that vanished is cleared."""
        loaded_session.selected_id = "missing"

        await workflow.load_applications(loaded_session)

        assert loaded_session.selected is None


class TestBeginTransition:
    """Tests for opening the notification editor."""

    def test_prefills_template(self, workflow, loaded_session):
        """Draft carries the status template for the applicant."""
        app = loaded_session.applications[0]

        draft = workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        assert loaded_session.draft is draft
        assert draft.subject.startswith("Congratulations!")
        assert draft.message.startswith("Dear A,")

    def test_pending_target_rejected(self, workflow, loaded_session):
        """Pending is not a valid target."""
        app = loaded_session.applications[0]
        with pytest.raises(InvalidTransitionError):
            workflow.begin_transition(loaded_session, app, ApplicationStatus.PENDING)
        assert loaded_session.draft is None

    async def test_reviewed_application_rejected(self, workflow, loaded_session):
        """Terminal statuses cannot transition again."""
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.REJECTED)
        result = await workflow.confirm_transition(loaded_session)
        reviewed = result.application

        for status in (ApplicationStatus.SELECTED, ApplicationStatus.REJECTED):
            with pytest.raises(InvalidTransitionError):
                workflow.begin_transition(loaded_session, reviewed, status)

    def test_cancel_discards_draft(self, workflow, loaded_session):
        """Cancelling leaves the application untouched."""
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        workflow.cancel_transition(loaded_session)

        assert loaded_session.draft is None
        assert loaded_session.applications[0].is_pending


class TestConfirmTransition:
    """Tests for sending and recording a decision."""

    async def test_select_with_custom_message(self, workflow, store, dispatcher, loaded_session):
        """Selecting records the decision and notifies the applicant."""
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        result = await workflow.confirm_transition(loaded_session, "Congrats")

        assert result.outcome == TransitionOutcome.COMPLETED
        assert result.notified is True
        assert result.application.status == ApplicationStatus.SELECTED
        assert result.application.reviewed_at == REVIEW_TIME
        assert result.application.review_notes == "Congrats"

        recipient, subject, body = dispatcher.sent[0]
        assert recipient == "a@x.com"
        assert subject.startswith("Congratulations!")
        assert body == "Congrats"

        stored = await store.get(app.id)
        assert stored.status == ApplicationStatus.SELECTED
        assert stored.reviewed_at == REVIEW_TIME
        assert loaded_session.applications[0] == result.application
        assert loaded_session.draft is None

    async def test_default_message_used_when_unedited(self, workflow, dispatcher, loaded_session):
        """Without an edit the template text is sent."""
        app = loaded_session.applications[0]
        draft = workflow.begin_transition(loaded_session, app, ApplicationStatus.REJECTED)

        result = await workflow.confirm_transition(loaded_session)

        assert result.is_completed
        assert dispatcher.sent[0][2] == draft.message
        assert result.application.review_notes == draft.message

    async def test_empty_message_is_invalid(self, workflow, store, dispatcher, loaded_session):
        """A blank message sends nothing and writes nothing."""
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        result = await workflow.confirm_transition(loaded_session, "   ")

        assert result.outcome == TransitionOutcome.INVALID
        assert dispatcher.sent == []
        assert (await store.get(app.id)).is_pending
        assert loaded_session.draft is not None

    async def test_no_draft_is_invalid(self, workflow, loaded_session):
        """Confirming without an open editor does nothing."""
        result = await workflow.confirm_transition(loaded_session, "Hello")
        assert result.outcome == TransitionOutcome.INVALID

    async def test_dispatch_failure_blocks_when_configured(
        self, store, failing_dispatcher, templates, loaded_session
    ):
        """With commits disabled a failed email leaves the record pending."""
        workflow = ReviewWorkflow(
            store, failing_dispatcher, templates,
            commit_on_dispatch_failure=False,
            clock=lambda: REVIEW_TIME,
        )
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        result = await workflow.confirm_transition(loaded_session, "Edited")

        assert result.outcome == TransitionOutcome.NOTIFICATION_FAILED
        assert (await store.get(app.id)).is_pending
        assert loaded_session.draft.message == "Edited"

    async def test_dispatch_failure_still_commits_by_default(
        self, store, failing_dispatcher, templates, loaded_session
    ):
        """By default the review is recorded even if the email failed."""
        workflow = ReviewWorkflow(store, failing_dispatcher, templates, clock=lambda: REVIEW_TIME)
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.REJECTED)

        result = await workflow.confirm_transition(loaded_session)

        assert result.outcome == TransitionOutcome.COMPLETED
        assert result.notified is False
        assert (await store.get(app.id)).status == ApplicationStatus.REJECTED

    async def test_dispatcher_exception_counts_as_failure(self, store, templates, loaded_session):
        """A raising dispatcher is treated like a failed send."""
        notifier = AsyncMock()
        notifier.send.side_effect = ConnectionError("smtp down")
        workflow = ReviewWorkflow(store, notifier, templates, clock=lambda: REVIEW_TIME)
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        result = await workflow.confirm_transition(loaded_session)

        assert result.is_completed
        assert result.notified is False

    async def test_concurrent_review_conflict(self, workflow, store, dispatcher, loaded_session):
        """Losing a race reports a conflict and shows the winning decision."""
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)
        await store.update_status(app.id, ApplicationStatus.REJECTED, REVIEW_TIME, "Other admin")

        result = await workflow.confirm_transition(loaded_session)

        assert result.outcome == TransitionOutcome.CONFLICT
        assert result.application.status == ApplicationStatus.REJECTED
        assert loaded_session.applications[0].review_notes == "Other admin"
        assert (await store.get(app.id)).status == ApplicationStatus.REJECTED
        assert loaded_session.draft is None

    async def test_store_failure_keeps_list(self, dispatcher, templates, loaded_session):
        """A failed write reports an error and changes nothing locally."""
        store = AsyncMock()
        store.update_status.side_effect = StoreError("locked")
        workflow = ReviewWorkflow(store, dispatcher, templates, clock=lambda: REVIEW_TIME)
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        result = await workflow.confirm_transition(loaded_session)

        assert result.outcome == TransitionOutcome.STORE_ERROR
        assert result.message == "locked"
        assert loaded_session.applications[0].is_pending
        assert loaded_session.draft is not None

    async def test_unguarded_missing_record(self, dispatcher, templates, loaded_session):
        """Without the guard a missing row is a store error."""
        store = AsyncMock()
        store.update_status.return_value = False
        workflow = ReviewWorkflow(
            store, dispatcher, templates,
            guard_concurrent_reviews=False,
            clock=lambda: REVIEW_TIME,
        )
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        result = await workflow.confirm_transition(loaded_session)

        assert result.outcome == TransitionOutcome.STORE_ERROR
        assert result.message == "Application not found"
        assert store.update_status.await_args.kwargs["expected_status"] is None
        assert loaded_session.draft is not None

    async def test_missing_record_draft_can_be_resent(self, dispatcher, templates, loaded_session):
        """After a failed write the edited draft is still there to retry."""
        store = AsyncMock()
        store.update_status.side_effect = [False, True]
        workflow = ReviewWorkflow(
            store, dispatcher, templates,
            guard_concurrent_reviews=False,
            clock=lambda: REVIEW_TIME,
        )
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        first = await workflow.confirm_transition(loaded_session, "Edited")
        second = await workflow.confirm_transition(loaded_session)

        assert first.outcome == TransitionOutcome.STORE_ERROR
        assert second.outcome == TransitionOutcome.COMPLETED
        assert second.application.review_notes == "Edited"

    async def test_default_clock_is_utc(self, store, dispatcher, templates, loaded_session):
        """Review timestamps default to aware UTC times."""
        workflow = ReviewWorkflow(store, dispatcher, templates)
        app = loaded_session.applications[0]
        workflow.begin_transition(loaded_session, app, ApplicationStatus.SELECTED)

        result = await workflow.confirm_transition(loaded_session)

        assert result.application.reviewed_at.utcoffset() == timedelta(0)
        assert (await store.get(app.id)).reviewed_at == result.application.reviewed_at


class TestReviewSession:
    """Tests for session bookkeeping."""

    async def test_counts(self, workflow, store, make_form):
        """Statistics follow the loaded statuses."""
        first = await store.create(make_form(name="one"))
        second = await store.create(make_form(name="two"))
        await store.create(make_form(name="three"))
        await store.update_status(first.id, ApplicationStatus.SELECTED, REVIEW_TIME, "Yes")
        await store.update_status(second.id, ApplicationStatus.REJECTED, REVIEW_TIME, "No")
        session = ReviewSession()

        await workflow.load_applications(session)

        assert session.counts() == {"total": 3, "pending": 1, "selected": 1, "rejected": 1}

    def test_empty_counts(self):
        """An empty dashboard shows zeros."""
        assert ReviewSession().counts() == {"total": 0, "pending": 0, "selected": 0, "rejected": 0}

    def test_select_and_clear(self, loaded_session):
        """Selection opens and closes the detail view."""
        app = loaded_session.applications[0]

        assert loaded_session.select(app.id) == app
        assert loaded_session.selected == app

        loaded_session.clear_selection()
        assert loaded_session.selected is None

    def test_select_unknown(self, loaded_session):
        """Unknown ids select nothing."""
        assert loaded_session.select("missing") is None
        assert loaded_session.selected_id is None

    def test_reset(self, loaded_session):
        """Reset forgets the admin state."""
        loaded_session.select(loaded_session.applications[0].id)

        loaded_session.reset()

        assert loaded_session.authenticated is False
        assert loaded_session.applications == []
        assert loaded_session.selected is None
