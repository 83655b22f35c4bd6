"""
Unit tests for domain entities and value objects.
"""

import pytest
from datetime import datetime

from careers.domain.entities import JobApplication, ApplicationStatus, JobPosting
from careers.domain.exceptions import InvalidTransitionError
from careers.domain.value_objects import (
    ApplicationForm,
    EmailMessage,
    ReviewDecision,
    Selected,
    Rejected,
)


def make_application(**overrides) -> JobApplication:
    data = {
        "id": "abc123",
        "name": "Asha",
        "email": "asha@example.com",
        "mobile": "9876543210",
        "java_experience": "1-2years",
        "graduation_year": "2023",
        "current_location": "Hyderabad",
        "applied_at": datetime(2025, 6, 1, 9, 0),
    }
    data.update(overrides)
    return JobApplication(**data)


class TestApplicationStatus:
    """Tests for ApplicationStatus."""

    def test_parse_missing_status_is_pending(self):
        """Absent status should read as pending."""
        assert ApplicationStatus.parse(None) == ApplicationStatus.PENDING
        assert ApplicationStatus.parse("") == ApplicationStatus.PENDING

    def test_terminal_statuses(self):
        """Only selected and rejected are terminal."""
        assert ApplicationStatus.PENDING.is_terminal is False
        assert ApplicationStatus.SELECTED.is_terminal is True
        assert ApplicationStatus.REJECTED.is_terminal is True

    def test_parse_unknown_status(self):
        """Unknown statuses should be rejected."""
        with pytest.raises(ValueError):
            ApplicationStatus.parse("archived")


class TestJobApplication:
    """Tests for JobApplication entity."""

    def test_new_application_is_pending_and_unreviewed(self):
        """A fresh application has no review data."""
        app = make_application()

        assert app.is_pending is True
        assert app.reviewed_at is None
        assert app.review_notes is None

    def test_status_from_string(self):
        """Should convert string status to enum."""
        app = make_application(status="selected")  # type: ignore
        assert app.status == ApplicationStatus.SELECTED

    def test_timestamps_from_iso_strings(self):
        """ISO strings from the store should become datetimes."""
        app = make_application(applied_at="2025-06-01T09:00:00.000000")
        assert app.applied_at == datetime(2025, 6, 1, 9, 0)

    def test_reviewed_sets_status_time_and_notes_together(self):
        """Review fields are all set by one transition."""
        app = make_application()
        reviewed_at = datetime(2025, 6, 2, 10, 30)

        updated = app.reviewed(Selected("Congrats"), reviewed_at)

        assert updated.status == ApplicationStatus.SELECTED
        assert updated.reviewed_at == reviewed_at
        assert updated.review_notes == "Congrats"
        assert app.is_pending is True  # original untouched

    @pytest.mark.parametrize("status", [ApplicationStatus.SELECTED, ApplicationStatus.REJECTED])
    def test_terminal_application_cannot_transition(self, status):
        """Selected/rejected are final."""
        app = make_application(status=status)

        with pytest.raises(InvalidTransitionError):
            app.reviewed(Rejected("No"), datetime.now())
        with pytest.raises(InvalidTransitionError):
            app.reviewed(Selected("Yes"), datetime.now())

    def test_cannot_transition_to_pending(self):
        """Pending is never a transition target."""
        app = make_application()
        assert app.can_transition_to(ApplicationStatus.PENDING) is False

    def test_from_dict_without_status(self):
        """Rows without a status load as pending."""
        data = make_application().to_dict()
        data.pop("status")

        app = JobApplication.from_dict(data)

        assert app.status == ApplicationStatus.PENDING
        assert app.id == "abc123"

    def test_to_dict(self):
        """Should convert to dictionary."""
        data = make_application().to_dict()

        assert data["status"] == "pending"
        assert data["applied_at"] == "2025-06-01T09:00:00"
        assert data["reviewed_at"] is None


class TestReviewDecision:
    """Tests for the Selected/Rejected variants."""

    def test_variant_carries_status(self):
        """Each variant knows its target status."""
        assert Selected("a").status == ApplicationStatus.SELECTED
        assert Rejected("b").status == ApplicationStatus.REJECTED

    def test_for_status(self):
        """Should build the matching variant."""
        decision = ReviewDecision.for_status(ApplicationStatus.REJECTED, "Sorry")

        assert isinstance(decision, Rejected)
        assert decision.message == "Sorry"

    def test_for_pending_fails(self):
        """Pending has no decision."""
        with pytest.raises(ValueError):
            ReviewDecision.for_status(ApplicationStatus.PENDING, "x")

    def test_message_required(self):
        """Blank messages are not allowed."""
        with pytest.raises(ValueError, match="Review message is required"):
            Selected("   ")

    def test_decision_immutable(self):
        """Decisions should be immutable."""
        decision = Selected("Congrats")
        with pytest.raises(Exception):
            decision.message = "other"  # type: ignore


class TestApplicationForm:
    """Tests for form validation."""

    def test_empty_form_reports_required_fields(self):
        """Every required field and the relocation flag are reported."""
        errors = ApplicationForm().validate()

        assert set(errors) == {
            "name",
            "email",
            "mobile",
            "java_experience",
            "graduation_year",
            "current_location",
            "willing_to_relocate",
        }

    def test_valid_form(self, valid_form):
        """A complete form has no errors."""
        assert valid_form.validate() == {}

    def test_relocation_must_be_confirmed(self, make_form):
        """willing_to_relocate must be True."""
        errors = make_form(willing_to_relocate=False).validate()
        assert list(errors) == ["willing_to_relocate"]

    def test_graduation_year_must_be_numeric_and_in_range(self, make_form):
        """Graduation year is a number within bounds."""
        assert "graduation_year" in make_form(graduation_year="twenty").validate()
        assert "graduation_year" in make_form(graduation_year="2010").validate()
        assert make_form(graduation_year="2010").validate(2005, 2025) == {}

    @pytest.mark.parametrize("year", ["2023²", "٢٠٢٣", "２０２３", "20.5"])
    def test_graduation_year_rejects_non_ascii_digits(self, make_form, year):
        """Digits int() cannot parse are a field error, not a crash."""
        errors = make_form(graduation_year=year).validate()
        assert errors == {"graduation_year": "Graduation year must be a number"}

    def test_experience_must_be_an_option(self, make_form):
        """Java experience comes from the fixed option set."""
        assert "java_experience" in make_form(java_experience="10years").validate()

    def test_notice_period_optional_but_checked(self, make_form):
        """Notice period may be blank but must be an option when set."""
        assert make_form(notice_period="").validate() == {}
        assert make_form(notice_period="30days").validate() == {}
        assert "notice_period" in make_form(notice_period="never").validate()

    def test_email_needs_at_sign(self, make_form):
        """Email only needs to look like an address."""
        assert "email" in make_form(email="not-an-email").validate()

    def test_cleaned_strips_whitespace(self, make_form):
        """Cleaning strips text fields."""
        form = make_form(name="  A  ", current_location=" Hyderabad ").cleaned()

        assert form.name == "A"
        assert form.current_location == "Hyderabad"
        assert form.willing_to_relocate is True

    def test_can_submit_follows_relocation(self, make_form):
        """Submit is offered only after relocation is confirmed."""
        assert make_form().can_submit is True
        assert ApplicationForm().can_submit is False


class TestEmailMessage:
    """Tests for EmailMessage value object."""

    def test_message_immutable(self):
        """Messages cannot be edited after creation."""
        message = EmailMessage(
            recipient="a@x.com",
            subject="Subject",
            body="Hello",
            applicant_name="A",
            status=ApplicationStatus.SELECTED,
        )
        with pytest.raises(Exception):
            message.body = "Congrats"  # type: ignore

    def test_requires_body(self):
        """A blank body is rejected."""
        with pytest.raises(ValueError, match="Message body is required"):
            EmailMessage("a@x.com", "s", "  ", "A", ApplicationStatus.SELECTED)

    def test_requires_recipient(self):
        """Recipient is required."""
        with pytest.raises(ValueError, match="Recipient is required"):
            EmailMessage("", "s", "b", "A", ApplicationStatus.REJECTED)


class TestJobPosting:
    """Tests for JobPosting entity."""

    def test_junior_java_developer(self):
        """Default posting carries the relocation requirement."""
        posting = JobPosting.junior_java_developer(
            company="Haryak Technologies India Private Limited",
            location="Chilakaluripet, Andhra Pradesh",
        )

        assert posting.title == "Junior Java Developer"
        assert "Chilakaluripet, Andhra Pradesh" in posting.relocation_notice
        assert len(posting.responsibilities) == 5
        assert len(posting.requirements) == 5

    def test_posting_requires_title(self):
        """Should raise error without title."""
        with pytest.raises(ValueError, match="title is required"):
            JobPosting(title="", company="Corp", location="X")
