"""
ApplicationForm Value Object - Fields entered on the public application form.
"""

from dataclasses import asdict, dataclass


JAVA_EXPERIENCE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("0-6months", "0-6 months"),
    ("6months-1year", "6 months - 1 year"),
    ("1-2years", "1-2 years"),
    ("2-3years", "2-3 years"),
    ("3+years", "3+ years"),
)

NOTICE_PERIOD_OPTIONS: tuple[tuple[str, str], ...] = (
    ("immediate", "Immediate"),
    ("15days", "15 days"),
    ("30days", "30 days"),
    ("60days", "60 days"),
    ("90days", "90 days"),
)

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "mobile",
    "java_experience",
    "graduation_year",
    "current_location",
)

FIELD_LABELS = {
    "name": "Full name",
    "email": "Email address",
    "mobile": "Mobile number",
    "java_experience": "Java experience",
    "graduation_year": "Graduation year",
    "current_location": "Current location",
    "notice_period": "Notice period",
    "willing_to_relocate": "Relocation confirmation",
}


@dataclass
class ApplicationForm:
    """
    Mutable form state for a new application.

    Holds exactly what the applicant can type; identifier, timestamps and
    review fields are assigned later by the store and the review workflow.
    A default-constructed form is the empty form shown after a submission.
    """

    name: str = ""
    email: str = ""
    mobile: str = ""
    java_experience: str = ""
    graduation_year: str = ""
    current_location: str = ""
    preferred_location: str = ""
    notice_period: str = ""
    previous_company: str = ""
    relevant_skills: str = ""
    additional_comments: str = ""
    willing_to_relocate: bool = False

    def validate(self, graduation_year_min: int = 2015, graduation_year_max: int = 2025) -> dict[str, str]:
        """
        Check the form against the posting requirements.

        Returns:
            Mapping of field name to error message; empty when valid.
        """
        errors: dict[str, str] = {}

        for name in REQUIRED_FIELDS:
            if not str(getattr(self, name) or "").strip():
                errors[name] = f"{FIELD_LABELS[name]} is required"

        if "email" not in errors and "@" not in self.email:
            errors["email"] = "Enter a valid email address"

        experience_values = {value for value, _ in JAVA_EXPERIENCE_OPTIONS}
        if "java_experience" not in errors and self.java_experience not in experience_values:
            errors["java_experience"] = "Select an experience level"

        if "graduation_year" not in errors:
            year = self.graduation_year.strip()
            if not (year.isascii() and year.isdecimal()):
                errors["graduation_year"] = "Graduation year must be a number"
            elif not graduation_year_min <= int(year) <= graduation_year_max:
                errors["graduation_year"] = (
                    f"Graduation year must be between {graduation_year_min} "
                    f"and {graduation_year_max}"
                )

        notice_values = {value for value, _ in NOTICE_PERIOD_OPTIONS}
        if self.notice_period and self.notice_period not in notice_values:
            errors["notice_period"] = "Select a notice period"

        if self.willing_to_relocate is not True:
            errors["willing_to_relocate"] = "You must be willing to relocate for this position"

        return errors

    @property
    def can_submit(self) -> bool:
        """The submit action is only offered once relocation is confirmed."""
        return self.willing_to_relocate is True

    def cleaned(self) -> "ApplicationForm":
        """Return a copy with surrounding whitespace stripped from text fields."""
        data = {
            key: value.strip() if isinstance(value, str) else value
            for key, value in asdict(self).items()
        }
        return ApplicationForm(**data)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return asdict(self)
