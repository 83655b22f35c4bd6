"""
Email Templates - Status notification subjects and default messages.

Each terminal status has a fixed subject line and a default message the
admin can edit before sending. Templates know nothing about delivery.
"""

from dataclasses import dataclass
from string import Template

from careers.domain.entities import ApplicationStatus, JobApplication
from careers.domain.value_objects import EmailMessage, ReviewDecision


SELECTED_SUBJECT = Template("Congratulations! Application Status Update - $position Position")

REJECTED_SUBJECT = Template("Application Status Update - $position Position")

SELECTED_MESSAGE = Template("""Dear $name,

Congratulations! We are pleased to inform you that you have been selected for the $position position at $company.

We were impressed with your qualifications and believe you would be a great addition to our team in $location.

Our HR team will contact you within the next 2-3 business days with further details regarding:
- Joining date and formalities
- Salary and benefits discussion
- Relocation assistance (if needed)
- Required documentation

Thank you for your interest in joining $company. We look forward to welcoming you to our team!

Best regards,
HR Team
$company
$website""")

REJECTED_MESSAGE = Template("""Dear $name,

Thank you for your interest in the $position position at $company and for taking the time to apply.

After careful consideration of all applications, we have decided to move forward with other candidates whose experience more closely matches our current requirements.

We appreciate the effort you put into your application and encourage you to apply for future opportunities that match your skills and experience.

We wish you the best of luck in your job search and future career endeavors.

Best regards,
HR Team
$company
$website""")


@dataclass(frozen=True)
class RenderedTemplate:
    """Subject and message for one status."""
    subject: str
    message: str


class EmailTemplates:
    """
    Builds status notifications for a posting.

    Usage:
        templates = EmailTemplates("Junior Java Developer", "Acme", "Pune")
        rendered = templates.render(ApplicationStatus.SELECTED, "Asha")
    """

    def __init__(
        self,
        position: str,
        company: str,
        location: str,
        website: str = "",
    ) -> None:
        self.position = position
        self.company = company
        self.location = location
        self.website = website
        self._templates = {
            ApplicationStatus.SELECTED: (SELECTED_SUBJECT, SELECTED_MESSAGE),
            ApplicationStatus.REJECTED: (REJECTED_SUBJECT, REJECTED_MESSAGE),
        }

    def render(
        self,
        status: ApplicationStatus,
        applicant_name: str,
    ) -> RenderedTemplate:
        """
        Render the subject and message for a terminal status.

        Args:
            status: Selected or rejected.
            applicant_name: Name used in the greeting.

        Raises:
            ValueError: If status is pending.
        """
        if status not in self._templates:
            raise ValueError(f"No email template for status '{status.value}'")

        subject_template, message_template = self._templates[status]
        values = {
            "name": applicant_name,
            "position": self.position,
            "company": self.company,
            "location": self.location,
            "website": self.website,
        }
        subject = subject_template.substitute(values)
        message = message_template.substitute(values).rstrip()
        return RenderedTemplate(subject=subject, message=message)

    def subject_for(self, status: ApplicationStatus) -> str:
        """Fixed subject line for a status."""
        return self.render(status, "").subject

    def build_message(self, application: JobApplication, decision: ReviewDecision) -> EmailMessage:
        """Build the notification announcing a decision."""
        return EmailMessage(
            recipient=application.email,
            subject=self.subject_for(decision.status),
            body=decision.message,
            applicant_name=application.name,
            status=decision.status,
        )
