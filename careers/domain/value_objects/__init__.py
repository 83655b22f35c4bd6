# Domain Value Objects
from .application_form import (
    ApplicationForm,
    JAVA_EXPERIENCE_OPTIONS,
    NOTICE_PERIOD_OPTIONS,
)
from .email_message import EmailMessage
from .review_decision import ReviewDecision, Selected, Rejected

__all__ = [
    "ApplicationForm",
    "JAVA_EXPERIENCE_OPTIONS",
    "NOTICE_PERIOD_OPTIONS",
    "EmailMessage",
    "ReviewDecision",
    "Selected",
    "Rejected",
]
