# Use Cases Package
from .submit_application import SubmitApplicationUseCase, SubmitOutcome, SubmitResult
from .review_workflow import (
    ReviewSession,
    ReviewWorkflow,
    TransitionDraft,
    TransitionOutcome,
    TransitionResult,
)
from .admin_access import AdminAccess

__all__ = [
    "SubmitApplicationUseCase",
    "SubmitOutcome",
    "SubmitResult",
    "ReviewSession",
    "ReviewWorkflow",
    "TransitionDraft",
    "TransitionOutcome",
    "TransitionResult",
    "AdminAccess",
]
