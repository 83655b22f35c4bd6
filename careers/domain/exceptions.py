"""
Domain Exceptions - Errors raised by entities, stores and use cases.
"""

from typing import Optional


class ApplicationValidationError(ValueError):
    """Raised when a submitted form does not satisfy the posting requirements."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid application: {fields}")


class InvalidTransitionError(ValueError):
    """Raised when a status change is attempted on a reviewed application."""

    def __init__(self, application_id: Optional[str], current_status: str, target_status: str) -> None:
        self.application_id = application_id
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            f"Cannot move application {application_id} from "
            f"'{current_status}' to '{target_status}'"
        )


class StoreError(RuntimeError):
    """Raised when the application store cannot complete an operation."""
