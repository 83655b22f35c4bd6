"""
Application Form Component

Public form for applying to the posting.
"""

import flet as ft
from typing import Awaitable, Callable, Optional

from careers.application.use_cases import SubmitResult
from careers.domain.entities import JobPosting
from careers.domain.value_objects import (
    ApplicationForm,
    JAVA_EXPERIENCE_OPTIONS,
    NOTICE_PERIOD_OPTIONS,
)
from ..styles import Theme


SubmitHandler = Callable[[ApplicationForm], Awaitable[SubmitResult]]

TEXT_FIELDS = (
    "name",
    "email",
    "mobile",
    "graduation_year",
    "current_location",
    "preferred_location",
    "previous_company",
    "relevant_skills",
    "additional_comments",
)


def create_application_form(posting: JobPosting) -> tuple[ft.Container, dict]:
    """
    Create the application form card.

    Features:
    - Contact, experience and location fields
    - Relocation confirmation gating the submit button
    - Inline validation errors and a store error banner
    - Confirmation view with "Submit Another Application"

    Returns:
        Tuple of (container, controls_dict) for external updates
    """
    fields: dict[str, ft.Control] = {
        "name": ft.TextField(label="Full Name *", border_radius=Theme.RADIUS_MD),
        "email": ft.TextField(
            label="Email Address *",
            keyboard_type=ft.KeyboardType.EMAIL,
            border_radius=Theme.RADIUS_MD,
        ),
        "mobile": ft.TextField(
            label="Mobile Number *",
            keyboard_type=ft.KeyboardType.PHONE,
            border_radius=Theme.RADIUS_MD,
        ),
        "java_experience": ft.Dropdown(
            label="Java Experience *",
            hint_text="Select experience level",
            options=[ft.dropdown.Option(key, text) for key, text in JAVA_EXPERIENCE_OPTIONS],
            border_radius=Theme.RADIUS_MD,
        ),
        "graduation_year": ft.TextField(
            label="Graduation Year *",
            hint_text="2023",
            keyboard_type=ft.KeyboardType.NUMBER,
            border_radius=Theme.RADIUS_MD,
        ),
        "current_location": ft.TextField(label="Current Location *", border_radius=Theme.RADIUS_MD),
        "preferred_location": ft.TextField(label="Preferred Location", border_radius=Theme.RADIUS_MD),
        "notice_period": ft.Dropdown(
            label="Notice Period",
            hint_text="Select notice period",
            options=[ft.dropdown.Option(key, text) for key, text in NOTICE_PERIOD_OPTIONS],
            border_radius=Theme.RADIUS_MD,
        ),
        "previous_company": ft.TextField(label="Previous Company", border_radius=Theme.RADIUS_MD),
        "relevant_skills": ft.TextField(
            label="Relevant Skills",
            hint_text="Core Java, OOP, Spring, SQL...",
            multiline=True,
            min_lines=2,
            max_lines=4,
            border_radius=Theme.RADIUS_MD,
        ),
        "additional_comments": ft.TextField(
            label="Additional Comments",
            multiline=True,
            min_lines=2,
            max_lines=4,
            border_radius=Theme.RADIUS_MD,
        ),
    }

    submit_button = ft.ElevatedButton(
        "Submit Application",
        icon=ft.Icons.SEND,
        style=Theme.button_style("primary"),
        disabled=True,
    )

    def _on_relocate_change(e) -> None:
        submit_button.disabled = not e.control.value
        submit_button.update()

    relocate_checkbox = ft.Checkbox(
        label=posting.relocation_confirmation + " *",
        value=False,
        on_change=_on_relocate_change,
    )
    relocate_error = ft.Text("", color=Theme.ERROR, size=12, visible=False)

    error_banner = ft.Container(
        content=ft.Row([
            ft.Icon(ft.Icons.ERROR_OUTLINE, color=Theme.ERROR),
            ft.Text("", color=Theme.ERROR, expand=True),
        ]),
        bgcolor="#fef2f2",
        border=ft.border.all(1, "#fecaca"),
        border_radius=Theme.RADIUS_MD,
        padding=Theme.SPACING_MD,
        visible=False,
    )

    relocation_box = ft.Container(
        content=ft.Column([
            ft.Text("Relocation Requirement", weight=ft.FontWeight.BOLD, color="#7f1d1d"),
            ft.Text(posting.relocation_notice, size=13, color="#991b1b"),
            relocate_checkbox,
            relocate_error,
        ], spacing=Theme.SPACING_SM),
        bgcolor="#fef2f2",
        border=ft.border.all(1, "#fecaca"),
        border_radius=Theme.RADIUS_MD,
        padding=Theme.SPACING_MD,
    )

    form_view = ft.Column([
        ft.Text("Apply for this Position", size=24, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
        error_banner,
        ft.ResponsiveRow([
            ft.Container(content=fields[name], col={"sm": 12, "md": 6})
            for name in (
                "name", "email", "mobile", "java_experience",
                "graduation_year", "current_location",
                "preferred_location", "notice_period",
            )
        ], run_spacing=Theme.SPACING_MD),
        fields["previous_company"],
        fields["relevant_skills"],
        fields["additional_comments"],
        relocation_box,
        submit_button,
    ], spacing=Theme.SPACING_MD)

    another_button = ft.ElevatedButton(
        "Submit Another Application",
        style=Theme.button_style("primary"),
    )

    success_view = ft.Column([
        ft.Icon(ft.Icons.CHECK_CIRCLE, color=Theme.SUCCESS, size=64),
        ft.Text("Application Submitted!", size=24, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
        ft.Text(
            f"Thank you for your interest in the {posting.title} position. "
            "We'll review your application and get back to you soon.",
            text_align=ft.TextAlign.CENTER,
            color=Theme.TEXT_SECONDARY,
        ),
        another_button,
    ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=Theme.SPACING_MD, visible=False)

    container = ft.Container(
        content=ft.Column([form_view, success_view]),
        **Theme.card_style(),
    )

    controls = {
        "fields": fields,
        "relocate_checkbox": relocate_checkbox,
        "relocate_error": relocate_error,
        "error_banner": error_banner,
        "submit_button": submit_button,
        "another_button": another_button,
        "form_view": form_view,
        "success_view": success_view,
    }

    return container, controls


class ApplicationFormPanel:
    """Wrapper class for the application form."""

    def __init__(
        self,
        posting: JobPosting,
        on_submit: Optional[SubmitHandler] = None,
    ):
        self.container, self._controls = create_application_form(posting)
        self._on_submit = on_submit
        self._controls["submit_button"].on_click = self._handle_submit
        self._controls["another_button"].on_click = self._handle_another

    def read_form(self) -> ApplicationForm:
        """Collect the current field values."""
        fields = self._controls["fields"]
        values = {name: fields[name].value or "" for name in TEXT_FIELDS}
        return ApplicationForm(
            java_experience=fields["java_experience"].value or "",
            notice_period=fields["notice_period"].value or "",
            willing_to_relocate=bool(self._controls["relocate_checkbox"].value),
            **values,
        )

    def fill(self, form: ApplicationForm) -> None:
        """Show a form's values in the fields."""
        data = form.to_dict()
        for name, control in self._controls["fields"].items():
            if isinstance(control, ft.Dropdown):
                control.value = data[name] or None
            else:
                control.value = data[name]
        self._controls["relocate_checkbox"].value = form.willing_to_relocate
        self._controls["submit_button"].disabled = not form.can_submit

    def show_errors(self, errors: dict[str, str]) -> None:
        """Display inline validation errors."""
        for name, control in self._controls["fields"].items():
            control.error_text = errors.get(name)
        relocate_error = self._controls["relocate_error"]
        relocate_error.value = errors.get("willing_to_relocate", "")
        relocate_error.visible = "willing_to_relocate" in errors

    def show_banner(self, message: str) -> None:
        """Show a submission error above the form."""
        banner = self._controls["error_banner"]
        banner.content.controls[1].value = message
        banner.visible = bool(message)

    def show_success(self, submitted: bool) -> None:
        """Toggle between the form and the confirmation view."""
        self._controls["form_view"].visible = not submitted
        self._controls["success_view"].visible = submitted

    def reset(self) -> None:
        """Return to an empty form."""
        self.fill(ApplicationForm())
        self.show_errors({})
        self.show_banner("")

    async def _handle_submit(self, e) -> None:
        submit_button = self._controls["submit_button"]
        submit_button.disabled = True
        submit_button.text = "Submitting..."
        self.show_banner("")
        self.container.update()

        result = await self._on_submit(self.read_form()) if self._on_submit else None

        submit_button.text = "Submit Application"
        if result and result.is_submitted:
            self.reset()
            self.show_success(True)
        elif result:
            self.show_errors(result.errors)
            self.show_banner("" if result.errors else result.message)
            submit_button.disabled = not self._controls["relocate_checkbox"].value
        self.container.update()

    def _handle_another(self, e) -> None:
        self.show_success(False)
        self.container.update()

    def __getattr__(self, name):
        return getattr(self.container, name)
