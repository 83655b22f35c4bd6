"""
Admin Dashboard Component

Application statistics, the application table, detail view and the
notification editor used to select or reject an applicant.
"""

import flet as ft
from datetime import datetime
from typing import Callable, Optional

from careers.application.use_cases import (
    ReviewSession,
    ReviewWorkflow,
    TransitionOutcome,
)
from careers.domain.entities import ApplicationStatus, JobApplication
from careers.domain.value_objects import JAVA_EXPERIENCE_OPTIONS, NOTICE_PERIOD_OPTIONS
from ..styles import Theme


EXPERIENCE_LABELS = dict(JAVA_EXPERIENCE_OPTIONS)
NOTICE_LABELS = dict(NOTICE_PERIOD_OPTIONS)


def format_date(value: Optional[datetime]) -> str:
    """Format a timestamp for display."""
    if not value:
        return "N/A"
    return value.astimezone().strftime("%d %b %Y, %I:%M %p")


def status_badge(status: ApplicationStatus) -> ft.Container:
    """Colored pill showing an application status."""
    badges = {
        ApplicationStatus.PENDING: (ft.Icons.SCHEDULE, "Pending", Theme.PENDING_BADGE),
        ApplicationStatus.SELECTED: (ft.Icons.CHECK_CIRCLE, "Selected", Theme.SELECTED_BADGE),
        ApplicationStatus.REJECTED: (ft.Icons.CANCEL, "Rejected", Theme.REJECTED_BADGE),
    }
    icon, label, (bgcolor, color) = badges[status]
    return ft.Container(
        content=ft.Row([
            ft.Icon(icon, size=14, color=color),
            ft.Text(label, size=12, weight=ft.FontWeight.W_500, color=color),
        ], spacing=Theme.SPACING_XS, tight=True),
        bgcolor=bgcolor,
        border_radius=Theme.RADIUS_XL,
        padding=ft.padding.symmetric(horizontal=10, vertical=4),
    )


def _stat_card(label: str, icon: str, color: str) -> tuple[ft.Container, ft.Text]:
    value = ft.Text("0", size=24, weight=ft.FontWeight.BOLD, color=Theme.TEXT)
    card = ft.Container(
        content=ft.Row([
            ft.Icon(icon, size=32, color=color),
            ft.Column([
                ft.Text(label, size=13, color=Theme.TEXT_SECONDARY),
                value,
            ], spacing=0),
        ], spacing=Theme.SPACING_MD),
        col={"sm": 6, "md": 3},
        **Theme.card_style(),
    )
    return card, value


def _detail_row(icon: str, label: str, value: str) -> ft.Row:
    return ft.Row([
        ft.Icon(icon, size=16, color=Theme.TEXT_SECONDARY),
        ft.Text(f"{label}:", weight=ft.FontWeight.W_500, width=140),
        ft.Text(value or "-", expand=True, selectable=True),
    ], vertical_alignment=ft.CrossAxisAlignment.START)


class AdminDashboard:
    """
    Review dashboard bound to one admin session.

    The session holds the list, selection and draft; this class only
    renders it and forwards actions to the review workflow.
    """

    def __init__(
        self,
        page: ft.Page,
        workflow: ReviewWorkflow,
        session: ReviewSession,
        on_logout: Optional[Callable[[], None]] = None,
    ):
        self.page = page
        self.workflow = workflow
        self.session = session
        self._on_logout = on_logout

        # === STATS ===
        total_card, self._total = _stat_card("Total Applications", ft.Icons.PEOPLE, Theme.ACCENT)
        pending_card, self._pending = _stat_card("Pending", ft.Icons.SCHEDULE, Theme.WARNING)
        selected_card, self._selected = _stat_card("Selected", ft.Icons.CHECK_CIRCLE, Theme.SUCCESS)
        rejected_card, self._rejected = _stat_card("Rejected", ft.Icons.CANCEL, Theme.ERROR)

        # === TABLE ===
        self._table = ft.DataTable(
            columns=[
                ft.DataColumn(ft.Text("Applicant")),
                ft.DataColumn(ft.Text("Location")),
                ft.DataColumn(ft.Text("Experience")),
                ft.DataColumn(ft.Text("Applied")),
                ft.DataColumn(ft.Text("Status")),
                ft.DataColumn(ft.Text("Actions")),
            ],
            rows=[],
            heading_row_color=Theme.MUTED_BG,
        )
        self._empty_text = ft.Text("No applications yet", color=Theme.TEXT_SECONDARY, visible=False)
        self._loading = ft.ProgressRing(width=32, height=32, visible=False)
        self._notice = ft.Text("", size=13, visible=False)

        # === DETAIL DIALOG ===
        self._detail_content = ft.Column(spacing=Theme.SPACING_SM, scroll=ft.ScrollMode.AUTO)
        self.detail_dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Application Details"),
            content=ft.Container(content=self._detail_content, width=560, height=460),
            actions=[ft.TextButton("Close", on_click=self._close_detail)],
            actions_alignment=ft.MainAxisAlignment.END,
        )

        # === EMAIL DIALOG ===
        self._email_to = ft.Text("", color=Theme.TEXT_SECONDARY)
        self._email_subject = ft.Text("", weight=ft.FontWeight.W_500)
        self._email_message = ft.TextField(
            label="Message",
            multiline=True,
            min_lines=10,
            max_lines=16,
            border_radius=Theme.RADIUS_MD,
        )
        self._email_error = ft.Text("", color=Theme.ERROR, visible=False)
        self._send_button = ft.ElevatedButton(
            "Send Email & Update Status",
            icon=ft.Icons.SEND,
            style=Theme.button_style("primary"),
            on_click=self._send,
        )
        self._sending = ft.ProgressRing(width=20, height=20, visible=False)
        self.email_dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text(""),
            content=ft.Container(
                content=ft.Column([
                    self._email_to,
                    self._email_subject,
                    self._email_message,
                    self._email_error,
                ], spacing=Theme.SPACING_SM, scroll=ft.ScrollMode.AUTO),
                width=560,
            ),
            actions=[
                ft.TextButton("Cancel", on_click=self._cancel),
                self._sending,
                self._send_button,
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )

        header = ft.Container(
            content=ft.Row([
                ft.Column([
                    ft.Text("Admin Dashboard", size=24, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
                    ft.Text("Manage job applications", color=Theme.TEXT_SECONDARY),
                ], spacing=0),
                ft.Row([
                    ft.IconButton(icon=ft.Icons.REFRESH, tooltip="Refresh", on_click=self._refresh_click),
                    ft.TextButton("Logout", icon=ft.Icons.LOGOUT, on_click=self._logout_click),
                ]),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            bgcolor=Theme.SURFACE,
            padding=Theme.SPACING_MD,
        )

        table_card = ft.Container(
            content=ft.Column([
                ft.Text("Job Applications", size=18, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
                ft.Divider(height=1),
                self._loading,
                self._empty_text,
                ft.Row([self._table], scroll=ft.ScrollMode.AUTO),
            ], spacing=Theme.SPACING_MD),
            **Theme.card_style(),
        )

        self.container = ft.Column([
            header,
            self._notice,
            ft.ResponsiveRow([total_card, pending_card, selected_card, rejected_card], spacing=Theme.SPACING_LG),
            table_card,
        ], spacing=Theme.SPACING_LG)

    @property
    def dialogs(self) -> list[ft.AlertDialog]:
        """Dialogs to place in the page overlay."""
        return [self.detail_dialog, self.email_dialog]

    # === DATA ===

    async def refresh(self) -> None:
        """Reload applications from the store."""
        self._loading.visible = True
        self._safe_update()

        await self.workflow.load_applications(self.session)

        self._loading.visible = False
        if self.session.last_error:
            self._show_notice(f"Could not load applications: {self.session.last_error}", Theme.ERROR)
        self.render()

    def render(self) -> None:
        """Redraw statistics and the table from the session."""
        counts = self.session.counts()
        self._total.value = str(counts["total"])
        self._pending.value = str(counts[ApplicationStatus.PENDING.value])
        self._selected.value = str(counts[ApplicationStatus.SELECTED.value])
        self._rejected.value = str(counts[ApplicationStatus.REJECTED.value])

        self._table.rows = [self._row(application) for application in self.session.applications]
        self._empty_text.visible = not self.session.applications and not self.session.loading
        self._safe_update()

    def _row(self, application: JobApplication) -> ft.DataRow:
        actions = [
            ft.IconButton(
                icon=ft.Icons.VISIBILITY,
                tooltip="View details",
                on_click=lambda e, app_id=application.id: self._open_detail(app_id),
            ),
        ]
        if application.is_pending:
            actions += [
                ft.IconButton(
                    icon=ft.Icons.CHECK_CIRCLE,
                    icon_color=Theme.SUCCESS,
                    tooltip="Select",
                    on_click=lambda e, app=application: self._start_transition(app, ApplicationStatus.SELECTED),
                ),
                ft.IconButton(
                    icon=ft.Icons.CANCEL,
                    icon_color=Theme.ERROR,
                    tooltip="Reject",
                    on_click=lambda e, app=application: self._start_transition(app, ApplicationStatus.REJECTED),
                ),
            ]

        return ft.DataRow(cells=[
            ft.DataCell(ft.Column([
                ft.Text(application.name, weight=ft.FontWeight.W_500),
                ft.Text(application.email, size=12, color=Theme.TEXT_SECONDARY),
            ], spacing=0, alignment=ft.MainAxisAlignment.CENTER)),
            ft.DataCell(ft.Text(application.current_location)),
            ft.DataCell(ft.Text(EXPERIENCE_LABELS.get(application.java_experience, application.java_experience))),
            ft.DataCell(ft.Text(format_date(application.applied_at))),
            ft.DataCell(status_badge(application.status)),
            ft.DataCell(ft.Row(actions, spacing=0)),
        ])

    # === DETAIL ===

    def _open_detail(self, application_id: str) -> None:
        application = self.session.select(application_id)
        if not application:
            return

        rows = [
            status_badge(application.status),
            _detail_row(ft.Icons.PERSON, "Name", application.name),
            _detail_row(ft.Icons.EMAIL, "Email", application.email),
            _detail_row(ft.Icons.PHONE, "Mobile", application.mobile),
            _detail_row(ft.Icons.WORK, "Java Experience",
                        EXPERIENCE_LABELS.get(application.java_experience, application.java_experience)),
            _detail_row(ft.Icons.SCHOOL, "Graduation Year", application.graduation_year),
            _detail_row(ft.Icons.PLACE, "Current Location", application.current_location),
            _detail_row(ft.Icons.PLACE, "Preferred Location", application.preferred_location),
            _detail_row(ft.Icons.SCHEDULE, "Notice Period",
                        NOTICE_LABELS.get(application.notice_period, application.notice_period)),
            _detail_row(ft.Icons.BUSINESS, "Previous Company", application.previous_company),
            _detail_row(ft.Icons.DESCRIPTION, "Relevant Skills", application.relevant_skills),
            _detail_row(ft.Icons.COMMENT, "Comments", application.additional_comments),
            _detail_row(ft.Icons.FLIGHT, "Willing to Relocate", "Yes" if application.willing_to_relocate else "No"),
            _detail_row(ft.Icons.CALENDAR_TODAY, "Applied", format_date(application.applied_at)),
        ]
        if application.is_reviewed:
            rows += [
                _detail_row(ft.Icons.EVENT_AVAILABLE, "Reviewed", format_date(application.reviewed_at)),
                _detail_row(ft.Icons.MESSAGE, "Review Notes", application.review_notes or ""),
            ]
        self._detail_content.controls = rows
        self.detail_dialog.open = True
        self._safe_update()

    def _close_detail(self, e) -> None:
        self.session.clear_selection()
        self.detail_dialog.open = False
        self._safe_update()

    # === TRANSITION ===

    def _start_transition(self, application: JobApplication, status: ApplicationStatus) -> None:
        draft = self.workflow.begin_transition(self.session, application, status)

        selected = status == ApplicationStatus.SELECTED
        self.email_dialog.title = ft.Text(
            "Send Selection Email" if selected else "Send Rejection Email"
        )
        self._email_to.value = f"To: {application.name} <{application.email}>"
        self._email_subject.value = f"Subject: {draft.subject}"
        self._email_message.value = draft.message
        self._email_error.visible = False
        self._send_button.style = Theme.button_style("success" if selected else "error")
        self.email_dialog.open = True
        self._safe_update()

    async def _send(self, e) -> None:
        message = self._email_message.value or ""
        if not message.strip():
            self._email_error.value = "Message is required"
            self._email_error.visible = True
            self._safe_update()
            return

        self._send_button.disabled = True
        self._sending.visible = True
        self._email_error.visible = False
        self._safe_update()

        result = await self.workflow.confirm_transition(self.session, message)

        self._send_button.disabled = False
        self._sending.visible = False

        if result.outcome in (TransitionOutcome.COMPLETED, TransitionOutcome.CONFLICT):
            self.email_dialog.open = False
            color = Theme.SUCCESS if result.is_completed and result.notified else Theme.WARNING
            self._show_notice(result.message, color)
            self.render()
        else:
            self._email_error.value = result.message
            self._email_error.visible = True
            self._safe_update()

    def _cancel(self, e) -> None:
        self.workflow.cancel_transition(self.session)
        self.email_dialog.open = False
        self._safe_update()

    # === HEADER ===

    async def _refresh_click(self, e) -> None:
        self._notice.visible = False
        await self.refresh()

    def _logout_click(self, e) -> None:
        if self._on_logout:
            self._on_logout()

    def _show_notice(self, message: str, color: str) -> None:
        self._notice.value = message
        self._notice.color = color
        self._notice.visible = True

    def _safe_update(self) -> None:
        try:
            self.page.update()
        except Exception:
            pass  # May fail if not attached to page yet

    def __getattr__(self, name):
        return getattr(self.container, name)
