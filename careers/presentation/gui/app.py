"""
Careers Main Application - Flet GUI wired to the store and review workflow.

Routes:
- "/": job posting and application form
- "/admin": login gate, then the review dashboard
"""

import logging
from typing import Optional

import flet as ft

from careers.application.use_cases import (
    AdminAccess,
    ReviewSession,
    ReviewWorkflow,
    SubmitApplicationUseCase,
    SubmitResult,
)
from careers.config.settings import Settings, get_settings
from careers.domain.entities import JobPosting
from careers.domain.services import EmailTemplates
from careers.domain.value_objects import ApplicationForm
from careers.infrastructure.notifications import SimulatedEmailDispatcher
from careers.infrastructure.storage import SQLiteAdapter

from .components import (
    AdminDashboard,
    AdminLoginPanel,
    ApplicationFormPanel,
    create_job_description,
)
from .styles import Theme


logger = logging.getLogger(__name__)

ADMIN_ROUTE = "/admin"


async def build_app(page: ft.Page, settings: Optional[Settings] = None) -> None:
    """Build the careers site for one page session."""
    settings = settings or get_settings()

    # === PAGE CONFIGURATION ===
    page.title = f"Careers - {settings.company_name}"
    page.theme_mode = ft.ThemeMode.LIGHT
    page.theme = Theme.get_flet_theme()
    page.bgcolor = Theme.BG
    page.padding = 0
    page.scroll = ft.ScrollMode.AUTO

    # === COMPONENTS ===
    store = SQLiteAdapter(settings.database_path)
    await store.initialize()

    dispatcher = SimulatedEmailDispatcher(
        sender=settings.email_sender,
        delay_seconds=settings.email_delay_seconds,
    )
    templates = EmailTemplates(
        position=settings.position_title,
        company=settings.company_name,
        location=settings.job_location,
        website=settings.company_website,
    )
    posting = JobPosting.junior_java_developer(
        company=settings.company_name,
        location=settings.job_location,
        website=settings.company_website,
        title=settings.position_title,
    )

    submit_use_case = SubmitApplicationUseCase(
        store,
        graduation_year_min=settings.graduation_year_min,
        graduation_year_max=settings.graduation_year_max,
    )
    workflow = ReviewWorkflow(
        store,
        dispatcher,
        templates,
        commit_on_dispatch_failure=settings.commit_on_dispatch_failure,
        guard_concurrent_reviews=settings.guard_concurrent_reviews,
    )
    access = AdminAccess(settings.admin_username, settings.admin_password)

    # === STATE ===
    session = ReviewSession()

    async def close_store(e) -> None:
        await store.close()
        logger.info("Page session closed")

    page.on_close = close_store

    # === PUBLIC PAGE ===
    async def submit(form: ApplicationForm) -> SubmitResult:
        return await submit_use_case.execute(form)

    def public_view() -> list[ft.Control]:
        header = ft.Container(
            content=ft.Row([
                ft.Text(settings.company_name, size=20, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
                ft.Column([
                    ft.Text("Careers", size=24, weight=ft.FontWeight.BOLD, color=Theme.PRIMARY),
                    ft.Text("Join Our Team", size=13, color=Theme.SECONDARY),
                ], spacing=0, horizontal_alignment=ft.CrossAxisAlignment.END),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            bgcolor=Theme.SURFACE,
            padding=ft.padding.symmetric(horizontal=Theme.SPACING_XL, vertical=Theme.SPACING_MD),
        )

        form_panel = ApplicationFormPanel(posting, on_submit=submit)

        main_content = ft.Container(
            content=ft.ResponsiveRow([
                ft.Container(content=create_job_description(posting), col={"sm": 12, "lg": 6}),
                ft.Container(content=form_panel.container, col={"sm": 12, "lg": 6}),
            ], spacing=Theme.SPACING_XL, run_spacing=Theme.SPACING_XL),
            padding=Theme.SPACING_XL,
        )

        footer = ft.Container(
            content=ft.Column([
                ft.Text(settings.company_name, size=16, weight=ft.FontWeight.BOLD, color="#60a5fa"),
                ft.Text(
                    f"© {settings.company_name}. All rights reserved.",
                    color=Theme.FOOTER_TEXT,
                ),
                ft.Text("Empowering Tomorrow's Solutions, Today", size=12, color="#9ca3af"),
                ft.TextButton(
                    content=ft.Text("Admin", size=11, color="#6b7280"),
                    on_click=lambda e: page.go(ADMIN_ROUTE),
                ),
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=Theme.SPACING_SM),
            bgcolor=Theme.FOOTER_BG,
            padding=Theme.SPACING_XL,
            alignment=ft.alignment.center,
        )

        return [header, main_content, footer]

    # === ADMIN ===
    def login(username: str, password: str) -> bool:
        if access.login(session, username, password):
            page.run_task(show_route)
            return True
        return False

    def logout() -> None:
        access.logout(session)
        page.go("/")

    def login_view() -> list[ft.Control]:
        panel = AdminLoginPanel(on_login=login, on_back=lambda: page.go("/"))
        return [
            ft.Container(
                content=panel.container,
                alignment=ft.alignment.center,
                padding=Theme.SPACING_XL,
                expand=True,
            )
        ]

    def dashboard_view() -> list[ft.Control]:
        dashboard = AdminDashboard(page, workflow, session, on_logout=logout)
        page.overlay.clear()
        page.overlay.extend(dashboard.dialogs)
        page.run_task(dashboard.refresh)
        return [ft.Container(content=dashboard.container, padding=Theme.SPACING_XL)]

    # === ROUTING ===
    async def show_route(e=None) -> None:
        if page.route == ADMIN_ROUTE:
            if session.authenticated:
                controls = dashboard_view()
            else:
                controls = login_view()
        else:
            page.overlay.clear()
            controls = public_view()

        page.controls.clear()
        page.add(*controls)

    page.on_route_change = show_route
    await show_route()
