"""
Job Description Component

Static view of the advertised position.
"""

import flet as ft

from careers.domain.entities import JobPosting
from ..styles import Theme


def _bullets(items: tuple[str, ...]) -> ft.Column:
    return ft.Column([
        ft.Row([
            ft.Icon(ft.Icons.CHECK_CIRCLE_OUTLINE, color=Theme.SECONDARY, size=16),
            ft.Text(item, color=Theme.TEXT_SECONDARY, expand=True),
        ], vertical_alignment=ft.CrossAxisAlignment.START)
        for item in items
    ], spacing=Theme.SPACING_SM)


def _fact(icon: str, text: str) -> ft.Row:
    return ft.Row([
        ft.Icon(icon, size=16, color=Theme.TEXT_SECONDARY),
        ft.Text(text, size=13, color=Theme.TEXT_SECONDARY),
    ], spacing=Theme.SPACING_XS, tight=True)


def create_job_description(posting: JobPosting) -> ft.Container:
    """
    Create the job posting card.

    Features:
    - Title with location, salary, type and level
    - Description, responsibilities and requirements
    - Relocation notice
    """
    facts = ft.Row([
        _fact(ft.Icons.PLACE, posting.location),
        _fact(ft.Icons.CURRENCY_RUPEE, posting.salary),
        _fact(ft.Icons.CALENDAR_MONTH, posting.employment_type),
        _fact(ft.Icons.PEOPLE, posting.level),
    ], wrap=True, spacing=Theme.SPACING_MD)

    relocation = ft.Container(
        content=ft.Row([
            ft.Icon(ft.Icons.INFO_OUTLINE, color=Theme.PRIMARY),
            ft.Text(posting.relocation_notice, color=Theme.PRIMARY_VARIANT, expand=True),
        ]),
        bgcolor="#ffedd5",
        border_radius=Theme.RADIUS_MD,
        padding=Theme.SPACING_MD,
    )

    return ft.Container(
        content=ft.Column([
            ft.Text(posting.title, size=28, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
            ft.Text(posting.company, size=14, color=Theme.TEXT_SECONDARY),
            facts,
            ft.Divider(height=1),
            ft.Text("Description", size=18, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
            ft.Text(posting.description, color=Theme.TEXT_SECONDARY),
            ft.Text("Responsibilities", size=18, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
            _bullets(posting.responsibilities),
            ft.Text("Requirements", size=18, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
            _bullets(posting.requirements),
            relocation,
        ], spacing=Theme.SPACING_MD),
        **Theme.card_style(),
    )
