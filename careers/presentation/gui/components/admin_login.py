"""
Admin Login Component

Username/password gate in front of the dashboard.
"""

import flet as ft
from typing import Callable, Optional

from ..styles import Theme


def create_admin_login(
    on_login: Optional[Callable[[str, str], bool]] = None,
    on_back: Optional[Callable[[], None]] = None,
) -> tuple[ft.Container, dict]:
    """
    Create the admin login card.

    Returns:
        Tuple of (container, controls_dict) for external updates
    """
    username_input = ft.TextField(
        label="Username",
        border_radius=Theme.RADIUS_MD,
        prefix_icon=ft.Icons.PERSON,
        autofocus=True,
    )

    password_input = ft.TextField(
        label="Password",
        password=True,
        can_reveal_password=True,
        border_radius=Theme.RADIUS_MD,
        prefix_icon=ft.Icons.LOCK,
    )

    error_text = ft.Text("", color=Theme.ERROR, visible=False)

    def _on_submit(e) -> None:
        username = username_input.value or ""
        password = password_input.value or ""
        if not username or not password:
            error_text.value = "Enter username and password"
            error_text.visible = True
            error_text.update()
            return

        if on_login and not on_login(username, password):
            error_text.value = "Invalid credentials"
            error_text.visible = True
            password_input.value = ""
            container.update()

    password_input.on_submit = _on_submit

    def _on_back(e) -> None:
        if on_back:
            on_back()

    container = ft.Container(
        content=ft.Column([
            ft.Icon(ft.Icons.ADMIN_PANEL_SETTINGS, size=48, color=Theme.ACCENT),
            ft.Text("Admin Login", size=24, weight=ft.FontWeight.BOLD, color=Theme.TEXT),
            username_input,
            password_input,
            error_text,
            ft.ElevatedButton(
                "Login",
                icon=ft.Icons.LOGIN,
                style=Theme.button_style("primary"),
                on_click=_on_submit,
            ),
            ft.TextButton("Back to careers page", on_click=_on_back),
        ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=Theme.SPACING_MD),
        width=400,
        **Theme.card_style(),
    )

    controls = {
        "username_input": username_input,
        "password_input": password_input,
        "error_text": error_text,
    }

    return container, controls


class AdminLoginPanel:
    """Wrapper class for the admin login."""

    def __init__(
        self,
        on_login: Optional[Callable[[str, str], bool]] = None,
        on_back: Optional[Callable[[], None]] = None,
    ):
        self.container, self._controls = create_admin_login(on_login, on_back)

    def __getattr__(self, name):
        return getattr(self.container, name)
