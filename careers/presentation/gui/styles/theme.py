"""
Theme Configuration for the Careers GUI.

Brand colors and spacing shared by the public page and the dashboard.
"""

import flet as ft


class Theme:
    """Theme configuration for the application."""

    # Brand palette
    PRIMARY = "#ea580c"  # Orange 600
    PRIMARY_VARIANT = "#c2410c"
    SECONDARY = "#16a34a"  # Green 600
    SECONDARY_VARIANT = "#15803d"
    ACCENT = "#2563eb"  # Blue 600

    ERROR = "#dc2626"  # Red
    WARNING = "#ca8a04"  # Yellow
    SUCCESS = "#16a34a"  # Green
    INFO = "#2563eb"  # Blue

    # Status badges (background, foreground)
    PENDING_BADGE = ("#fef9c3", "#854d0e")
    SELECTED_BADGE = ("#dcfce7", "#166534")
    REJECTED_BADGE = ("#fee2e2", "#991b1b")

    # Light surfaces
    BG = "#fff7ed"  # Orange 50
    SURFACE = "#ffffff"
    CARD = "#ffffff"
    MUTED_BG = "#f9fafb"
    BORDER = "#e5e7eb"
    TEXT = "#111827"  # Gray 900
    TEXT_SECONDARY = "#4b5563"  # Gray 600
    FOOTER_BG = "#111827"
    FOOTER_TEXT = "#d1d5db"

    # Spacing
    SPACING_XS = 4
    SPACING_SM = 8
    SPACING_MD = 16
    SPACING_LG = 24
    SPACING_XL = 32

    # Border radius
    RADIUS_SM = 4
    RADIUS_MD = 8
    RADIUS_LG = 12
    RADIUS_XL = 16

    @classmethod
    def get_flet_theme(cls) -> ft.Theme:
        """Get Flet theme configuration."""
        return ft.Theme(
            color_scheme_seed=cls.PRIMARY,
            color_scheme=ft.ColorScheme(
                primary=cls.ACCENT,
                secondary=cls.SECONDARY,
                error=cls.ERROR,
            ),
        )

    @classmethod
    def card_style(cls) -> dict:
        """Get card styling."""
        return {
            "bgcolor": cls.CARD,
            "border_radius": cls.RADIUS_LG,
            "padding": cls.SPACING_LG,
            "shadow": ft.BoxShadow(blur_radius=12, color="#1f000000"),
        }

    @classmethod
    def button_style(cls, variant: str = "primary") -> ft.ButtonStyle:
        """Get button styling."""
        colors = {
            "primary": cls.ACCENT,
            "secondary": cls.SECONDARY,
            "error": cls.ERROR,
            "success": cls.SUCCESS,
        }
        return ft.ButtonStyle(
            color="white",
            bgcolor=colors.get(variant, cls.ACCENT),
            shape=ft.RoundedRectangleBorder(radius=cls.RADIUS_MD),
            padding=ft.padding.symmetric(horizontal=cls.SPACING_LG, vertical=cls.SPACING_MD),
        )
