"""
Careers - Job posting micro-site with application review.

Entry point for the application.
"""

import logging
import sys

import flet as ft

from careers.config.settings import get_settings


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


async def main(page: ft.Page) -> None:
    """Main entry point - Flet app target."""
    from careers.presentation.gui.app import build_app
    await build_app(page)


def run() -> None:
    """Serve the site in the browser."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logging.getLogger(__name__).info(
        f"Serving careers site on http://{settings.host}:{settings.port} ({settings.env})"
    )
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
