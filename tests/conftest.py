"""
Shared fixtures for the test suite.
"""

from datetime import datetime, timedelta
from pathlib import Path
from typing import AsyncIterator

import pytest

from careers.config.settings import Settings
from careers.domain.services import EmailTemplates
from careers.domain.value_objects import ApplicationForm
from careers.infrastructure.storage import SQLiteAdapter


class SteppingClock:
    """Clock that advances one minute per call."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(minutes=1)
        return value


class FakeDispatcher:
    """Records messages instead of sending them."""

    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.sent: list[tuple[str, str, str]] = []

    async def send(self, recipient: str, subject: str, body: str) -> bool:
        self.sent.append((recipient, subject, body))
        return self.succeed


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Create test settings."""
    return Settings(
        data_dir=tmp_path,
        email_delay_seconds=0.0,
        admin_username="admin",
        admin_password="secret",
    )


@pytest.fixture
def templates(settings: Settings) -> EmailTemplates:
    """Email templates for the default posting."""
    return EmailTemplates(
        position=settings.position_title,
        company=settings.company_name,
        location=settings.job_location,
        website=settings.company_website,
    )


@pytest.fixture
def clock() -> SteppingClock:
    """Deterministic clock."""
    return SteppingClock(datetime(2025, 6, 1, 9, 0, 0))


@pytest.fixture
async def store(settings: Settings, clock: SteppingClock) -> AsyncIterator[SQLiteAdapter]:
    """Real SQLite store in a temporary directory."""
    adapter = SQLiteAdapter(settings.database_path, clock=clock)
    await adapter.initialize()
    yield adapter
    await adapter.close()


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    """Dispatcher that always succeeds."""
    return FakeDispatcher()


def _make_form(**overrides) -> ApplicationForm:
    data = {
        "name": "A",
        "email": "a@x.com",
        "mobile": "999",
        "java_experience": "1-2years",
        "graduation_year": "2023",
        "current_location": "Hyderabad",
        "willing_to_relocate": True,
    }
    data.update(overrides)
    return ApplicationForm(**data)


@pytest.fixture
def make_form():
    """Factory building a valid form, overriding selected fields."""
    return _make_form


@pytest.fixture
def valid_form() -> ApplicationForm:
    """A form that passes validation."""
    return _make_form()


@pytest.fixture
def failing_dispatcher() -> FakeDispatcher:
    """Dispatcher that always reports failure."""
    return FakeDispatcher(succeed=False)
