"""
SQLite Adapter - Application store backed by aiosqlite.

Each submission is one row keyed by an opaque id. Timestamps are stored
as ISO-8601 text so that text ordering matches time ordering.
"""

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

import aiosqlite

from careers.application.interfaces import StoragePort
from careers.domain.entities import JobApplication, ApplicationStatus, utc_now
from careers.domain.exceptions import StoreError
from careers.domain.value_objects import ApplicationForm
from .migrations import run_migrations


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _timestamp(value: datetime) -> str:
    return value.isoformat(timespec="microseconds")


class SQLiteAdapter(StoragePort):
    """
    SQLite database adapter for job applications.

    Provides async create, list, get and status updates.
    """

    def __init__(self, db_path: Path, clock: Clock = utc_now) -> None:
        """
        Initialize the adapter.

        Args:
            db_path: Path to the SQLite database file.
            clock: Source of server-side timestamps, UTC by default.
        """
        self.db_path = db_path
        self.clock = clock
        self._connection: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        """Initialize database and run migrations."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        # Run migrations synchronously first
        run_migrations(self.db_path)

        self._connection = await aiosqlite.connect(str(self.db_path))
        self._connection.row_factory = aiosqlite.Row
        logger.info(f"Application store opened at {self.db_path}")

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    @property
    def conn(self) -> aiosqlite.Connection:
        """Get the active connection or raise error."""
        if not self._connection:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._connection

    # ==================== Application Operations ====================

    async def create(self, form: ApplicationForm) -> JobApplication:
        """
        Persist a new application with status pending.

        Returns:
            The stored application with its id and applied_at.
        """
        application_id = uuid.uuid4().hex
        now = _timestamp(self.clock())
        data = form.to_dict()

        try:
            await self.conn.execute(
                """
                INSERT INTO job_applications
                (id, name, email, mobile, java_experience, graduation_year,
                 current_location, preferred_location, notice_period,
                 previous_company, relevant_skills, additional_comments,
                 willing_to_relocate, applied_at, created_at, status)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    application_id,
                    data["name"],
                    data["email"],
                    data["mobile"],
                    data["java_experience"],
                    data["graduation_year"],
                    data["current_location"],
                    data["preferred_location"],
                    data["notice_period"],
                    data["previous_company"],
                    data["relevant_skills"],
                    data["additional_comments"],
                    int(bool(data["willing_to_relocate"])),
                    now,
                    now,
                    ApplicationStatus.PENDING.value,
                )
            )
            await self.conn.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Could not save application: {e}") from e

        logger.info(f"Stored application {application_id} from {data['email']}")
        return JobApplication.from_dict({**data, "id": application_id, "applied_at": now})

    async def get(self, application_id: str) -> Optional[JobApplication]:
        """Get an application by id."""
        try:
            cursor = await self.conn.execute(
                "SELECT * FROM job_applications WHERE id = ?",
                (application_id,)
            )
            row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StoreError(f"Could not load application {application_id}: {e}") from e
        if row:
            return JobApplication.from_dict(dict(row))
        return None

    async def list_applications(self) -> list[JobApplication]:
        """Get all applications ordered by submission time, newest first."""
        try:
            cursor = await self.conn.execute(
                "SELECT * FROM job_applications ORDER BY applied_at DESC, rowid DESC"
            )
            rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise StoreError(f"Could not list applications: {e}") from e
        return [JobApplication.from_dict(dict(row)) for row in rows]

    async def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        reviewed_at: datetime,
        review_notes: str,
        expected_status: Optional[ApplicationStatus] = None,
    ) -> bool:
        """
        Record a review outcome in a single write.

        Returns:
            True if a row was updated.
        """
        query = (
            "UPDATE job_applications SET status = ?, reviewed_at = ?, review_notes = ? "
            "WHERE id = ?"
        )
        params: list[Any] = [status.value, _timestamp(reviewed_at), review_notes, application_id]

        if expected_status == ApplicationStatus.PENDING:
            query += " AND (status IS NULL OR status = ?)"
            params.append(expected_status.value)
        elif expected_status is not None:
            query += " AND status = ?"
            params.append(expected_status.value)

        try:
            cursor = await self.conn.execute(query, params)
            await self.conn.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Could not update application {application_id}: {e}") from e

        updated = cursor.rowcount > 0
        if not updated:
            logger.warning(f"No application updated for id {application_id}")
        return updated
