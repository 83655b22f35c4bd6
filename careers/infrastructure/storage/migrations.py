"""
Database Migrations - Schema setup and versioning.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

SCHEMA_SQL = """
-- One document per submission
CREATE TABLE IF NOT EXISTS job_applications (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    mobile TEXT NOT NULL,
    java_experience TEXT NOT NULL,
    graduation_year TEXT NOT NULL,
    current_location TEXT NOT NULL,
    preferred_location TEXT DEFAULT '',
    notice_period TEXT DEFAULT '',
    previous_company TEXT DEFAULT '',
    relevant_skills TEXT DEFAULT '',
    additional_comments TEXT DEFAULT '',
    willing_to_relocate INTEGER NOT NULL CHECK(willing_to_relocate = 1),
    applied_at TEXT NOT NULL,
    created_at TEXT NOT NULL,
    status TEXT DEFAULT 'pending' CHECK(status IN ('pending', 'selected', 'rejected')),
    reviewed_at TEXT,
    review_notes TEXT
);

-- Schema version tracking
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY
);

-- Indexes for performance
CREATE INDEX IF NOT EXISTS idx_job_applications_applied_at ON job_applications(applied_at);
CREATE INDEX IF NOT EXISTS idx_job_applications_status ON job_applications(status);
"""


def run_migrations(db_path: Path, conn: Optional[sqlite3.Connection] = None) -> None:
    """
    Run database migrations to ensure schema is up to date.

    Args:
        db_path: Path to the SQLite database file.
        conn: Optional existing connection to use.
    """
    should_close = conn is None
    if conn is None:
        conn = sqlite3.connect(str(db_path))

    try:
        cursor = conn.cursor()

        # Check current version
        cursor.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
        )
        version_table_exists = cursor.fetchone() is not None

        current_version = 0
        if version_table_exists:
            cursor.execute("SELECT MAX(version) FROM schema_version")
            row = cursor.fetchone()
            current_version = row[0] if row and row[0] else 0

        if current_version < SCHEMA_VERSION:
            logger.info(f"Migrating {db_path} from schema {current_version} to {SCHEMA_VERSION}")
            cursor.executescript(SCHEMA_SQL)

            cursor.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (SCHEMA_VERSION,)
            )
            conn.commit()

    finally:
        if should_close:
            conn.close()
