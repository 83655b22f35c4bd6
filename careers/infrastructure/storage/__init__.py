# Storage Package
from .sqlite_adapter import SQLiteAdapter
from .migrations import run_migrations

__all__ = ["SQLiteAdapter", "run_migrations"]
