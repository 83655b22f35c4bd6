"""
Careers Configuration Module

Environment-based configuration with fail-fast validation.
All settings are loaded from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="CAREERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    data_dir: Path = Field(
        default=Path("./data"),
        description="Directory for runtime data (database)",
    )

    # Web server
    host: str = Field(
        default="127.0.0.1",
        description="Interface the web app binds to",
    )
    port: int = Field(
        default=8553,
        ge=1,
        le=65535,
        description="Port the web app listens on",
    )

    # Admin gate (not a security boundary)
    admin_username: str = Field(
        default="admin",
        description="Username accepted by the admin login",
    )
    admin_password: str = Field(
        default="admin123",
        description="Password accepted by the admin login",
    )

    # Notifications
    email_sender: str = Field(
        default="careers@haryak.com",
        description="From address shown on status notifications",
    )
    email_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Simulated delivery time of a notification",
    )

    # Review workflow
    commit_on_dispatch_failure: bool = Field(
        default=True,
        description="Record the review even when the notification could not be sent",
    )
    guard_concurrent_reviews: bool = Field(
        default=True,
        description="Only record a review if the application is still pending in the store",
    )

    # Posting
    company_name: str = Field(
        default="Haryak Technologies India Private Limited",
        description="Hiring company",
    )
    company_website: str = Field(
        default="www.haryak.com",
        description="Company website used in email signatures",
    )
    position_title: str = Field(
        default="Junior Java Developer",
        description="Title of the advertised position",
    )
    job_location: str = Field(
        default="Chilakaluripet, Andhra Pradesh",
        description="Work location applicants must relocate to",
    )
    graduation_year_min: int = Field(
        default=2015,
        description="Earliest graduation year accepted",
    )
    graduation_year_max: int = Field(
        default=2025,
        description="Latest graduation year accepted",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Convert string to Path."""
        return Path(v)

    @model_validator(mode="after")
    def check_graduation_range(self) -> "Settings":
        """Graduation year bounds must form a range."""
        if self.graduation_year_min > self.graduation_year_max:
            raise ValueError("graduation_year_min must not exceed graduation_year_max")
        return self

    def ensure_data_dir(self) -> None:
        """Create data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        """Path to SQLite database."""
        return self.data_dir / "careers.db"


def get_settings() -> Settings:
    """
    Get validated settings instance.

    Raises:
        ValidationError: If required settings are missing or invalid.
    """
    settings = Settings()
    settings.ensure_data_dir()
    return settings
