"""
Unit tests for configuration.
"""

import pytest
from pydantic import ValidationError

from careers.config.settings import Settings


class TestSettings:

    def test_defaults(self, tmp_path):
        settings = Settings(data_dir=tmp_path)

        assert settings.port == 8553
        assert settings.email_delay_seconds == 2.0
        assert settings.commit_on_dispatch_failure is True
        assert settings.guard_concurrent_reviews is True
        assert settings.database_path == tmp_path / "careers.db"

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CAREERS_PORT", "9000")
        monkeypatch.setenv("CAREERS_COMMIT_ON_DISPATCH_FAILURE", "false")

        settings = Settings(data_dir=tmp_path)

        assert settings.port == 9000
        assert settings.commit_on_dispatch_failure is False

    def test_year_range_must_be_ordered(self, tmp_path):
        with pytest.raises(ValidationError):
            Settings(data_dir=tmp_path, graduation_year_min=2030, graduation_year_max=2020)
