"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from ledgerlens_config import Settings, clear_settings_cache, get_settings
from ledgerlens_config.settings import _resolve_env_file_path


class TestSettingsDefaults:
    """Tests for the built-in defaults."""

    def test_defaults(self):
        """Test every setting has its documented default."""
        settings = Settings(_env_file=None)

        assert settings.app_name == "LedgerLens"
        assert settings.default_view_type == "Week"
        assert settings.list_page_size == 10
        assert settings.query_cache_size == 128
        assert settings.income_fallback_emoji == "💰"
        assert settings.log_level == "INFO"


class TestSettingsFromEnvironment:
    """Environment variables override defaults."""

    def test_reads_environment(self, monkeypatch):
        """Test sizes are read from environment variables."""
        monkeypatch.setenv("LIST_PAGE_SIZE", "25")
        monkeypatch.setenv("QUERY_CACHE_SIZE", "0")

        settings = Settings(_env_file=None)

        assert settings.list_page_size == 25
        assert settings.query_cache_size == 0

    @pytest.mark.parametrize("raw", ["month", "MONTH", " Month "])
    def test_view_type_is_normalized(self, monkeypatch, raw):
        """Test the default view type is normalized to its canonical name."""
        monkeypatch.setenv("DEFAULT_VIEW_TYPE", raw)

        assert Settings(_env_file=None).default_view_type == "Month"

    def test_unknown_view_type_is_rejected(self, monkeypatch):
        """Test an unknown default view type fails validation."""
        monkeypatch.setenv("DEFAULT_VIEW_TYPE", "fortnight")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        ("name", "value"),
        [("LIST_PAGE_SIZE", "0"), ("QUERY_CACHE_SIZE", "-1")],
    )
    def test_sizes_are_validated(self, monkeypatch, name, value):
        """Test a zero page size or negative cache size fails validation."""
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    """Tests for the cached settings getter."""

    def test_is_cached(self):
        """Test repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self, monkeypatch):
        """Test clearing the cache picks up changed environment variables."""
        first = get_settings()
        monkeypatch.setenv("APP_NAME", "Other")

        clear_settings_cache()

        assert get_settings() is not first
        assert get_settings().app_name == "Other"


class TestEnvFileResolution:
    """Tests for locating the env file."""

    def test_explicit_env_file(self, tmp_path, monkeypatch):
        """Test LEDGERLENS_ENV_FILE points at the env file to load."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("LIST_PAGE_SIZE=3\n", encoding="utf-8")
        monkeypatch.setenv("LEDGERLENS_ENV_FILE", str(env_file))

        assert _resolve_env_file_path() == env_file
        assert Settings(_env_file=env_file).list_page_size == 3

    def test_missing_explicit_file_is_skipped(self, tmp_path, monkeypatch):
        """Test a missing explicit env file falls back to the defaults."""
        monkeypatch.setenv("LEDGERLENS_ENV_FILE", str(tmp_path / "absent.env"))

        assert _resolve_env_file_path() != tmp_path / "absent.env"
