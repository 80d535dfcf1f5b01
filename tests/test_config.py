"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from shamir256.config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "SHAMIR256_LOG_LEVEL",
        "SHAMIR256_LOG_JSON",
        "SHAMIR256_MAX_SECRET_SIZE",
        "SHAMIR256_MAX_WORKERS",
        "SHAMIR256_PARALLEL_MIN_BYTES",
        "SHAMIR256_METRICS_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.max_secret_size is None
        assert settings.max_workers == 1
        assert settings.parallel_min_bytes == 65536
        assert settings.metrics_enabled is True
        assert settings.parallel_enabled is False

    def test_reads_environment(self, clean_env):
        clean_env.setenv("SHAMIR256_LOG_LEVEL", "debug")
        clean_env.setenv("SHAMIR256_LOG_JSON", "true")
        clean_env.setenv("SHAMIR256_MAX_SECRET_SIZE", "1024")
        clean_env.setenv("SHAMIR256_MAX_WORKERS", "4")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.max_secret_size == 1024
        assert settings.max_workers == 4
        assert settings.parallel_enabled is True

    def test_unknown_log_level_rejected(self, clean_env):
        clean_env.setenv("SHAMIR256_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        "name,value",
        [
            ("SHAMIR256_MAX_WORKERS", "0"),
            ("SHAMIR256_MAX_SECRET_SIZE", "-1"),
            ("SHAMIR256_PARALLEL_MIN_BYTES", "0"),
        ],
    )
    def test_invalid_limits_rejected(self, clean_env, name, value):
        clean_env.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self, clean_env):
        assert get_settings() is get_settings()

        get_settings.cache_clear()
        clean_env.setenv("SHAMIR256_MAX_WORKERS", "2")

        assert get_settings().max_workers == 2
