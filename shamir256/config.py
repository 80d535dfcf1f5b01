"""Library configuration."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Settings loaded from SHAMIR256_* environment variables."""

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # JSON structured output for log aggregation

    # Upper bound on secret length in bytes (None = unlimited)
    max_secret_size: Optional[int] = None

    # Per-byte work is spread over a thread pool once secrets reach
    # parallel_min_bytes. One worker keeps everything on the calling thread.
    max_workers: int = 1
    parallel_min_bytes: int = 65536

    # Prometheus metrics
    metrics_enabled: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SHAMIR256_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def _check_limits(self) -> "Settings":
        """Reject sizes and pool settings that can never work."""
        if self.max_secret_size is not None and self.max_secret_size < 0:
            raise ValueError("max_secret_size must be >= 0")
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if self.parallel_min_bytes < 1:
            raise ValueError("parallel_min_bytes must be >= 1")
        return self

    @property
    def parallel_enabled(self) -> bool:
        """Check if per-byte work may use the thread pool."""
        return self.max_workers > 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
