"""Configuration settings using Pydantic Settings.

Usage:
    from recordkit.config import RecordSettings, get_settings

    # Load from environment variables (RECORDKIT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = RecordSettings(duplicate_id_policy="preserve")
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from recordkit.core.record.models import IdPolicy


class RecordSettings(BaseSettings):  # type: ignore[misc]
    """Library-wide defaults.

    Attributes:
        duplicate_id_policy: Id handling for Record.duplicate() when no
            policy is passed (reset or preserve).
        log_level: Level used by configure_from_settings().
        json_logs: Emit JSON log lines instead of the console format.

    Environment Variables:
        RECORDKIT_DUPLICATE_ID_POLICY
        RECORDKIT_LOG_LEVEL
        RECORDKIT_JSON_LOGS
    """

    model_config = SettingsConfigDict(
        env_prefix="RECORDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    duplicate_id_policy: IdPolicy = IdPolicy.RESET
    log_level: str = "WARNING"
    json_logs: bool = False


@lru_cache(maxsize=1)
def get_settings() -> RecordSettings:
    """Cached settings; call get_settings.cache_clear() after changing the environment."""
    return RecordSettings()
