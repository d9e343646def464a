"""Configuration module using Pydantic Settings.

Usage:
    from recordkit.config import RecordSettings, get_settings

    settings = RecordSettings(duplicate_id_policy="preserve")
"""

from recordkit.config.settings import RecordSettings, get_settings

__all__ = [
    "RecordSettings",
    "get_settings",
]
