"""
Centralized settings for tag-spine.

One validated, cached settings object read from ``TAGSPINE_*`` environment
variables and an optional ``.env`` file.

Fields
──────
hash_algorithm : Digest used for non-document tags (validated at startup)
database_url   : SQLAlchemy URL of the repository the SQL provider reads
database_echo  : Log every SQL statement
log_level      : structlog level
log_format     : ``json`` or ``console``

Examples:
    >>> from tagspine.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.hash_algorithm
    'md5'
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tagspine.core.hashing import DEFAULT_ALGORITHM, is_supported_algorithm

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TagSpineSettings(BaseSettings):
    """tag-spine configuration.

    All fields can be set via ``TAGSPINE_*`` environment variables (e.g.
    ``TAGSPINE_HASH_ALGORITHM=sha256``) or through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TAGSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Tags ─────────────────────────────────────────────────────
    hash_algorithm: str = Field(default=DEFAULT_ALGORITHM)

    # ── Database ─────────────────────────────────────────────────
    database_url: str = Field(default="sqlite:///tagspine.db")
    database_echo: bool = Field(default=False)

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    @field_validator("hash_algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        value = value.lower()
        if not is_supported_algorithm(value):
            raise ValueError(f"unsupported hash algorithm: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return value

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, TagSpineSettings] = {}


def get_settings(*, _force_reload: bool = False) -> TagSpineSettings:
    """Load, validate, and cache a :class:`TagSpineSettings` instance.

    Pass ``_force_reload=True`` (tests) to rebuild from the current
    environment.
    """
    if _force_reload or "default" not in _settings_cache:
        _settings_cache["default"] = TagSpineSettings()
    return _settings_cache["default"]


def clear_settings_cache() -> None:
    """Forget the cached settings instance."""
    _settings_cache.clear()


__all__ = [
    "LOG_LEVELS",
    "TagSpineSettings",
    "get_settings",
    "clear_settings_cache",
]
