"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
membership builder.

Usage:
    from creational.config import MembershipSettings

    # Load from environment variables (GYM_*)
    settings = MembershipSettings()

    # Or override with explicit values
    settings = MembershipSettings(strict_duration=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class MembershipSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for building gym memberships.

    Attributes:
        default_duration_months: Duration a builder starts from before
            set_duration() is called.
        strict_duration: Reject non-positive durations instead of warning.

    Environment Variables:
        GYM_DEFAULT_DURATION_MONTHS
        GYM_STRICT_DURATION
    """

    model_config = SettingsConfigDict(
        env_prefix="GYM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_duration_months: int = 1
    strict_duration: bool = False
