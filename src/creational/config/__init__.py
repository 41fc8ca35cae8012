"""Configuration module using Pydantic Settings.

Provides typed configuration for the membership examples with environment
variable support.

Usage:
    from creational.config import MembershipSettings

    settings = MembershipSettings(default_duration_months=6)
"""

from creational.config.settings import MembershipSettings

__all__ = [
    "MembershipSettings",
]
