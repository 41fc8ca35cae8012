"""Fluent builder for GymMembership."""

from __future__ import annotations

import warnings
from typing import Self

from creational.builder.models import GymMembership
from creational.config import MembershipSettings


class GymMembershipBuilder:
    """Stages membership options and turns them into snapshots.

    Every configuration method returns the builder so calls can be chained.
    build() leaves the staged values in place, so one builder can produce
    several identical memberships.

    Args:
        settings: Defaults and duration policy. When omitted the built-in
            defaults are used and the environment is not read.
    """

    def __init__(self, settings: MembershipSettings | None = None) -> None:
        self._settings = (
            settings if settings is not None else MembershipSettings.model_construct()
        )
        self._has_personal_training = False
        self._has_swimming_pool = False
        self._has_diet_plan = False
        self._duration_months: float = self._settings.default_duration_months

    def add_personal_training(self) -> Self:
        self._has_personal_training = True
        return self

    def add_swimming_pool(self) -> Self:
        self._has_swimming_pool = True
        return self

    def add_diet_plan(self) -> Self:
        self._has_diet_plan = True
        return self

    def set_duration(self, months: float) -> Self:
        """Set the membership length.

        Any number is stored as given. Non-positive values produce a warning,
        or a ValueError when settings.strict_duration is enabled.
        """
        if months <= 0:
            if self._settings.strict_duration:
                raise ValueError(f"Membership duration must be positive, got {months}")
            warnings.warn(
                f"set_duration() received non-positive duration {months}.",
                stacklevel=2,
            )
        self._duration_months = months
        return self

    def build(self) -> GymMembership:
        """Snapshot the staged values into a new GymMembership."""
        return GymMembership(
            has_personal_training=self._has_personal_training,
            has_swimming_pool=self._has_swimming_pool,
            has_diet_plan=self._has_diet_plan,
            duration_months=self._duration_months,
        )
