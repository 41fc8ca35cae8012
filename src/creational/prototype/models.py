"""Cloneable gym membership."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Self


@dataclass(slots=True)
class GymMembership:
    """A member's subscription. Fields may be reassigned freely.

    Attributes:
        member_name: Name of the member.
        has_personal_training: Member has personal training sessions.
        has_swimming_pool: Member has swimming pool access.
        has_diet_plan: Member has a diet plan.
        duration_months: Length of the membership in months.
    """

    member_name: str
    has_personal_training: bool = False
    has_swimming_pool: bool = False
    has_diet_plan: bool = False
    duration_months: float = 1

    def clone(self, **changes: Any) -> Self:
        """Copy this membership.

        All fields are primitives, so a shallow copy is fully independent of
        the original.

        Args:
            **changes: Field values to override on the copy.

        Returns:
            A new GymMembership.

        Raises:
            TypeError: If changes names a field that does not exist.
        """
        return dataclasses.replace(self, **changes)

    def show_info(self) -> None:
        """Print the membership details."""
        print(f"Gym Membership for {self.member_name}:")
        print(f"- Duration: {self.duration_months} month(s)")
        print(f"- Personal Training: {'Yes' if self.has_personal_training else 'No'}")
        print(f"- Swimming Pool Access: {'Yes' if self.has_swimming_pool else 'No'}")
        print(f"- Diet Plan: {'Yes' if self.has_diet_plan else 'No'}")
