"""Membership snapshot produced by the builder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GymMembership:
    """Immutable membership. Create through GymMembershipBuilder.

    Attributes:
        has_personal_training: Member has personal training sessions.
        has_swimming_pool: Member has swimming pool access.
        has_diet_plan: Member has a diet plan.
        duration_months: Length of the membership in months.
    """

    has_personal_training: bool = False
    has_swimming_pool: bool = False
    has_diet_plan: bool = False
    duration_months: float = 1

    def show_info(self) -> None:
        """Print the membership details."""
        print("Gym Membership Details:")
        print(f"- Duration: {self.duration_months} month(s)")
        print(f"- Personal Training: {'Yes' if self.has_personal_training else 'No'}")
        print(f"- Swimming Pool Access: {'Yes' if self.has_swimming_pool else 'No'}")
        print(f"- Diet Plan: {'Yes' if self.has_diet_plan else 'No'}")
