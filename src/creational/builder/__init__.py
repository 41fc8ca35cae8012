"""Builder: assemble a gym membership one optional feature at a time.

Usage:
    from creational.builder import GymMembershipBuilder

    membership = (
        GymMembershipBuilder()
        .set_duration(12)
        .add_personal_training()
        .add_swimming_pool()
        .build()
    )
    membership.show_info()
"""

from creational.builder.builder import GymMembershipBuilder
from creational.builder.models import GymMembership

__all__ = [
    "GymMembership",
    "GymMembershipBuilder",
]
