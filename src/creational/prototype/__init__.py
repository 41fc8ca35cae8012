"""Prototype: new memberships by copying existing ones.

Usage:
    from creational.prototype import GymMembership

    alice = GymMembership("Alice", True, True, True, 12)
    bob = alice.clone(member_name="Bob")
"""

from creational.prototype.catalog import MembershipCatalog
from creational.prototype.models import GymMembership
from creational.prototype.protocol import Cloneable

__all__ = [
    "Cloneable",
    "GymMembership",
    "MembershipCatalog",
]
