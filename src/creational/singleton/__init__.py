"""Singleton: one shared membership database per process.

Usage:
    from creational.singleton import DatabaseGymMembership

    db = DatabaseGymMembership.get_instance()
    db.add_member()
    assert db is DatabaseGymMembership.get_instance()
"""

from creational.singleton.database import DatabaseGymMembership

__all__ = [
    "DatabaseGymMembership",
]
