"""Protocols for the level factory family.

A factory only has to provide the two creation methods; nothing needs to
inherit from these classes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Enemy(Protocol):
    """Anything that can attack the player."""

    def attack(self) -> None:
        """Perform the enemy's attack."""
        ...


@runtime_checkable
class Collectible(Protocol):
    """Anything the player can pick up."""

    def collect(self) -> None:
        """Pick the item up."""
        ...


@runtime_checkable
class LevelFactory(Protocol):
    """Creates one consistent family of level objects.

    Each call returns a new object. Implementations must always pair the same
    enemy type with the same collectible type.
    """

    def create_enemy(self) -> Enemy:
        """Create this level's enemy."""
        ...

    def create_collectible(self) -> Collectible:
        """Create this level's collectible."""
        ...
