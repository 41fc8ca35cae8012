"""Protocols for the factory method example."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Enemy(Protocol):
    def attack(self) -> None: ...


@runtime_checkable
class EnemySource(Protocol):
    """The one step that varies between levels: choosing the enemy."""

    def load_enemy(self) -> Enemy:
        """Create the enemy for this level."""
        ...
