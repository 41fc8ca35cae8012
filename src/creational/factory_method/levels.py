"""Game levels and the shared level orchestration.

Architecture Note:
    play() is the only place that knows the order of a level's steps.
    GameLevel.run() delegates to it, so subclasses override load_enemy() and
    nothing else. Objects that merely have load_enemy() can be passed to
    play() directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from creational.factory_method.enemies import Mushroom, Turtle
from creational.factory_method.protocol import Enemy, EnemySource


def play(source: EnemySource) -> None:
    """Load the level's enemy, then let it attack."""
    enemy = source.load_enemy()
    enemy.attack()


class GameLevel(ABC):
    """Base class for levels. Subclasses implement the factory method."""

    @abstractmethod
    def load_enemy(self) -> Enemy:
        """Factory method: create this level's enemy."""

    def run(self) -> None:
        """Run the level. Not meant to be overridden."""
        play(self)


class ForestLevel(GameLevel):
    def load_enemy(self) -> Enemy:
        return Mushroom()


class BeachLevel(GameLevel):
    def load_enemy(self) -> Enemy:
        return Turtle()


def start(level: GameLevel) -> None:
    """Start any level."""
    level.run()
