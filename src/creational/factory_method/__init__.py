"""Factory Method: levels that decide which enemy to load.

The orchestration lives in play(); levels only supply load_enemy().

Usage:
    from creational.factory_method import ForestLevel, start

    start(ForestLevel())
    # I am Mushroom and I attack!
"""

from creational.factory_method.enemies import Mushroom, Turtle
from creational.factory_method.levels import BeachLevel, ForestLevel, GameLevel, play, start
from creational.factory_method.protocol import Enemy, EnemySource

__all__ = [
    "Enemy",
    "EnemySource",
    "Mushroom",
    "Turtle",
    "GameLevel",
    "ForestLevel",
    "BeachLevel",
    "play",
    "start",
]
