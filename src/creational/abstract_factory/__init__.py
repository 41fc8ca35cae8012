"""Abstract Factory: themed levels that produce matching enemy/collectible pairs.

Usage:
    from creational.abstract_factory import ForestFactory, run_level

    run_level(ForestFactory())
    # Mushroom attacks Mario!
    # Coin collected!
"""

from creational.abstract_factory.factories import (
    BeachFactory,
    ForestFactory,
    UnknownLevelError,
    get_level_factory,
    level_names,
    register_level_factory,
    run_level,
)
from creational.abstract_factory.products import Coin, Mushroom, Star, Turtle
from creational.abstract_factory.protocol import Collectible, Enemy, LevelFactory

__all__ = [
    # Protocols
    "Enemy",
    "Collectible",
    "LevelFactory",
    # Products
    "Mushroom",
    "Turtle",
    "Coin",
    "Star",
    # Factories
    "ForestFactory",
    "BeachFactory",
    "run_level",
    "get_level_factory",
    "register_level_factory",
    "level_names",
    "UnknownLevelError",
]
