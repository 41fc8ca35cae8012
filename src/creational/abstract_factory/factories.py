"""Concrete level factories and the level runner.

Usage:
    factory = get_level_factory("beach")
    run_level(factory)
"""

from __future__ import annotations

from creational.abstract_factory.products import Coin, Mushroom, Star, Turtle
from creational.abstract_factory.protocol import Collectible, Enemy, LevelFactory


class ForestFactory:
    """Forest levels: Mushroom enemies and Coin collectibles."""

    def create_enemy(self) -> Enemy:
        return Mushroom()

    def create_collectible(self) -> Collectible:
        return Coin()


class BeachFactory:
    """Beach levels: Turtle enemies and Star collectibles."""

    def create_enemy(self) -> Enemy:
        return Turtle()

    def create_collectible(self) -> Collectible:
        return Star()


def run_level(factory: LevelFactory) -> None:
    """Play one level using whatever family the factory produces.

    Creates the enemy and the collectible once each, then the enemy attacks
    and the player collects the item.

    Args:
        factory: Any object providing create_enemy() and create_collectible().
    """
    enemy = factory.create_enemy()
    collectible = factory.create_collectible()

    enemy.attack()
    collectible.collect()


class UnknownLevelError(KeyError):
    """Raised when a level name has no registered factory."""


_factories: dict[str, type[LevelFactory]] = {
    "forest": ForestFactory,
    "beach": BeachFactory,
}


def _normalize(name: str) -> str:
    return name.strip().lower()


def register_level_factory(name: str, factory_cls: type[LevelFactory]) -> None:
    """Register a themed factory under a level name.

    Re-registering a name replaces the previous factory.

    Args:
        name: Level name (case-insensitive).
        factory_cls: Class whose instances satisfy LevelFactory.

    Raises:
        TypeError: If instances of factory_cls lack the creation methods.
    """
    missing = [
        method
        for method in ("create_enemy", "create_collectible")
        if not callable(getattr(factory_cls, method, None))
    ]
    if missing:
        raise TypeError(
            f"{getattr(factory_cls, '__name__', factory_cls)!r} is not a level factory: "
            f"missing {', '.join(missing)}"
        )
    _factories[_normalize(name)] = factory_cls


def get_level_factory(name: str) -> LevelFactory:
    """Create a new factory for the named level.

    Raises:
        UnknownLevelError: If no factory is registered under name.
    """
    try:
        factory_cls = _factories[_normalize(name)]
    except KeyError:
        raise UnknownLevelError(
            f"Unknown level {name!r}. Known levels: {', '.join(level_names())}"
        ) from None
    return factory_cls()


def level_names() -> list[str]:
    """Registered level names, sorted."""
    return sorted(_factories)
