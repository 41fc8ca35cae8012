"""Creational: small, runnable examples of the creational design patterns.

Usage:
    from creational import ForestFactory, GymMembershipBuilder, run_level

    run_level(ForestFactory())

    membership = GymMembershipBuilder().set_duration(6).add_diet_plan().build()
    membership.show_info()

Each pattern lives in its own subpackage and shares nothing with the others:
    creational.abstract_factory, creational.factory_method,
    creational.builder, creational.prototype, creational.singleton
"""

__version__ = "0.1.0"

# Abstract Factory
from creational.abstract_factory import (
    BeachFactory,
    ForestFactory,
    LevelFactory,
    UnknownLevelError,
    get_level_factory,
    register_level_factory,
    run_level,
)

# Builder
from creational.builder import GymMembershipBuilder

# Config
from creational.config import MembershipSettings

# Factory Method
from creational.factory_method import BeachLevel, ForestLevel, GameLevel, play, start

# Prototype
from creational.prototype import Cloneable, MembershipCatalog

# Singleton
from creational.singleton import DatabaseGymMembership

__all__ = [
    # Version
    "__version__",
    # Abstract Factory
    "LevelFactory",
    "ForestFactory",
    "BeachFactory",
    "run_level",
    "get_level_factory",
    "register_level_factory",
    "UnknownLevelError",
    # Factory Method
    "GameLevel",
    "ForestLevel",
    "BeachLevel",
    "play",
    "start",
    # Builder
    "GymMembershipBuilder",
    # Prototype
    "Cloneable",
    "MembershipCatalog",
    # Singleton
    "DatabaseGymMembership",
    # Config
    "MembershipSettings",
]
