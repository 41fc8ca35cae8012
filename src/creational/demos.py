"""Console demonstrations for each pattern.

Usage:
    python -m creational              # Run every demonstration
    python -m creational builder      # Run one demonstration
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from creational.abstract_factory import BeachFactory, ForestFactory, run_level
from creational.builder import GymMembershipBuilder
from creational.factory_method import BeachLevel, ForestLevel, start
from creational.prototype import GymMembership
from creational.singleton import DatabaseGymMembership


def abstract_factory_demo() -> None:
    run_level(ForestFactory())
    run_level(BeachFactory())


def factory_method_demo() -> None:
    start(ForestLevel())
    start(BeachLevel())


def builder_demo() -> None:
    basic = GymMembershipBuilder().set_duration(3).build()
    premium = (
        GymMembershipBuilder()
        .set_duration(12)
        .add_personal_training()
        .add_swimming_pool()
        .add_diet_plan()
        .build()
    )

    basic.show_info()
    premium.show_info()


def prototype_demo() -> None:
    original = GymMembership(
        "Alice",
        has_personal_training=True,
        has_swimming_pool=True,
        has_diet_plan=True,
        duration_months=12,
    )
    original.show_info()

    cloned = original.clone()
    cloned.member_name = "Bob"
    cloned.show_info()

    short = original.clone()
    short.member_name = "Charlie"
    short.duration_months = 3
    short.show_info()


def singleton_demo() -> None:
    db1 = DatabaseGymMembership.get_instance()
    db1.add_member()

    db2 = DatabaseGymMembership.get_instance()
    db2.add_member()

    print(db1 is db2)


DEMOS: dict[str, Callable[[], None]] = {
    "abstract-factory": abstract_factory_demo,
    "factory-method": factory_method_demo,
    "builder": builder_demo,
    "prototype": prototype_demo,
    "singleton": singleton_demo,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="creational",
        description="Creational design pattern demonstrations",
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        default="all",
        choices=[*DEMOS, "all"],
        help="Pattern to demonstrate (default: all)",
    )

    args = parser.parse_args(argv)
    selected = list(DEMOS) if args.pattern == "all" else [args.pattern]

    for name in selected:
        print(f"== {name} ==")
        DEMOS[name]()

    return 0


if __name__ == "__main__":
    sys.exit(main())
