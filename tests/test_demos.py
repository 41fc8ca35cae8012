"""Tests for the console demonstrations."""

import pytest

from creational import DatabaseGymMembership
from creational.demos import DEMOS, main


def test_abstract_factory_demo(capsys):
    assert main(["abstract-factory"]) == 0

    assert capsys.readouterr().out == (
        "== abstract-factory ==\n"
        "Mushroom attacks Mario!\n"
        "Coin collected!\n"
        "Turtle attacks Mario!\n"
        "Star collected!\n"
    )


def test_factory_method_demo(capsys):
    main(["factory-method"])

    assert capsys.readouterr().out == (
        "== factory-method ==\nI am Mushroom and I attack!\nI am Turtle and I attack!\n"
    )


def test_builder_demo(capsys):
    main(["builder"])

    out = capsys.readouterr().out
    assert out.startswith("== builder ==\nGym Membership Details:\n- Duration: 3 month(s)\n")
    assert "- Duration: 12 month(s)\n- Personal Training: Yes\n" in out
    assert out.count("Gym Membership Details:") == 2


def test_prototype_demo(capsys):
    main(["prototype"])

    out = capsys.readouterr().out
    assert [line for line in out.splitlines() if line.startswith("Gym Membership for")] == [
        "Gym Membership for Alice:",
        "Gym Membership for Bob:",
        "Gym Membership for Charlie:",
    ]
    assert out.endswith(
        "- Duration: 3 month(s)\n"
        "- Personal Training: Yes\n"
        "- Swimming Pool Access: Yes\n"
        "- Diet Plan: Yes\n"
    )


def test_singleton_demo(capsys):
    start = DatabaseGymMembership.get_instance().total_members

    main(["singleton"])

    assert capsys.readouterr().out == (
        "== singleton ==\n"
        f"Member added! Total members: {start + 1}\n"
        f"Member added! Total members: {start + 2}\n"
        "True\n"
    )


def test_all_runs_every_demo_in_order(capsys):
    assert main([]) == 0

    headers = [line for line in capsys.readouterr().out.splitlines() if line.startswith("== ")]
    assert headers == [f"== {name} ==" for name in DEMOS]


def test_unknown_pattern_exits(capsys):
    with pytest.raises(SystemExit):
        main(["adapter"])
