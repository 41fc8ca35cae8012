"""Tests for the prototype catalog."""

import pytest

from creational.prototype import GymMembership, MembershipCatalog


@pytest.fixture
def catalog():
    catalog = MembershipCatalog()
    catalog.register("premium", GymMembership("template", True, True, True, 12))
    catalog.register("basic", GymMembership("template", duration_months=3))
    return catalog


def test_clone_from_catalog(catalog):
    bob = catalog.clone("premium", member_name="Bob")

    assert bob == GymMembership("Bob", True, True, True, 12)


def test_clones_are_independent_of_template(catalog):
    first = catalog.clone("basic")
    first.duration_months = 24

    assert catalog.clone("basic").duration_months == 3


def test_registered_object_changes_do_not_leak(catalog):
    template = GymMembership("template", duration_months=6)
    catalog.register("half-year", template)

    template.duration_months = 1

    assert catalog.clone("half-year").duration_months == 6


def test_unknown_name_raises(catalog):
    with pytest.raises(KeyError):
        catalog.clone("platinum")


def test_unregister(catalog):
    catalog.unregister("basic")

    assert "basic" not in catalog
    assert catalog.names() == ["premium"]
    with pytest.raises(KeyError):
        catalog.unregister("basic")


def test_register_replaces(catalog):
    catalog.register("basic", GymMembership("template", duration_months=1))

    assert len(catalog) == 2
    assert catalog.clone("basic").duration_months == 1


def test_register_rejects_non_cloneable(catalog):
    with pytest.raises(TypeError, match="does not implement clone"):
        catalog.register("bad", object())
