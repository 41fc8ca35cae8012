"""Tests for membership settings."""

from creational.config import MembershipSettings


def test_defaults(settings):
    assert settings.default_duration_months == 1
    assert settings.strict_duration is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GYM_DEFAULT_DURATION_MONTHS", "12")
    monkeypatch.setenv("GYM_STRICT_DURATION", "true")

    settings = MembershipSettings(_env_file=None)

    assert settings.default_duration_months == 12
    assert settings.strict_duration is True


def test_ignores_unrelated_environment(monkeypatch):
    monkeypatch.setenv("GYM_UNKNOWN_OPTION", "x")

    settings = MembershipSettings(_env_file=None)

    assert not hasattr(settings, "unknown_option")


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("GYM_DEFAULT_DURATION_MONTHS", "12")

    settings = MembershipSettings(_env_file=None, default_duration_months=2)

    assert settings.default_duration_months == 2
