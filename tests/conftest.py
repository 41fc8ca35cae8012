"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from creational.config import MembershipSettings


@pytest.fixture
def settings(monkeypatch):
    """Default settings, unaffected by the caller's environment."""
    monkeypatch.delenv("GYM_DEFAULT_DURATION_MONTHS", raising=False)
    monkeypatch.delenv("GYM_STRICT_DURATION", raising=False)
    return MembershipSettings(_env_file=None)


@pytest.fixture
def strict_settings(monkeypatch):
    monkeypatch.delenv("GYM_DEFAULT_DURATION_MONTHS", raising=False)
    return MembershipSettings(_env_file=None, strict_duration=True)
