"""Prototype protocol."""

from __future__ import annotations

from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Cloneable(Protocol):
    """An object that can copy itself without the caller knowing its fields."""

    def clone(self, **changes: Any) -> Self:
        """Return an independent copy, with changes applied to the copy only."""
        ...
