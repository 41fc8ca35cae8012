"""Registry of named prototypes.

Usage:
    catalog = MembershipCatalog()
    catalog.register("premium", GymMembership("template", True, True, True, 12))
    bob = catalog.clone("premium", member_name="Bob")
"""

from __future__ import annotations

from typing import Any

from creational.prototype.protocol import Cloneable


class MembershipCatalog:
    """Named templates that new memberships are cloned from.

    The catalog keeps its own copy of each registered prototype, so later
    changes to the registered object, or to anything cloned from the
    catalog, never alter the template.
    """

    def __init__(self) -> None:
        self._prototypes: dict[str, Cloneable] = {}

    def register(self, name: str, prototype: Cloneable) -> None:
        """Store a copy of prototype under name, replacing any previous one."""
        if not isinstance(prototype, Cloneable):
            raise TypeError(f"{type(prototype).__name__} does not implement clone()")
        self._prototypes[name] = prototype.clone()

    def unregister(self, name: str) -> None:
        """Remove a template. Raises KeyError if name is not registered."""
        del self._prototypes[name]

    def clone(self, name: str, **changes: Any) -> Any:
        """Clone the named template, applying changes to the copy.

        Raises:
            KeyError: If name is not registered.
        """
        return self._prototypes[name].clone(**changes)

    def names(self) -> list[str]:
        """Registered template names, sorted."""
        return sorted(self._prototypes)

    def __contains__(self, name: object) -> bool:
        return name in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)
