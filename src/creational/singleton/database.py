from __future__ import annotations

import threading

_CONSTRUCT_KEY = object()


class DatabaseGymMembership:
    """Process-wide membership counter. Singleton per process.

    Obtain it with get_instance(); calling the class directly raises TypeError.
    The instance is never torn down.
    """

    _instance: DatabaseGymMembership | None = None
    _lock = threading.Lock()

    def __init__(self, _key: object = None) -> None:
        if _key is not _CONSTRUCT_KEY:
            raise TypeError(
                f"{type(self).__name__} cannot be instantiated directly. "
                f"Use {type(self).__name__}.get_instance()."
            )
        self.total_members = 0
        self._members_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> DatabaseGymMembership:
        """Get the singleton instance, creating it if necessary."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_CONSTRUCT_KEY)
        return cls._instance

    # Copying or unpickling must not bypass get_instance().
    def __copy__(self) -> DatabaseGymMembership:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> DatabaseGymMembership:
        return self

    def __reduce__(self) -> tuple[object, tuple[()]]:
        return (type(self).get_instance, ())

    def add_member(self) -> None:
        """Count one more member and report the new total."""
        with self._members_lock:
            self.total_members += 1
            total = self.total_members
        print(f"Member added! Total members: {total}")
