"""Handle to the process-wide namespace shared by every copy of globalapi."""

from collections.abc import MutableMapping
from typing import Any
import sys
import threading


# Attribute on the `sys` module holding the namespace. Every copy of the
# library imported into the interpreter sees the same `sys` module.
PROCESS_ATTR = "__globalapi_shared__"

# Key of the lock guarding all tables in a namespace.
LOCK_KEY = "globalapi.lock"


class SharedGlobals:
    """
    A mutable key/value namespace plus the lock that guards it.

    Only builtin types should be stored here: two copies of this library
    have distinct classes, but they share dicts, strings and locks fine.
    """

    def __init__(self, namespace: MutableMapping[str, Any] | None = None):
        self._namespace: MutableMapping[str, Any] = {} if namespace is None else namespace
        # setdefault keeps the first lock ever stored, so all handles on the
        # same namespace serialize on it.
        self.lock: threading.RLock = self._namespace.setdefault(LOCK_KEY, threading.RLock())

    def get(self, key: str) -> dict[str, Any] | None:
        """Return the table stored under `key`, or None."""
        return self._namespace.get(key)

    def get_or_create(self, key: str, version: str) -> dict[str, Any]:
        """Return the table under `key`, creating it stamped with `version`."""
        table = self._namespace.get(key)
        if table is None:
            table = {"version": version}
            self._namespace[key] = table
        return table


def process_globals() -> SharedGlobals:
    """Handle on the real process-wide namespace."""
    namespace = sys.__dict__.setdefault(PROCESS_ATTR, {})
    return SharedGlobals(namespace)
