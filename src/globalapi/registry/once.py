"""Compute-once value holder."""

from typing import Callable, Generic
import threading
import time
from typing_extensions import TypeVar


T = TypeVar('T', default=object)


class Once(Generic[T]):
    """
    Lazily computes a value on first `get()` and caches it.

    Thread-safe: the factory runs at most once even under concurrent first use.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._value: T | None = None
        self._done = False
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._done

    def get(self) -> T:
        if self._done:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._done:
                self._value = self._factory()
                self._done = True
        return self._value  # type: ignore[return-value]


def clock_instance_id() -> int:
    """Millisecond component of the wall clock, 0-999."""
    return time.time_ns() // 1_000_000 % 1000


# Instance id of this copy of the library, picked at first override registration.
process_instance_id: Once[int] = Once(clock_instance_id)
