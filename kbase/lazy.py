"""A value created on first access, exactly once, even across threads."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """Hold a value that ``creator`` builds the first time it is asked for.

    If ``creator`` raises, nothing is stored and the next access tries again.
    """

    def __init__(self, creator: Callable[[], T]):
        self._creator = creator
        self._lock = threading.Lock()
        self._created = False
        self._value: T | None = None

    def value(self) -> T:
        """Return the value, creating it on the first call."""
        if not self._created:
            with self._lock:
                if not self._created:
                    self._value = self._creator()
                    self._created = True
        return self._value  # type: ignore[return-value]