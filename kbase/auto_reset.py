"""Restore an attribute or mapping entry to its original value on exit."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


class AutoReset:
    """Remember ``target.name`` (or ``target[name]`` for mappings) now,
    and put that value back when the ``with`` block ends."""

    def __init__(self, target: Any, name: Any):
        self._target = target
        self._name = name
        self.original_value = self._read()

    def _read(self) -> Any:
        if isinstance(self._target, MutableMapping):
            return self._target[self._name]
        return getattr(self._target, self._name)

    def _restore(self) -> None:
        if isinstance(self._target, MutableMapping):
            self._target[self._name] = self.original_value
        else:
            setattr(self._target, self._name, self.original_value)

    def __enter__(self) -> AutoReset:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._restore()