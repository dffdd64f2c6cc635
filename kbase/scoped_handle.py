"""Owners of closable handles that close them when they are done."""

from __future__ import annotations

import os
from typing import Any, IO


class ScopedHandle:
    """Owns a handle and closes it on reset, replacement or leaving a block.

    Subclasses choose what a null handle is, which handles are valid and
    how one is closed. The default treats None as null and closes a handle
    by calling its ``close()`` method.
    """

    null_handle: Any = None

    def __init__(self, handle: Any = None):
        self._handle = self.null_handle if handle is None else handle

    @classmethod
    def is_valid(cls, handle: Any) -> bool:
        return handle is not None and handle != cls.null_handle

    @classmethod
    def close_handle(cls, handle: Any) -> None:
        handle.close()

    def _close(self) -> None:
        if self.is_valid(self._handle):
            self.close_handle(self._handle)

    def __bool__(self) -> bool:
        return self.is_valid(self._handle)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._handle!r})"

    def get(self) -> Any:
        """Return the owned handle without giving up ownership."""
        return self._handle

    def release(self) -> Any:
        """Give up ownership and return the handle, leaving this one null."""
        handle = self._handle
        self._handle = self.null_handle
        return handle

    def reset(self, new_handle: Any = None) -> None:
        """Close the owned handle and take ``new_handle`` (null if omitted)."""
        self._close()
        self._handle = self.null_handle if new_handle is None else new_handle

    def swap(self, other: ScopedHandle) -> None:
        """Exchange owned handles with ``other``."""
        self._handle, other._handle = other._handle, self._handle

    def __enter__(self) -> ScopedHandle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.reset()

    def __del__(self) -> None:
        try:
            self.reset()
        except (OSError, AttributeError, ValueError):
            pass


class ScopedFD(ScopedHandle):
    """Owns an operating-system file descriptor; -1 is the null handle."""

    null_handle = -1

    @classmethod
    def is_valid(cls, handle: Any) -> bool:
        return handle != -1

    @classmethod
    def close_handle(cls, handle: int) -> None:
        os.close(handle)


class ScopedFileHandle(ScopedHandle):
    """Owns a file object; None is the null handle."""

    null_handle = None

    @classmethod
    def is_valid(cls, handle: IO | None) -> bool:
        return handle is not None