"""Run a callback when a ``with`` block is left, unless dismissed."""

from __future__ import annotations

from collections.abc import Callable


class ScopeGuard:
    """Call ``callback`` on leaving the block, however it is left."""

    def __init__(self, callback: Callable[[], object]):
        self._callback = callback
        self._dismissed = False

    @property
    def dismissed(self) -> bool:
        return self._dismissed

    def dismiss(self) -> None:
        """Cancel the pending callback."""
        self._dismissed = True

    def __enter__(self) -> ScopeGuard:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._dismissed:
            self._dismissed = True
            self._callback()