"""Helpers for calls that may be interrupted by a signal."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def handle_eintr(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call ``fn`` again for as long as it raises InterruptedError."""
    while True:
        try:
            return fn(*args, **kwargs)
        except InterruptedError:
            continue


def ignore_eintr(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T | int:
    """Call ``fn`` once; if it is interrupted, return 0 instead of raising."""
    try:
        return fn(*args, **kwargs)
    except InterruptedError:
        return 0