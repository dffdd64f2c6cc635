"""Capture the current call stack and render it as text."""

from __future__ import annotations

import io
import traceback
from typing import TextIO

MAX_STACK_FRAMES = 64


class StackWalker:
    """Holds a snapshot of the call stack taken when it is created.

    At most ``MAX_STACK_FRAMES`` frames are kept. They are ordered from the
    innermost (where the walker was created) to the outermost.
    """

    def __init__(self):
        # Drop this constructor's own frame.
        captured = traceback.extract_stack()[:-1]
        self._frames = list(reversed(captured))[:MAX_STACK_FRAMES]

    @property
    def frames(self) -> list[traceback.FrameSummary]:
        """The captured frames, innermost first."""
        return list(self._frames)

    def dump_call_stack(self, stream: TextIO) -> None:
        """Write one tab-indented line per captured frame to ``stream``."""
        if not self._frames:
            stream.write("Empty stack frame, possibily corrupted.\n")
            return
        for frame in self._frames:
            stream.write(f"\t{frame.name} ({frame.filename}:{frame.lineno})\n")

    def call_stack_to_string(self) -> str:
        """Return the text that ``dump_call_stack`` would write."""
        buffer = io.StringIO()
        self.dump_call_stack(buffer)
        return buffer.getvalue()