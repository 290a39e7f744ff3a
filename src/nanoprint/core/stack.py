"""
Call-stack capture configuration shared by every printer.

A single StackCapture instance (default_stack_capture) is read by the
printers on each call, so toggling it from any thread takes effect for
every subsequent print.

Frame indices count from the innermost frame:
    0 -> StackCapture.capture
    1 -> the printer's render step
    2 -> the public printer method (ln, stack_ln, ...)
    3 -> the code that called the printer   (default start index)
"""

import os
import sys
import threading
import traceback
from typing import Optional

from .errors import AlreadyInitializedError, InvalidIndexError

DEFAULT_START_INDEX = 3
DEFAULT_END_INDEX = sys.maxsize


class _Unset:
    """End index that has not been read yet; still writable."""

    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value


class _Locked:
    """End index latched by its first read; never writable again."""

    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value


def _format_frame(frame: traceback.FrameSummary) -> str:
    """Render one frame as "function(file.py:line)"."""
    return f"{frame.name}({os.path.basename(frame.filename)}:{frame.lineno})"


class StackCapture:
    """
    Thread-safe, explicitly owned stack capture settings.

    The end index is latched by its first read: once a capture has used it,
    set_end_index() raises AlreadyInitializedError.
    """

    def __init__(self, start_index: int = DEFAULT_START_INDEX,
                 end_index: int = DEFAULT_END_INDEX):
        self._lock = threading.Lock()
        self._enabled = False
        self._start_index = start_index
        self._end = _Unset(end_index)

    def is_enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def set_enabled(self, value: bool) -> None:
        """Switch stack capture on or off for every printer. Idempotent."""
        with self._lock:
            self._enabled = bool(value)

    @property
    def start_index(self) -> int:
        with self._lock:
            return self._start_index

    def set_start_index(self, index: int) -> None:
        """Set the first frame index shown. May be changed at any time."""
        if index < 0:
            raise InvalidIndexError(f"start index must be >= 0, got {index}")
        with self._lock:
            self._start_index = index

    @property
    def end_index(self) -> int:
        """Return the exclusive end index, latching it against later writes."""
        with self._lock:
            return self._latch_end()

    def is_end_index_locked(self) -> bool:
        with self._lock:
            return isinstance(self._end, _Locked)

    def set_end_index(self, index: int) -> None:
        """
        Set the exclusive end frame index and enable capture.

        Raises:
            AlreadyInitializedError: the end index has already been read
            InvalidIndexError: index is lower than 1
        """
        with self._lock:
            if isinstance(self._end, _Locked):
                raise AlreadyInitializedError(
                    "stack end index has already been used by a printer"
                )
            if index < 1:
                raise InvalidIndexError(f"end index must be >= 1, got {index}")
            self._end = _Unset(index)
            self._enabled = True

    def set_depth(self, depth: int) -> None:
        """Set the end index `depth` frames past the current start index."""
        self.set_end_index(self.start_index + depth)

    def print_single(self) -> None:
        """Limit capture to the single frame at the start index."""
        self.set_depth(1)

    def _latch_end(self) -> int:
        if isinstance(self._end, _Unset):
            self._end = _Locked(self._end.value)
        return self._end.value

    def bounds(self) -> tuple[int, int]:
        """Return (start, end) for a configured capture; latches the end."""
        with self._lock:
            return self._start_index, self._latch_end()

    def capture(self, start: Optional[int] = None, end: Optional[int] = None) -> str:
        """
        Render the calling thread's frames in [start, end), one per line.

        Missing bounds come from the configuration. An end beyond the stack is
        cut to the stack size; a start beyond it shows the outermost frame.
        """
        frames = traceback.extract_stack()[::-1]
        if end is None:
            default_start, end = self.bounds()
            start = default_start if start is None else start
        elif start is None:
            start = self.start_index

        available = len(frames)
        if start >= available:
            start, end = available - 1, available
        end = min(end, available)

        return "".join(f"\n    at {_format_frame(f)}" for f in frames[start:end])


# Module-level default configuration read by every printer.
default_stack_capture = StackCapture()
