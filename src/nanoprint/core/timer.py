"""
Reusable nanosecond stopwatch with lap reporting.

lap() is lock-free from the caller's point of view: it takes a single
compare-and-set on the last observation. When several threads lap at the
same instant only one wins that window; the others print nothing and get
None back. There is no retry.

sync_lap() is the lock-based variant. It stores the lap *duration* as the
new baseline, not the current timestamp, so consecutive sync laps are not
comparable with lap(). That asymmetry is kept as-is.

Calling elapsed_nanos(), elapsed() or lap() before start() or
silent_start() is a usage error: it trips an assert, and with assertions
disabled the result is a meaningless large duration.
"""

import itertools
import textwrap
import threading
import time
from datetime import datetime
from typing import Optional

from .atomic import AtomicLong
from .durations import DurationFormat
from ..output.printer import Printer

_NOT_STARTED = 0
_INDENT = "   "

_timer_ids = itertools.count()


def _now_ns() -> int:
    return time.perf_counter_ns()


class Timer:
    """
    Interval stopwatch that prints its readings through a Printer.

    Can be used manually or as a context manager:

        timer = Timer(DurationFormat.MILL_NAN, Printer.CYAN, autostart=True)
        step_one()
        timer.lap()
        step_two()
        timer.elapsed()

        with Timer(printer=Printer.GREEN):
            work()              # prints elapsed time on exit
    """

    def __init__(self, fmt: DurationFormat = DurationFormat.FULL,
                 printer: Printer = Printer.WHITE, autostart: bool = False):
        """
        Args:
            fmt: How durations are rendered
            printer: Color used for every message of this timer
            autostart: Call start() immediately
        """
        self.timer_id = next(_timer_ids)
        self.fmt = fmt
        self.printer = printer
        self._start_ns = _NOT_STARTED
        self._last = AtomicLong(_NOT_STARTED)
        self._lock = threading.Lock()
        if autostart:
            self.start()

    @classmethod
    def begin(cls, printer: Printer = Printer.WHITE,
              fmt: DurationFormat = DurationFormat.FULL) -> "Timer":
        """Return a timer that has already been started."""
        return cls(fmt, printer, autostart=True)

    def _reset(self) -> None:
        now = _now_ns()
        self._start_ns = now
        self._last.set(now)

    def _begin_message(self) -> str:
        wall_clock = datetime.now().strftime("%I:%M %p")
        return (f"\n >>> Timer {self.timer_id}, begins at = \n"
                f"{textwrap.indent(wall_clock, _INDENT)}")

    def start(self) -> None:
        """Reset start and lap baseline to now and print the begin message."""
        self._reset()
        self.printer.ln(self._begin_message())

    def silent_start(self) -> None:
        """Same as start() without printing."""
        self._reset()

    def start_text(self) -> str:
        """Same as start() but return the rendered begin message instead."""
        self._reset()
        return self.printer.apply(self._begin_message())

    @property
    def started(self) -> bool:
        return self._start_ns != _NOT_STARTED

    def _emit(self, prefix: str, nanos: int) -> None:
        body = textwrap.indent(self.fmt.format(nanos), _INDENT)
        self.printer.ln(f"{prefix} at (timer {self.timer_id})...\n{body}")

    def elapsed_nanos(self) -> int:
        """Return nanoseconds since the last start."""
        assert self.started, "Must call start() or silent_start() first."
        return _now_ns() - self._start_ns

    def elapsed(self) -> int:
        """Print and return the time since the last start."""
        nanos = self.elapsed_nanos()
        self._emit("Elapsed", nanos)
        return nanos

    def lap(self) -> Optional[int]:
        """
        Print the time since the previous lap (or start) with one CAS.

        Returns:
            The lap in nanoseconds, or None if a concurrent lap won the window.
        """
        prev = self._last.get()
        assert prev != _NOT_STARTED, "Must call start() or silent_start() first."
        now = _now_ns()
        delta = now - prev
        if not self._last.compare_and_set(prev, now):
            return None
        self._emit("Lapsed", delta)
        return delta

    def sync_lap(self) -> int:
        """
        Lock-based lap.

        Stores the lap duration as the new baseline instead of the current
        timestamp, unlike lap().
        """
        with self._lock:
            prev = self._last.get()
            lap = _now_ns() - prev
            self._last.set(lap)
            self._emit("Sync lapsed", lap)
            return lap

    def __enter__(self) -> "Timer":
        """Start timing on context entry."""
        self.start()
        return self

    def __exit__(self, *_) -> None:
        """Print elapsed time on context exit."""
        self.elapsed()

    def __repr__(self):
        return f"Timer(id={self.timer_id}, fmt={self.fmt!r}, printer={self.printer.name})"
