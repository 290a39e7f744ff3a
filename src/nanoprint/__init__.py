"""
nanoprint - colorized debug printing and nanosecond lap timing.

Provides:
  - Printer            : colored stdout printer (GREEN, RED, CYAN, ...)
  - Timer              : reusable stopwatch with lock-free lap() and sync_lap()
  - Nanos              : bare stopwatch counting from construction
  - DurationFormat     : SEC, MILL, NANO, MILL_NAN, FULL duration layouts
  - format_nanos()     : render a nanosecond count with a DurationFormat
  - print_stack()      : append the caller's stack to every printed message
  - set_stack_end()    : fix the last stack frame shown (once, before use)
  - set_stack_depth()  : show N frames from the start index
  - set_stack_index()  : change the first stack frame shown
  - Export             : CSV export of string rows
  - Editor             : write a copy of a text file with lines swapped

All timings use time.perf_counter_ns for nanosecond precision.
"""

from .core.durations import DurationFormat, DurationUnit, Nanos, format_nanos
from .core.errors import (
    AlreadyInitializedError,
    ConfigurationError,
    InvalidIndexError,
    NanoprintError,
)
from .core.stack import StackCapture, default_stack_capture
from .core.timer import Timer

from .output.printer import DIVISOR, Printer, depth_stack, set_auto_flush, this_stack
from .output.export import Export
from .output.editor import Editor, Line


def print_stack(value: bool) -> None:
    """Enable or disable stack traces on every printed message."""
    default_stack_capture.set_enabled(value)


def is_stack_printed() -> bool:
    """Return True if printers currently append the stack."""
    return default_stack_capture.is_enabled()


def set_stack_end(end: int) -> None:
    """
    Set the exclusive last stack index printed and enable stack printing.

    Must be called before the first stack trace is printed.
    """
    default_stack_capture.set_end_index(end)


def set_stack_depth(depth: int) -> None:
    """Print `depth` frames starting at the current stack index."""
    default_stack_capture.set_depth(depth)


def print_single_stack() -> None:
    """Print only the caller's frame with each message."""
    default_stack_capture.print_single()


def set_stack_index(index: int) -> None:
    """Set the first stack index printed (default 3: the printer's caller)."""
    default_stack_capture.set_start_index(index)


__all__ = [
    "Printer",
    "Timer",
    "Nanos",
    "DurationFormat",
    "DurationUnit",
    "format_nanos",
    "StackCapture",
    "default_stack_capture",
    "print_stack",
    "is_stack_printed",
    "set_stack_end",
    "set_stack_depth",
    "print_single_stack",
    "set_stack_index",
    "set_auto_flush",
    "depth_stack",
    "this_stack",
    "DIVISOR",
    "Export",
    "Editor",
    "Line",
    "NanoprintError",
    "ConfigurationError",
    "AlreadyInitializedError",
    "InvalidIndexError",
]
