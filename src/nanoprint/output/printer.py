"""
Colorized console printer with optional call-stack annotation.

Each Printer member is a stateless color tag. Whether a stack trace is
appended is decided on every call by reading the shared
default_stack_capture, so enabling capture from any thread switches all
printers at once.

Usage:
    Printer.GREEN.ln("loaded config")
    Printer.RED.ln("bad row", tag="parser")
    Printer.CYAN.stack_ln("who called me?")
"""

import re
import sys
from enum import Enum
from typing import Optional

import colorama
from colorama import Fore, Style

from ..core.stack import default_stack_capture

colorama.just_fix_windows_console()

RESET = Style.RESET_ALL

_LINE_START = re.compile(r"^", re.MULTILINE)

# Frame index of the code calling a Printer method.
_CALLER_INDEX = 3

DIVISOR = (
    "\n"
    "  || >>>>>>>> || ** \n"
    " ================\n"
    "  || >>>>>>>> || ** \n"
)


class Printer(Enum):
    """ANSI color tags that print messages to stdout."""

    GREEN = Fore.GREEN
    PURPLE = Fore.MAGENTA
    WHITE = Fore.WHITE
    RED = Fore.RED
    YELLOW = Fore.YELLOW
    BLUE = Fore.BLUE
    CYAN = Fore.CYAN

    def colorize(self, text: str) -> str:
        """Prefix every line with this color and append a reset code."""
        return _LINE_START.sub(self.value, text) + RESET

    def render(self, message: str, start: Optional[int] = None,
               end: Optional[int] = None) -> str:
        """
        Return the colored message, with the stack appended when requested.

        Explicit bounds always capture; otherwise the shared configuration
        decides.
        """
        if start is not None or end is not None:
            message += default_stack_capture.capture(start, end)
        elif default_stack_capture.is_enabled():
            message += default_stack_capture.capture()
        return self.colorize(message)

    def apply(self, message: str) -> str:
        """Return the rendered message without printing it."""
        return self.render(message)

    def ln(self, message, *, tag: Optional[str] = None, depth: Optional[int] = None,
           start: Optional[int] = None, end: Optional[int] = None) -> None:
        """
        Print a message on its own line.

        Passing depth, start or end always appends that stack slice for this
        call, whatever the shared configuration says.

        Args:
            message: Any object; converted with str()
            tag: Optional prefix rendered as "tag: message"
            depth: Capture this many frames from `start`
            start: First frame index; defaults to the configured start index
            end: Exclusive last frame index; cannot be combined with depth
        """
        text = str(message) if tag is None else f"{tag}: {message}"
        if depth is None and start is None and end is None:
            print(self.render(text))
            return
        if depth is not None and end is not None:
            raise ValueError("pass either depth or end, not both")
        if start is None:
            start = default_stack_capture.start_index
        if end is None:
            end = start + (1 if depth is None else depth)
        print(self.render(text, start, end))

    def stack_ln(self, message, at: int = _CALLER_INDEX) -> None:
        """Print a message followed by the single frame at index `at` (default: caller)."""
        print(self.render(str(message), at, at + 1))


def set_auto_flush(auto_flush: bool) -> bool:
    """
    Switch stdout line buffering on or off.

    Returns:
        True if the stream setting changed, False if it already matched
        or the stream cannot be reconfigured.
    """
    stream = sys.stdout
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None or stream.line_buffering == auto_flush:
        return False
    reconfigure(line_buffering=auto_flush)
    return True


def this_stack() -> str:
    """Return the frame of the code that called this function."""
    return default_stack_capture.capture(2, 3).strip()


def depth_stack(depth: int) -> str:
    """Return `depth` frames starting at the caller, comma separated."""
    frames = default_stack_capture.capture(2, 2 + depth)
    return ", \n ".join(line.strip() for line in frames.splitlines() if line.strip())
