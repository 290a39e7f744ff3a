"""
nanoprint demo script.

Run this directly to see all interfaces in action:
    python demo.py
"""

import tempfile
import threading
import time

import nanoprint
from nanoprint import (
    DurationFormat,
    Editor,
    Export,
    Line,
    Printer,
    Timer,
    format_nanos,
)


# --- 1. Printer --------------------------------------------------------------

def colors():
    """Print one line per color."""
    for printer in Printer:
        printer.ln(f"this is {printer.name.lower()}")
    Printer.YELLOW.ln("parsed 12 rows", tag="loader")
    print(nanoprint.DIVISOR)


# --- 2. Stack traces ---------------------------------------------------------

def traced_step():
    """Print with the caller's stack appended."""
    Printer.CYAN.ln("where am I?")


def stacks():
    """Limit stack output to two frames, then print a traced message."""
    nanoprint.set_stack_depth(2)
    traced_step()
    nanoprint.print_stack(False)
    Printer.GREEN.stack_ln("single frame, regardless of the global switch")


# --- 3. Timer ----------------------------------------------------------------

def timing():
    """Exercise start, lap, sync_lap and elapsed."""
    timer = Timer.begin(Printer.PURPLE, DurationFormat.MILL_NAN)
    time.sleep(0.003)
    timer.lap()
    time.sleep(0.002)
    timer.lap()
    timer.elapsed()

    racing = Timer(DurationFormat.NANO, Printer.BLUE)
    racing.silent_start()
    threads = [threading.Thread(target=racing.lap) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    with Timer(printer=Printer.GREEN):
        time.sleep(0.001)

    Printer.WHITE.ln(format_nanos(1_999_999_999), tag="full format")


# --- 4. Files ----------------------------------------------------------------

def files():
    """Export a CSV and patch a text file in a temporary directory."""
    with tempfile.TemporaryDirectory() as directory:
        Export.TO_CSV.save(directory, "people", ["ID", "Name"], ["1", "Alice"])
        Export.TO_CSV.save(directory, "people", ["ID", "Name"], ["2", "Bob"])

        with open(f"{directory}/notes.txt", "w", encoding="utf-8") as file:
            file.write("title\nbody\n")
        patched = Editor.TXT.edit_line(directory, "notes", Line(0, "new title"))
        Printer.GREEN.ln(patched.read_text(encoding="utf-8"), tag=patched.name)


# --- run everything ----------------------------------------------------------

def main():
    """Execute all demos."""
    print("\n--- printer ---")
    colors()

    print("\n--- timer ---")
    timing()

    print("\n--- files ---")
    files()

    print("\n--- stack traces ---")
    stacks()


if __name__ == "__main__":
    main()
