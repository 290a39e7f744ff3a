"""
Nanosecond duration formatting.

A DurationFormat is an ordered, coarsest-first tuple of DurationUnit values.
A unit alone in its format shows its full converted value. In a format with
several units every unit is wrapped by its own fixed modulus: millis by
1000, nanos by 1_000_000. Seconds have no modulus.

    format_nanos(1_999_999_999)  ->  "1[secs]: 999[millis]: 999999[nanos]"
"""

import time
from enum import Enum
from typing import Optional


class DurationUnit(Enum):
    """Time unit with its size in nanoseconds, display suffix and wraparound."""

    SECONDS = (1_000_000_000, "secs", None)
    MILLISECONDS = (1_000_000, "millis", 1_000)
    NANOSECONDS = (1, "nanos", 1_000_000)

    def __init__(self, nanos_per_unit: int, suffix: str, modulus: Optional[int]):
        self.nanos_per_unit = nanos_per_unit
        self.suffix = suffix
        self.modulus = modulus

    def convert(self, nanos: int) -> int:
        """Return the whole number of this unit contained in `nanos`."""
        return nanos // self.nanos_per_unit

    def wraparound(self) -> Optional[int]:
        """Return the modulus applied in multi-unit formats; None means none."""
        return self.modulus

    def render(self, nanos: int, wrapped: bool = False) -> str:
        """Render this unit's component as "<value>[<suffix>]"."""
        value = self.convert(nanos)
        if wrapped and self.modulus is not None:
            value %= self.modulus
        return f"{value}[{self.suffix}]"


class DurationFormat:
    """
    Immutable ordered selection of units used to render a duration.

    Predefined variants: SEC, MILL, NANO, MILL_NAN, FULL.
    """

    __slots__ = ("_units",)

    SEC: "DurationFormat"
    MILL: "DurationFormat"
    NANO: "DurationFormat"
    MILL_NAN: "DurationFormat"
    FULL: "DurationFormat"

    def __init__(self, *units: DurationUnit):
        if not units:
            raise ValueError("DurationFormat needs at least one unit")
        sizes = [unit.nanos_per_unit for unit in units]
        if any(a <= b for a, b in zip(sizes, sizes[1:])):
            raise ValueError("DurationFormat units must be ordered coarsest first")
        object.__setattr__(self, "_units", tuple(units))

    def __setattr__(self, name, value):
        raise AttributeError("DurationFormat is immutable")

    @property
    def units(self) -> tuple[DurationUnit, ...]:
        return self._units

    def format(self, nanos: int) -> str:
        """Render `nanos` using this format's units, joined by ": "."""
        if nanos < 0:
            raise ValueError(f"nanos must be non-negative, got {nanos}")
        wrapped = len(self._units) > 1
        return ": ".join(unit.render(nanos, wrapped) for unit in self._units)

    def __eq__(self, other):
        if not isinstance(other, DurationFormat):
            return NotImplemented
        return self._units == other._units

    def __hash__(self):
        return hash(self._units)

    def __repr__(self):
        names = ", ".join(unit.name for unit in self._units)
        return f"DurationFormat({names})"


DurationFormat.SEC = DurationFormat(DurationUnit.SECONDS)
DurationFormat.MILL = DurationFormat(DurationUnit.MILLISECONDS)
DurationFormat.NANO = DurationFormat(DurationUnit.NANOSECONDS)
DurationFormat.MILL_NAN = DurationFormat(DurationUnit.MILLISECONDS, DurationUnit.NANOSECONDS)
DurationFormat.FULL = DurationFormat(
    DurationUnit.SECONDS, DurationUnit.MILLISECONDS, DurationUnit.NANOSECONDS
)


def format_nanos(nanos: int, fmt: DurationFormat = DurationFormat.FULL) -> str:
    """Return a human-readable string for a nanosecond duration."""
    return fmt.format(nanos)


class Nanos:
    """Minimal stopwatch that starts counting when constructed."""

    def __init__(self):
        self.start_ns = time.perf_counter_ns()

    def lapse(self) -> int:
        """Return nanoseconds since construction."""
        return time.perf_counter_ns() - self.start_ns

    def lapse_text(self, fmt: DurationFormat = DurationFormat.FULL) -> str:
        """Return the time since construction rendered with `fmt`."""
        return fmt.format(self.lapse())
