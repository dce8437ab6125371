"""Exception types raised by the index-mapping layer."""

from __future__ import annotations


class DimensionMismatch(ValueError):
    """Operands disagree on their number of dimensions."""


class OutOfRange(IndexError):
    """A position, linear index, component or dimension number lies outside its interval."""


def check_in_range(value: int, stop: int, what: str) -> int:
    if value < 0 or value >= stop:
        raise OutOfRange(f"{what} {value} is out of range; valid interval is [0, {stop}).")
    return value
