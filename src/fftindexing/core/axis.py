"""One-dimensional frequency axis in FFT bin order."""

from __future__ import annotations

import operator
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from numbers import Integral
from typing import Any

import numpy as np

from .errors import OutOfRange, check_in_range


def frequency_value(position: int, length: int) -> int:
    """Signed frequency stored at ``position`` of an FFT output of ``length`` bins.

    Positions at or past the Nyquist position ``ceil(length / 2)`` wrap to
    negative frequencies, matching ``numpy.fft.fftfreq(length, 1 / length)``.
    """
    return position if position < (length + 1) // 2 else position - length


def frequency_position(frequency: int, length: int) -> int:
    """Zero-based position holding ``frequency`` in an axis of ``length`` bins.

    Python's ``%`` is a floored modulo, so the result is never negative. Any
    integer is accepted; frequencies outside the axis alias onto it.
    """
    if length <= 0:
        raise OutOfRange(f"Cannot place frequency {frequency} on an axis of length {length}.")
    return frequency % length


def range_length(r: range) -> int:
    """Number of elements of ``r``; unlike ``len`` this is not capped at ``sys.maxsize``."""
    if r.step > 0:
        return max(0, (r.stop - r.start + r.step - 1) // r.step)
    return max(0, (r.start - r.stop - r.step - 1) // -r.step)


def _length_of(obj: Any) -> int:
    if isinstance(obj, FrequencyAxis):
        return obj.length
    if isinstance(obj, range):
        return range_length(obj)
    return len(obj)


@dataclass(frozen=True, repr=False)
class FrequencyAxis(Sequence):
    """Read-only view of the signed frequencies along one axis of length N.

    Nothing but the length is stored; every element is computed from its
    position.

    Examples
    --------
    >>> list(FrequencyAxis(4))
    [0, 1, -2, -1]
    >>> list(FrequencyAxis(5))
    [0, 1, 2, -2, -1]
    >>> FrequencyAxis([7.0, 8.0, 9.0])  # length inferred from a sequence
    FrequencyAxis(3)
    """

    length: int

    def __post_init__(self) -> None:
        try:
            n = operator.index(self.length)
        except TypeError:
            n = _length_of(self.length)
        if n < 0:
            raise ValueError(f"FrequencyAxis length must be non-negative; got {n}.")
        object.__setattr__(self, "length", int(n))

    def __repr__(self) -> str:
        return f"FrequencyAxis({self.length})"

    def __len__(self) -> int:
        return self.length

    def at(self, position: int) -> int:
        p = check_in_range(operator.index(position), self.length, "position")
        return frequency_value(p, self.length)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, slice):
            return [frequency_value(p, self.length) for p in range(self.length)[key]]
        return self.at(key)

    def __iter__(self) -> Iterator[int]:
        n = self.length
        return (frequency_value(p, n) for p in range(n))

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, Integral):
            return False
        return self.minimum() <= value <= self.maximum()

    def minimum(self) -> int:
        return -(self.length // 2)

    def maximum(self) -> int:
        return (self.length - 1) // 2

    @property
    def nyquist(self) -> int:
        """First position whose frequency is negative."""
        return (self.length + 1) // 2

    def sorted(self, reverse: bool = False) -> range:
        """Frequencies in ascending (or descending) order as a plain ``range``."""
        result = range(self.minimum(), self.maximum() + 1)
        return result[::-1] if reverse else result

    def position(self, frequency: int) -> int:
        """Inverse of :meth:`at`: the position holding ``frequency``."""
        f = operator.index(frequency)
        if f not in self:
            raise OutOfRange(
                f"frequency {f} is out of range; valid interval is [{self.minimum()}, {self.maximum()}]."
            )
        return frequency_position(f, self.length)

    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:
        if value not in self:
            raise ValueError(f"{value!r} is not in {self!r}")
        p = frequency_position(int(value), self.length)
        if p not in range(self.length)[start:stop]:
            raise ValueError(f"{value!r} is not in {self!r}[{start}:{stop}]")
        return p

    def count(self, value: Any) -> int:
        return 1 if value in self else 0

    def to_numpy(self) -> np.ndarray:
        """Materialize the axis; equal to ``numpy.fft.fftfreq(N, 1 / N)`` as integers."""
        p = np.arange(self.length)
        return np.where(p < self.nyquist, p, p - self.length)
