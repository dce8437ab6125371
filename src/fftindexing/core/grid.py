"""Lazy multidimensional grid of frequency-bin indices."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from numbers import Integral
from typing import Any

import numpy as np

from .axis import FrequencyAxis, frequency_value
from .config import DEFAULT_GRID_CONFIG, GridConfig
from .errors import DimensionMismatch, OutOfRange, check_in_range
from .index import AbstractFrequencyIndex, FrequencyIndex


def _axes_from(args: tuple[Any, ...]) -> tuple[FrequencyAxis, ...]:
    if len(args) == 1 and not isinstance(args[0], Integral):
        src = args[0]
        if isinstance(src, FrequencyGrid):
            return src.axes
        # Only a tuple is read as a shape; anything else is an array whose shape is used.
        if isinstance(src, tuple):
            return tuple(FrequencyAxis(n) for n in src)
        return tuple(FrequencyAxis(n) for n in np.shape(src))
    return tuple(FrequencyAxis(n) for n in args)


@dataclass(frozen=True, init=False, repr=False)
class FrequencyGrid:
    """Read-only view of every :class:`FrequencyIndex` of an array shape.

    The grid is the frequency-space counterpart of ``numpy.ndindex``: element
    ``k`` (in the configured order) is the frequency index of the array
    position ``numpy.unravel_index(k, shape, order=order)``. Only the axis
    lengths are stored.

    Accepted constructions::

        FrequencyGrid(6, 9)                     # lengths as arguments
        FrequencyGrid((6, 9))                   # shape tuple
        FrequencyGrid((range(6), range(9)))     # lengths of ranges
        FrequencyGrid(a)                        # shape of an array-like
        FrequencyGrid(())                       # zero-dimensional, one element

    Examples
    --------
    >>> grid = FrequencyGrid(3, 3)
    >>> grid.at(2, 1)
    FrequencyIndex(-1, 1)
    >>> list(FrequencyGrid(4))
    [FrequencyIndex(0), FrequencyIndex(1), FrequencyIndex(-2), FrequencyIndex(-1)]
    """

    axes: tuple[FrequencyAxis, ...]
    order: str

    def __init__(self, *args: Any, order: str | None = None, config: GridConfig | None = None) -> None:
        if order is not None and config is not None:
            raise ValueError("Pass either order or config, not both.")
        if config is None:
            if order is None and len(args) == 1 and isinstance(args[0], FrequencyGrid):
                # A grid built from another grid keeps its order unless told otherwise.
                order = args[0].order
            config = DEFAULT_GRID_CONFIG if order is None else GridConfig(order=order)
        object.__setattr__(self, "axes", _axes_from(args))
        object.__setattr__(self, "order", config.order)

    def __repr__(self) -> str:
        if self.order == DEFAULT_GRID_CONFIG.order:
            return f"FrequencyGrid({self.shape})"
        return f"FrequencyGrid({self.shape}, order={self.order!r})"

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(ax.length for ax in self.axes)

    @property
    def ndim(self) -> int:
        return len(self.axes)

    @property
    def size(self) -> int:
        return math.prod(self.shape)

    def axis(self, d: int) -> FrequencyAxis:
        return self.axes[check_in_range(operator.index(d), self.ndim, "dimension")]

    def axis_or_default(self, d: int) -> FrequencyAxis:
        """Like :meth:`axis`, but dimensions past the last one have length 1.

        Used when broadcasting this grid against data with more dimensions.
        """
        d = operator.index(d)
        if d < 0:
            raise OutOfRange(f"dimension {d} is out of range; dimensions start at 0.")
        return self.axes[d] if d < self.ndim else FrequencyAxis(1)

    def _check_position(self, coords: Sequence[int]) -> tuple[int, ...]:
        coords = tuple(operator.index(c) for c in coords)
        if len(coords) != self.ndim:
            raise DimensionMismatch(
                f"Expected {self.ndim} coordinate(s) for a grid of shape {self.shape}; got {len(coords)}."
            )
        for d, (c, n) in enumerate(zip(coords, self.shape)):
            check_in_range(c, n, f"dimension {d} position")
        return coords

    def at_position(self, coords: Sequence[int]) -> FrequencyIndex:
        coords = self._check_position(coords)
        return FrequencyIndex(tuple(ax.at(c) for ax, c in zip(self.axes, coords)))

    def _unravel(self, i: int) -> tuple[int, ...]:
        coords = [0] * self.ndim
        dims = range(self.ndim - 1, -1, -1) if self.order == "C" else range(self.ndim)
        for d in dims:
            i, coords[d] = divmod(i, self.axes[d].length)
        return tuple(coords)

    def at_linear(self, i: int) -> FrequencyIndex:
        i = check_in_range(operator.index(i), self.size, "linear index")
        return self.at_position(self._unravel(i))

    def at(self, *coords: int) -> FrequencyIndex:
        """Frequency index at a multi-coordinate position or a linear index.

        With as many coordinates as dimensions, each is a zero-based position
        along its dimension. A single coordinate on a grid that is not
        one-dimensional is a linear index in the grid's order.
        """
        if len(coords) == self.ndim:
            return self.at_position(coords)
        if len(coords) == 1:
            return self.at_linear(coords[0])
        raise DimensionMismatch(
            f"Expected {self.ndim} coordinate(s) or one linear index for a grid of shape "
            f"{self.shape}; got {len(coords)}."
        )

    def __getitem__(self, key: Any) -> FrequencyIndex:
        if isinstance(key, tuple):
            return self.at(*key)
        return self.at(key)

    def linear_index(self, coords: Sequence[int]) -> int:
        """Linear index of a positional coordinate; inverse of the unravel used by :meth:`at`."""
        coords = self._check_position(coords)
        dims = range(self.ndim) if self.order == "C" else range(self.ndim - 1, -1, -1)
        i = 0
        for d in dims:
            i = i * self.axes[d].length + coords[d]
        return i

    def position(self, index: AbstractFrequencyIndex) -> tuple[int, ...]:
        """Positional coordinate of ``index`` within an array of this grid's shape."""
        return index.to_positional(self.shape)

    def __iter__(self) -> Iterator[FrequencyIndex]:
        if self.size == 0:
            return
        shape = self.shape
        # Odometer over positions; the fastest dimension comes first in `dims`.
        dims = range(self.ndim - 1, -1, -1) if self.order == "C" else range(self.ndim)
        pos = [0] * self.ndim
        while True:
            yield FrequencyIndex(tuple(frequency_value(p, n) for p, n in zip(pos, shape)))
            for d in dims:
                pos[d] += 1
                if pos[d] < shape[d]:
                    break
                pos[d] = 0
            else:
                return

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, AbstractFrequencyIndex):
            return False
        freqs = item.as_tuple()
        return len(freqs) == self.ndim and all(f in ax for f, ax in zip(freqs, self.axes))

    def axis_arrays(self) -> tuple[np.ndarray, ...]:
        """One integer frequency array per axis, for ``numpy.ix_`` or broadcasting."""
        return tuple(ax.to_numpy() for ax in self.axes)
