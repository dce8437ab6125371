"""Adapters between frequency indices and host arrays.

The host array is only ever asked for its shape (``numpy.shape``) and for
element access by positional key; nothing here copies array data.
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np

from .core.axis import FrequencyAxis
from .core.errors import DimensionMismatch, OutOfRange
from .core.grid import FrequencyGrid
from .core.index import AbstractFrequencyIndex


def shape_of(a: Any) -> tuple[int, ...]:
    return tuple(int(n) for n in np.shape(a))


def fftaxes(a: Any) -> tuple[FrequencyAxis, ...]:
    """One :class:`FrequencyAxis` per dimension of ``a``."""
    if isinstance(a, FrequencyGrid):
        return a.axes
    return tuple(FrequencyAxis(n) for n in shape_of(a))


def fftaxis(a: Any, d: int) -> FrequencyAxis:
    """The :class:`FrequencyAxis` of ``a`` along dimension ``d``.

    Dimensions past the last one are reported with length 1, so lower
    dimensional data broadcasts against higher dimensional data (see
    :meth:`FrequencyGrid.axis_or_default`).
    """
    if isinstance(a, FrequencyGrid):
        return a.axis_or_default(d)
    d = operator.index(d)
    if d < 0:
        raise OutOfRange(f"dimension {d} is out of range; dimensions start at 0.")
    shape = shape_of(a)
    return FrequencyAxis(shape[d]) if d < len(shape) else FrequencyAxis(1)


def positional(index: AbstractFrequencyIndex, a: Any) -> tuple[int, ...]:
    """Positions in ``a`` addressed by ``index``, which must cover every dimension of ``a``."""
    return index.to_positional(shape_of(a))


def to_indices(a: Any, *keys: Any) -> tuple[Any, ...]:
    """Translate a mixed key into a positional key for ``a``.

    Each frequency index consumes as many of the remaining dimensions as it
    has components; an integer or slice consumes one and ``None`` consumes
    none. The result can be used directly as ``a[result]``.

    >>> from fftindexing import FrequencyIndex
    >>> a = np.arange(24).reshape(2, 3, 4)
    >>> to_indices(a, FrequencyIndex(-1, 1), slice(None))
    (1, 1, slice(None, None, None))
    """
    shape = shape_of(a)
    out: list[Any] = []
    dim = 0
    for key in keys:
        if key is Ellipsis:
            raise TypeError("Ellipsis is not supported when mixing frequency indices with other keys.")
        if isinstance(key, AbstractFrequencyIndex):
            d = key.ndim
            if dim + d > len(shape):
                raise DimensionMismatch(
                    f"A {d}-dimensional index starting at dimension {dim} does not fit an object "
                    f"with {len(shape)} dimension(s) (shape {shape})."
                )
            out.extend(key.to_positional(shape[dim : dim + d]))
            dim += d
            continue
        if key is not None:
            if dim >= len(shape):
                raise DimensionMismatch(f"Too many keys for an object with {len(shape)} dimension(s) (shape {shape}).")
            dim += 1
        out.append(key)
    return tuple(out)


def getitem(a: Any, *keys: Any) -> Any:
    """``a`` indexed by a mix of frequency indices and ordinary keys.

    A single positional key is passed unwrapped, so one-dimensional indices
    also work on plain sequences such as tuples and lists.
    """
    key = to_indices(a, *keys)
    if len(key) == 1:
        return a[key[0]]
    return a[key]
