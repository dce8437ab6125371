"""Frequency-bin indices and their conversion to array positions."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral
from typing import Any

from .axis import FrequencyAxis, frequency_position, range_length
from .errors import DimensionMismatch, check_in_range


class AbstractFrequencyIndex(ABC):
    """Supertype for indices naming the FFT frequency bin along each dimension.

    An index of dimensionality D addresses any object indexable by D
    positional coordinates. It carries no knowledge of the object it will
    index, so it cannot become a positional coordinate on its own: the axis
    lengths are supplied at conversion time through :meth:`to_positional`.

    Subclasses provide :meth:`as_tuple` and :meth:`as_frequency_index`; the
    latter lets index kinds that carry extra information be reduced to a
    plain :class:`FrequencyIndex` before positional use.

    Indices are scalars. They are deliberately not iterable, so ``*index``
    cannot silently spread the components into unrelated arguments; call
    :meth:`as_tuple` to get at them.
    """

    __iter__ = None

    @abstractmethod
    def as_tuple(self) -> tuple[int, ...]:
        """The D signed components, in dimension order."""

    @abstractmethod
    def as_frequency_index(self) -> FrequencyIndex:
        """Canonical :class:`FrequencyIndex` for this index."""

    @property
    def ndim(self) -> int:
        return len(self.as_tuple())

    def __len__(self) -> int:
        return self.ndim

    def __bool__(self) -> bool:
        return True

    def component(self, i: int) -> int:
        t = self.as_tuple()
        return t[check_in_range(operator.index(i), len(t), "component")]

    def to_positional(self, axes: Sequence[Any]) -> tuple[int, ...]:
        """Zero-based positions of this index for an object with the given axes.

        ``axes`` holds one entry per dimension of the index: an integer
        length, a ``range`` of valid positions, or a :class:`FrequencyAxis`.
        """
        return positional_tuple(self, axes)


@dataclass(frozen=True, init=False, repr=False)
class FrequencyIndex(AbstractFrequencyIndex):
    """Index of an FFT frequency bin along each of D dimensions.

    Any integer is a valid component; frequencies beyond an axis alias onto
    it when the index is converted to positions.

    Examples
    --------
    >>> FrequencyIndex(2, 3) == FrequencyIndex((2, 3))
    True
    >>> FrequencyIndex(1, 5).to_positional((3, 3))
    (1, 2)
    >>> FrequencyIndex(-1, -2).to_positional((6, 9))
    (5, 7)
    """

    components: tuple[int, ...]

    def __init__(self, *args: Any) -> None:
        if len(args) == 1 and isinstance(args[0], AbstractFrequencyIndex):
            comps = args[0].as_frequency_index().as_tuple()
        elif len(args) == 1 and not isinstance(args[0], Integral):
            comps = tuple(args[0])
        else:
            comps = args
        object.__setattr__(self, "components", tuple(int(operator.index(c)) for c in comps))

    def __repr__(self) -> str:
        return f"FrequencyIndex({', '.join(str(c) for c in self.components)})"

    def as_tuple(self) -> tuple[int, ...]:
        return self.components

    def as_frequency_index(self) -> FrequencyIndex:
        return self


def _position_on_axis(frequency: int, axis: Any) -> int:
    if isinstance(axis, range):
        return axis.start + frequency_position(frequency, range_length(axis)) * axis.step
    if isinstance(axis, FrequencyAxis):
        return frequency_position(frequency, axis.length)
    return frequency_position(frequency, operator.index(axis))


def positional_tuple(index: AbstractFrequencyIndex, axes: Sequence[Any]) -> tuple[int, ...]:
    """Tuple of positions performing the same indexing as ``index`` on ``axes``.

    Provided separately from :meth:`AbstractFrequencyIndex.to_positional` for
    callers holding an arbitrary index kind.
    """
    freqs = index.as_frequency_index().as_tuple()
    axes = tuple(axes)
    if len(freqs) != len(axes):
        d = len(freqs)
        raise DimensionMismatch(
            f"The index has {d} dimension(s) but {len(axes)} axes were supplied; "
            "the number of axes must match the dimensionality of the index.\n"
            "To index only some dimensions of an object, pass those axes explicitly:\n"
            f"\tindex.to_positional(a.shape[:{d}])    # for an array a\n"
            f"\tindex.to_positional(axes[:{d}])       # for a list of axes"
        )
    return tuple(_position_on_axis(f, ax) for f, ax in zip(freqs, axes))
