import numpy as np
import pytest

from fftindexing import (
    AbstractFrequencyIndex,
    DimensionMismatch,
    FrequencyAxis,
    FrequencyIndex,
    OutOfRange,
    positional_tuple,
)


def test_index_constructors_agree() -> None:
    i1 = FrequencyIndex((2, 3))
    assert i1 == FrequencyIndex(2, 3)
    assert i1 == FrequencyIndex([2, 3])
    assert i1 == FrequencyIndex(np.array([2, 3]))
    assert i1 == FrequencyIndex(i1)
    assert FrequencyIndex(np.int64(4)) == FrequencyIndex(4)
    assert isinstance(i1, AbstractFrequencyIndex)
    assert type(i1.as_tuple()[0]) is int


def test_index_construction_accepts_any_integer() -> None:
    i = FrequencyIndex(100, -250)
    assert i.as_tuple() == (100, -250)
    with pytest.raises(TypeError):
        FrequencyIndex(1.5, 2)


def test_index_dimensionality() -> None:
    assert FrequencyIndex(1, 2, 3).ndim == 3
    assert len(FrequencyIndex(7)) == 1
    assert FrequencyIndex().ndim == 0
    assert FrequencyIndex(()) == FrequencyIndex()


def test_index_component() -> None:
    i = FrequencyIndex(4, -1, 0)
    assert i.component(0) == 4
    assert i.component(1) == -1
    assert i.component(2) == 0
    with pytest.raises(OutOfRange, match=r"\[0, 3\)"):
        i.component(3)
    with pytest.raises(OutOfRange):
        i.component(-1)


def test_index_is_not_iterable() -> None:
    i = FrequencyIndex(1, 2)
    with pytest.raises(TypeError):
        iter(i)
    with pytest.raises(TypeError):
        tuple(i)
    with pytest.raises(TypeError):
        a, b = i
    assert tuple(i.as_tuple()) == (1, 2)


def test_index_value_semantics() -> None:
    assert FrequencyIndex(1, 2) != FrequencyIndex(2, 1)
    assert FrequencyIndex(1, 2) != FrequencyIndex(1, 2, 0)
    assert FrequencyIndex(1, 2) != (1, 2)
    assert hash(FrequencyIndex(1, 2)) == hash(FrequencyIndex((1, 2)))
    assert {FrequencyIndex(0): "dc"}[FrequencyIndex((0,))] == "dc"


def test_index_repr() -> None:
    assert repr(FrequencyIndex(0)) == "FrequencyIndex(0)"
    assert repr(FrequencyIndex(2, -3)) == "FrequencyIndex(2, -3)"
    assert repr(FrequencyIndex()) == "FrequencyIndex()"


def test_to_positional_uses_floored_modulo() -> None:
    assert FrequencyIndex(1, 5).to_positional((3, 3)) == (1, 2)
    assert FrequencyIndex(-1, -2).to_positional((6, 9)) == (5, 7)
    assert FrequencyIndex(-7).to_positional((3,)) == (2,)
    assert FrequencyIndex().to_positional(()) == ()


def test_to_positional_accepts_ranges_and_axes() -> None:
    assert FrequencyIndex(-1, 1).to_positional((range(6), FrequencyAxis(9))) == (5, 1)
    # Positions are offset by the start of a range.
    assert FrequencyIndex(-1).to_positional((range(10, 14),)) == (13,)


def test_to_positional_dimension_mismatch() -> None:
    i = FrequencyIndex(1, 5)
    with pytest.raises(DimensionMismatch, match="2 dimension"):
        i.to_positional((3, 3, 7))
    with pytest.raises(DimensionMismatch, match=r"\[:2\]"):
        i.to_positional((3,))
    # DimensionMismatch is a ValueError.
    with pytest.raises(ValueError):
        i.to_positional(())


def test_partial_indexing_with_explicit_prefix() -> None:
    shape = (6, 9, 4)
    assert FrequencyIndex(-1, 2).to_positional(shape[:2]) == (5, 2)


def test_to_positional_on_empty_axis() -> None:
    with pytest.raises(OutOfRange):
        FrequencyIndex(0).to_positional((0,))


def test_positional_tuple_matches_numpy_indexing() -> None:
    a = np.arange(54).reshape(6, 9)
    i = FrequencyIndex(2, 3)
    assert a[positional_tuple(i, a.shape)] == a[2, 3]
    assert a[FrequencyIndex(-1, -1).to_positional(a.shape)] == a[-1, -1]


def test_empty_index_is_truthy() -> None:
    assert bool(FrequencyIndex())
    assert bool(FrequencyIndex(0))


def test_to_positional_on_stepped_and_huge_ranges() -> None:
    assert FrequencyIndex(-1).to_positional((range(0, 10, 2),)) == (8,)
    assert FrequencyIndex(1).to_positional((range(10, 0, -3),)) == (7,)
    n = 2**63
    assert FrequencyIndex(-1).to_positional((FrequencyAxis(n),)) == (n - 1,)
    assert FrequencyIndex(-1).to_positional((range(5, 5 + n),)) == (n + 4,)
    assert FrequencyAxis(range(n)).length == n
