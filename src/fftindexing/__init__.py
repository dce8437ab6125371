from .arrays import fftaxes, fftaxis, getitem, positional, shape_of, to_indices
from .core import (
    DEFAULT_GRID_CONFIG,
    AbstractFrequencyIndex,
    DimensionMismatch,
    FrequencyAxis,
    FrequencyGrid,
    FrequencyIndex,
    GridConfig,
    OutOfRange,
    positional_tuple,
)

__all__ = [
    "AbstractFrequencyIndex",
    "FrequencyIndex",
    "FrequencyAxis",
    "FrequencyGrid",
    "GridConfig",
    "DEFAULT_GRID_CONFIG",
    "DimensionMismatch",
    "OutOfRange",
    "positional_tuple",
    "fftaxes",
    "fftaxis",
    "positional",
    "to_indices",
    "getitem",
    "shape_of",
]

__version__ = "0.1.0"
