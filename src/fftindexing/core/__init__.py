from .axis import FrequencyAxis, frequency_position, frequency_value
from .config import DEFAULT_GRID_CONFIG, GridConfig
from .errors import DimensionMismatch, OutOfRange
from .grid import FrequencyGrid
from .index import AbstractFrequencyIndex, FrequencyIndex, positional_tuple

__all__ = [
    "AbstractFrequencyIndex",
    "FrequencyIndex",
    "positional_tuple",
    "FrequencyAxis",
    "frequency_value",
    "frequency_position",
    "FrequencyGrid",
    "GridConfig",
    "DEFAULT_GRID_CONFIG",
    "DimensionMismatch",
    "OutOfRange",
]
