"""Configuration for grid enumeration."""

from __future__ import annotations

from dataclasses import dataclass


ORDERS = ("C", "F")


@dataclass(frozen=True)
class GridConfig:
    """Config knobs for FrequencyGrid.

    ``order`` fixes the enumeration order shared by linear lookup and
    iteration: ``"C"`` varies the last dimension fastest (numpy's default
    layout), ``"F"`` varies the first dimension fastest.
    """

    order: str = "C"

    def __post_init__(self) -> None:
        if self.order not in ORDERS:
            raise ValueError(f"order must be one of: {', '.join(ORDERS)}; got {self.order!r}.")


DEFAULT_GRID_CONFIG = GridConfig()
