"""Maze configuration.

``MazeConfig`` collects everything needed to produce one maze and its wall
layout. It is a frozen dataclass; derive variants with ``dataclasses.replace``.
Defaults reproduce the classic 20 x 14 board.
"""

from dataclasses import dataclass
from typing import Optional

from grid_maze.generator import (
    CARVE_FN_REGISTRY,
    carve_recursive,
    check_recursive_budget,
    validate_dimensions,
)
from grid_maze.layout import DEFAULT_BORDER_THICKNESS, DEFAULT_WALL_THICKNESS
from grid_maze.types import CarveFn


@dataclass(frozen=True)
class MazeConfig:
    """Generation and layout settings.

    Attributes:
        rows: Number of cell rows (vertical cell count).
        cols: Number of cell columns (horizontal cell count).
        width: Layout width in screen units.
        height: Layout height in screen units.
        wall_thickness: Thickness of interior walls.
        border_thickness: Thickness of the four outer borders.
        carve: Key into ``CARVE_FN_REGISTRY``. ``"recursive"`` is limited to
            ``recursive_cell_budget()`` cells.
        seed: Base seed for a session; ``None`` starts the sequence at 0.
    """

    rows: int = 14
    cols: int = 20
    width: int = 1000
    height: int = 700
    wall_thickness: int = DEFAULT_WALL_THICKNESS
    border_thickness: int = DEFAULT_BORDER_THICKNESS
    carve: str = "stack"
    seed: Optional[int] = None

    @property
    def carve_fn(self) -> CarveFn:
        if self.carve not in CARVE_FN_REGISTRY:
            raise ValueError(
                f"Unknown carve strategy {self.carve!r}, "
                f"expected one of {sorted(CARVE_FN_REGISTRY)}"
            )
        return CARVE_FN_REGISTRY[self.carve]

    def validate(self) -> None:
        """Raise on settings that cannot produce a maze.

        Raises:
            InvalidDimensions: If ``rows`` or ``cols`` is not a positive integer.
            ValueError: On non-positive layout sizes, an unknown carve strategy,
                or a grid too large for the recursive carve.
        """
        validate_dimensions(self.rows, self.cols)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Layout size must be positive, got {self.width}x{self.height}"
            )
        if self.wall_thickness <= 0 or self.border_thickness <= 0:
            raise ValueError("Wall and border thickness must be positive")
        if self.carve not in CARVE_FN_REGISTRY:
            raise ValueError(f"Unknown carve strategy {self.carve!r}")
        if self.carve_fn is carve_recursive:
            check_recursive_budget(self.rows, self.cols)
