"""Exceptions raised by maze generation and lookups."""

from typing import Any

from grid_maze.types import Cell


class InvalidDimensions(ValueError):
    """Grid dimensions that cannot hold a maze (non-integer or below 1)."""

    def __init__(self, rows: Any, cols: Any) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Maze dimensions must be positive integers, got rows={rows!r}, cols={cols!r}"
        )


class InvalidCell(ValueError):
    """Cell coordinates that are not integers inside the ``rows x cols`` grid."""

    def __init__(self, cell: Cell, rows: int, cols: int) -> None:
        self.cell = cell
        self.rows = rows
        self.cols = cols
        super().__init__(f"Out of bounds: {cell} for grid {rows}x{cols}")
