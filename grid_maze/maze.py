"""Immutable ``Maze`` value object.

A ``Maze`` is the only thing :func:`grid_maze.generator.generate` hands back.
It wraps the two passage matrices produced by the carve:

* ``vertical_passages`` has shape ``rows x (cols - 1)``. Entry ``[r][c]`` is
    ``True`` when the wall between ``(r, c)`` and ``(r, c + 1)`` is removed.
* ``horizontal_passages`` has shape ``(rows - 1) x cols``. Entry ``[r][c]`` is
    ``True`` when the wall between ``(r, c)`` and ``(r + 1, c)`` is removed.

Both matrices are persistent vectors (``pyrsistent.PVector``) so a finished
maze can be shared freely; generating again always builds new matrices.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from pyrsistent import PMap, freeze, pmap

from grid_maze.errors import InvalidCell
from grid_maze.types import (
    BoolMatrix,
    Cell,
    Direction,
    DIRECTION_OFFSETS,
    NEIGHBOR_ORDER,
    PassageMatrix,
)


@dataclass(frozen=True)
class Maze:
    """Perfect maze over a ``rows x cols`` grid.

    Attributes:
        rows (int): Number of cell rows.
        cols (int): Number of cell columns.
        vertical_passages (PassageMatrix): Open walls between horizontal neighbors.
        horizontal_passages (PassageMatrix): Open walls between vertical neighbors.
        start (Cell): Cell the carve started from.
        seed (int | None): Seed used to build the random source, if known.
    """

    rows: int
    cols: int
    vertical_passages: PassageMatrix
    horizontal_passages: PassageMatrix
    start: Cell = (0, 0)
    seed: Optional[int] = None

    @classmethod
    def from_matrices(
        cls,
        vertical: BoolMatrix,
        horizontal: BoolMatrix,
        start: Cell = (0, 0),
        seed: Optional[int] = None,
    ) -> "Maze":
        """Freeze working matrices into a ``Maze``.

        ``rows`` and ``cols`` are recovered from the matrix shapes, so the
        1-row and 1-column cases (one empty matrix) are handled via the other.
        """
        rows = len(vertical)
        cols = len(horizontal[0]) if horizontal else len(vertical[0]) + 1
        return cls(
            rows=rows,
            cols=cols,
            vertical_passages=freeze([list(row) for row in vertical]),
            horizontal_passages=freeze([list(row) for row in horizontal]),
            start=start,
            seed=seed,
        )

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, cell: Cell, direction: Direction) -> bool:
        """Return True if the wall on ``direction`` side of ``cell`` is removed.

        Sides on the outer boundary are always closed.
        """
        self._check_bounds(cell)
        row, col = cell
        drow, dcol = DIRECTION_OFFSETS[direction]
        if not self.in_bounds((row + drow, col + dcol)):
            return False
        if direction == Direction.RIGHT:
            return self.vertical_passages[row][col]
        if direction == Direction.LEFT:
            return self.vertical_passages[row][col - 1]
        if direction == Direction.DOWN:
            return self.horizontal_passages[row][col]
        if direction == Direction.UP:
            return self.horizontal_passages[row - 1][col]
        raise ValueError(f"Unknown direction: {direction!r}")

    def open_directions(self, cell: Cell) -> List[Direction]:
        """Directions with an open passage from ``cell``, in neighbor order."""
        return [d for d in NEIGHBOR_ORDER if self.is_open(cell, d)]

    def cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    @property
    def num_open_passages(self) -> int:
        return sum(sum(row) for row in self.vertical_passages) + sum(
            sum(row) for row in self.horizontal_passages
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse summary for diagnostics (skips unset fields)."""
        description: PMap[str, Any] = pmap(
            {
                "rows": self.rows,
                "cols": self.cols,
                "start": self.start,
                "open_passages": self.num_open_passages,
            }
        )
        if self.seed is not None:
            description = description.set("seed", self.seed)
        return description

    def _check_bounds(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise InvalidCell(cell, self.rows, self.cols)
