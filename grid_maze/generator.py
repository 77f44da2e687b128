"""Perfect maze generation by randomized backtracking.

The carve walks the grid depth-first from a random start cell. At every cell
the four neighbors are shuffled, and each neighbor that is inside the grid and
not yet visited gets the wall between them removed before the walk continues
from it. Because a wall is only ever removed towards an unvisited cell, the
open passages form a spanning tree: ``rows * cols - 1`` passages, every cell
reachable, no loops.

Two interchangeable carve functions are provided (see ``CarveFn``):

* :func:`carve_stack` keeps an explicit work-stack and is safe for any grid
  size. It is the default.
* :func:`carve_recursive` is the direct recursive formulation. It needs one
  interpreter frame per cell on the longest branch, so it is limited by
  ``sys.getrecursionlimit()`` and only suitable for small grids.

Given the same random source state both produce identical matrices, since
they consume randomness in the same order (start cell, then one shuffle per
cell in visiting order).
"""

import logging
import random
import sys
from typing import Dict, List, Optional, Tuple, TypeVar

from grid_maze.errors import InvalidCell, InvalidDimensions
from grid_maze.maze import Maze
from grid_maze.types import (
    BoolMatrix,
    CarveFn,
    Cell,
    Direction,
    DIRECTION_OFFSETS,
    NEIGHBOR_ORDER,
    RandomSource,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Frames kept free for the caller and for shuffle() below the deepest carve.
RECURSION_HEADROOM = 200


def shuffle(items: List[T], rng: RandomSource) -> List[T]:
    """Fisher-Yates shuffle in place; returns ``items`` for chaining.

    Walks from the last index down to 1 and swaps each element with a
    uniformly chosen element at an earlier-or-equal index.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def validate_dimensions(rows: int, cols: int) -> None:
    """Raise ``InvalidDimensions`` unless both are integers >= 1."""
    for value in (rows, cols):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidDimensions(rows, cols)


def is_valid_cell(cell: Cell, rows: int, cols: int) -> bool:
    """True for an integer ``(row, col)`` pair inside the grid."""
    if len(cell) != 2:
        return False
    for value in cell:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
    row, col = cell
    return 0 <= row < rows and 0 <= col < cols


def allocate_matrices(
    rows: int, cols: int
) -> Tuple[BoolMatrix, BoolMatrix, BoolMatrix]:
    """Fresh ``visited``, ``vertical`` and ``horizontal`` matrices, all False."""
    visited = [[False] * cols for _ in range(rows)]
    vertical = [[False] * (cols - 1) for _ in range(rows)]
    horizontal = [[False] * cols for _ in range(rows - 1)]
    return visited, vertical, horizontal


def recursive_cell_budget() -> int:
    """Largest cell count ``carve_recursive`` can handle at the current limit."""
    return max(0, sys.getrecursionlimit() - RECURSION_HEADROOM)


def check_recursive_budget(rows: int, cols: int) -> None:
    """Raise ``ValueError`` if a recursive carve could exhaust the stack."""
    budget = recursive_cell_budget()
    if rows * cols > budget:
        raise ValueError(
            f"Grid {rows}x{cols} has {rows * cols} cells, more than the "
            f"{budget} a recursive carve supports; use the stack carve"
        )


def open_passage(
    vertical: BoolMatrix, horizontal: BoolMatrix, cell: Cell, direction: Direction
) -> None:
    """Remove the wall on the ``direction`` side of ``cell``."""
    row, col = cell
    if direction == Direction.RIGHT:
        vertical[row][col] = True
    elif direction == Direction.LEFT:
        vertical[row][col - 1] = True
    elif direction == Direction.DOWN:
        horizontal[row][col] = True
    elif direction == Direction.UP:
        horizontal[row - 1][col] = True
    else:
        raise ValueError(f"Unknown direction: {direction!r}")


def carve_recursive(
    rows: int, cols: int, start: Cell, rng: RandomSource
) -> Tuple[BoolMatrix, BoolMatrix]:
    """Recursive backtracker. Recursion depth grows up to ``rows * cols``.

    Raises:
        ValueError: If the grid exceeds ``recursive_cell_budget()``. Checked
            before any carving or randomness.
    """
    check_recursive_budget(rows, cols)
    visited, vertical, horizontal = allocate_matrices(rows, cols)

    def carve(row: int, col: int) -> None:
        if visited[row][col]:
            return
        visited[row][col] = True
        for direction in shuffle(NEIGHBOR_ORDER[:], rng):
            drow, dcol = DIRECTION_OFFSETS[direction]
            next_row, next_col = row + drow, col + dcol
            if not (0 <= next_row < rows and 0 <= next_col < cols):
                continue
            if visited[next_row][next_col]:
                continue
            open_passage(vertical, horizontal, (row, col), direction)
            carve(next_row, next_col)

    carve(*start)
    return vertical, horizontal


def carve_stack(
    rows: int, cols: int, start: Cell, rng: RandomSource
) -> Tuple[BoolMatrix, BoolMatrix]:
    """Backtracker driven by an explicit stack of ``(parent, direction, cell)``.

    Shuffled neighbors are pushed in reverse so the first one is popped next,
    which reproduces the recursive visiting order exactly. A popped entry whose
    cell was reached meanwhile through another branch is dropped; this is the
    same check the recursive version does after returning from a sibling.
    """
    visited, vertical, horizontal = allocate_matrices(rows, cols)
    stack: List[Tuple[Optional[Cell], Optional[Direction], Cell]] = [
        (None, None, start)
    ]

    while stack:
        parent, via, (row, col) = stack.pop()
        if visited[row][col]:
            continue
        if parent is not None and via is not None:
            open_passage(vertical, horizontal, parent, via)
        visited[row][col] = True

        for direction in reversed(shuffle(NEIGHBOR_ORDER[:], rng)):
            drow, dcol = DIRECTION_OFFSETS[direction]
            next_row, next_col = row + drow, col + dcol
            if not (0 <= next_row < rows and 0 <= next_col < cols):
                continue
            if visited[next_row][next_col]:
                continue
            stack.append(((row, col), direction, (next_row, next_col)))

    return vertical, horizontal


CARVE_FN_REGISTRY: Dict[str, CarveFn] = {
    "stack": carve_stack,
    "recursive": carve_recursive,
}
"""Carve strategies by name, used by ``MazeConfig.carve``."""


def generate(
    rows: int,
    cols: int,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
    start: Optional[Cell] = None,
    carve_fn: CarveFn = carve_stack,
) -> Maze:
    """Generate a perfect maze.

    Args:
        rows: Number of cell rows (>= 1).
        cols: Number of cell columns (>= 1).
        rng: Random source. Takes precedence over ``seed``.
        seed: Seed for a fresh ``random.Random`` when ``rng`` is not given.
        start: Carve start cell. Drawn uniformly from the grid when omitted.
        carve_fn: Traversal implementation, see ``CARVE_FN_REGISTRY``.

    Returns:
        Maze: Frozen passage matrices plus the start cell. ``Maze.seed`` is
        only set when the random source was built from ``seed`` here.

    Raises:
        InvalidDimensions: If ``rows`` or ``cols`` is not a positive integer.
            Raised before any randomness is consumed.
        InvalidCell: If ``start`` is not an integer cell inside the grid.
        ValueError: If ``carve_fn`` is ``carve_recursive`` and the grid is
            larger than ``recursive_cell_budget()``.
    """
    validate_dimensions(rows, cols)
    maze_seed: Optional[int] = None
    if rng is None:
        rng = random.Random(seed)
        maze_seed = seed

    if start is None:
        start = (rng.randrange(rows), rng.randrange(cols))
    elif not is_valid_cell(start, rows, cols):
        raise InvalidCell(start, rows, cols)

    logger.debug(
        "Carving %dx%d maze from %s using %s",
        rows,
        cols,
        start,
        getattr(carve_fn, "__name__", carve_fn),
    )
    vertical, horizontal = carve_fn(rows, cols, start, rng)
    return Maze.from_matrices(vertical, horizontal, start=start, seed=maze_seed)
