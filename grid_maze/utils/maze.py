from collections import deque

import numpy as np
import numpy.typing as npt

from grid_maze.maze import Maze
from grid_maze.types import Cell, DIRECTION_OFFSETS, Direction

BoolArray = npt.NDArray[np.bool_]


def neighbors(maze: Maze, cell: Cell) -> list[Cell]:
    """Cells one step away from ``cell`` through an open passage."""
    row, col = cell
    result: list[Cell] = []
    for direction in maze.open_directions(cell):
        drow, dcol = DIRECTION_OFFSETS[direction]
        result.append((row + drow, col + dcol))
    return result


def bfs_path(maze: Maze, start: Cell, goal: Cell) -> list[Cell]:
    """Finds the shortest path from start to goal using BFS.
    In a perfect maze this is the only simple path.
    Returns the path as a list of cells (including both start and goal), or [] if unreachable.
    """
    if start == goal:
        return [start]
    queue: deque[Cell] = deque([start])
    prev: dict[Cell, Cell] = {}
    visited: set[Cell] = {start}

    while queue:
        cell = queue.popleft()
        if cell == goal:
            break
        for nxt in neighbors(maze, cell):
            if nxt not in visited:
                prev[nxt] = cell
                visited.add(nxt)
                queue.append(nxt)

    # Reconstruct path
    path: list[Cell] = []
    if goal in visited:
        c = goal
        while c != start:
            path.append(c)
            c = prev[c]
        path.append(start)
        path.reverse()
    return path


def reachable_cells(maze: Maze, start: Cell) -> set[Cell]:
    """All cells connected to ``start`` through open passages."""
    seen: set[Cell] = {start}
    stack: list[Cell] = [start]
    while stack:
        for nxt in neighbors(maze, stack.pop()):
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return seen


def is_perfect(maze: Maze) -> bool:
    """True if the open passages form a spanning tree of the grid.

    A connected graph on ``n`` nodes with ``n - 1`` edges has no cycles, so
    counting passages plus one reachability sweep is enough.
    """
    total = maze.rows * maze.cols
    if maze.num_open_passages != total - 1:
        return False
    return len(reachable_cells(maze, (0, 0))) == total


def dead_ends(maze: Maze) -> list[Cell]:
    """Cells with exactly one open passage, in row-major order."""
    return [cell for cell in maze.cells() if len(maze.open_directions(cell)) == 1]


def to_block_grid(maze: Maze) -> BoolArray:
    """Tile view of the maze: ``True`` is floor, ``False`` is wall.

    Shape is ``(2 * rows + 1, 2 * cols + 1)``. Cell ``(r, c)`` sits at block
    ``(2r + 1, 2c + 1)`` and an open passage clears the block between two cells.
    """
    grid: BoolArray = np.zeros((2 * maze.rows + 1, 2 * maze.cols + 1), dtype=np.bool_)
    grid[1::2, 1::2] = True
    for r, row in enumerate(maze.vertical_passages):
        for c, open_ in enumerate(row):
            if open_:
                grid[2 * r + 1, 2 * c + 2] = True
    for r, row in enumerate(maze.horizontal_passages):
        for c, open_ in enumerate(row):
            if open_:
                grid[2 * r + 2, 2 * c + 1] = True
    return grid


def render_ascii(maze: Maze) -> str:
    """Text drawing using ``+``, ``---`` and ``|``."""
    lines: list[str] = ["+" + "---+" * maze.cols]
    for r in range(maze.rows):
        body = "|"
        floor = "+"
        for c in range(maze.cols):
            body += "   " + (" " if maze.is_open((r, c), Direction.RIGHT) else "|")
            floor += ("   " if maze.is_open((r, c), Direction.DOWN) else "---") + "+"
        lines.append(body)
        lines.append(floor)
    return "\n".join(lines)
