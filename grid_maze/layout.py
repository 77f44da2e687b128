"""Static wall geometry derived from a ``Maze``.

The layout is what a renderer or a physics engine consumes: a list of
center-anchored rectangles in screen units. The grid is stretched to fill
``width x height``; each cell is ``unit_x`` wide and ``unit_y`` tall.

Every passage entry yields exactly one rectangle when closed and nothing when
open. Horizontal passages are emitted first, then vertical ones, each in
row-major order.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import List, Tuple

from grid_maze.maze import Maze


DEFAULT_WALL_THICKNESS = 5
DEFAULT_BORDER_THICKNESS = 2
GOAL_SCALE = 0.7
BALL_RADIUS_DIVISOR = 3


class RectLabel(StrEnum):
    BORDER = auto()
    WALL = auto()
    GOAL = auto()
    BALL = auto()


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its center.

    Attributes:
        x: Center x (0 at left).
        y: Center y (0 at top).
        width: Extent along x.
        height: Extent along y.
        label: What the rectangle represents.
    """

    x: float
    y: float
    width: float
    height: float
    label: RectLabel = RectLabel.WALL

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """``(left, top, right, bottom)``."""
        half_w = self.width / 2
        half_h = self.height / 2
        return (self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h)


@dataclass(frozen=True)
class WallLayout:
    """Geometry for one maze instance.

    ``ball`` is the bounding square of the playing ball placed in the top-left
    cell; ``goal`` sits in the bottom-right cell.
    """

    width: float
    height: float
    unit_x: float
    unit_y: float
    borders: Tuple[Rect, ...]
    walls: Tuple[Rect, ...]
    goal: Rect
    ball: Rect
    ball_radius: float

    @property
    def obstacles(self) -> Tuple[Rect, ...]:
        """Every static rectangle that blocks movement."""
        return self.borders + self.walls


def build_borders(width: float, height: float, thickness: float) -> List[Rect]:
    return [
        Rect(width / 2, 0, width, thickness, RectLabel.BORDER),
        Rect(width / 2, height, width, thickness, RectLabel.BORDER),
        Rect(0, height / 2, thickness, height, RectLabel.BORDER),
        Rect(width, height / 2, thickness, height, RectLabel.BORDER),
    ]


def build_walls(
    maze: Maze, unit_x: float, unit_y: float, thickness: float
) -> List[Rect]:
    """One rectangle per closed passage entry."""
    walls: List[Rect] = []
    for row_index, row in enumerate(maze.horizontal_passages):
        for col_index, open_ in enumerate(row):
            if open_:
                continue
            walls.append(
                Rect(
                    col_index * unit_x + unit_x / 2,
                    row_index * unit_y + unit_y,
                    unit_x,
                    thickness,
                )
            )
    for row_index, row in enumerate(maze.vertical_passages):
        for col_index, open_ in enumerate(row):
            if open_:
                continue
            walls.append(
                Rect(
                    col_index * unit_x + unit_x,
                    row_index * unit_y + unit_y / 2,
                    thickness,
                    unit_y,
                )
            )
    return walls


def build_layout(
    maze: Maze,
    width: float,
    height: float,
    wall_thickness: float = DEFAULT_WALL_THICKNESS,
    border_thickness: float = DEFAULT_BORDER_THICKNESS,
) -> WallLayout:
    """Scale ``maze`` onto a ``width x height`` area.

    Raises:
        ValueError: If a size or thickness is not positive.
    """
    for name, value in (
        ("width", width),
        ("height", height),
        ("wall_thickness", wall_thickness),
        ("border_thickness", border_thickness),
    ):
        if value <= 0:
            raise ValueError(f"Layout {name} must be positive, got {value}")

    unit_x = width / maze.cols
    unit_y = height / maze.rows
    goal = Rect(
        width - unit_x / 2,
        height - unit_y / 2,
        unit_x * GOAL_SCALE,
        unit_y * GOAL_SCALE,
        RectLabel.GOAL,
    )
    ball_radius = min(unit_x, unit_y) / BALL_RADIUS_DIVISOR
    ball = Rect(
        unit_x / 2, unit_y / 2, ball_radius * 2, ball_radius * 2, RectLabel.BALL
    )
    return WallLayout(
        width=width,
        height=height,
        unit_x=unit_x,
        unit_y=unit_y,
        borders=tuple(build_borders(width, height, border_thickness)),
        walls=tuple(build_walls(maze, unit_x, unit_y, wall_thickness)),
        goal=goal,
        ball=ball,
        ball_radius=ball_radius,
    )
