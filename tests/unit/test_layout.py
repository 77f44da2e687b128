# tests/unit/test_layout.py

import pytest

from grid_maze.generator import generate
from grid_maze.layout import Rect, RectLabel, build_layout
from grid_maze.maze import Maze


def make_two_by_two() -> Maze:
    return Maze.from_matrices([[True], [True]], [[False, True]])


def test_units_scale_to_area() -> None:
    layout = build_layout(generate(14, 20, seed=0), 1000, 700)
    assert layout.unit_x == pytest.approx(50)
    assert layout.unit_y == pytest.approx(50)


def test_borders() -> None:
    layout = build_layout(make_two_by_two(), 200, 100, border_thickness=2)
    assert layout.borders == (
        Rect(100, 0, 200, 2, RectLabel.BORDER),
        Rect(100, 100, 200, 2, RectLabel.BORDER),
        Rect(0, 50, 2, 100, RectLabel.BORDER),
        Rect(200, 50, 2, 100, RectLabel.BORDER),
    )


def test_only_closed_passages_become_walls() -> None:
    layout = build_layout(make_two_by_two(), 200, 100, wall_thickness=5)
    # The single closed entry is horizontal (0, 0): below cell (0, 0).
    assert layout.walls == (Rect(50, 50, 100, 5, RectLabel.WALL),)


def test_vertical_wall_geometry() -> None:
    maze = Maze.from_matrices([[False], [True]], [[True, True]])
    layout = build_layout(maze, 200, 100, wall_thickness=4)
    assert layout.walls == (Rect(100, 25, 4, 50, RectLabel.WALL),)


def test_walls_ordered_horizontals_then_verticals() -> None:
    maze = Maze.from_matrices([[False], [False]], [[False, False]])
    layout = build_layout(maze, 200, 100)
    assert [(w.x, w.y) for w in layout.walls] == [
        (50, 50),
        (150, 50),
        (100, 25),
        (100, 75),
    ]


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 5), (5, 1), (14, 20)])
def test_wall_count_is_closed_passage_count(rows: int, cols: int) -> None:
    maze = generate(rows, cols, seed=1)
    total_entries = rows * (cols - 1) + (rows - 1) * cols
    layout = build_layout(maze, 640, 480)
    assert len(layout.walls) == total_entries - maze.num_open_passages
    assert len(layout.obstacles) == len(layout.walls) + 4


def test_goal_and_ball() -> None:
    layout = build_layout(make_two_by_two(), 200, 100)
    goal = layout.goal
    assert (goal.x, goal.y) == (150, 75)
    assert goal.width == pytest.approx(70)
    assert goal.height == pytest.approx(35)
    assert goal.label == RectLabel.GOAL
    assert layout.ball_radius == pytest.approx(50 / 3)
    assert layout.ball.x == 50
    assert layout.ball.y == 25
    assert layout.ball.width == pytest.approx(100 / 3)
    assert layout.ball.label == RectLabel.BALL


def test_rect_bounds() -> None:
    assert Rect(10, 20, 4, 6).bounds == (8, 17, 12, 23)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 100},
        {"width": 100, "height": -1},
        {"width": 100, "height": 100, "wall_thickness": 0},
        {"width": 100, "height": 100, "border_thickness": -2},
    ],
)
def test_invalid_layout_sizes(kwargs: dict[str, float]) -> None:
    with pytest.raises(ValueError):
        build_layout(make_two_by_two(), **kwargs)
