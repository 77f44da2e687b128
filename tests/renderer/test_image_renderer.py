# tests/renderer/test_image_renderer.py

import pytest
from PIL import Image

from grid_maze.generator import generate
from grid_maze.layout import RectLabel, build_layout
from grid_maze.maze import Maze
from grid_maze.renderer.image import (
    DEFAULT_BACKGROUND,
    DEFAULT_PALETTE,
    LayoutRenderer,
    render,
    render_maze,
)


def make_two_by_two() -> Maze:
    return Maze.from_matrices([[True], [True]], [[False, True]])


def test_render_size_and_mode() -> None:
    layout = build_layout(generate(14, 20, seed=0), 1000, 700)
    img = render(layout)
    assert isinstance(img, Image.Image)
    assert img.mode == "RGB"
    assert img.size == (1000, 700)


def test_render_draws_walls_goal_and_ball() -> None:
    img = render(build_layout(make_two_by_two(), 200, 100))
    wall = DEFAULT_PALETTE[RectLabel.WALL]
    # closed passage below cell (0, 0) is centered at (50, 50)
    assert img.getpixel((50, 50)) == wall
    # open passage below cell (0, 1)
    assert img.getpixel((150, 50)) == DEFAULT_BACKGROUND
    assert img.getpixel((150, 75)) == DEFAULT_PALETTE[RectLabel.GOAL]
    assert img.getpixel((50, 25)) == DEFAULT_PALETTE[RectLabel.BALL]
    # top border
    assert img.getpixel((100, 0)) == DEFAULT_PALETTE[RectLabel.BORDER]


def test_layout_renderer_custom_palette() -> None:
    palette = {
        RectLabel.BORDER: (1, 1, 1),
        RectLabel.WALL: (2, 2, 2),
        RectLabel.GOAL: (3, 3, 3),
        RectLabel.BALL: (4, 4, 4),
    }
    renderer = LayoutRenderer(palette=palette, background=(0, 0, 0))
    img = renderer.render(build_layout(make_two_by_two(), 200, 100))
    assert img.getpixel((50, 50)) == (2, 2, 2)
    assert img.getpixel((150, 25)) == (0, 0, 0)


def test_render_maze_matches_render_of_layout() -> None:
    maze = generate(5, 5, seed=8)
    direct = render_maze(maze, 250, 250)
    via_layout = render(build_layout(maze, 250, 250))
    assert direct.tobytes() == via_layout.tobytes()


def test_explicit_palette_kept_even_when_empty() -> None:
    layout = build_layout(make_two_by_two(), 200, 100)
    assert LayoutRenderer().palette is DEFAULT_PALETTE
    assert LayoutRenderer(palette={}).palette == {}
    # an empty palette has no colors to draw with, through either entry point
    with pytest.raises(KeyError):
        render(layout, palette={})
    with pytest.raises(KeyError):
        LayoutRenderer(palette={}).render(layout)
