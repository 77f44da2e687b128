from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from grid_maze.layout import (
    DEFAULT_BORDER_THICKNESS,
    DEFAULT_WALL_THICKNESS,
    RectLabel,
    WallLayout,
    build_layout,
)
from grid_maze.maze import Maze


RGB = Tuple[int, int, int]
Palette = Dict[RectLabel, RGB]

DEFAULT_BACKGROUND: RGB = (20, 21, 31)

DEFAULT_PALETTE: Palette = {
    RectLabel.BORDER: (242, 242, 111),
    RectLabel.WALL: (242, 242, 111),  # #f2f26f
    RectLabel.GOAL: (161, 240, 141),  # #a1f08d
    RectLabel.BALL: (242, 133, 237),  # #f285ed
}


def render(
    layout: WallLayout,
    palette: Optional[Palette] = None,
    background: RGB = DEFAULT_BACKGROUND,
) -> Image.Image:
    """
    Draws the layout as an RGB image sized ``(layout.width, layout.height)``.
    Obstacles first, then the goal, then the ball on top.
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    size = (max(1, round(layout.width)), max(1, round(layout.height)))
    img = Image.new("RGB", size, background)
    draw = ImageDraw.Draw(img)

    for rect in layout.obstacles + (layout.goal,):
        draw.rectangle(rect.bounds, fill=palette[rect.label])
    draw.ellipse(layout.ball.bounds, fill=palette[RectLabel.BALL])
    return img


def render_maze(
    maze: Maze,
    width: int,
    height: int,
    wall_thickness: float = DEFAULT_WALL_THICKNESS,
    border_thickness: float = DEFAULT_BORDER_THICKNESS,
    palette: Optional[Palette] = None,
) -> Image.Image:
    layout = build_layout(maze, width, height, wall_thickness, border_thickness)
    return render(layout, palette=palette)


class LayoutRenderer:
    palette: Palette
    background: RGB

    def __init__(
        self,
        palette: Optional[Palette] = None,
        background: RGB = DEFAULT_BACKGROUND,
    ):
        self.palette = palette if palette is not None else DEFAULT_PALETTE
        self.background = background

    def render(self, layout: WallLayout) -> Image.Image:
        return render(layout, palette=self.palette, background=self.background)
