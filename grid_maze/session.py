"""Scene lifecycle around the generator.

A ``MazeSession`` owns the current maze and its wall layout. Asking for a new
maze drops both and generates again from scratch; the only state carried
between mazes is a counter used to derive the next seed, so a session started
from the same config replays the same sequence of mazes.
"""

import logging
from typing import Optional

from grid_maze.config import MazeConfig
from grid_maze.generator import generate
from grid_maze.layout import WallLayout, build_layout
from grid_maze.maze import Maze

logger = logging.getLogger(__name__)


class MazeSession:
    config: MazeConfig
    maze: Optional[Maze]
    layout: Optional[WallLayout]
    seed_counter: int

    def __init__(self, config: Optional[MazeConfig] = None):
        self.config = config or MazeConfig()
        self.config.validate()
        self.maze = None
        self.layout = None
        self.seed_counter = 0

    @property
    def next_seed(self) -> int:
        base_seed = self.config.seed if self.config.seed is not None else 0
        return base_seed + self.seed_counter

    def new_maze(self) -> Maze:
        """Discard the current maze and layout and build fresh ones."""
        self.maze = None
        self.layout = None

        seed = self.next_seed
        maze = generate(
            self.config.rows,
            self.config.cols,
            seed=seed,
            carve_fn=self.config.carve_fn,
        )
        self.layout = build_layout(
            maze,
            self.config.width,
            self.config.height,
            wall_thickness=self.config.wall_thickness,
            border_thickness=self.config.border_thickness,
        )
        self.maze = maze
        self.seed_counter += 1
        logger.info(
            "Generated %dx%d maze (seed=%d, walls=%d)",
            maze.rows,
            maze.cols,
            seed,
            len(self.layout.walls),
        )
        return maze

    def restart(self) -> Maze:
        """Start over with the next maze in the sequence."""
        logger.info("Restarting session after %d maze(s)", self.seed_counter)
        return self.new_maze()
