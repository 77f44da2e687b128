"""Common type aliases and enumerations.

``RandomSource`` and ``CarveFn`` are the extension points of the generator:
the first decides every random choice, the second decides how the traversal
is executed (recursively or with an explicit stack).
"""

from enum import StrEnum, auto
from typing import Callable, Dict, List, Protocol, Tuple

from pyrsistent.typing import PVector


# Grid coordinate (row, col), zero-based, row-major.
Cell = Tuple[int, int]

# Mutable working matrix used while carving.
BoolMatrix = List[List[bool]]

# Frozen matrix stored on a finished maze.
PassageMatrix = PVector[PVector[bool]]


class Direction(StrEnum):
    """Carve directions from a cell towards one of its four neighbors."""

    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()


DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

NEIGHBOR_ORDER: List[Direction] = [
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
]


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in ``[0, stop)``.

    ``random.Random`` satisfies this protocol.
    """

    def randrange(self, stop: int) -> int: ...


CarveFn = Callable[[int, int, Cell, RandomSource], Tuple[BoolMatrix, BoolMatrix]]
