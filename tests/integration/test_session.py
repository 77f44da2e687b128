# tests/integration/test_session.py

import logging

import pytest

from grid_maze.config import MazeConfig
from grid_maze.errors import InvalidDimensions
from grid_maze.generator import generate
from grid_maze.session import MazeSession
from grid_maze.utils.maze import is_perfect


def test_session_starts_empty() -> None:
    session = MazeSession(MazeConfig(rows=4, cols=6, seed=10))
    assert session.maze is None
    assert session.layout is None
    assert session.next_seed == 10


def test_new_maze_uses_base_seed_then_counts_up() -> None:
    config = MazeConfig(rows=5, cols=7, seed=100)
    session = MazeSession(config)
    first = session.new_maze()
    second = session.new_maze()
    assert first.seed == 100
    assert second.seed == 101
    assert first == generate(5, 7, seed=100)
    assert second == generate(5, 7, seed=101)


def test_unset_seed_starts_at_zero() -> None:
    session = MazeSession(MazeConfig(rows=3, cols=3))
    assert session.new_maze().seed == 0


def test_restart_replaces_maze_and_layout() -> None:
    session = MazeSession(MazeConfig(rows=8, cols=8, seed=0))
    session.new_maze()
    old_maze, old_layout = session.maze, session.layout
    new_maze = session.restart()
    assert session.maze is new_maze
    assert new_maze is not old_maze
    assert session.layout is not old_layout
    assert is_perfect(new_maze)


def test_layout_matches_maze() -> None:
    config = MazeConfig(rows=6, cols=9, width=900, height=600, seed=3)
    session = MazeSession(config)
    maze = session.new_maze()
    assert session.layout is not None
    closed = 6 * 8 + 5 * 9 - maze.num_open_passages
    assert len(session.layout.walls) == closed
    assert session.layout.unit_x == pytest.approx(100)
    assert session.layout.unit_y == pytest.approx(100)


def test_two_sessions_replay_same_sequence() -> None:
    config = MazeConfig(rows=6, cols=6, seed=42, carve="recursive")
    a, b = MazeSession(config), MazeSession(config)
    assert [a.new_maze() for _ in range(3)] == [b.new_maze() for _ in range(3)]


def test_invalid_config_rejected_up_front() -> None:
    with pytest.raises(InvalidDimensions):
        MazeSession(MazeConfig(rows=0))


def test_new_maze_logs(caplog: pytest.LogCaptureFixture) -> None:
    session = MazeSession(MazeConfig(rows=2, cols=2, seed=1))
    with caplog.at_level(logging.INFO, logger="grid_maze.session"):
        session.new_maze()
        session.restart()
    messages = [record.getMessage() for record in caplog.records]
    assert "Generated 2x2 maze (seed=1, walls=1)" in messages
    assert "Restarting session after 1 maze(s)" in messages
