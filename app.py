from typing import List

import streamlit as st
from pyrsistent import thaw

from grid_maze.config import MazeConfig
from grid_maze.generator import CARVE_FN_REGISTRY
from grid_maze.maze import Maze
from grid_maze.renderer.image import LayoutRenderer
from grid_maze.session import MazeSession
from grid_maze.utils.maze import bfs_path, dead_ends, render_ascii

st.set_page_config(layout="wide", page_title="Grid Maze")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_config() -> None:
    if "maze_config" not in st.session_state:
        st.session_state["maze_config"] = MazeConfig(seed=0)


def get_config_from_widgets() -> MazeConfig:
    maze_config: MazeConfig = st.session_state["maze_config"]

    st.subheader("Maze Size")
    cols: int = st.slider("Columns", 1, 60, maze_config.cols, key="cols")
    rows: int = st.slider("Rows", 1, 40, maze_config.rows, key="rows")

    st.subheader("Layout")
    width: int = st.number_input(
        "Width", min_value=100, value=maze_config.width, key="width"
    )
    height: int = st.number_input(
        "Height", min_value=100, value=maze_config.height, key="height"
    )
    wall_thickness: int = st.slider(
        "Wall thickness", 1, 20, maze_config.wall_thickness, key="wall_thickness"
    )

    st.subheader("Generation")
    carve_names: List[str] = list(CARVE_FN_REGISTRY.keys())
    carve: str = st.selectbox(
        "Carve strategy",
        carve_names,
        index=carve_names.index(maze_config.carve),
        key="carve",
    )
    seed: int = st.number_input("Random seed", min_value=0, key="maze_seed")

    return MazeConfig(
        rows=rows,
        cols=cols,
        width=width,
        height=height,
        wall_thickness=wall_thickness,
        border_thickness=maze_config.border_thickness,
        carve=carve,
        seed=seed,
    )


def start_session(config: MazeConfig) -> MazeSession:
    session = MazeSession(config)
    session.new_maze()
    st.session_state["session"] = session
    return session


def display_stats(maze: Maze) -> None:
    solution = bfs_path(maze, (0, 0), (maze.rows - 1, maze.cols - 1))
    st.metric("Open passages", maze.num_open_passages)
    st.metric("Dead ends", len(dead_ends(maze)))
    st.metric("Solution length", len(solution))


# --------- Main App ---------
set_default_config()
tab_maze, tab_config, tab_state = st.tabs(["Maze", "Config", "State"])

with tab_config:
    config: MazeConfig = get_config_from_widgets()
    st.session_state["maze_config"] = config

    if st.button("🔄 Generate Maze", key="save_config_btn", use_container_width=True):
        try:
            start_session(config)
        except ValueError as e:
            st.error(str(e))
    st.divider()

with tab_maze:
    if "session" not in st.session_state:
        start_session(st.session_state["maze_config"])

    session: MazeSession = st.session_state["session"]
    left_col, right_col = st.columns([0.75, 0.25])

    with right_col:
        if st.button("🔁 New Maze", key="generate_btn", use_container_width=True):
            session.restart()

        if session.maze is not None:
            st.info(f"Seed {session.next_seed - 1}", icon="🎲")
            display_stats(session.maze)

    with left_col:
        if session.layout is not None:
            img = LayoutRenderer().render(session.layout)
            st.image(img, use_container_width=True)

with tab_state:
    maze = st.session_state["session"].maze
    if maze is not None:
        st.json(thaw(maze.description), expanded=True)
        st.code(render_ascii(maze), language=None)
