# tests/conftest.py
"""
Shared fixtures.
Mazes are drawn as ASCII art: '#' wall (black), '.' corridor (white),
'?' a grey pixel that is neither.
"""
import numpy as np
import pytest
from PIL import Image

_COLORS = {
    "#": (0, 0, 0),
    ".": (255, 255, 255),
    "?": (128, 128, 128),
}


def ascii_to_array(rows: list[str]) -> np.ndarray:
    return np.array([[_COLORS[ch] for ch in row] for row in rows], dtype=np.uint8)


# ── Maze layouts ─────────────────────────────────────────────────

STRAIGHT = [
    "#####",
    ".....",
    "#####",
]

L_SHAPE = [
    "#.###",
    "#.###",
    "#....",
    "#####",
]

SINGLE_OPENING = [
    "#.###",
    "#.###",
    "#####",
]

DISCONNECTED = [
    "#.###",
    "#.###",
    "#####",
    "###.#",
    "###.#",
]

# Two equally short routes around the central block.
LOOP = [
    "#.#####",
    "#.....#",
    "#.###.#",
    "#.....#",
    "#####.#",
]

# Dead ends, a loop and a long detour.
LABYRINTH = [
    "#.#########",
    "#.....#...#",
    "###.#.#.#.#",
    "#...#...#.#",
    "#.#####.#.#",
    "#.....#.#.#",
    "#####.#.###",
    "#.....#...#",
    "#.#######.#",
    "#.........#",
    "#########.#",
]


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def draw_maze():
    """Factory: ASCII rows -> RGB Pillow image."""
    def _draw(rows: list[str]) -> Image.Image:
        return Image.fromarray(ascii_to_array(rows))
    return _draw


@pytest.fixture
def straight_image(draw_maze) -> Image.Image:
    return draw_maze(STRAIGHT)


@pytest.fixture
def l_shape_image(draw_maze) -> Image.Image:
    return draw_maze(L_SHAPE)


@pytest.fixture
def loop_image(draw_maze) -> Image.Image:
    return draw_maze(LOOP)


@pytest.fixture
def labyrinth_image(draw_maze) -> Image.Image:
    return draw_maze(LABYRINTH)


@pytest.fixture
def disconnected_image(draw_maze) -> Image.Image:
    return draw_maze(DISCONNECTED)
