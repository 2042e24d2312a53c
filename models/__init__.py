"""Model layer for the maze solver: grid, graph, extraction and rendering."""

from .errors import (
    FrozenGraphError,
    InvalidMazeError,
    MalformedPixelError,
    MazeError,
    NonOrthogonalSegmentError,
    NoSolutionError,
    UnregisteredVertexError,
    UnsupportedSolverError,
)
from .extractor import connect_neighbors, extract_maze, find_branches, find_openings
from .graph import Graph, Vertex
from .grid import MazeGrid, load_maze_grid
from .maze import Maze, MazeBuilder
from .point import CARDINAL_OFFSETS, Point
from .render import SOLUTION_COLOR, expand_path, render_solution

__all__ = [
    "Point",
    "CARDINAL_OFFSETS",
    "Graph",
    "Vertex",
    "MazeGrid",
    "load_maze_grid",
    "Maze",
    "MazeBuilder",
    "extract_maze",
    "find_openings",
    "find_branches",
    "connect_neighbors",
    "SOLUTION_COLOR",
    "expand_path",
    "render_solution",
    "MazeError",
    "InvalidMazeError",
    "MalformedPixelError",
    "NoSolutionError",
    "UnregisteredVertexError",
    "FrozenGraphError",
    "UnsupportedSolverError",
    "NonOrthogonalSegmentError",
]
