"""Turn a black-and-white maze bitmap into a solvable graph.

Vertices are the two border openings (entrance and exit) plus every interior
corridor pixel where the path turns or forks. Edges are the straight,
unbroken white runs between two vertices, found by casting a ray from each
vertex along the four cardinal directions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Sequence

import numpy as np
from PIL import Image

from .errors import InvalidMazeError, MalformedPixelError
from .grid import OTHER, MazeGrid, load_maze_grid
from .maze import Maze, MazeBuilder
from .point import CARDINAL_OFFSETS, Point

logger = logging.getLogger(__name__)


def extract_maze(source: MazeGrid | Image.Image | np.ndarray | str | Path) -> Maze:
    grid = load_maze_grid(source)
    start, exit_point = find_openings(grid)
    branches = find_branches(grid)

    builder = MazeBuilder(start)
    builder.set_exit(exit_point)
    for branch in branches:
        builder.add_vertex(branch)

    connect_neighbors(grid, builder, [start, exit_point, *branches])
    maze = builder.build()
    logger.info(
        "Extracted %dx%d maze: %d vertices, %d edges",
        grid.width,
        grid.height,
        len(maze.graph),
        maze.graph.edge_count,
    )
    return maze


def find_openings(grid: MazeGrid) -> tuple[Point, Point]:
    """Return the first two distinct white border pixels as ``(start, exit)``."""

    openings: list[Point] = []
    for point in _border_scan(grid):
        if not grid.is_path(point.x, point.y) or point in openings:
            continue
        openings.append(point)
        if len(openings) == 2:
            logger.debug("Openings: start=%s exit=%s", openings[0], openings[1])
            return openings[0], openings[1]
    raise InvalidMazeError("Maze missing start and/or end.")


def _border_scan(grid: MazeGrid) -> Iterator[Point]:
    # Top/bottom pairs per column, then left/right pairs per row.
    bottom = grid.height - 1
    right = grid.width - 1
    for x in range(grid.width):
        yield Point(x, 0)
        yield Point(x, bottom)
    for y in range(1, grid.height - 1):
        yield Point(0, y)
        yield Point(right, y)


def find_branches(grid: MazeGrid) -> list[Point]:
    """Interior white pixels with a white neighbour both vertically and horizontally.

    Raises ``MalformedPixelError`` for the first interior pixel that is
    neither white nor black.
    """

    if grid.width < 3 or grid.height < 3:
        return []

    interior = grid.kinds[1:-1, 1:-1]
    malformed = np.argwhere(interior.T == OTHER)
    if malformed.size:
        x, y = (int(v) + 1 for v in malformed[0])
        raise MalformedPixelError(x, y, grid.color_at(x, y))

    path = grid.path_mask
    vertical = path[:-2, 1:-1] | path[2:, 1:-1]
    horizontal = path[1:-1, :-2] | path[1:-1, 2:]
    branches = path[1:-1, 1:-1] & vertical & horizontal
    # Transpose so argwhere walks columns first, matching the x-outer scan.
    return [Point(int(x) + 1, int(y) + 1) for x, y in np.argwhere(branches.T)]


def connect_neighbors(grid: MazeGrid, builder: MazeBuilder, vertices: Sequence[Point]) -> int:
    """Wire every vertex to the nearest vertex along each cardinal ray.

    Returns the number of connections made (each edge is seen from both ends).
    """

    registered = set(vertices)
    connections = 0
    for vertex in vertices:
        for dx, dy in CARDINAL_OFFSETS:
            neighbor = _cast_ray(grid, registered, vertex, dx, dy)
            if neighbor is not None:
                builder.connect_vertices(vertex, neighbor)
                connections += 1
    return connections


def _cast_ray(
    grid: MazeGrid,
    registered: set[Point],
    origin: Point,
    dx: int,
    dy: int,
) -> Point | None:
    cursor = origin.offset(dx, dy)
    while grid.is_path(cursor.x, cursor.y):
        if cursor in registered:
            return cursor
        cursor = cursor.offset(dx, dy)
    return None


__all__ = ["extract_maze", "find_openings", "find_branches", "connect_neighbors"]
