from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from .errors import InvalidMazeError, NoSolutionError, UnsupportedSolverError
from .graph import Graph
from .point import Point
from .render import SOLUTION_COLOR, render_solution

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MazeBuilder:
    """Mutable construction phase of a maze graph."""

    start: Point
    exit: Point | None = None
    graph: Graph[Point] = field(default_factory=Graph)

    def __post_init__(self) -> None:
        self.graph.add_value(self.start)

    def add_vertex(self, point: Point) -> None:
        self.graph.add_value(point)

    def connect_vertices(self, first: Point, second: Point) -> None:
        self.graph.connect_undirected(first, second)

    def set_exit(self, point: Point) -> None:
        self.graph.add_value(point)
        self.exit = point

    def build(self) -> Maze:
        """Freeze the graph and return the solvable maze."""

        if self.exit is None:
            raise InvalidMazeError("Maze missing an exit.")
        self.graph.freeze()
        return Maze(graph=self.graph, start=self.start, exit=self.exit)


@dataclass(frozen=True, slots=True)
class Maze:
    """Read-only maze graph with a designated start and exit."""

    graph: Graph[Point]
    start: Point
    exit: Point

    def __post_init__(self) -> None:
        if not self.graph.frozen:
            raise ValueError("Maze requires a frozen graph; use MazeBuilder.build().")

    def solve_path(self) -> list[Point]:
        """Return the vertex sequence of a shortest start-to-exit route."""

        path = self.graph.breadth_first_path(self.start, self.exit)
        if path is None:
            raise NoSolutionError(f"Maze has no solution from {self.start} to {self.exit}.")
        logger.debug("BFS path has %d vertices", len(path))
        return path

    def solve_bfs(
        self,
        image: Image.Image,
        *,
        color: tuple[int, int, int, int] = SOLUTION_COLOR,
    ) -> Image.Image:
        return render_solution(image, self.solve_path(), color=color)

    def solve_dfs(self, *args: object, **kwargs: object) -> Image.Image:
        raise UnsupportedSolverError("Depth-first solving is not supported; use solve_bfs().")

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {**self.graph.to_payload(Point.to_dict)}
        payload.update(self._endpoints())
        return payload

    def save(self, output_path: Path) -> Path:
        """Write the graph JSON with the start and exit points to ``output_path``."""

        return self.graph.save(output_path, Point.to_dict, extra=self._endpoints())

    def _endpoints(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "exit": self.exit.to_dict()}


__all__ = ["Maze", "MazeBuilder"]
