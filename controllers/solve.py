"""Solve maze images end to end and persist the results."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from PIL import Image

from controllers.data_paths import DataPaths
from controllers.settings import load_settings
from models.errors import MazeError, NoSolutionError
from models.extractor import extract_maze
from models.grid import MazeGrid
from models.maze import Maze
from models.point import Point
from models.render import SOLUTION_COLOR, expand_path, render_solution
from models.utils.image_io import load_image, save_png
from models.utils.naming import canonical_maze_name, prefixed_name

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SolveResult:
    name: str
    maze: Maze
    path: list[Point]
    solution_image: Image.Image
    elapsed_seconds: float
    solution_path: Path | None = None
    graph_path: Path | None = None

    @property
    def pixel_count(self) -> int:
        return len(expand_path(self.path))

    def summary(self) -> str:
        return (
            f"{len(self.maze.graph)} vertices, {self.pixel_count} steps "
            f"in {self.elapsed_seconds:.4f} s"
        )


def solve_maze_image(
    image: Image.Image,
    *,
    name: str = "maze",
    color: tuple[int, int, int, int] = SOLUTION_COLOR,
) -> SolveResult:
    """Extract, solve and render ``image``; maze errors propagate to the caller."""

    started = time.perf_counter()
    maze = extract_maze(MazeGrid.from_image(image))
    path = maze.solve_path()
    solution = render_solution(image, path, color=color)
    elapsed = time.perf_counter() - started
    logger.debug("Solved %s using breadth first search in %.4f seconds", name, elapsed)
    return SolveResult(
        name=name,
        maze=maze,
        path=path,
        solution_image=solution,
        elapsed_seconds=elapsed,
    )


def solve_maze_file(
    maze_path: Path,
    *,
    data_paths: DataPaths | None = None,
    save_graph: bool = False,
    color: tuple[int, int, int, int] | None = None,
    image: Image.Image | None = None,
) -> SolveResult:
    """Solve the maze at ``maze_path`` and save its artifacts.

    Pass ``image`` when the caller has already decoded ``maze_path``.
    """

    paths = data_paths or DataPaths.from_data_dir()
    paths.ensure_directories()
    if color is None:
        color = load_settings().solution_color

    name = canonical_maze_name(maze_path)
    if image is None:
        image = load_image(maze_path, mode="RGB")
    result = solve_maze_image(image, name=name, color=color)

    result.solution_path = save_png(
        result.solution_image,
        paths.solutions_dir / prefixed_name("solution", name),
    )
    if save_graph:
        result.graph_path = result.maze.save(paths.graphs_dir / prefixed_name("graph", name))
    return result


def describe_failure(exc: MazeError, grid: MazeGrid | None = None) -> str:
    """Human-readable explanation of ``exc`` for status lines."""

    message = str(exc)
    if isinstance(exc, NoSolutionError) and grid is not None:
        _, regions = grid.path_regions()
        message = f"{message} The corridors form {regions} disconnected regions."
    return message


def _cli(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Solve black-and-white maze PNGs with breadth-first search."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Maze PNG paths. If omitted, solves every <data-dir>/mazes/*.png.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Data directory containing mazes/, solutions/ and graphs/ (default from config.toml).",
    )
    parser.add_argument(
        "--graph",
        action="store_true",
        help="Also write the extracted graph as graph_<name>.json.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log extraction and timing details.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    paths = DataPaths.from_data_dir(args.data_dir)
    targets = list(args.paths) or sorted(paths.mazes_dir.glob("*.png"))
    if not targets:
        print(f"No maze PNGs found in {paths.mazes_dir}; nothing to do.", file=sys.stderr)
        return 0

    failures = 0
    for target in targets:
        if not target.exists():
            print(f"[missing] {target} – skipping", file=sys.stderr)
            failures += 1
            continue
        try:
            image = load_image(target, mode="RGB")
            result = solve_maze_file(target, data_paths=paths, save_graph=args.graph, image=image)
        except MazeError as exc:
            grid = MazeGrid.from_image(image)
            print(f"[error] {target.name}: {describe_failure(exc, grid)}", file=sys.stderr)
            failures += 1
            continue
        except ValueError as exc:
            print(f"[error] {target.name}: {exc}", file=sys.stderr)
            failures += 1
            continue
        print(f"[ok] {target.name} → {result.solution_path.name} ({result.summary()})")

    if failures:
        logger.warning("%d of %d mazes failed", failures, len(targets))
        return 1
    return 0


__all__ = ["SolveResult", "solve_maze_image", "solve_maze_file", "describe_failure"]


if __name__ == "__main__":
    raise SystemExit(_cli())
