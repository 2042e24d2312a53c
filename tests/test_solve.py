# tests/test_solve.py
"""Tests for the solve controller and its command-line entry point."""
import json

import pytest

from controllers.data_paths import DataPaths
from controllers.solve import _cli, describe_failure, solve_maze_file, solve_maze_image
from models.errors import InvalidMazeError, NoSolutionError
from models.grid import MazeGrid
from models.point import Point
from tests.conftest import SINGLE_OPENING


@pytest.fixture
def data_paths(tmp_path) -> DataPaths:
    paths = DataPaths.from_data_dir(tmp_path)
    paths.ensure_directories()
    return paths


class TestSolveMazeImage:

    def test_result(self, l_shape_image):
        result = solve_maze_image(l_shape_image, name="ell")
        assert result.name == "ell"
        assert result.path == [Point(1, 0), Point(1, 2), Point(4, 2)]
        assert result.pixel_count == 6
        assert result.elapsed_seconds >= 0
        assert result.solution_image.size == l_shape_image.size
        assert "3 vertices, 6 steps" in result.summary()

    def test_invalid_maze_propagates(self, draw_maze):
        with pytest.raises(InvalidMazeError):
            solve_maze_image(draw_maze(SINGLE_OPENING))

    def test_no_solution_propagates(self, disconnected_image):
        with pytest.raises(NoSolutionError):
            solve_maze_image(disconnected_image)


class TestSolveMazeFile:

    def test_writes_solution(self, data_paths, l_shape_image):
        source = data_paths.mazes_dir / "maze_ell.png"
        l_shape_image.save(source)
        result = solve_maze_file(source, data_paths=data_paths, color=(0, 0, 255, 255))
        assert result.solution_path == data_paths.solutions_dir / "solution_ell.png"
        assert result.solution_path.exists()
        assert result.graph_path is None

    def test_writes_graph(self, data_paths, l_shape_image):
        source = data_paths.mazes_dir / "ell.png"
        l_shape_image.save(source)
        result = solve_maze_file(source, data_paths=data_paths, save_graph=True)
        payload = json.loads(result.graph_path.read_text())
        assert payload["start"] == {"x": 1, "y": 0}
        assert len(payload["edges"]) == 2

    def test_missing_file(self, data_paths, tmp_path):
        with pytest.raises(ValueError, match="was not found"):
            solve_maze_file(tmp_path / "missing.png", data_paths=data_paths)

    def test_preloaded_image_skips_disk(self, data_paths, l_shape_image):
        # The path only names the artifacts; nothing is read from it.
        source = data_paths.mazes_dir / "maze_ell.png"
        result = solve_maze_file(source, data_paths=data_paths, image=l_shape_image, save_graph=True)
        assert not source.exists()
        assert result.solution_path == data_paths.solutions_dir / "solution_ell.png"
        assert result.graph_path == data_paths.graphs_dir / "graph_ell.json"


class TestDescribeFailure:

    def test_no_solution_counts_regions(self, disconnected_image):
        grid = MazeGrid.from_image(disconnected_image)
        message = describe_failure(NoSolutionError("Maze has no solution."), grid)
        assert "2 disconnected regions" in message

    def test_other_errors_use_message(self):
        assert describe_failure(InvalidMazeError("missing exit")) == "missing exit"


class TestCli:

    def test_solves_directory(self, data_paths, l_shape_image, straight_image, capsys):
        l_shape_image.save(data_paths.mazes_dir / "ell.png")
        straight_image.save(data_paths.mazes_dir / "straight.png")
        status = _cli(["--data-dir", str(data_paths.mazes_dir.parent), "--graph"])
        out = capsys.readouterr().out
        assert status == 0
        assert "[ok] ell.png" in out
        assert "[ok] straight.png" in out
        assert (data_paths.graphs_dir / "graph_straight.json").exists()

    def test_reports_failures(self, data_paths, disconnected_image, capsys):
        target = data_paths.mazes_dir / "split.png"
        disconnected_image.save(target)
        status = _cli([str(target), "--data-dir", str(data_paths.mazes_dir.parent)])
        err = capsys.readouterr().err
        assert status == 1
        assert "[error] split.png" in err
        assert "2 disconnected regions" in err

    def test_missing_path(self, data_paths, capsys):
        status = _cli([str(data_paths.mazes_dir / "ghost.png"), "--data-dir", str(data_paths.mazes_dir.parent)])
        assert status == 1
        assert "[missing]" in capsys.readouterr().err

    def test_empty_directory(self, data_paths, capsys):
        assert _cli(["--data-dir", str(data_paths.mazes_dir.parent)]) == 0
        assert "nothing to do" in capsys.readouterr().err

    def test_exit_status_is_one_for_many_failures(self, data_paths, capsys):
        ghosts = [str(data_paths.mazes_dir / f"ghost_{i}.png") for i in range(256)]
        status = _cli([*ghosts, "--data-dir", str(data_paths.mazes_dir.parent)])
        assert status == 1
        assert capsys.readouterr().err.count("[missing]") == 256

    def test_mixed_batch_fails(self, data_paths, l_shape_image, disconnected_image, capsys):
        l_shape_image.save(data_paths.mazes_dir / "ell.png")
        disconnected_image.save(data_paths.mazes_dir / "split.png")
        status = _cli(["--data-dir", str(data_paths.mazes_dir.parent)])
        captured = capsys.readouterr()
        assert status == 1
        assert "[ok] ell.png" in captured.out
        assert "[error] split.png" in captured.err
