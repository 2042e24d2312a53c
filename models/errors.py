"""Exception types raised while extracting and solving mazes."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every maze-related failure."""


class InvalidMazeError(MazeError):
    """The image does not expose both an entrance and an exit on its border."""


class MalformedPixelError(MazeError, ValueError):
    """An interior pixel is neither the path colour nor the wall colour."""

    def __init__(self, x: int, y: int, color: tuple[int, ...]) -> None:
        self.x = x
        self.y = y
        self.color = tuple(int(c) for c in color)
        super().__init__(f"Pixel ({x}, {y}) has unexpected colour {self.color}.")


class NoSolutionError(MazeError):
    """The maze is well formed but the exit cannot be reached from the start."""


class UnregisteredVertexError(MazeError, KeyError):
    """A graph operation referenced a value that was never added."""

    def __str__(self) -> str:
        # KeyError.__str__ wraps the message in quotes.
        return str(self.args[0]) if self.args else ""


class FrozenGraphError(MazeError, RuntimeError):
    """The graph was mutated after it entered its read-only phase."""


class UnsupportedSolverError(MazeError, NotImplementedError):
    """The requested solving strategy is not available."""


class NonOrthogonalSegmentError(MazeError, ValueError):
    """Two consecutive path points are not on the same row or column."""


__all__ = [
    "MazeError",
    "InvalidMazeError",
    "MalformedPixelError",
    "NoSolutionError",
    "UnregisteredVertexError",
    "FrozenGraphError",
    "UnsupportedSolverError",
    "NonOrthogonalSegmentError",
]
