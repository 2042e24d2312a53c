from __future__ import annotations

from dataclasses import dataclass

CARDINAL_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),  # up
    (0, 1),  # down
    (-1, 0),  # left
    (1, 0),  # right
)


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """Integer pixel coordinate, also used as a graph vertex identity."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


__all__ = ["CARDINAL_OFFSETS", "Point"]
