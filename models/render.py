from __future__ import annotations

from typing import Sequence

from PIL import Image, ImageDraw

from .errors import NonOrthogonalSegmentError
from .point import Point

SOLUTION_COLOR: tuple[int, int, int, int] = (50, 150, 255, 150)


def expand_path(points: Sequence[Point]) -> list[Point]:
    """Expand consecutive vertices into every pixel of the corridors between them."""

    if not points:
        return []
    pixels: list[Point] = [points[0]]
    for start, end in zip(points, points[1:]):
        if start.x != end.x and start.y != end.y:
            raise NonOrthogonalSegmentError(
                f"Segment {start} -> {end} is not axis-aligned."
            )
        dx = (end.x > start.x) - (end.x < start.x)
        dy = (end.y > start.y) - (end.y < start.y)
        cursor = start
        while cursor != end:
            cursor = cursor.offset(dx, dy)
            pixels.append(cursor)
    return pixels


def render_solution(
    image: Image.Image,
    points: Sequence[Point],
    *,
    color: tuple[int, int, int, int] = SOLUTION_COLOR,
) -> Image.Image:
    """Composite ``color`` over every pixel of the path on an RGBA copy of ``image``."""

    base = image.convert("RGBA")
    pixels = expand_path(points)
    if not pixels:
        return base
    overlay = Image.new("RGBA", base.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    draw.point([(p.x, p.y) for p in pixels], fill=tuple(color))
    return Image.alpha_composite(base, overlay)


__all__ = ["SOLUTION_COLOR", "expand_path", "render_solution"]
