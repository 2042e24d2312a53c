"""Read-only pixel classification for maze bitmaps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image
from skimage.measure import label

PATH = 1
WALL = 0
OTHER = 2

PATH_RGB = (255, 255, 255)
WALL_RGB = (0, 0, 0)


@dataclass(frozen=True, slots=True, eq=False)
class MazeGrid:
    """Pixel field where every cell is PATH, WALL or OTHER.

    ``kinds`` is indexed ``[y, x]`` like any image array; every public method
    takes ``(x, y)`` pixel coordinates.
    """

    kinds: np.ndarray
    colors: np.ndarray

    @classmethod
    def from_image(cls, image: Image.Image) -> MazeGrid:
        return cls.from_array(np.asarray(image.convert("RGB")))

    @classmethod
    def from_array(cls, array: np.ndarray) -> MazeGrid:
        """Classify a ``(H, W)`` grayscale/boolean or ``(H, W, C)`` colour array.

        Alpha channels are ignored; only RGB decides the pixel kind.
        """

        data = np.asarray(array)
        if data.dtype == bool:
            data = data.astype(np.uint8) * 255
        if data.ndim == 2:
            rgb = np.repeat(data[:, :, None], 3, axis=2)
        elif data.ndim == 3 and data.shape[2] in (3, 4):
            rgb = data[:, :, :3]
        else:
            raise ValueError(f"Expected a 2D grayscale or RGB(A) array, got shape {data.shape}.")
        if rgb.shape[0] == 0 or rgb.shape[1] == 0:
            raise ValueError("Maze image is empty.")

        rgb = rgb.astype(np.int64)
        kinds = np.full(rgb.shape[:2], OTHER, dtype=np.uint8)
        kinds[np.all(rgb == PATH_RGB, axis=2)] = PATH
        kinds[np.all(rgb == WALL_RGB, axis=2)] = WALL
        kinds.setflags(write=False)
        rgb.setflags(write=False)
        return cls(kinds=kinds, colors=rgb)

    @property
    def width(self) -> int:
        return int(self.kinds.shape[1])

    @property
    def height(self) -> int:
        return int(self.kinds.shape[0])

    @property
    def path_mask(self) -> np.ndarray:
        return self.kinds == PATH

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} maze.")
        return int(self.kinds[y, x])

    def color_at(self, x: int, y: int) -> tuple[int, int, int]:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} maze.")
        r, g, b = self.colors[y, x]
        return int(r), int(g), int(b)

    def is_path(self, x: int, y: int) -> bool:
        """True when ``(x, y)`` is in bounds and white."""

        return self.contains(x, y) and self.kinds[y, x] == PATH

    def path_regions(self) -> tuple[np.ndarray, int]:
        """Label 4-connected corridor regions; returns ``(labels, count)``."""

        labels, count = label(self.path_mask, connectivity=1, return_num=True)
        return labels, int(count)


def load_maze_grid(source: MazeGrid | Image.Image | np.ndarray | str | Path) -> MazeGrid:
    if isinstance(source, MazeGrid):
        return source
    if isinstance(source, np.ndarray):
        return MazeGrid.from_array(source)
    if not isinstance(source, Image.Image):
        with Image.open(source) as opened:
            source = opened.convert("RGB")
    return MazeGrid.from_image(source)


__all__ = [
    "MazeGrid",
    "PATH",
    "WALL",
    "OTHER",
    "PATH_RGB",
    "WALL_RGB",
    "load_maze_grid",
]
