"""Pillow wrappers for reading maze bitmaps and writing solutions."""

from __future__ import annotations

import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError


def load_image(source: Image.Image | str | Path, *, mode: str | None = None) -> Image.Image:
    """Load a maze image from ``source`` (path or Image) and optionally convert modes.

    Missing or undecodable files surface as ``ValueError`` so callers can
    report them next to maze errors.
    """

    if isinstance(source, Image.Image):
        image = source.copy()
    else:
        path = Path(source).expanduser()
        try:
            with Image.open(path) as opened:
                opened.load()
                image = opened.copy()
        except FileNotFoundError as exc:
            raise ValueError(f"Maze image {path} was not found.") from exc
        except UnidentifiedImageError as exc:
            raise ValueError(f"{path} is not a valid image file.") from exc
    if mode is not None:
        image = image.convert(mode)
    return image


def encode_png(image: Image.Image, *, mode: str | None = None) -> bytes:
    buffer = io.BytesIO()
    target = image.convert(mode) if mode is not None else image
    target.save(buffer, format="PNG")
    return buffer.getvalue()


def save_png(image: Image.Image, destination: Path, *, mode: str | None = None) -> Path:
    """Write ``image`` as PNG, creating parent directories as needed."""

    destination = destination.expanduser()
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(encode_png(image, mode=mode))
    return destination


__all__ = ["load_image", "encode_png", "save_png"]
