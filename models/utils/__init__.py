"""Small shared helpers for the models layer."""

from .image_io import encode_png, load_image, save_png
from .naming import STAGE_PREFIXES, apply_stage_prefix, canonical_maze_name, known_prefixes, prefixed_name, strip_prefix

__all__ = [
    "STAGE_PREFIXES",
    "apply_stage_prefix",
    "canonical_maze_name",
    "known_prefixes",
    "prefixed_name",
    "strip_prefix",
    "load_image",
    "encode_png",
    "save_png",
]
