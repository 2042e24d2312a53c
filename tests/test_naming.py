# tests/test_naming.py
"""Tests for artifact filename helpers (models/utils/naming.py)."""
from pathlib import Path

import pytest

from models.utils.naming import apply_stage_prefix, canonical_maze_name, prefixed_name, strip_prefix


@pytest.mark.parametrize(
    "value, expected",
    [
        ("maze_spiral", "spiral"),
        ("solution_spiral", "spiral"),
        ("graph_spiral", "spiral"),
        ("spiral", "spiral"),
        ("maze_", "maze_"),
    ],
)
def test_strip_prefix(value, expected):
    assert strip_prefix(value) == expected


def test_apply_stage_prefix_does_not_double_up():
    assert apply_stage_prefix("solution", "maze_spiral") == "solution_spiral"


def test_prefixed_name_default_suffixes():
    assert prefixed_name("solution", "spiral") == "solution_spiral.png"
    assert prefixed_name("graph", "spiral") == "graph_spiral.json"


def test_prefixed_name_explicit_suffix():
    assert prefixed_name("graph", "spiral", ".txt") == "graph_spiral.txt"


def test_canonical_maze_name():
    assert canonical_maze_name(Path("/data/mazes/maze_tiny.png")) == "tiny"
    assert canonical_maze_name("tiny.png") == "tiny"
