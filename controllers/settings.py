"""Load solver settings from config.toml."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import tomllib

from models.render import SOLUTION_COLOR

CONFIG_FILENAME = "config.toml"
CONFIG_SECTION = "mazesolver"
DEFAULT_DATA_DIR = "data"


@dataclass(frozen=True, slots=True)
class SolverSettings:
    data_dir: Path
    solution_color: tuple[int, int, int, int] = SOLUTION_COLOR


def load_settings(config_path: Path | None = None) -> SolverSettings:
    """Return settings resolved from ``config_path`` (default: project config.toml)."""

    path = (config_path or _project_root() / CONFIG_FILENAME).resolve()
    section = _read_config_section(path)
    return SolverSettings(
        data_dir=_resolve_path(_data_dir_from(section), path.parent),
        solution_color=_color_from(section),
    )


def load_data_dir() -> Path:
    return load_settings().data_dir


@lru_cache(maxsize=8)
def _read_config_section(config_path: Path) -> dict[str, Any]:
    if not config_path.is_file():
        return {}
    with config_path.open("rb") as handle:
        config = tomllib.load(handle)
    section = config.get(CONFIG_SECTION)
    return section if isinstance(section, dict) else {}


def _data_dir_from(section: dict[str, Any]) -> str:
    candidate = section.get("data_dir")
    if isinstance(candidate, str) and candidate.strip():
        return candidate
    return DEFAULT_DATA_DIR


def _color_from(section: dict[str, Any]) -> tuple[int, int, int, int]:
    candidate = section.get("solution_color")
    if (
        isinstance(candidate, list)
        and len(candidate) == 4
        and all(isinstance(c, int) and 0 <= c <= 255 for c in candidate)
    ):
        return tuple(candidate)  # type: ignore[return-value]
    return SOLUTION_COLOR


def _resolve_path(raw_path: str, root: Path) -> Path:
    path = Path(raw_path).expanduser()
    if path.is_absolute():
        return path.resolve()
    return (root / path).resolve()


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


__all__ = ["SolverSettings", "load_settings", "load_data_dir"]
