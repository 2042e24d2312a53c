"""Shared filesystem layout for mazes and their solutions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from controllers.settings import load_data_dir


def _default_data_dir() -> Path:
    env_dir = os.environ.get("MAZESOLVER_DATA_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return load_data_dir()


@dataclass(slots=True)
class DataPaths:
    """Canonical directories for input mazes, rendered solutions and graph dumps."""

    mazes_dir: Path = Path("data/mazes")
    solutions_dir: Path = Path("data/solutions")
    graphs_dir: Path = Path("data/graphs")

    def ensure_directories(self) -> None:
        self.mazes_dir.mkdir(parents=True, exist_ok=True)
        self.solutions_dir.mkdir(parents=True, exist_ok=True)
        self.graphs_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_data_dir(cls, data_dir: Path | None = None) -> DataPaths:
        base = data_dir or _default_data_dir()
        base = base.expanduser().resolve()
        return cls(
            mazes_dir=base / "mazes",
            solutions_dir=base / "solutions",
            graphs_dir=base / "graphs",
        )

    def list_mazes(self) -> list[str]:
        if not self.mazes_dir.exists():
            return []
        return sorted(path.name for path in self.mazes_dir.glob("*.png"))


__all__ = ["DataPaths"]
