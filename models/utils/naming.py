"""Keep maze, solution and graph filenames consistent."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

STAGE_PREFIXES: dict[str, str] = {
    "maze": "maze_",
    "solution": "solution_",
    "graph": "graph_",
}

STAGE_SUFFIXES: dict[str, str] = {
    "maze": ".png",
    "solution": ".png",
    "graph": ".json",
}


def known_prefixes() -> tuple[str, ...]:
    return tuple(dict.fromkeys(STAGE_PREFIXES.values()))


def strip_prefix(value: str, *, extra: Iterable[str] | None = None) -> str:
    """Remove one known prefix from ``value`` (never returning an empty string)."""

    prefixes = list(known_prefixes())
    if extra:
        prefixes.extend(extra)
    for prefix in prefixes:
        if value.startswith(prefix) and len(value) > len(prefix):
            return value[len(prefix) :]
    return value


def apply_stage_prefix(stage: str, base: str) -> str:
    try:
        prefix = STAGE_PREFIXES[stage.strip().lower()]
    except KeyError as exc:  # pragma: no cover - developer errors
        raise KeyError(f"Unknown stage '{stage}'") from exc
    return prefix + strip_prefix(base)


def prefixed_name(stage: str, base: str, suffix: str | None = None) -> str:
    """Return the full artifact filename for ``stage`` (default suffix per stage)."""

    if suffix is None:
        suffix = STAGE_SUFFIXES[stage.strip().lower()]
    return f"{apply_stage_prefix(stage, base)}{suffix}"


def canonical_maze_name(path: Path | str) -> str:
    """Best-effort logical maze name for ``path`` (stem without stage prefix)."""

    stem = Path(path).stem
    cleaned = strip_prefix(stem)
    return cleaned or stem
