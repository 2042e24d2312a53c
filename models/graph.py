from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, Hashable, Iterator, TypeVar

from .errors import FrozenGraphError, UnregisteredVertexError

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Vertex(Generic[T]):
    """Read-only snapshot of a graph vertex and the values adjacent to it."""

    value: T
    neighbors: tuple[T, ...] = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vertex):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


class Graph(Generic[T]):
    """Undirected graph keyed by value.

    Vertices live in a contiguous store and are addressed by index; each value
    maps to exactly one index. Neighbour sets hold indices and keep insertion
    order, so traversals are reproducible for a given construction order.
    """

    __slots__ = ("_index", "_values", "_adjacency", "_frozen")

    def __init__(self) -> None:
        self._index: dict[T, int] = {}
        self._values: list[T] = []
        self._adjacency: list[dict[int, None]] = []
        self._frozen = False

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency) // 2

    def freeze(self) -> None:
        """Enter the read-only phase; later mutations raise ``FrozenGraphError``."""

        self._frozen = True

    def add_value(self, value: T) -> int:
        """Register ``value`` (no-op when already present) and return its index."""

        existing = self._index.get(value)
        if existing is not None:
            return existing
        self._ensure_mutable()
        index = len(self._values)
        self._index[value] = index
        self._values.append(value)
        self._adjacency.append({})
        return index

    def connect_undirected(self, first: T, second: T) -> None:
        """Record ``first`` and ``second`` as neighbours of each other."""

        self._ensure_mutable()
        a = self._lookup(first)
        b = self._lookup(second)
        if a == b:
            raise ValueError(f"Refusing to connect {first!r} to itself.")
        self._adjacency[a][b] = None
        self._adjacency[b][a] = None

    def neighbors(self, value: T) -> list[T]:
        return [self._values[idx] for idx in self._adjacency[self._lookup(value)]]

    def degree(self, value: T) -> int:
        return len(self._adjacency[self._lookup(value)])

    def vertex(self, value: T) -> Vertex[T]:
        return Vertex(value=self._values[self._lookup(value)], neighbors=tuple(self.neighbors(value)))

    def values(self) -> list[T]:
        return list(self._values)

    def edges(self) -> Iterator[tuple[T, T]]:
        """Yield every undirected edge once, lower index first."""

        for a, neighbors in enumerate(self._adjacency):
            for b in neighbors:
                if a < b:
                    yield self._values[a], self._values[b]

    def breadth_first_path(self, start: T, goal: T) -> list[T] | None:
        """Return the fewest-edge path ``start`` .. ``goal`` or ``None`` if unreachable."""

        source = self._lookup(start)
        target = self._lookup(goal)
        if source == target:
            return [self._values[source]]

        parent: dict[int, int] = {source: source}
        queue: deque[int] = deque([source])
        while queue:
            current = queue.popleft()
            for neighbor in self._adjacency[current]:
                if neighbor in parent:
                    continue
                parent[neighbor] = current
                if neighbor == target:
                    return self._rebuild_path(parent, source, target)
                queue.append(neighbor)
        return None

    def to_payload(self, encode: Callable[[T], Any] = lambda value: value) -> dict[str, list[Any]]:
        nodes = [
            {"id": idx, "value": encode(value), "degree": len(self._adjacency[idx])}
            for idx, value in enumerate(self._values)
        ]
        edges = [
            {"source": a, "target": b}
            for a, neighbors in enumerate(self._adjacency)
            for b in neighbors
            if a < b
        ]
        return {"nodes": nodes, "edges": edges}

    def to_json(
        self,
        encode: Callable[[T], Any] = lambda value: value,
        *,
        indent: int = 2,
        extra: dict[str, Any] | None = None,
    ) -> str:
        """Serialise the payload; ``extra`` keys are added at the top level."""

        payload: dict[str, Any] = dict(self.to_payload(encode))
        if extra:
            payload.update(extra)
        return json.dumps(payload, indent=indent)

    def save(
        self,
        output_path: Path,
        encode: Callable[[T], Any] = lambda value: value,
        *,
        extra: dict[str, Any] | None = None,
    ) -> Path:
        output_path.write_text(self.to_json(encode, extra=extra))
        return output_path

    def _rebuild_path(self, parent: dict[int, int], source: int, target: int) -> list[T]:
        path: list[T] = []
        cursor = target
        while cursor != source:
            path.append(self._values[cursor])
            cursor = parent[cursor]
        path.append(self._values[source])
        path.reverse()
        return path

    def _lookup(self, value: T) -> int:
        try:
            return self._index[value]
        except KeyError:
            raise UnregisteredVertexError(f"{value!r} is not a vertex of this graph.") from None

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise FrozenGraphError("Graph is frozen; build a new maze to change it.")

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.edge_count})"


__all__ = ["Graph", "Vertex"]
