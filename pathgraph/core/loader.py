"""
Bulk Loader
===========

Builds a whole graph at once, either from a structured description
(vertex names plus neighbor lists) or from the bundled example graph.
Both replace everything the store held before.
"""

from __future__ import annotations
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union
import logging

from ..config import LayoutConfig
from ..contracts.base import Error, ErrorCode, Result
from ..contracts.graph import VertexEntry
from .layout import circular_layout
from .store import GraphStore

logger = logging.getLogger("pathgraph.loader")

RawEntry = Union[VertexEntry, Mapping[str, object], Tuple[str, Sequence[str]]]


# Six-vertex weighted example, laid out left to right.
EXAMPLE_VERTICES: Tuple[Tuple[str, float, float], ...] = (
    ("A", 150, 250),
    ("B", 300, 150),
    ("C", 300, 350),
    ("D", 450, 150),
    ("E", 450, 350),
    ("F", 600, 250),
)

EXAMPLE_EDGES: Tuple[Tuple[str, str, float], ...] = (
    ("A", "B", 12),
    ("A", "C", 4),
    ("B", "C", 6),
    ("B", "D", 6),
    ("B", "E", 8),
    ("C", "E", 2),
    ("D", "F", 6),
    ("E", "F", 6),
)


def parse_entries(raw: Iterable[RawEntry]) -> List[VertexEntry]:
    """
    Normalize description entries.

    Accepts VertexEntry objects, mappings with `name` / `neighbors` keys,
    or (name, neighbors) pairs. Surrounding whitespace is stripped from
    every name.
    """
    entries = []
    for item in raw:
        if isinstance(item, VertexEntry):
            name, neighbors = item.name, item.neighbors
        elif isinstance(item, Mapping):
            name, neighbors = item["name"], item.get("neighbors", ())
        else:
            name, neighbors = item
        if isinstance(neighbors, str):
            raise TypeError(f"neighbors of {name!r} must be a sequence of names")
        entries.append(VertexEntry(
            name=str(name).strip(),
            neighbors=tuple(str(n).strip() for n in neighbors)
        ))
    return entries


class BulkLoader:
    """Replaces a store's contents, placing vertices on a circle."""

    def __init__(self, layout: Optional[LayoutConfig] = None):
        self._layout = layout or LayoutConfig()

    def load(self, store: GraphStore, raw_entries: Iterable[RawEntry]) -> Result:
        """Rebuild `store` from a description around the canvas midpoint."""
        entries = parse_entries(raw_entries)
        result = store.rebuild_from_description(entries, place=self._place)
        if result.is_failure:
            logger.info("description rejected: %s", result.error.message)
        return result

    def load_example(self, store: GraphStore) -> Result:
        """Rebuild `store` as the six-vertex example graph."""
        if store.capacity < len(EXAMPLE_VERTICES):
            return Result.failure(Error.create(
                ErrorCode.INVALID_VERTEX_NAME,
                f"Example graph needs {len(EXAMPLE_VERTICES)} vertices, "
                f"capacity is {store.capacity}",
                reason="capacity_exceeded",
            ))

        store.clear()
        for name, x, y in EXAMPLE_VERTICES:
            store.add_vertex(name, x, y)
        for origin, destination, weight in EXAMPLE_EDGES:
            store.add_edge(origin, destination, weight)
        logger.info("loaded example graph")
        return Result.success(store.names)

    def _place(self, count: int):
        return circular_layout(count, self._layout.center, self._layout.radius)
