"""
Graph Store
===========

In-memory owner of vertices, positions and the weighted edge relation.

INVARIANTS:
===========
- Vertex names are unique and non-empty
- Vertex count never exceeds the configured capacity
- The edge relation is symmetric (undirected networkx graph)
- No vertex is connected to itself
- Every edge endpoint is a vertex currently in the store

Vertices are ordered by insertion; that order is the vertex index used
by the matrix view and by path enumeration.
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple
import logging
import math
import numbers

import networkx as nx
import numpy as np

from ..config import GraphStoreConfig
from ..contracts.base import Error, ErrorCode, Position, Result, Vertex
from ..contracts.graph import AdjacencyView, VertexEntry

logger = logging.getLogger("pathgraph.store")

Placement = Callable[[int], Sequence[Position]]


def is_valid_weight(weight) -> bool:
    """Edge weights must be finite positive numbers."""
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        return False
    try:
        return math.isfinite(weight) and weight > 0
    except OverflowError:
        # ints beyond float range
        return False


def collect_names(entries: Iterable[VertexEntry]) -> List[str]:
    """
    Distinct names referenced by a description, in first-seen order.

    Each entry contributes its own name followed by its neighbor names.
    """
    seen: Dict[str, None] = {}
    for entry in entries:
        seen.setdefault(entry.name, None)
        for neighbor in entry.neighbors:
            seen.setdefault(neighbor, None)
    return list(seen)


class GraphStore:
    """
    Bounded, insertion-ordered undirected weighted graph.

    Wraps a networkx Graph for the edge relation and keeps a
    name -> index map next to the ordered name list for O(1) lookup.
    """

    def __init__(self, config: Optional[GraphStoreConfig] = None):
        self._config = config or GraphStoreConfig()
        self._graph = nx.Graph()
        self._names: List[str] = []
        self._index: Dict[str, int] = {}

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def capacity(self) -> int:
        return self._config.capacity

    @property
    def default_weight(self) -> float:
        return self._config.default_weight

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    @property
    def vertex_count(self) -> int:
        return len(self._names)

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def is_full(self) -> bool:
        return len(self._names) >= self._config.capacity

    def has_vertex(self, name: str) -> bool:
        return name in self._index

    def index_of(self, name: str) -> int:
        """Insertion index of a vertex. Raises KeyError for unknown names."""
        return self._index[name]

    def position_of(self, name: str) -> Position:
        return self._graph.nodes[name]["position"]

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(
            Vertex(name=name, position=self._graph.nodes[name]["position"])
            for name in self._names
        )

    def weight(self, origin: str, destination: str) -> float:
        """Weight between two vertices, 0 when they are not connected."""
        data = self._graph.get_edge_data(origin, destination)
        if data is None:
            return 0
        return data["weight"]

    def is_connected(self, origin: str, destination: str) -> bool:
        return self._graph.has_edge(origin, destination)

    def neighbors_in_order(self, name: str) -> List[str]:
        """Neighbors of a vertex, ordered by vertex index."""
        return sorted(self._graph.adj[name], key=self._index.__getitem__)

    def edges(self) -> List[Tuple[str, str, float]]:
        """Each undirected edge once, as (lower-index, higher-index, weight)."""
        ordered = []
        for u, v, weight in self._graph.edges(data="weight"):
            if self._index[u] > self._index[v]:
                u, v = v, u
            ordered.append((u, v, weight))
        ordered.sort(key=lambda e: (self._index[e[0]], self._index[e[1]]))
        return ordered

    def adjacency_view(self) -> AdjacencyView:
        """Square weight matrix over the populated vertices."""
        if not self._names:
            return AdjacencyView(names=(), weights=np.zeros((0, 0), dtype=float))
        weights = nx.to_numpy_array(
            self._graph, nodelist=self._names, weight="weight", dtype=float
        )
        return AdjacencyView(names=tuple(self._names), weights=weights)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_vertex(self, name: str, x: float, y: float) -> Result:
        """
        Append a vertex at (x, y).

        Fails with INVALID_VERTEX_NAME when the name is empty, already
        present, or the store is at capacity.
        """
        reason = None
        if not name or not isinstance(name, str):
            reason = "empty_name"
        elif name in self._index:
            reason = "duplicate_name"
        elif self.is_full:
            reason = "capacity_exceeded"

        if reason is not None:
            logger.debug("rejected vertex %r: %s", name, reason)
            return Result.failure(Error.create(
                ErrorCode.INVALID_VERTEX_NAME,
                "Invalid, duplicate or over-capacity vertex name",
                name=name or "",
                reason=reason,
            ))

        position = Position(x=float(x), y=float(y))
        self._index[name] = len(self._names)
        self._names.append(name)
        self._graph.add_node(name, position=position)
        logger.debug("added vertex %r at (%s, %s)", name, x, y)
        return Result.success(Vertex(name=name, position=position))

    def add_edge(self, origin: str, destination: str, weight: float = None) -> bool:
        """
        Connect two vertices symmetrically, overwriting any previous weight.

        Unknown names, self-loops and non-positive weights are ignored.
        Returns whether the relation was written.
        """
        if weight is None:
            weight = self.default_weight

        if origin not in self._index or destination not in self._index:
            logger.debug("ignored edge %r-%r: unknown vertex", origin, destination)
            return False
        if origin == destination:
            logger.debug("ignored edge %r-%r: self-loop", origin, destination)
            return False
        if not is_valid_weight(weight):
            logger.debug("ignored edge %r-%r: weight %r", origin, destination, weight)
            return False

        self._graph.add_edge(origin, destination, weight=weight)
        logger.debug("set edge %r-%r weight %s", origin, destination, weight)
        return True

    def clear(self) -> None:
        """Drop every vertex and edge."""
        self._graph.clear()
        self._names = []
        self._index = {}

    def rebuild_from_description(
        self,
        entries: Sequence[VertexEntry],
        place: Optional[Placement] = None
    ) -> Result:
        """
        Replace the whole graph with the one a description declares.

        Every distinct name (entry or neighbor) becomes a vertex in
        first-seen order. `place` maps the vertex count to positions;
        without it every vertex sits at the origin. Each entry is then
        connected to its neighbors with the default weight.

        On failure the previous graph is left untouched.
        """
        names = collect_names(entries)

        if any(not name or not isinstance(name, str) for name in names):
            return Result.failure(Error.create(
                ErrorCode.INVALID_VERTEX_NAME,
                "Description contains an empty or non-text vertex name",
                reason="empty_name",
            ))
        if len(names) > self._config.capacity:
            return Result.failure(Error.create(
                ErrorCode.INVALID_VERTEX_NAME,
                f"Description declares {len(names)} vertices, "
                f"capacity is {self._config.capacity}",
                reason="capacity_exceeded",
            ))

        positions = list(place(len(names))) if place else [Position(0.0, 0.0)] * len(names)
        if len(positions) != len(names):
            raise ValueError(
                f"placement returned {len(positions)} positions for {len(names)} vertices"
            )

        self.clear()
        for name, position in zip(names, positions):
            self.add_vertex(name, position.x, position.y)

        for entry in entries:
            for neighbor in entry.neighbors:
                self.add_edge(entry.name, neighbor)

        logger.info(
            "rebuilt graph from description: %d vertices, %d edges",
            self.vertex_count, self.edge_count
        )
        return Result.success(self.names)
