"""
Session Orchestration Module

One GraphExplorerSession owns one GraphStore and the state the UI
used to keep in globals (highlighted cheapest/costliest paths).

DESIGN PRINCIPLES:
==================
1. Raw user input (weights, padded names) is validated here
2. The store stays permissive; this layer reports what it ignored
3. Every failure is returned as a Result, never raised
"""

from __future__ import annotations
from typing import Iterable, Optional, Tuple
import logging
import math

from .config import ExplorerConfig
from .contracts.base import Error, ErrorCode, Result
from .contracts.graph import AdjacencyView, PathQueryResult
from .core.loader import BulkLoader, RawEntry
from .core.store import GraphStore
from .query import PathQueryEngine
from .views import GraphView, build_graph_view, highlights_for

logger = logging.getLogger("pathgraph.session")


def parse_weight(raw) -> Result:
    """
    Validate an edge weight typed by the user.

    Accepts numbers or numeric strings; the value must be finite and > 0.
    """
    try:
        weight = float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError, OverflowError):
        return Result.failure(Error.create(
            ErrorCode.INVALID_WEIGHT, "Invalid weight", raw=str(raw)
        ))

    if isinstance(raw, bool) or not math.isfinite(weight) or weight <= 0:
        return Result.failure(Error.create(
            ErrorCode.INVALID_WEIGHT, "Invalid weight", raw=str(raw)
        ))

    if weight.is_integer():
        weight = int(weight)
    return Result.success(weight)


class GraphExplorerSession:
    """
    Unified entry point for an editing session.

    FLOW:
    =====
    add_vertex / connect / load_*  ->  GraphStore
    find_paths                     ->  PathQueryEngine -> highlights
    render_view / adjacency_view   ->  read-only snapshots
    """

    def __init__(self, config: Optional[ExplorerConfig] = None):
        self._config = config or ExplorerConfig()
        self._store = GraphStore(self._config.store)
        self._loader = BulkLoader(self._config.layout)
        self._query = PathQueryEngine(self._store, self._config.search)
        self._last_query: Optional[PathQueryResult] = None

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def store(self) -> GraphStore:
        return self._store

    @property
    def last_query(self) -> Optional[PathQueryResult]:
        return self._last_query

    @property
    def highlighted_paths(self) -> Tuple[Optional[Tuple[str, ...]], Optional[Tuple[str, ...]]]:
        """(cheapest, costliest) from the last successful query."""
        if self._last_query is None:
            return None, None
        extremes = self._last_query.extremes
        return extremes.cheapest, extremes.costliest

    # =========================================================================
    # EDITING
    # =========================================================================

    def add_vertex(self, name: str, x: float, y: float) -> Result:
        name = name.strip() if isinstance(name, str) else name
        result = self._store.add_vertex(name, x, y)
        if result.is_failure:
            logger.info("vertex %r rejected: %s", name, result.error.context_value("reason"))
        else:
            logger.info("vertex %r added", name)
        return result

    def connect(self, origin: str, destination: str, weight="1") -> Result:
        """
        Connect two vertices with a user-supplied weight.

        Unlike GraphStore.add_edge, every ignored case is reported:
        INVALID_WEIGHT, UNKNOWN_VERTEX_REFERENCE or SELF_LOOP_REJECTED.
        """
        parsed = parse_weight(weight)
        if parsed.is_failure:
            return parsed

        unknown = [n for n in (origin, destination) if not self._store.has_vertex(n)]
        if unknown:
            return Result.failure(Error.create(
                ErrorCode.UNKNOWN_VERTEX_REFERENCE,
                "Edge references an unknown vertex",
                missing=", ".join(str(n) for n in unknown),
            ))
        if origin == destination:
            return Result.failure(Error.create(
                ErrorCode.SELF_LOOP_REJECTED,
                "A vertex cannot be connected to itself",
                vertex=origin,
            ))

        self._store.add_edge(origin, destination, parsed.value)
        logger.info("edge %r-%r set to %s", origin, destination, parsed.value)
        return Result.success((origin, destination, parsed.value))

    def load_description(self, entries: Iterable[RawEntry]) -> Result:
        """Replace the graph with a described one; clears highlights."""
        result = self._loader.load(self._store, entries)
        if result.is_success:
            self._last_query = None
        return result

    def load_example(self) -> Result:
        """Replace the graph with the bundled example; clears highlights."""
        result = self._loader.load_example(self._store)
        if result.is_success:
            self._last_query = None
        return result

    # =========================================================================
    # QUERIES
    # =========================================================================

    def find_paths(self, origin: str, destination: str) -> Result:
        """
        Enumerate paths and remember the extremes for highlighting.
        A failed query leaves the previous highlights in place.
        """
        result = self._query.find_paths(origin, destination)
        if result.is_success:
            self._last_query = result.value
        return result

    def adjacency_view(self) -> AdjacencyView:
        return self._store.adjacency_view()

    def render_view(self) -> GraphView:
        cheapest, costliest = self.highlighted_paths
        return build_graph_view(
            self._store,
            highlights_for(cheapest, costliest),
            vertex_radius=self._config.layout.vertex_radius,
        )
