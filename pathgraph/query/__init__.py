"""
Path Query Interface

RESPONSIBILITY: Validated, read-only path queries over a GraphStore
ALLOWED INPUTS: Origin / destination vertex names
OUTPUTS: Result carrying a PathQueryResult or an explicit Error

WHAT THIS LAYER MUST NOT DO:
============================
- Mutate the graph
- Hand unknown names to the enumerator
- Confuse "vertex missing" with "no path" (distinct error codes)
"""

from __future__ import annotations
from itertools import islice
from typing import Optional
import logging
import time

from ..config import PathSearchConfig
from ..contracts.base import Error, ErrorCode, Result
from ..contracts.graph import PathQueryResult
from ..core.paths import iter_all_paths, path_weight, select_extremes
from ..core.store import GraphStore

logger = logging.getLogger("pathgraph.query")


class PathQueryEngine:
    """
    Path query engine.

    BOUNDARY ENFORCEMENT:
    - ONLY performs read operations on the store
    - Validates both names before enumerating
    - Returns explicit success/failure for every query
    """

    def __init__(
        self,
        store: GraphStore,
        config: Optional[PathSearchConfig] = None
    ):
        self._store = store
        self._config = config or PathSearchConfig()

    def find_paths(self, origin: str, destination: str) -> Result:
        """
        Enumerate every simple path and summarize the weights.

        Failure codes:
        - VERTICES_NOT_FOUND when either name is not in the graph
        - NO_PATH_FOUND when the two vertices are not linked
        """
        missing = [
            name for name in (origin, destination)
            if not self._store.has_vertex(name)
        ]
        if missing:
            logger.info("path query rejected, unknown vertices: %s", missing)
            error = Error.create(
                ErrorCode.VERTICES_NOT_FOUND,
                "Invalid vertices",
                origin=origin,
                destination=destination,
            )
            return Result.failure(
                error.with_context("missing", ", ".join(str(name) for name in missing))
            )

        start_time = time.time()
        max_paths = self._config.max_paths
        found = iter_all_paths(self._store, origin, destination)
        if max_paths is not None:
            # one extra path tells us whether the cap was hit
            found = islice(found, max_paths + 1)
        paths = list(found)

        truncated = max_paths is not None and len(paths) > max_paths
        if truncated:
            paths = paths[:max_paths]

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug(
            "enumerated %d paths %s -> %s in %.2f ms",
            len(paths), origin, destination, elapsed_ms
        )

        if not paths:
            return Result.failure(Error.create(
                ErrorCode.NO_PATH_FOUND,
                "No path found",
                origin=origin,
                destination=destination,
            ))

        weights = [path_weight(self._store, path) for path in paths]
        extremes = select_extremes(paths, weights)

        return Result.success(PathQueryResult(
            origin=origin,
            destination=destination,
            paths=tuple(tuple(path) for path in paths),
            weights=tuple(weights),
            extremes=extremes,
            truncated=truncated,
        ))


__all__ = ['PathQueryEngine']
