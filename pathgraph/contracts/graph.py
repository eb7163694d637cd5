"""
Graph Layer Contracts

Immutable types exchanged between the store, the path enumerator,
the query layer and external consumers (renderer, matrix display).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
import numpy as np


# =============================================================================
# BULK DESCRIPTION CONTRACTS
# =============================================================================

@dataclass(frozen=True)
class VertexEntry:
    """
    One line of a bulk description: a vertex and the names it connects to.

    A neighbor name that never appears as an entry name still becomes a
    vertex when the description is loaded.
    """
    name: str
    neighbors: Tuple[str, ...] = field(default_factory=tuple)


# =============================================================================
# MATRIX VIEW
# =============================================================================

@dataclass(frozen=True, eq=False)
class AdjacencyView:
    """
    Read-only adjacency snapshot.

    `weights[i][j]` is the weight between names[i] and names[j],
    0 when the pair is not connected. Only populated rows/columns are kept.
    """
    names: Tuple[str, ...]
    weights: np.ndarray

    def __post_init__(self):
        self.weights.setflags(write=False)

    @property
    def size(self) -> int:
        return len(self.names)

    @property
    def connected(self) -> np.ndarray:
        """Boolean adjacency matrix."""
        return self.weights != 0

    def padded(self, capacity: int) -> np.ndarray:
        """Embed the matrix in a zero-filled capacity x capacity array."""
        if capacity < self.size:
            raise ValueError(
                f"capacity {capacity} is smaller than vertex count {self.size}"
            )
        full = np.zeros((capacity, capacity), dtype=float)
        full[:self.size, :self.size] = self.weights
        return full

    def to_lists(self) -> list:
        return self.weights.tolist()


# =============================================================================
# PATH QUERY CONTRACTS
# =============================================================================

@dataclass(frozen=True)
class PathExtremes:
    """Cheapest and costliest path (first occurrence wins ties)."""
    cheapest: Tuple[str, ...]
    cheapest_weight: float
    costliest: Tuple[str, ...]
    costliest_weight: float


@dataclass(frozen=True)
class PathQueryResult:
    """
    Outcome of a successful path query.

    `paths` and `weights` are index-aligned and follow enumeration order.
    `truncated` is set when a path cap stopped the search early.
    """
    origin: str
    destination: str
    paths: Tuple[Tuple[str, ...], ...]
    weights: Tuple[float, ...]
    extremes: PathExtremes
    truncated: bool = False

    @property
    def path_count(self) -> int:
        return len(self.paths)

    def to_text(self, arrow: str = " → ") -> str:
        """Human readable report listing every path and the two extremes."""
        lines = [f"Paths from {self.origin} to {self.destination}:", ""]
        for path, weight in zip(self.paths, self.weights):
            lines.append(f"• {arrow.join(path)} (weight: {_fmt(weight)})")
        if self.truncated:
            lines.append(f"(search stopped after {self.path_count} paths)")
        lines.append("")
        lines.append(
            f"Cheapest path: {arrow.join(self.extremes.cheapest)} "
            f"(weight: {_fmt(self.extremes.cheapest_weight)})"
        )
        lines.append(
            f"Costliest path: {arrow.join(self.extremes.costliest)} "
            f"(weight: {_fmt(self.extremes.costliest_weight)})"
        )
        return "\n".join(lines)


def _fmt(weight: float) -> str:
    # 10.0 -> "10", 2.5 -> "2.5"
    return f"{weight:g}"
