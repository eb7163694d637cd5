"""
Graph View Contracts

Responsibility:
Deterministic transformation of the store into renderable data.
The renderer draws these; it never reads the store directly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .contracts.graph import AdjacencyView
from .core.store import GraphStore

CHEAPEST_COLOR = "#1e88e5"
COSTLIEST_COLOR = "#e53935"


@dataclass(frozen=True)
class GraphNode:
    """Renderable vertex."""
    name: str
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class GraphEdge:
    """Renderable edge, one per undirected pair."""
    source: str
    target: str
    weight: float
    label_x: float
    label_y: float


@dataclass(frozen=True)
class PathHighlight:
    """A path to stroke over the edges in a given color."""
    path: Tuple[str, ...]
    color: str


@dataclass(frozen=True)
class GraphView:
    """
    Everything a drawing surface needs for one frame.
    Edges come before nodes in draw order; highlights go on top.
    """
    nodes: Tuple[GraphNode, ...]
    edges: Tuple[GraphEdge, ...]
    highlights: Tuple[PathHighlight, ...]


def build_graph_view(
    store: GraphStore,
    highlights: Sequence[PathHighlight] = (),
    vertex_radius: float = 20
) -> GraphView:
    nodes = tuple(
        GraphNode(name=v.name, x=v.position.x, y=v.position.y, radius=vertex_radius)
        for v in store.vertices
    )

    edges = []
    for u, v, weight in store.edges():
        p1, p2 = store.position_of(u), store.position_of(v)
        edges.append(GraphEdge(
            source=u,
            target=v,
            weight=weight,
            label_x=(p1.x + p2.x) / 2,
            label_y=(p1.y + p2.y) / 2,
        ))

    return GraphView(nodes=nodes, edges=tuple(edges), highlights=tuple(highlights))


def matrix_rows(view: AdjacencyView) -> List[List[str]]:
    """
    Table rows for a matrix display: a header row, then one row per
    vertex led by its name.
    """
    rows = [[""] + list(view.names)]
    for name, row in zip(view.names, view.weights):
        rows.append([name] + [f"{w:g}" for w in row])
    return rows


def highlights_for(
    cheapest: Optional[Sequence[str]],
    costliest: Optional[Sequence[str]]
) -> Tuple[PathHighlight, ...]:
    """Cheapest first; the costliest path is drawn on top."""
    out = []
    if cheapest:
        out.append(PathHighlight(path=tuple(cheapest), color=CHEAPEST_COLOR))
    if costliest:
        out.append(PathHighlight(path=tuple(costliest), color=COSTLIEST_COLOR))
    return tuple(out)
