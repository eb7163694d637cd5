"""
Graph Path Explorer

Core of an interactive undirected-graph editor: vertices placed on a
canvas, symmetric weighted edges, an adjacency matrix view, and
exhaustive enumeration of simple paths with cheapest/costliest
selection.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Immutable types and the Result/Error failure model

2. CORE (core/)
   - GraphStore: vertices, positions, weighted edge relation
   - Path enumeration, weight sums, extremes
   - Bulk loading with circular layout, example graph

3. QUERY (query/)
   - Validated path queries with explicit error codes

4. SESSION (engine.py)
   - One store per session, user input validation, highlighted paths

5. VIEWS (views.py)
   - Render-ready data for drawing surfaces and matrix tables

CONSTRAINTS ENFORCED:
=====================
- Vertex names unique, count bounded by capacity
- Edge relation symmetric, no self-loops
- Explicit errors: recoverable failures are returned, never raised
"""

from .config import ExplorerConfig, GraphStoreConfig, LayoutConfig, PathSearchConfig
from .contracts import (
    ErrorCode, Error, Result, Position, Vertex,
    VertexEntry, AdjacencyView, PathExtremes, PathQueryResult,
)
from .core import (
    GraphStore, BulkLoader, find_all_paths, path_weight, select_extremes,
)
from .query import PathQueryEngine
from .engine import GraphExplorerSession, parse_weight

__version__ = "0.1.0"

__all__ = [
    'ExplorerConfig', 'GraphStoreConfig', 'LayoutConfig', 'PathSearchConfig',
    'ErrorCode', 'Error', 'Result', 'Position', 'Vertex',
    'VertexEntry', 'AdjacencyView', 'PathExtremes', 'PathQueryResult',
    'GraphStore', 'BulkLoader', 'find_all_paths', 'path_weight', 'select_extremes',
    'PathQueryEngine',
    'GraphExplorerSession', 'parse_weight',
]
