"""
Graph Core

RESPONSIBILITY: Graph data model and path enumeration
OUTPUTS: GraphStore state, path lists, AdjacencyView

WHAT THIS LAYER MUST NOT DO:
============================
- Render vertices or edges
- Parse free-form user input (weights, prompts)
- Validate path query names (query layer's job)
"""

from .store import GraphStore, collect_names, is_valid_weight
from .paths import iter_all_paths, find_all_paths, path_weight, select_extremes
from .layout import circular_layout
from .loader import BulkLoader, parse_entries, EXAMPLE_VERTICES, EXAMPLE_EDGES

__all__ = [
    'GraphStore', 'collect_names', 'is_valid_weight',
    'iter_all_paths', 'find_all_paths', 'path_weight', 'select_extremes',
    'circular_layout',
    'BulkLoader', 'parse_entries', 'EXAMPLE_VERTICES', 'EXAMPLE_EDGES',
]
