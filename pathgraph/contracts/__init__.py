"""
Contracts shared by every layer of the graph explorer.
"""

from .base import ErrorCode, Error, Result, Position, Vertex
from .graph import (
    VertexEntry, AdjacencyView, PathExtremes, PathQueryResult
)

__all__ = [
    'ErrorCode', 'Error', 'Result', 'Position', 'Vertex',
    'VertexEntry', 'AdjacencyView', 'PathExtremes', 'PathQueryResult',
]
