"""
Explorer Configuration

One dataclass per layer, composed by ExplorerConfig.
Environment overrides are read only by ExplorerConfig.from_env().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import os


@dataclass
class GraphStoreConfig:
    """Configuration for the graph store."""
    capacity: int = 50
    default_weight: float = 1

    def __post_init__(self):
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")
        if self.default_weight <= 0:
            raise ValueError("default_weight must be positive")


@dataclass
class LayoutConfig:
    """Circular placement used by bulk loading."""
    canvas_width: float = 800
    canvas_height: float = 500
    radius: float = 180
    vertex_radius: float = 20

    @property
    def center(self):
        return (self.canvas_width / 2, self.canvas_height / 2)


@dataclass
class PathSearchConfig:
    """
    Path enumeration limits.

    max_paths=None keeps the exhaustive behaviour; set it when graphs
    get dense enough for enumeration to blow up.
    """
    max_paths: Optional[int] = None

    def __post_init__(self):
        if self.max_paths is not None and self.max_paths <= 0:
            raise ValueError("max_paths must be positive or None")


@dataclass
class ExplorerConfig:
    """Unified configuration for a graph explorer session."""
    store: GraphStoreConfig = None
    layout: LayoutConfig = None
    search: PathSearchConfig = None

    def __post_init__(self):
        self.store = self.store or GraphStoreConfig()
        self.layout = self.layout or LayoutConfig()
        self.search = self.search or PathSearchConfig()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ExplorerConfig:
        """
        Build a config from PATHGRAPH_* environment variables.

        PATHGRAPH_CAPACITY       maximum vertex count
        PATHGRAPH_LAYOUT_RADIUS  circle radius for bulk loads
        PATHGRAPH_MAX_PATHS      cap on enumerated paths (unset = unbounded)
        """
        env = os.environ if environ is None else environ

        store = GraphStoreConfig()
        if env.get("PATHGRAPH_CAPACITY"):
            store = GraphStoreConfig(capacity=int(env["PATHGRAPH_CAPACITY"]))

        layout = LayoutConfig()
        if env.get("PATHGRAPH_LAYOUT_RADIUS"):
            layout = LayoutConfig(radius=float(env["PATHGRAPH_LAYOUT_RADIUS"]))

        search = PathSearchConfig()
        if env.get("PATHGRAPH_MAX_PATHS"):
            search = PathSearchConfig(max_paths=int(env["PATHGRAPH_MAX_PATHS"]))

        return cls(store=store, layout=layout, search=search)
