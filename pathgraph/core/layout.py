"""
Circular Layout

Vertex k of N sits at angle 2*pi*k/N on a circle around a center point.
"""

from __future__ import annotations
from typing import List, Tuple
import numpy as np

from ..contracts.base import Position


def circular_layout(
    count: int,
    center: Tuple[float, float],
    radius: float
) -> List[Position]:
    """Evenly spaced positions on a circle, starting at angle 0."""
    if count <= 0:
        return []

    angles = np.linspace(0, 2 * np.pi, count, endpoint=False)
    cx, cy = center
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)
    return [Position(x=float(x), y=float(y)) for x, y in zip(xs, ys)]
