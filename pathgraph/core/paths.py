"""
Path Enumerator
===============

Exhaustive enumeration of simple paths between two vertices, plus
weight aggregation and cheapest/costliest selection.

All functions are stateless reads over a GraphStore. Enumeration is
exponential in the worst case (complete graphs); pass `max_paths` to
cap it on larger graphs.
"""

from __future__ import annotations
from itertools import islice
from typing import Iterator, List, Optional, Sequence, Tuple

from ..contracts.graph import PathExtremes
from .store import GraphStore


def iter_all_paths(
    store: GraphStore,
    origin: str,
    destination: str
) -> Iterator[List[str]]:
    """
    Yield every simple path from origin to destination, depth first.

    Each stack frame carries its own immutable path tuple, which doubles
    as the visited set for that branch. A branch that reaches the
    destination is recorded and not expanded further. Neighbors are
    expanded in vertex insertion order, so the output order matches a
    recursive DFS over the adjacency matrix.

    Raises KeyError when either name is not in the store.
    """
    store.index_of(origin)
    store.index_of(destination)

    stack: List[Tuple[str, ...]] = [(origin,)]
    while stack:
        path = stack.pop()
        current = path[-1]

        if current == destination:
            yield list(path)
            continue

        on_path = frozenset(path)
        # reversed so the lowest-index neighbor is popped first
        for neighbor in reversed(store.neighbors_in_order(current)):
            if neighbor not in on_path:
                stack.append(path + (neighbor,))


def find_all_paths(
    store: GraphStore,
    origin: str,
    destination: str,
    max_paths: Optional[int] = None
) -> List[List[str]]:
    """All simple paths, optionally stopping after `max_paths`."""
    paths = iter_all_paths(store, origin, destination)
    if max_paths is not None:
        paths = islice(paths, max_paths)
    return list(paths)


def path_weight(store: GraphStore, path: Sequence[str]) -> float:
    """
    Sum of the edge weights along a path.

    A single-vertex path weighs 0. Raises ValueError if two consecutive
    vertices are not connected.
    """
    total = 0
    for u, v in zip(path, path[1:]):
        if not store.is_connected(u, v):
            raise ValueError(f"{u!r} and {v!r} are not connected")
        total += store.weight(u, v)
    return total


def select_extremes(
    paths: Sequence[Sequence[str]],
    weights: Sequence[float]
) -> PathExtremes:
    """Cheapest and costliest path; the first path reaching each bound wins."""
    if not paths:
        raise ValueError("no paths to choose from")
    if len(paths) != len(weights):
        raise ValueError("paths and weights must have the same length")

    cheapest = costliest = 0
    for i in range(1, len(weights)):
        if weights[i] < weights[cheapest]:
            cheapest = i
        if weights[i] > weights[costliest]:
            costliest = i

    return PathExtremes(
        cheapest=tuple(paths[cheapest]),
        cheapest_weight=weights[cheapest],
        costliest=tuple(paths[costliest]),
        costliest_weight=weights[costliest],
    )
