"""Constrained shortest-path computation using Dijkstra's algorithm.

Every routing policy of the project is built from :func:`dijkstra`,
which searches with one travel mode while pruning excluded locations
and excluded segments.
"""

from __future__ import annotations

import heapq
from typing import AbstractSet, Collection, Dict, FrozenSet, Iterable, List, Tuple

from ..domain.models import TravelMode
from .network import Graph

Segment = Tuple[str, str]


def normalize_segments(segments: Iterable[Segment]) -> FrozenSet[Segment]:
    """Return ``segments`` closed under reversal.

    Segments are undirected: excluding ``(A, B)`` also excludes ``(B, A)``.
    """
    closed = set()
    for a, b in segments:
        closed.add((a, b))
        closed.add((b, a))
    return frozenset(closed)


def dijkstra(
    graph: Graph,
    start: str,
    end: str,
    mode: TravelMode = TravelMode.DRIVING,
    avoid_nodes: Collection[str] = (),
    avoid_segments: Iterable[Segment] = (),
) -> List[str]:
    """Compute the fastest path between two locations.

    Parameters
    ----------
    graph:
        Road network as built by the graph repository.
    start:
        Code of the departure location.
    end:
        Code of the arrival location.
    mode:
        Which edge weight to minimise. Segments whose weight for this
        mode is unavailable are never used.
    avoid_nodes:
        Codes that the path may not pass through. ``start`` and ``end``
        stay usable as endpoints even when listed here.
    avoid_segments:
        Undirected segments the path may not traverse.

    Returns
    -------
    list[str]
        The sequence of location codes from ``start`` to ``end``
        (inclusive), ``[start]`` when both are the same location, or
        ``[]`` if no path exists or either code is unknown.

    Notes
    -----
    Frontier entries are ordered by ``(distance, code)`` and relaxation
    is strict, so among equal-cost paths the result is deterministic.
    """
    if start not in graph or end not in graph:
        return []
    if start == end:
        return [start]

    blocked: AbstractSet[str] = set(avoid_nodes) - {start, end}
    forbidden = normalize_segments(avoid_segments)

    distances: Dict[str, int] = {start: 0}
    previous: Dict[str, str] = {}

    heap: List[Tuple[int, str]] = [(0, start)]
    visited = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        for v, weights in graph.neighbors(u):
            weight = weights.for_mode(mode)
            if weight is None:
                continue
            if v in blocked or v in visited:
                continue
            if (u, v) in forbidden:
                continue

            new_distance = current_distance + weight
            if v not in distances or new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if end not in previous:
        return []

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return path
