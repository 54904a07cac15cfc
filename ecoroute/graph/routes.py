"""Routing policies built on top of the constrained Dijkstra search.

- fastest driving route
- alternative route sharing no intermediate location or segment with
  the fastest one
- restricted route, optionally forced through a waypoint
- time aggregation over an already computed path
"""

from __future__ import annotations

from typing import Collection, FrozenSet, Iterable, List, Optional, Sequence

from ..domain.models import TravelMode
from .dijkstra import Segment, dijkstra, normalize_segments
from .network import Graph


def segments_of(path: Sequence[str]) -> FrozenSet[Segment]:
    """Return every segment used by ``path``, in both directions."""
    return normalize_segments(zip(path, path[1:]))


def shortest_path(graph: Graph, source: str, dest: str) -> List[str]:
    """Fastest driving path, or ``[]`` when ``dest`` is unreachable."""
    return dijkstra(graph, source, dest, TravelMode.DRIVING)


def alternative_route(
    graph: Graph,
    source: str,
    dest: str,
    main_path: Optional[Sequence[str]] = None,
) -> List[str]:
    """Fastest driving path independent from ``main_path``.

    The alternative avoids every intermediate location of the main path
    and every segment it uses. ``main_path`` defaults to the fastest
    route. A main path of fewer than two locations has no alternative.
    """
    if main_path is None:
        main_path = shortest_path(graph, source, dest)
    if len(main_path) < 2:
        return []

    return dijkstra(
        graph,
        source,
        dest,
        TravelMode.DRIVING,
        avoid_nodes=set(main_path[1:-1]),
        avoid_segments=segments_of(main_path),
    )


def restricted_route(
    graph: Graph,
    source: str,
    dest: str,
    avoid_nodes: Collection[str] = (),
    avoid_segments: Iterable[Segment] = (),
    include_node: Optional[str] = None,
    mode: TravelMode = TravelMode.DRIVING,
) -> List[str]:
    """Fastest path honouring exclusions and an optional mandatory waypoint.

    With ``include_node`` the route is computed as two independent legs,
    ``source -> include_node`` and ``include_node -> dest``, under the same
    exclusions, and joined so that the waypoint appears once. If either
    leg is impossible, or the waypoint is itself excluded, the whole route
    is ``[]``.
    """
    avoid_segments = normalize_segments(avoid_segments)

    if include_node is None:
        return dijkstra(graph, source, dest, mode, avoid_nodes, avoid_segments)

    if include_node in avoid_nodes:
        return []

    first_leg = dijkstra(graph, source, include_node, mode, avoid_nodes, avoid_segments)
    if not first_leg:
        return []
    second_leg = dijkstra(graph, include_node, dest, mode, avoid_nodes, avoid_segments)
    if not second_leg:
        return []

    return first_leg[:-1] + second_leg


def aggregate_time(
    graph: Graph, path: Sequence[str], mode: TravelMode = TravelMode.DRIVING
) -> Optional[int]:
    """Sum the ``mode`` weight along ``path``.

    Returns 0 for paths of fewer than two locations and ``None`` when
    two consecutive locations are not connected, or connected by a
    segment that ``mode`` cannot use.
    """
    total = 0
    for a, b in zip(path, path[1:]):
        weight = graph.weight(a, b, mode)
        if weight is None:
            return None
        total += weight
    return total


def driving_time(graph: Graph, path: Sequence[str]) -> Optional[int]:
    return aggregate_time(graph, path, TravelMode.DRIVING)


def walking_time(graph: Graph, path: Sequence[str]) -> Optional[int]:
    return aggregate_time(graph, path, TravelMode.WALKING)
