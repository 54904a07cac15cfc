"""In-memory road network.

This module defines the Graph type used throughout the project: a
mapping from location code to the ordered list of its neighbours, each
paired with the driving and walking times of the connecting segment.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.models import EdgeWeights, TravelMode

Adjacency = List[Tuple[str, EdgeWeights]]


class Graph:
    """Undirected graph with a (driving, walking) weight pair per segment.

    Segments are always stored in both directions with the same weights.
    The graph is built once and then only read by the routing functions.
    """

    def __init__(self) -> None:
        self._adj: Dict[str, Adjacency] = {}

    def add_edge(
        self,
        source: str,
        target: str,
        driving_time: Optional[int],
        walking_time: Optional[int],
    ) -> None:
        """Connect ``source`` and ``target`` in both directions.

        Unknown endpoints are created on the fly. ``None`` as a time marks
        the mode as unable to use the segment.
        """
        weights = EdgeWeights(driving=driving_time, walking=walking_time)
        self._adj.setdefault(source, []).append((target, weights))
        self._adj.setdefault(target, []).append((source, weights))

    def add_node(self, code: str) -> None:
        """Register a location without any segment."""
        self._adj.setdefault(code, [])

    def neighbors(self, code: str) -> Adjacency:
        """Return the neighbours of ``code``, or an empty list if unknown."""
        return self._adj.get(code, [])

    def weight(self, source: str, target: str, mode: TravelMode) -> Optional[int]:
        """Return the cheapest ``mode`` time between two adjacent locations.

        ``None`` if they are not adjacent or no segment between them is
        usable with ``mode``.
        """
        best: Optional[int] = None
        for neighbor, weights in self.neighbors(source):
            if neighbor != target:
                continue
            value = weights.for_mode(mode)
            if value is not None and (best is None or value < best):
                best = value
        return best

    def nodes(self) -> List[str]:
        return list(self._adj)

    @property
    def edge_count(self) -> int:
        """Number of undirected segments."""
        return sum(len(edges) for edges in self._adj.values()) // 2

    def __contains__(self, code: object) -> bool:
        return code in self._adj

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count})"
