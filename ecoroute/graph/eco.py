"""Eco route search: drive to a parking location, then walk.

Every parking-capable location is tried as the transfer point. For each
candidate a driving leg (source to candidate) and a walking leg
(candidate to destination) are computed independently under the same
exclusions, and the best combination within the walking budget wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Iterable, List, Optional, Tuple

from ..domain.models import EcoRoute, EcoRouteStatus, TravelMode
from .dijkstra import Segment, dijkstra, normalize_segments
from .network import Graph
from .routes import aggregate_time

NO_PARKING_MESSAGE = "No parking nodes available."
NO_VIABLE_ROUTE_MESSAGE = "No viable eco route found."
FOUND_MESSAGE = "Eco route found."


@dataclass(frozen=True)
class _Candidate:
    parking: str
    drive_path: List[str]
    walk_path: List[str]
    drive_time: int
    walk_time: int

    @property
    def rank(self) -> Tuple[int, int, str]:
        # Lowest total first; at equal totals the longer walk, then the code.
        return (self.drive_time + self.walk_time, -self.walk_time, self.parking)


def drive_leg(
    graph: Graph,
    source: str,
    parking: str,
    avoid_nodes: Collection[str] = (),
    avoid_segments: Iterable[Segment] = (),
) -> List[str]:
    """Driving part of an eco route, from ``source`` to ``parking``."""
    return dijkstra(graph, source, parking, TravelMode.DRIVING, avoid_nodes, avoid_segments)


def walk_leg(
    graph: Graph,
    parking: str,
    dest: str,
    avoid_nodes: Collection[str] = (),
    avoid_segments: Iterable[Segment] = (),
) -> List[str]:
    """Walking part of an eco route, from ``parking`` to ``dest``."""
    return dijkstra(graph, parking, dest, TravelMode.WALKING, avoid_nodes, avoid_segments)


@dataclass
class EcoRouteFinder:
    """Finds the best drive-then-walk route over a fixed set of parkings.

    Attributes:
        graph: The road network
        parking_codes: Codes of the parking-capable locations
    """

    graph: Graph
    parking_codes: Collection[str]
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def candidates(self, avoid_nodes: Collection[str] = ()) -> List[str]:
        """Parking codes usable as transfer points, in sorted order."""
        return sorted(code for code in set(self.parking_codes) if code not in avoid_nodes)

    def find(
        self,
        source: str,
        dest: str,
        max_walk_time: int,
        avoid_nodes: Collection[str] = (),
        avoid_segments: Iterable[Segment] = (),
    ) -> EcoRoute:
        """Return the fastest eco route whose walk fits in ``max_walk_time``.

        Args:
            source: Departure location code.
            dest: Arrival location code.
            max_walk_time: Largest acceptable walking time, in minutes.
            avoid_nodes: Location codes neither leg may pass through.
            avoid_segments: Segments neither leg may traverse.

        Returns:
            An EcoRoute. On failure both paths are empty, ``parking`` is ""
            and ``status`` tells whether parkings were missing altogether
            or none of them led to a route within the budget.
        """
        avoid_nodes = set(avoid_nodes)
        avoid_segments = normalize_segments(avoid_segments)

        candidates = self.candidates(avoid_nodes)
        if not candidates:
            self._logger.info(
                "No parking candidates",
                extra={"source": source, "dest": dest},
            )
            return EcoRoute(status=EcoRouteStatus.NO_PARKING, message=NO_PARKING_MESSAGE)

        best: Optional[_Candidate] = None
        for parking in candidates:
            candidate = self._evaluate(
                source, dest, parking, max_walk_time, avoid_nodes, avoid_segments
            )
            if candidate is None:
                continue
            if best is None or candidate.rank < best.rank:
                best = candidate

        if best is None:
            self._logger.info(
                "No viable eco route",
                extra={
                    "source": source,
                    "dest": dest,
                    "max_walk_time": max_walk_time,
                    "candidates": len(candidates),
                },
            )
            return EcoRoute(
                status=EcoRouteStatus.NO_VIABLE_ROUTE, message=NO_VIABLE_ROUTE_MESSAGE
            )

        self._logger.debug(
            "Eco route selected",
            extra={
                "parking": best.parking,
                "drive_time": best.drive_time,
                "walk_time": best.walk_time,
            },
        )
        return EcoRoute(
            drive_path=tuple(best.drive_path),
            parking=best.parking,
            walk_path=tuple(best.walk_path),
            drive_time=best.drive_time,
            walk_time=best.walk_time,
            status=EcoRouteStatus.FOUND,
            message=FOUND_MESSAGE,
        )

    def _evaluate(
        self,
        source: str,
        dest: str,
        parking: str,
        max_walk_time: int,
        avoid_nodes: Collection[str],
        avoid_segments: Iterable[Segment],
    ) -> Optional[_Candidate]:
        drive_path = drive_leg(self.graph, source, parking, avoid_nodes, avoid_segments)
        if not drive_path:
            return None
        walk_path = walk_leg(self.graph, parking, dest, avoid_nodes, avoid_segments)
        if not walk_path:
            return None

        drive_time = aggregate_time(self.graph, drive_path, TravelMode.DRIVING)
        walk_time = aggregate_time(self.graph, walk_path, TravelMode.WALKING)
        if drive_time is None or walk_time is None:
            return None
        if walk_time > max_walk_time:
            self._logger.debug(
                "Parking rejected, walk too long",
                extra={"parking": parking, "walk_time": walk_time},
            )
            return None

        return _Candidate(parking, drive_path, walk_path, drive_time, walk_time)


def eco_route(
    graph: Graph,
    source: str,
    dest: str,
    max_walk_time: int,
    parking_codes: Collection[str],
    avoid_nodes: Collection[str] = (),
    avoid_segments: Iterable[Segment] = (),
) -> EcoRoute:
    """Functional shortcut for ``EcoRouteFinder(graph, parking_codes).find(...)``."""
    finder = EcoRouteFinder(graph, parking_codes)
    return finder.find(source, dest, max_walk_time, avoid_nodes, avoid_segments)
