"""Route planner service - Main orchestrator.

This service sits between the user-facing front-ends (interactive menu,
batch files) and the routing core. It translates numeric location ids
into codes, runs the routing policies and returns domain results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..domain.errors import LocationNotFoundError
from ..domain.models import EcoRoute, RouteResult, TravelMode
from ..graph import (
    EcoRouteFinder,
    aggregate_time,
    alternative_route,
    restricted_route,
    shortest_path,
)
from ..graph.network import Graph
from ..ports.graph import GraphRepositoryPort, LocationDirectoryPort


@dataclass
class RoutePlannerService:
    """Main service for planning routes between locations given by id.

    Attributes:
        graph_repository: Loads the road network
        directory: Translates ids to codes and knows parking locations
    """

    graph_repository: GraphRepositoryPort
    directory: LocationDirectoryPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> Graph:
        return self.graph_repository.load()

    def code_for(self, location_id: int) -> str:
        """Return the code of a location id.

        Raises:
            LocationNotFoundError: If no location has this id.
        """
        code = self.directory.code_for_id(location_id)
        if code is None:
            raise LocationNotFoundError(
                f"Unknown location id: {location_id}",
                location_id=location_id,
            )
        return code

    def _codes_for(self, location_ids: Iterable[int]) -> Set[str]:
        return {self.code_for(location_id) for location_id in location_ids}

    def _segments_for(
        self, segment_ids: Iterable[Tuple[int, int]]
    ) -> Set[Tuple[str, str]]:
        return {(self.code_for(a), self.code_for(b)) for a, b in segment_ids}

    def _result(self, path: Sequence[str]) -> RouteResult:
        if not path:
            return RouteResult(path=())
        return RouteResult(
            path=tuple(path),
            total_time=aggregate_time(self.graph, path, TravelMode.DRIVING),
        )

    def fastest(self, source_id: int, dest_id: int) -> RouteResult:
        """Fastest driving route between two locations.

        Returns:
            RouteResult, empty when the destination is unreachable.

        Raises:
            LocationNotFoundError: If either id is unknown.
        """
        source, dest = self.code_for(source_id), self.code_for(dest_id)
        route = self._result(shortest_path(self.graph, source, dest))
        self._logger.info(
            "Fastest route computed",
            extra={
                "source": source,
                "dest": dest,
                "stops": route.num_stops,
                "total_time": route.total_time,
            },
        )
        return route

    def alternative(self, source_id: int, dest_id: int) -> Tuple[RouteResult, RouteResult]:
        """Fastest route and an independent second route.

        Returns:
            ``(main, alternative)``; the alternative shares no intermediate
            location nor segment with the main route and may be empty.
        """
        source, dest = self.code_for(source_id), self.code_for(dest_id)
        main_path = shortest_path(self.graph, source, dest)
        alt_path = alternative_route(self.graph, source, dest, main_path)
        main, alt = self._result(main_path), self._result(alt_path)
        self._logger.info(
            "Alternative route computed",
            extra={
                "source": source,
                "dest": dest,
                "main_time": main.total_time,
                "alternative_time": alt.total_time,
            },
        )
        return main, alt

    def restricted(
        self,
        source_id: int,
        dest_id: int,
        avoid_ids: Iterable[int] = (),
        avoid_segment_ids: Iterable[Tuple[int, int]] = (),
        include_id: Optional[int] = None,
    ) -> RouteResult:
        """Fastest driving route honouring exclusions and an optional waypoint."""
        source, dest = self.code_for(source_id), self.code_for(dest_id)
        include = self.code_for(include_id) if include_id is not None else None
        avoid_nodes = self._codes_for(avoid_ids)
        avoid_segments = self._segments_for(avoid_segment_ids)

        path = restricted_route(
            self.graph,
            source,
            dest,
            avoid_nodes,
            avoid_segments,
            include_node=include,
        )
        route = self._result(path)
        self._logger.info(
            "Restricted route computed",
            extra={
                "source": source,
                "dest": dest,
                "include": include,
                "avoid_nodes": sorted(avoid_nodes),
                "stops": route.num_stops,
                "total_time": route.total_time,
            },
        )
        return route

    def eco(
        self,
        source_id: int,
        dest_id: int,
        max_walk_time: int,
        avoid_ids: Iterable[int] = (),
        avoid_segment_ids: Iterable[Tuple[int, int]] = (),
    ) -> EcoRoute:
        """Best drive-then-walk route with a walk of at most ``max_walk_time``."""
        source, dest = self.code_for(source_id), self.code_for(dest_id)
        finder = EcoRouteFinder(self.graph, self.directory.parking_codes())
        route = finder.find(
            source,
            dest,
            max_walk_time,
            self._codes_for(avoid_ids),
            self._segments_for(avoid_segment_ids),
        )
        self._logger.info(
            "Eco route computed",
            extra={
                "source": source,
                "dest": dest,
                "status": route.status.name,
                "parking": route.parking,
                "total_time": route.total_time,
            },
        )
        return route

    def ids_of(self, path: Sequence[str]) -> List[int]:
        """Translate a path of codes back into location ids."""
        ids = []
        for code in path:
            location_id = self.directory.id_for_code(code)
            if location_id is None:
                raise LocationNotFoundError(
                    f"Unknown location code: {code}",
                    location_code=code,
                )
            ids.append(location_id)
        return ids

    def format_path(self, path: Sequence[str]) -> str:
        """Format a path as comma-separated location ids."""
        return ",".join(str(location_id) for location_id in self.ids_of(path))

    def format_route(self, route: RouteResult) -> str:
        """Format a route as ``ids(time)``, or ``none`` when empty."""
        if route.is_empty:
            return "none"
        return f"{self.format_path(route.path)}({route.total_time})"
