"""CSV Graph Repository adapter.

Loads the road network and the location directory from two CSV files:

- locations: ``Location,Id,Code,Parking`` (parking is ``1`` when available)
- distances: ``Location1,Location2,Driving,Walking`` where a time equal
  to the unavailable marker (``X`` by default) means the mode cannot use
  the segment

Both files start with a header row. Loaded data is cached until
``clear_cache`` is called.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Location
from ...graph.network import Graph

EdgeRow = Tuple[str, str, Optional[int], Optional[int]]


def clean_code(code: str) -> str:
    """Strip every space from a location code."""
    return code.replace(" ", "")


@dataclass
class CSVGraphRepository:
    """Graph repository and location directory backed by CSV files.

    This adapter implements GraphRepositoryPort and LocationDirectoryPort.

    Attributes:
        config: Graph configuration (paths, file names, unavailable marker)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)
    _locations: Optional[Dict[str, Location]] = field(default=None, repr=False)
    _segment_count: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the road network from CSV files.

        Every known location becomes a node, even without segments.

        Returns:
            The graph keyed by location code.

        Raises:
            GraphError: If the files cannot be read or contain invalid rows.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "locations_path": str(self.config.locations_path),
                "distances_path": str(self.config.distances_path),
            },
        )

        graph = Graph()
        for code in self._load_locations():
            graph.add_node(code)

        segments = 0
        for source, target, driving, walking in self._read_distances():
            graph.add_edge(source, target, driving, walking)
            segments += 1

        self._graph = graph
        self._segment_count = segments
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "segments": segments},
        )
        return graph

    @property
    def segment_count(self) -> int:
        """Number of distance rows loaded, 0 before ``load``."""
        return self._segment_count

    def _read_rows(self, path: Path) -> Iterator[Tuple[int, List[str]]]:
        """Yield ``(line_number, fields)`` for each non-empty data row."""
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.reader(f)
                next(reader, None)  # header
                for row in reader:
                    fields = [value.strip() for value in row]
                    if not any(fields):
                        continue
                    yield reader.line_num, fields
        except OSError as e:
            raise GraphError(
                f"Failed to read {path.name}",
                file_path=str(path),
                cause=e,
            )
        except (UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Malformed {path.name}",
                file_path=str(path),
                cause=e,
            )

    def _parse_time(self, value: str) -> Optional[int]:
        if value == self.config.unavailable_marker:
            return None
        minutes = int(value)
        if minutes < 0:
            raise ValueError(f"negative time {minutes}")
        return minutes

    def _read_distances(self) -> Iterator[EdgeRow]:
        path = self.config.distances_path
        for line_number, fields in self._read_rows(path):
            try:
                source, target, driving_str, walking_str = fields[:4]
                yield (
                    clean_code(source),
                    clean_code(target),
                    self._parse_time(driving_str),
                    self._parse_time(walking_str),
                )
            except ValueError as e:
                raise GraphError(
                    f"Invalid distance row at line {line_number}",
                    file_path=str(path),
                    cause=e,
                )

    def _load_locations(self) -> Dict[str, Location]:
        """Load location metadata from CSV, keyed by code."""
        if self._locations is not None:
            return self._locations

        path = self.config.locations_path
        locations: Dict[str, Location] = {}
        for line_number, fields in self._read_rows(path):
            try:
                name, id_str, code, parking_str = fields[:4]
                location = Location(
                    id=int(id_str),
                    code=clean_code(code),
                    name=name,
                    has_parking=parking_str == "1",
                )
            except ValueError as e:
                raise GraphError(
                    f"Invalid location row at line {line_number}",
                    file_path=str(path),
                    cause=e,
                )
            if not location.code:
                continue
            locations[location.code] = location

        self._locations = locations
        self._logger.debug("Locations loaded", extra={"locations": len(locations)})
        return locations

    def get_location(self, code: str) -> Optional[Location]:
        """Get location details by code.

        Args:
            code: The location code to look up.

        Returns:
            Location with full details, or None if not found.
        """
        return self._load_locations().get(code)

    def code_for_id(self, location_id: int) -> Optional[str]:
        for location in self._load_locations().values():
            if location.id == location_id:
                return location.code
        return None

    def id_for_code(self, code: str) -> Optional[int]:
        location = self.get_location(code)
        return location.id if location is not None else None

    def parking_codes(self) -> FrozenSet[str]:
        return frozenset(
            location.code
            for location in self._load_locations().values()
            if location.has_parking
        )

    def clear_cache(self) -> None:
        """Clear cached graph and location data."""
        self._graph = None
        self._locations = None
        self._segment_count = 0
        self._logger.debug("Graph cache cleared")
