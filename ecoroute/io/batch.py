"""Batch mode: read one route query from a text file, write the answer.

Input is a list of ``Key:value`` lines::

    Mode:driving-restricted
    Source:5
    Destination:4
    AvoidNodes:2,3
    AvoidSegments:(1,2),(6,7)
    IncludeNode:8
    MaxWalkTime:

Modes are ``driving`` (best and alternative route), ``driving-restricted``
and ``driving-walking`` (eco route). Every location is given by its id.
Routes are written as comma-separated ids followed by the time in
parentheses, or ``none``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from ..domain.errors import BatchError
from ..services.route_planner import RoutePlannerService

SEGMENT_RE = re.compile(r"\(\s*(-?\d+)\s*,\s*(-?\d+)\s*\)")


class BatchMode(Enum):
    DRIVING = "driving"
    DRIVING_RESTRICTED = "driving-restricted"
    DRIVING_WALKING = "driving-walking"


@dataclass(frozen=True)
class BatchRequest:
    """A parsed batch query.

    Attributes:
        mode: Which routing policy to run
        source: Departure location id
        destination: Arrival location id
        avoid_nodes: Location ids the route may not pass through
        avoid_segments: Pairs of adjacent location ids the route may not use
        include_node: Location id the route must pass through
        max_walk_time: Walking budget of an eco route, in minutes
    """

    mode: BatchMode
    source: int
    destination: int
    avoid_nodes: Tuple[int, ...] = field(default_factory=tuple)
    avoid_segments: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)
    include_node: Optional[int] = None
    max_walk_time: Optional[int] = None


def parse_segments(value: str) -> List[Tuple[int, int]]:
    """Extract every ``(id,id)`` pair from ``value``."""
    return [(int(a), int(b)) for a, b in SEGMENT_RE.findall(value)]


def _to_int(value: str, line_number: int, line: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise BatchError(
            f"Expected an integer on line {line_number}",
            line_number=line_number,
            line=line,
            cause=e,
        )


def parse_batch(text: str) -> BatchRequest:
    """Parse the content of a batch input file.

    Unknown keys are ignored and empty values leave the field unset.

    Raises:
        BatchError: On a non-integer id or time, an unknown mode, a
            missing source or destination, or an eco query without a
            walking budget.
    """
    mode: Optional[BatchMode] = None
    source: Optional[int] = None
    destination: Optional[int] = None
    include_node: Optional[int] = None
    max_walk_time: Optional[int] = None
    avoid_nodes: List[int] = []
    avoid_segments: List[Tuple[int, int]] = []

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        key, sep, value = line.partition(":")
        if not sep:
            continue
        value = value.strip()
        if not value:
            continue

        if key == "Mode":
            try:
                mode = BatchMode(value)
            except ValueError as e:
                raise BatchError(
                    f"Unknown mode {value!r}",
                    line_number=line_number,
                    line=raw,
                    cause=e,
                )
        elif key == "Source":
            source = _to_int(value, line_number, raw)
        elif key == "Destination":
            destination = _to_int(value, line_number, raw)
        elif key == "IncludeNode":
            include_node = _to_int(value, line_number, raw)
        elif key == "MaxWalkTime":
            max_walk_time = _to_int(value, line_number, raw)
        elif key == "AvoidNodes":
            avoid_nodes.extend(
                _to_int(item, line_number, raw) for item in value.split(",") if item.strip()
            )
        elif key == "AvoidSegments":
            pairs = parse_segments(value)
            if not pairs:
                raise BatchError(
                    "Segments must be written as (id,id)",
                    line_number=line_number,
                    line=raw,
                )
            avoid_segments.extend(pairs)

    if mode is None:
        raise BatchError("Missing Mode")
    if source is None or destination is None:
        raise BatchError("Missing Source or Destination")
    if mode is BatchMode.DRIVING_WALKING and max_walk_time is None:
        raise BatchError("Mode driving-walking requires MaxWalkTime")

    return BatchRequest(
        mode=mode,
        source=source,
        destination=destination,
        avoid_nodes=tuple(avoid_nodes),
        avoid_segments=tuple(avoid_segments),
        include_node=include_node,
        max_walk_time=max_walk_time,
    )


@dataclass
class BatchProcessor:
    """Runs batch queries against a RoutePlannerService.

    Attributes:
        planner: The service answering route queries
    """

    planner: RoutePlannerService
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, request: BatchRequest) -> str:
        """Answer ``request`` and return the output file content.

        Raises:
            BatchError: If an eco request carries no walking budget.
        """
        lines = [f"Source:{request.source}", f"Destination:{request.destination}"]

        if request.mode is BatchMode.DRIVING:
            main, alt = self.planner.alternative(request.source, request.destination)
            lines.append(f"BestDrivingRoute:{self.planner.format_route(main)}")
            lines.append(f"AlternativeDrivingRoute:{self.planner.format_route(alt)}")

        elif request.mode is BatchMode.DRIVING_RESTRICTED:
            route = self.planner.restricted(
                request.source,
                request.destination,
                request.avoid_nodes,
                request.avoid_segments,
                request.include_node,
            )
            lines.append(f"RestrictedDrivingRoute:{self.planner.format_route(route)}")

        else:
            if request.max_walk_time is None:
                raise BatchError("Mode driving-walking requires MaxWalkTime")
            eco = self.planner.eco(
                request.source,
                request.destination,
                request.max_walk_time,
                request.avoid_nodes,
                request.avoid_segments,
            )
            if not eco.found:
                lines.extend(
                    [
                        "DrivingRoute:none",
                        "ParkingNode:none",
                        "WalkingRoute:none",
                        "TotalTime:",
                        f"Message:{eco.message}",
                    ]
                )
            else:
                parking_id = self.planner.ids_of([eco.parking])[0]
                lines.extend(
                    [
                        f"DrivingRoute:{self.planner.format_path(eco.drive_path)}({eco.drive_time})",
                        f"ParkingNode:{parking_id}",
                        f"WalkingRoute:{self.planner.format_path(eco.walk_path)}({eco.walk_time})",
                        f"TotalTime:{eco.total_time}",
                    ]
                )

        return "\n".join(lines) + "\n"

    def run(self, input_path: Path, output_path: Path) -> str:
        """Read ``input_path``, answer it and write ``output_path``.

        Returns:
            The text written to ``output_path``.

        Raises:
            BatchError: If a file cannot be read or written, or the input
                is malformed.
            LocationNotFoundError: If the input references an unknown id.
        """
        try:
            text = Path(input_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise BatchError(f"Cannot read batch input {input_path}", cause=e)

        request = parse_batch(text)
        self._logger.info(
            "Batch request parsed",
            extra={"mode": request.mode.value, "input": str(input_path)},
        )
        output = self.render(request)

        try:
            Path(output_path).write_text(output, encoding="utf-8")
        except OSError as e:
            raise BatchError(f"Cannot write batch output {output_path}", cause=e)

        self._logger.info("Batch output written", extra={"output": str(output_path)})
        return output
