"""Immutable domain models for the eco route planner.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
business concepts of the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class TravelMode(Enum):
    """Which weight of an edge a search or an aggregation uses."""

    DRIVING = auto()
    WALKING = auto()


class EcoRouteStatus(Enum):
    """Outcome of an eco route search.

    ``NO_PARKING`` and ``NO_VIABLE_ROUTE`` are two distinct failure causes:
    the first means no parking-capable, non-excluded location exists at all,
    the second that candidates existed but none satisfied the constraints.
    """

    FOUND = auto()
    NO_PARKING = auto()
    NO_VIABLE_ROUTE = auto()


@dataclass(frozen=True, slots=True)
class Location:
    """A named place of the road network.

    Attributes:
        id: Stable numeric identifier used by the data files and the user
        code: Short unique code, the only identifier the routing core uses
        name: Human-readable location name
        has_parking: Whether a car can be parked here
    """

    id: int
    code: str
    name: str
    has_parking: bool = False


@dataclass(frozen=True, slots=True)
class EdgeWeights:
    """Driving and walking times of a segment, in minutes.

    ``None`` marks a mode that cannot traverse the segment.
    """

    driving: Optional[int]
    walking: Optional[int]

    def for_mode(self, mode: TravelMode) -> Optional[int]:
        """Return the weight selected by ``mode``."""
        if mode is TravelMode.WALKING:
            return self.walking
        return self.driving


@dataclass(frozen=True, slots=True)
class RouteResult:
    """A computed route together with its aggregated time.

    Attributes:
        path: Ordered tuple of location codes forming the route
        total_time: Aggregated time in minutes, None if the path is empty
    """

    path: tuple[str, ...]
    total_time: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class EcoRoute:
    """Result of an eco (drive, park, then walk) route search.

    Attributes:
        drive_path: Driving leg from the source to the parking location
        parking: Code of the chosen parking location, "" on failure
        walk_path: Walking leg from the parking location to the destination
        drive_time: Aggregated driving time of the drive leg
        walk_time: Aggregated walking time of the walk leg
        status: Whether a route was found, and why not otherwise
        message: Human-readable description of ``status``
    """

    drive_path: tuple[str, ...] = field(default_factory=tuple)
    parking: str = ""
    walk_path: tuple[str, ...] = field(default_factory=tuple)
    drive_time: int = 0
    walk_time: int = 0
    status: EcoRouteStatus = EcoRouteStatus.NO_VIABLE_ROUTE
    message: str = ""

    @property
    def found(self) -> bool:
        return self.status is EcoRouteStatus.FOUND

    @property
    def total_time(self) -> Optional[int]:
        """Drive plus walk time, or None when no route was found."""
        if not self.found:
            return None
        return self.drive_time + self.walk_time
