"""Routing core for the road network.

This subpackage contains the in-memory graph and the path-finding
algorithms that run on top of it: constrained Dijkstra, the routing
policies built from it and the eco (drive then walk) route search.
"""

from .dijkstra import dijkstra, normalize_segments
from .eco import EcoRouteFinder, eco_route
from .network import Graph
from .routes import (
    aggregate_time,
    alternative_route,
    driving_time,
    restricted_route,
    segments_of,
    shortest_path,
    walking_time,
)

__all__ = [
    "Graph",
    "dijkstra",
    "normalize_segments",
    "shortest_path",
    "alternative_route",
    "restricted_route",
    "aggregate_time",
    "driving_time",
    "walking_time",
    "segments_of",
    "EcoRouteFinder",
    "eco_route",
]
