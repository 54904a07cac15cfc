"""Top-level package for the eco route planner.

The routing core lives in :mod:`ecoroute.graph`: a small undirected
network of locations with a driving and a walking time per segment, and
the fastest, alternative, restricted and eco (drive then walk) route
searches built on a constrained Dijkstra. The other subpackages load
data, translate location ids and drive the core from a console menu or
from batch files.
"""

__version__ = "0.1.0"
