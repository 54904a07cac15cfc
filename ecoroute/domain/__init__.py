"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    BatchError,
    ConfigurationError,
    EcoRouteError,
    GraphError,
    LocationNotFoundError,
)
from .models import (
    EcoRoute,
    EcoRouteStatus,
    EdgeWeights,
    Location,
    RouteResult,
    TravelMode,
)

__all__ = [
    # Models
    "TravelMode",
    "EcoRouteStatus",
    "Location",
    "EdgeWeights",
    "RouteResult",
    "EcoRoute",
    # Errors
    "EcoRouteError",
    "GraphError",
    "LocationNotFoundError",
    "BatchError",
    "ConfigurationError",
]
