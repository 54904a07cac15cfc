"""Services layer - Application orchestration.

This module contains the main application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- RoutePlannerService: Route queries by location id
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
