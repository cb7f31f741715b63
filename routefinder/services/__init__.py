"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Answers best-route and all-routes queries
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
