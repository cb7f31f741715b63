"""Route finder.

Finds the cheapest route and every simple route between named locations
of a weighted directed graph loaded from a delimited route table.
"""

from .domain.errors import (
    MalformedEdgeRowError,
    NoRouteFoundError,
    RouteFinderError,
    SourceNotFoundError,
    TargetNotFoundError,
)
from .domain.models import Route, RouteList
from .graph.route_graph import RouteGraph
from .services.route_planner import RoutePlannerService

__version__ = "0.1.0"

__all__ = [
    "RouteGraph",
    "RoutePlannerService",
    "Route",
    "RouteList",
    "RouteFinderError",
    "SourceNotFoundError",
    "TargetNotFoundError",
    "NoRouteFoundError",
    "MalformedEdgeRowError",
]
