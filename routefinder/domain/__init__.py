"""Domain layer - Core graph models, result models and errors.

This module contains the models and typed errors used throughout the
application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    LocationNotFoundError,
    MalformedEdgeRowError,
    NoRouteFoundError,
    RouteFinderError,
    SourceNotFoundError,
    TargetNotFoundError,
)
from .models import Connection, FoundPath, Location, Route, RouteList

__all__ = [
    # Models
    "Location",
    "Connection",
    "FoundPath",
    "Route",
    "RouteList",
    # Errors
    "RouteFinderError",
    "LocationNotFoundError",
    "SourceNotFoundError",
    "TargetNotFoundError",
    "NoRouteFoundError",
    "MalformedEdgeRowError",
    "GraphError",
    "ConfigurationError",
]
