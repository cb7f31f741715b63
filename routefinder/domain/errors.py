"""Typed domain errors for the route finder.

Every failure a caller can recover from is an explicit, typed error
carrying the offending names, so front-ends can build user-facing
messages without parsing strings.

All errors inherit from RouteFinderError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass
class RouteFinderError(Exception):
    """Base error for the route finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class LocationNotFoundError(RouteFinderError):
    """A queried location name is not a vertex of the graph.

    Attributes:
        location_name: The name that could not be resolved
        role: Which end of the query failed ('source' or 'target')
    """

    location_name: str = ""
    role: str = ""


@dataclass
class SourceNotFoundError(LocationNotFoundError):
    """The query's source name has no matching location."""

    role: str = "source"


@dataclass
class TargetNotFoundError(LocationNotFoundError):
    """The query's target name has no matching location."""

    role: str = "target"


@dataclass
class NoRouteFoundError(RouteFinderError):
    """Source and target exist but no simple path connects them.

    Attributes:
        source: Source location name
        target: Target location name
    """

    source: str = ""
    target: str = ""


@dataclass
class MalformedEdgeRowError(RouteFinderError):
    """A graph population row is not an (origin, destination, cost) triple.

    Attributes:
        row: The raw fields as read
        line_number: 1-based position of the row in its input, if known
        reason: Short description of what is wrong with the row
    """

    row: Sequence[str] = field(default_factory=tuple)
    line_number: Optional[int] = None
    reason: str = ""


@dataclass
class GraphError(RouteFinderError):
    """Graph file loading or persistence error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RouteFinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
