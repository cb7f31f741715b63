"""Domain models for the route finder.

Graph vertices and edges (Location, Connection) are the only mutable
models: a Location's outgoing list grows while the graph is populated.
Results handed back to callers (Route, RouteList) are frozen dataclasses
with slots and only ever hold already-rendered strings and integers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple


@dataclass(eq=False, slots=True)
class Location:
    """A named vertex of the route graph (a city, depot, airport...).

    Identity is the name alone: two Location objects with the same name
    compare equal and hash the same.

    Attributes:
        name: Case-sensitive identifier, unique within a graph
        outgoing: Connections leaving this location, in insertion order
    """

    name: str
    outgoing: List[Connection] = field(default_factory=list, repr=False)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True, slots=True)
class Connection:
    """A directed, weighted edge to ``destination``.

    The origin is implied by the Location whose ``outgoing`` list holds
    the connection.
    """

    destination: Location
    cost: int

    def __post_init__(self) -> None:
        """Validate the cost."""
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise ValueError(f"Cost must be an integer, got {self.cost!r}")
        if self.cost < 0:
            raise ValueError(f"Cost must be non-negative, got {self.cost}")


@dataclass(frozen=True, slots=True)
class FoundPath:
    """A simple path discovered by the search, with its summed cost.

    Attributes:
        locations: Ordered locations from source to target, no repeats
        cost: Sum of the connection costs along the path
    """

    locations: Tuple[Location, ...]
    cost: int

    @property
    def names(self) -> Tuple[str, ...]:
        """Return the location names along the path."""
        return tuple(location.name for location in self.locations)


@dataclass(frozen=True, slots=True)
class Route:
    """All distinct simple paths sharing one total cost.

    Attributes:
        paths: Rendered paths, in discovery order
        cost: Total cost shared by every path in ``paths``
    """

    paths: Tuple[str, ...]
    cost: int


# Strictly ascending by cost, one Route per distinct cost value.
RouteList = Tuple[Route, ...]
