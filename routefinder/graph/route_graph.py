"""In-memory route graph.

This module defines RouteGraph, the owner of every Location and
Connection, and the parser for the (origin, destination, cost) rows
used to populate it.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..domain.errors import MalformedEdgeRowError
from ..domain.models import Connection, Location

_logger = logging.getLogger(__name__)

_COST_PATTERN = re.compile(r"[0-9]+")

EdgeRow = Tuple[str, str, int]


def parse_edge_row(
    row: Sequence[str], line_number: Optional[int] = None
) -> EdgeRow:
    """Interpret raw fields as an (origin, destination, cost) triple.

    Names are taken as-is (no trimming, no case folding).

    Raises:
        MalformedEdgeRowError: If the row does not have exactly three
            fields, a name is empty, or the cost is not a non-negative
            integer.
    """
    where = f" at row {line_number}" if line_number is not None else ""

    if len(row) != 3:
        raise MalformedEdgeRowError(
            f"Expected 3 fields{where}, got {len(row)}",
            row=tuple(row),
            line_number=line_number,
            reason="field count",
        )

    origin, destination, cost_text = row
    if not origin or not destination:
        raise MalformedEdgeRowError(
            f"Empty location name{where}",
            row=tuple(row),
            line_number=line_number,
            reason="empty name",
        )

    if not _COST_PATTERN.fullmatch(cost_text):
        raise MalformedEdgeRowError(
            f"Cost {cost_text!r}{where} is not a non-negative integer",
            row=tuple(row),
            line_number=line_number,
            reason="invalid cost",
        )

    return origin, destination, int(cost_text)


class RouteGraph:
    """Directed, weighted graph of named locations.

    Locations are created on demand when a connection mentions them.
    Multi-edges and cycles are allowed; searches only ever follow simple
    paths. Insertion and reset must not overlap with a running search;
    the graph does no locking of its own.
    """

    def __init__(self) -> None:
        self._vertices: Dict[str, Location] = {}
        self._connection_count = 0

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> RouteGraph:
        """Build a graph from raw (origin, destination, cost) rows."""
        graph = cls()
        graph.add_rows(rows)
        return graph

    def add_connection(self, origin: str, destination: str, cost: int) -> Connection:
        """Insert a directed connection, creating missing endpoints.

        Returns:
            The new Connection, appended to the origin's outgoing list.

        Raises:
            ValueError: If ``cost`` is not a non-negative integer.
        """
        origin_location = self._vertices.get(origin) or Location(origin)
        if destination == origin:
            destination_location = origin_location
        else:
            destination_location = self._vertices.get(destination) or Location(
                destination
            )
        # Built before registering anything so a bad cost leaves the graph untouched.
        connection = Connection(destination=destination_location, cost=cost)

        self._vertices.setdefault(origin, origin_location)
        self._vertices.setdefault(destination, destination_location)
        origin_location.outgoing.append(connection)
        self._connection_count += 1
        return connection

    def add_rows(self, rows: Iterable[Sequence[str]]) -> int:
        """Insert one connection per raw row.

        Returns:
            Number of connections inserted.

        Raises:
            MalformedEdgeRowError: On the first row that cannot be parsed.
                Rows before it have already been inserted.
        """
        count = 0
        for line_number, row in enumerate(rows, start=1):
            origin, destination, cost = parse_edge_row(row, line_number)
            self.add_connection(origin, destination, cost)
            count += 1

        _logger.debug(
            "Rows added to graph",
            extra={"rows": count, "locations": len(self._vertices)},
        )
        return count

    def lookup(self, name: str) -> Optional[Location]:
        """Return the Location called ``name``, or None if absent."""
        return self._vertices.get(name)

    def reset(self) -> None:
        """Discard every location and connection."""
        self._vertices = {}
        self._connection_count = 0
        _logger.debug("Graph reset")

    @property
    def locations(self) -> List[str]:
        """Location names in the order they were first seen."""
        return list(self._vertices)

    @property
    def connection_count(self) -> int:
        return self._connection_count

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._vertices.values())

    def __repr__(self) -> str:
        return (
            f"RouteGraph(locations={len(self._vertices)}, "
            f"connections={self._connection_count})"
        )
