"""Graph ports - Abstractions for route table storage and result output.

These protocols define the contracts between the route-finding core and
the file collaborators that feed it connections and record its answers.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.models import Connection, Route
    from ..graph.route_graph import RouteGraph


class GraphRepositoryPort(Protocol):
    """Port for loading and extending the route graph.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for reading (origin, destination, cost)
    rows from persistent storage into a RouteGraph and for persisting
    connections added at run time.
    """

    @property
    def source_path(self) -> Path:
        """Path of the route table currently backing the graph."""
        ...

    def load(self) -> RouteGraph:
        """Load the route graph.

        Returns:
            The populated graph (cached after the first call).
        """
        ...

    def load_from(self, path: Union[str, Path]) -> RouteGraph:
        """Switch to the route table at ``path`` and load it.

        Args:
            path: Location of the route table.

        Returns:
            The populated graph.
        """
        ...

    def add_connection(self, origin: str, destination: str, cost: int) -> Connection:
        """Persist a new connection and insert it into the loaded graph.

        Args:
            origin: Origin location name.
            destination: Destination location name.
            cost: Non-negative connection cost.

        Returns:
            The Connection inserted into the graph.
        """
        ...

    def clear_cache(self) -> None:
        """Forget the loaded graph so the next load() re-reads storage."""
        ...


class RouteWriterPort(Protocol):
    """Port for recording query results.

    Implementation: adapters/output/csv_writer.py
    """

    def write_line(self, fields: Sequence[str], path: Optional[Path] = None) -> Path:
        """Append one delimited line.

        Args:
            fields: Values making up the line.
            path: Target file (defaults to the configured results file).

        Returns:
            The file the line was appended to.
        """
        ...

    def write_route(
        self,
        source: str,
        target: str,
        route: Route,
        path: Optional[Path] = None,
    ) -> Path:
        """Append a line describing ``route`` between source and target.

        Returns:
            The file the line was appended to.
        """
        ...
