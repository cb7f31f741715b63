"""CSV Graph Repository adapter.

This adapter reads the route table (one ``origin,destination,cost`` row
per connection) into a RouteGraph and adds:
- Configuration injection (path, delimiter from config)
- Caching of the loaded graph
- Persistence of connections added at run time
- Typed errors for unreadable files and malformed rows
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Connection
from ...graph.route_graph import RouteGraph, parse_edge_row


@dataclass
class CSVGraphRepository:
    """Graph repository backed by a delimited route table.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (directory, file name, delimiter)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[RouteGraph] = field(default=None, repr=False)
    _source_path: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._source_path = self.config.routes_path

    @property
    def source_path(self) -> Path:
        """Path of the route table currently backing the graph."""
        return self._source_path

    def load(self) -> RouteGraph:
        """Load the route graph from the current route table.

        Returns:
            The populated graph.

        Raises:
            GraphError: If the file cannot be read or decoded.
            MalformedEdgeRowError: If a row is not a valid connection.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph", extra={"routes_path": str(self.source_path)}
        )

        try:
            graph = self._load_graph_from_csv(self.source_path)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Failed to load graph from {self.source_path}",
                file_path=str(self.source_path),
                cause=e,
            )

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={
                "locations": len(graph),
                "connections": graph.connection_count,
            },
        )
        return graph

    def load_from(self, path: Union[str, Path]) -> RouteGraph:
        """Switch to the route table at ``path`` and load it."""
        self.clear_cache()
        self._source_path = Path(path)
        return self.load()

    def _load_graph_from_csv(self, path: Path) -> RouteGraph:
        """Internal method to build the graph from a delimited file."""
        graph = RouteGraph()

        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.reader(f, delimiter=self.config.delimiter)
            for row in reader:
                if not row:
                    continue
                if self.config.skip_header and reader.line_num == 1:
                    continue
                origin, destination, cost = parse_edge_row(row, reader.line_num)
                graph.add_connection(origin, destination, cost)

        return graph

    def add_connection(self, origin: str, destination: str, cost: int) -> Connection:
        """Append a connection to the route table and the loaded graph.

        The row is validated before anything is written, so a rejected
        connection leaves both the file and the graph unchanged.

        Raises:
            MalformedEdgeRowError: If the connection is not valid.
            GraphError: If the route table cannot be written.
        """
        row = [origin, destination, str(cost)]
        parse_edge_row(row)

        graph = self.load()

        try:
            needs_newline = not _ends_with_newline(self.source_path)
            with self.source_path.open("a", newline="", encoding="utf-8") as f:
                if needs_newline:
                    f.write("\n")
                csv.writer(
                    f, delimiter=self.config.delimiter, lineterminator="\n"
                ).writerow(row)
        except OSError as e:
            raise GraphError(
                f"Failed to write connection to {self.source_path}",
                file_path=str(self.source_path),
                cause=e,
            )

        connection = graph.add_connection(origin, destination, cost)
        self._logger.info(
            "Connection added",
            extra={"origin": origin, "destination": destination, "cost": cost},
        )
        return connection

    def clear_cache(self) -> None:
        """Forget the cached graph so the next load() re-reads the file.

        A graph already handed out by load() is left as it was.
        """
        self._graph = None
        self._logger.debug("Graph cache cleared")


def _ends_with_newline(path: Path) -> bool:
    """Check if appending to ``path`` starts on a fresh line."""
    if not path.exists() or path.stat().st_size == 0:
        return True
    with path.open("rb") as f:
        f.seek(-1, 2)
        return f.read(1) == b"\n"
