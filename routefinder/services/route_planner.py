"""Route planner service - Query orchestration.

This service answers best-route and all-routes queries against a
RouteGraph: it resolves names, runs the path search, ranks the result
and classifies failures into typed errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..domain.errors import (
    NoRouteFoundError,
    RouteFinderError,
    SourceNotFoundError,
    TargetNotFoundError,
)
from ..domain.models import Location, Route, RouteList
from ..graph.formatting import render_route_paths
from ..graph.path_search import find_all_paths
from ..graph.ranking import rank_paths
from ..graph.route_graph import RouteGraph

QUERY_SEPARATOR = "-"


@dataclass
class RoutePlannerService:
    """Service answering route queries on a graph.

    The service never mutates the graph, so any number of queries may
    run against a graph that is no longer being populated.

    Attributes:
        graph: The route graph to query
    """

    graph: RouteGraph

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def get_all_routes(self, source: str, target: str) -> RouteList:
        """Return every route from ``source`` to ``target``, cheapest first.

        Args:
            source: Source location name (used as-is).
            target: Target location name (used as-is).

        Returns:
            Routes strictly ascending by cost, one per distinct cost.

        Raises:
            SourceNotFoundError: If ``source`` is not in the graph.
            TargetNotFoundError: If ``target`` is not in the graph.
            NoRouteFoundError: If no simple path connects them.
        """
        origin, destination = self._resolve(source, target)

        routes = rank_paths(find_all_paths(origin, destination))
        if not routes:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            raise NoRouteFoundError(
                f"No route found between {source} and {target}",
                source=source,
                target=target,
            )

        self._logger.info(
            "Routes found",
            extra={
                "source": source,
                "target": target,
                "routes": len(routes),
                "best_cost": routes[0].cost,
            },
        )
        return routes

    def get_best_route(self, source: str, target: str) -> Route:
        """Return the cheapest route, including every path tied at its cost.

        Raises:
            SourceNotFoundError: If ``source`` is not in the graph.
            TargetNotFoundError: If ``target`` is not in the graph.
            NoRouteFoundError: If no simple path connects them.
        """
        return self.get_all_routes(source, target)[0]

    def get_all_routes_safe(
        self, source: str, target: str
    ) -> Tuple[RouteList, Optional[RouteFinderError]]:
        """Like get_all_routes(), but return the error instead of raising.

        Returns:
            ``(routes, None)`` on success, ``((), error)`` on failure.
        """
        try:
            return self.get_all_routes(source, target), None
        except RouteFinderError as e:
            return (), e

    def get_best_route_safe(
        self, source: str, target: str
    ) -> Tuple[Optional[Route], Optional[RouteFinderError]]:
        """Like get_best_route(), but return the error instead of raising.

        Returns:
            ``(route, None)`` on success, ``(None, error)`` on failure.
        """
        try:
            return self.get_best_route(source, target), None
        except RouteFinderError as e:
            return None, e

    def _resolve(self, source: str, target: str) -> Tuple[Location, Location]:
        origin = self.graph.lookup(source)
        if origin is None:
            raise SourceNotFoundError(
                f"Source <{source}> not found",
                location_name=source,
            )

        destination = self.graph.lookup(target)
        if destination is None:
            raise TargetNotFoundError(
                f"Target <{target}> not found",
                location_name=target,
            )

        return origin, destination

    @staticmethod
    def format_route(route: Route) -> str:
        """Format a route as ``"<paths> > $<cost>"``.

        Tied paths are joined with ``" | "``.
        """
        return f"{render_route_paths(route.paths)} > ${route.cost}"

    @classmethod
    def format_route_list(cls, routes: RouteList) -> str:
        """Format routes one per line, cheapest first."""
        return "\n".join(cls.format_route(route) for route in routes)

    @staticmethod
    def parse_query(query: str) -> Tuple[str, str]:
        """Split an interactive ``"SOURCE-TARGET"`` query.

        Splits on the first ``-`` and strips surrounding whitespace from
        each side.

        Raises:
            ValueError: If the query has no ``-`` or an empty side.
        """
        source, separator, target = query.partition(QUERY_SEPARATOR)
        source, target = source.strip(), target.strip()
        if not separator or not source or not target:
            raise ValueError(
                f"Query must look like SOURCE{QUERY_SEPARATOR}TARGET, got {query!r}"
            )
        return source, target
