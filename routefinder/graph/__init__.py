"""Graph-related code for representing the route network.

This subpackage contains the in-memory graph, the simple-path search,
the ranking of found paths into routes and their rendering.
"""

from .formatting import (
    PATH_SEPARATOR,
    ROUTE_PATHS_SEPARATOR,
    render_path,
    render_route_paths,
)
from .path_search import find_all_paths, iter_paths
from .ranking import rank_paths
from .route_graph import EdgeRow, RouteGraph, parse_edge_row

__all__ = [
    "RouteGraph",
    "EdgeRow",
    "parse_edge_row",
    "find_all_paths",
    "iter_paths",
    "rank_paths",
    "render_path",
    "render_route_paths",
    "PATH_SEPARATOR",
    "ROUTE_PATHS_SEPARATOR",
]
