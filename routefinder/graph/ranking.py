"""Grouping and ordering of discovered paths into routes.

Raw paths from the search are rendered once, grouped by total cost and
sorted so that the cheapest route comes first. Within a route, paths
keep the order in which the search discovered them.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from ..domain.models import FoundPath, Route, RouteList
from .formatting import render_path

_logger = logging.getLogger(__name__)


def rank_paths(paths: Iterable[FoundPath]) -> RouteList:
    """Turn discovered paths into a cost-ascending RouteList.

    Each distinct cost yields exactly one Route holding every path with
    that cost, so no two routes share a cost and the sort needs no
    tie-break.
    """
    groups: Dict[int, List[str]] = {}
    for found in paths:
        groups.setdefault(found.cost, []).append(render_path(found.locations))

    routes = tuple(
        Route(paths=tuple(rendered), cost=cost)
        for cost, rendered in sorted(groups.items())
    )
    _logger.debug("Paths ranked", extra={"routes": len(routes)})
    return routes

