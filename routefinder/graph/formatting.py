"""Rendering of paths as display strings."""

from __future__ import annotations

from typing import Iterable

from ..domain.models import Location

PATH_SEPARATOR = " - "
ROUTE_PATHS_SEPARATOR = " | "


def render_path(path: Iterable[Location]) -> str:
    """Join the location names of ``path`` with ``" - "``.

    An empty path renders to the empty string.
    """
    return PATH_SEPARATOR.join(location.name for location in path)


def render_route_paths(paths: Iterable[str]) -> str:
    """Join the rendered paths of one route with ``" | "``."""
    return ROUTE_PATHS_SEPARATOR.join(paths)
