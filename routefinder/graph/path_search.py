"""Exhaustive simple-path enumeration.

This module enumerates every simple directed path between two locations
with a depth-first traversal. Traversal state (the current path, its
running costs and the set of locations on it) lives in the call only, so
repeated or concurrent searches over an unchanged graph never interfere
and always discover paths in the same order.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Set

from ..domain.models import Connection, FoundPath, Location

_logger = logging.getLogger(__name__)


def iter_paths(source: Location, target: Location) -> Iterator[FoundPath]:
    """Yield every simple path from ``source`` to ``target``.

    Outgoing connections are followed in insertion order, which fixes the
    discovery order. A path ends at its first and only visit to
    ``target``; a location already on the current path is never
    re-entered, so cycles are skipped rather than looped. A path needs at
    least one connection, hence ``source == target`` yields nothing.

    Parameters
    ----------
    source:
        Location the paths start from.
    target:
        Location the paths end at.

    Yields
    ------
    FoundPath
        The path's locations (source first) and its summed cost.
    """
    path: List[Location] = [source]
    costs: List[int] = [0]
    on_path: Set[Location] = {source}
    # One iterator over outgoing connections per location on the path.
    pending: List[Iterator[Connection]] = [iter(source.outgoing)]

    while pending:
        connection = next(pending[-1], None)

        if connection is None:
            pending.pop()
            on_path.discard(path.pop())
            costs.pop()
            continue

        step = connection.destination
        if step in on_path:
            continue

        cost = costs[-1] + connection.cost
        if step == target:
            yield FoundPath(locations=tuple(path) + (step,), cost=cost)
            continue

        path.append(step)
        costs.append(cost)
        on_path.add(step)
        pending.append(iter(step.outgoing))


def find_all_paths(source: Location, target: Location) -> List[FoundPath]:
    """Return every simple path from ``source`` to ``target``.

    An empty list means the two locations are not connected; deciding
    whether that is an error is left to the caller.
    """
    paths = list(iter_paths(source, target))
    _logger.debug(
        "Path search finished",
        extra={"source": source.name, "target": target.name, "paths": len(paths)},
    )
    return paths
