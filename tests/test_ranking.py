from routefinder.domain.models import FoundPath, Location, Route
from routefinder.graph.formatting import render_path, render_route_paths
from routefinder.graph.ranking import rank_paths


def _path(names, cost):
    return FoundPath(locations=tuple(Location(n) for n in names), cost=cost)


def test_render_empty_path():
    assert render_path([]) == ""


def test_render_two_locations():
    assert render_path([Location("A"), Location("B")]) == "A - B"


def test_render_four_locations():
    path = [Location(n) for n in "ABCD"]

    assert render_path(path) == "A - B - C - D"


def test_render_route_paths_joins_ties():
    assert render_route_paths(["A - B - D", "A - D"]) == "A - B - D | A - D"


def test_rank_groups_equal_costs_in_discovery_order():
    paths = [
        _path("ABCD", 22),
        _path("ABD", 6),
        _path("AD", 6),
        _path("ACD", 11),
    ]

    routes = rank_paths(paths)

    assert routes == (
        Route(paths=("A - B - D", "A - D"), cost=6),
        Route(paths=("A - C - D",), cost=11),
        Route(paths=("A - B - C - D",), cost=22),
    )


def test_rank_is_strictly_ascending():
    paths = [_path("AB", c) for c in (9, 1, 5, 1, 9, 3)]

    costs = [route.cost for route in rank_paths(paths)]

    assert costs == sorted(set(costs))
    assert costs == [1, 3, 5, 9]


def test_rank_empty():
    assert rank_paths([]) == ()

