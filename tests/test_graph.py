import pytest

from routefinder.domain.errors import MalformedEdgeRowError
from routefinder.domain.models import Connection, Location
from routefinder.graph.route_graph import RouteGraph, parse_edge_row


def test_add_connection_creates_both_endpoints():
    graph = RouteGraph()

    graph.add_connection("A", "B", 5)

    assert "A" in graph
    assert "B" in graph
    assert len(graph) == 2
    assert graph.connection_count == 1


def test_add_connection_appends_in_insertion_order():
    graph = RouteGraph()
    graph.add_connection("A", "C", 3)
    graph.add_connection("A", "B", 5)
    graph.add_connection("A", "D", 9)

    origin = graph.lookup("A")

    assert [c.destination.name for c in origin.outgoing] == ["C", "B", "D"]
    assert [c.cost for c in origin.outgoing] == [3, 5, 9]


def test_connection_destination_is_the_graph_location():
    graph = RouteGraph()
    graph.add_connection("A", "B", 5)
    graph.add_connection("B", "C", 1)

    connection = graph.lookup("A").outgoing[0]

    assert connection.destination is graph.lookup("B")
    assert connection.destination.outgoing[0].destination is graph.lookup("C")


def test_self_loop_points_to_registered_location():
    graph = RouteGraph()
    graph.add_connection("A", "A", 2)

    location = graph.lookup("A")

    assert location.outgoing[0].destination is location
    assert len(graph) == 1


def test_multi_edges_and_cycles_are_kept():
    graph = RouteGraph()
    graph.add_connection("A", "B", 5)
    graph.add_connection("A", "B", 7)
    graph.add_connection("B", "A", 1)

    assert len(graph.lookup("A").outgoing) == 2
    assert graph.connection_count == 3


def test_negative_cost_is_rejected_without_side_effects():
    graph = RouteGraph()

    with pytest.raises(ValueError):
        graph.add_connection("A", "B", -1)

    assert len(graph) == 0
    assert graph.connection_count == 0


def test_non_integer_cost_is_rejected():
    graph = RouteGraph()

    with pytest.raises(ValueError):
        graph.add_connection("A", "B", 1.5)
    with pytest.raises(ValueError):
        graph.add_connection("A", "B", True)


def test_lookup_missing_returns_none():
    graph = RouteGraph()
    graph.add_connection("A", "B", 5)

    assert graph.lookup("Z") is None
    assert graph.lookup("a") is None


def test_reset_discards_everything():
    graph = RouteGraph()
    graph.add_connection("A", "B", 5)
    graph.add_connection("B", "C", 2)

    graph.reset()

    assert len(graph) == 0
    assert graph.connection_count == 0
    assert graph.lookup("A") is None
    assert graph.locations == []


def test_locations_keep_first_seen_order():
    graph = RouteGraph.from_rows([["B", "A", "1"], ["C", "B", "2"]])

    assert graph.locations == ["B", "A", "C"]


def test_from_rows_builds_graph():
    graph = RouteGraph.from_rows(
        [
            ["A", "B", "5"],
            ["B", "C", "9"],
        ]
    )

    assert graph.connection_count == 2
    assert graph.lookup("B").outgoing[0].cost == 9


def test_add_rows_reports_failing_row_number():
    graph = RouteGraph()

    with pytest.raises(MalformedEdgeRowError) as excinfo:
        graph.add_rows([["A", "B", "5"], ["B", "C", "x"]])

    assert excinfo.value.line_number == 2
    assert excinfo.value.reason == "invalid cost"
    # Rows before the bad one are kept.
    assert graph.connection_count == 1


@pytest.mark.parametrize(
    "row, reason",
    [
        (["A", "B"], "field count"),
        (["A", "B", "5", "extra"], "field count"),
        (["", "B", "5"], "empty name"),
        (["A", "", "5"], "empty name"),
        (["A", "B", "-5"], "invalid cost"),
        (["A", "B", "5.0"], "invalid cost"),
        (["A", "B", " 5"], "invalid cost"),
        (["A", "B", ""], "invalid cost"),
    ],
)
def test_parse_edge_row_rejects_malformed_rows(row, reason):
    with pytest.raises(MalformedEdgeRowError) as excinfo:
        parse_edge_row(row, line_number=7)

    assert excinfo.value.reason == reason
    assert excinfo.value.line_number == 7
    assert list(excinfo.value.row) == row


def test_parse_edge_row_keeps_names_verbatim():
    assert parse_edge_row(["São Paulo ", "lyon", "012"]) == ("São Paulo ", "lyon", 12)


def test_location_identity_is_its_name():
    assert Location("A") == Location("A")
    assert hash(Location("A")) == hash(Location("A"))
    assert Location("A") != Location("a")


def test_connection_rejects_negative_cost():
    with pytest.raises(ValueError):
        Connection(destination=Location("B"), cost=-3)
