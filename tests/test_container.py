import pytest

from routefinder.adapters.graph import CSVGraphRepository
from routefinder.adapters.output import CSVRouteWriter
from routefinder.config import AppConfig, GraphConfig
from routefinder.container import Container
from routefinder.domain.models import Route
from routefinder.graph.route_graph import RouteGraph
from routefinder.ports.graph import GraphRepositoryPort, RouteWriterPort
from routefinder.services import RoutePlannerService


@pytest.fixture
def config(tmp_path):
    (tmp_path / "input-routes.csv").write_text("A,B,5\nB,C,1\n", encoding="utf-8")
    return AppConfig(graph=GraphConfig(data_dir=tmp_path))


def test_default_bindings(config):
    container = Container.create_default(config)

    assert isinstance(container.resolve(GraphRepositoryPort), CSVGraphRepository)
    assert isinstance(container.resolve(RouteWriterPort), CSVRouteWriter)


def test_planner_uses_repository_graph(config):
    container = Container.create_default(config)

    planner = container.resolve(RoutePlannerService)

    assert planner.graph is container.resolve(GraphRepositoryPort).load()
    assert planner.get_best_route("A", "C") == Route(paths=("A - B - C",), cost=6)


def test_instances_are_shared(config):
    container = Container.create_default(config)

    assert container.resolve(RoutePlannerService) is container.resolve(
        RoutePlannerService
    )


def test_clear_instances_rebuilds(config):
    container = Container.create_default(config)
    first = container.resolve(RoutePlannerService)

    container.clear_instances()

    assert container.resolve(RoutePlannerService) is not first


def test_register_override(config):
    container = Container.create_default(config)
    container.resolve(RoutePlannerService)
    graph = RouteGraph.from_rows([["X", "Y", "2"]])

    container.register(RoutePlannerService, lambda: RoutePlannerService(graph=graph))

    assert container.resolve(RoutePlannerService).graph is graph


def test_unregistered_type_raises(config):
    container = Container(config=config)

    with pytest.raises(KeyError, match="Type not registered"):
        container.resolve(RouteGraph)
