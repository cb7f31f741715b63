"""Wiring of the route finder's adapters and service.

The CLI builds one Container per invocation from an AppConfig and pulls
the repository, the result writer and the planner out of it. Tests bind
their own factories with register().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazy registry of factories keyed by port type.

    Every binding is built on first resolve() and then reused, so the
    planner sees the graph the repository loaded for this run.

    Attributes:
        config: Configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any built instance."""
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to ``port_type``, building it once.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        if port_type not in self._instances:
            try:
                factory = self._factories[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None
            self._instances[port_type] = factory()
        return self._instances[port_type]

    def clear_instances(self) -> None:
        """Drop built instances so the next resolve() rebuilds them."""
        self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV repository, the CSV result writer and the planner."""
        from .adapters.graph import CSVGraphRepository
        from .adapters.output import CSVRouteWriter
        from .ports.graph import GraphRepositoryPort, RouteWriterPort
        from .services import RoutePlannerService

        container = cls(config=config or get_config())
        settings = container.config

        container.register(
            GraphRepositoryPort, lambda: CSVGraphRepository(settings.graph)
        )
        container.register(RouteWriterPort, lambda: CSVRouteWriter(settings.output))

        def create_route_planner() -> RoutePlannerService:
            repository = container.resolve(GraphRepositoryPort)
            return RoutePlannerService(graph=repository.load())

        container.register(RoutePlannerService, create_route_planner)
        return container
