"""Dependency wiring for the route planner.

Ports are bound to factories and resolved on first use. The CSV adapter
is bound twice: it is both the graph repository and the location
directory, so a single instance serves the two ports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Set

from .config import AppConfig, get_config

Factory = Callable[[], Any]


@dataclass
class Container:
    """Explicit port-to-factory registry.

    Usage:
        container = Container.create_default()
        planner = container.resolve(RoutePlannerService)

        # Swap the data source in tests
        container.register(GraphRepositoryPort, lambda: FakeRepository())

    Attributes:
        config: Application configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type, Factory] = field(default_factory=dict, repr=False)
    _shared: Set[type] = field(default_factory=set, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)

    def register(self, port_type: type, factory: Factory, singleton: bool = True) -> None:
        """Bind ``port_type`` to ``factory``, dropping any cached instance.

        With ``singleton`` the factory runs once and its result is reused.
        """
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)
        if singleton:
            self._shared.add(port_type)
        else:
            self._shared.discard(port_type)

    def resolve(self, port_type: type) -> Any:
        """Return an instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is registered for the type.
        """
        factory = self._factories.get(port_type)
        if factory is None:
            raise KeyError(f"Type not registered: {port_type}")
        if port_type not in self._shared:
            return factory()
        if port_type not in self._instances:
            self._instances[port_type] = factory()
        return self._instances[port_type]

    def is_registered(self, port_type: type) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        self._factories.clear()
        self._shared.clear()
        self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Container bound to the CSV data set named by ``config.graph``."""
        from .adapters.graph import CSVGraphRepository
        from .io.batch import BatchProcessor
        from .ports.graph import GraphRepositoryPort, LocationDirectoryPort
        from .services import RoutePlannerService

        container = cls(config=config or get_config())

        repository = CSVGraphRepository(container.config.graph)
        container.register(GraphRepositoryPort, lambda: repository)
        container.register(LocationDirectoryPort, lambda: repository)

        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                directory=container.resolve(LocationDirectoryPort),
            ),
        )
        container.register(
            BatchProcessor,
            lambda: BatchProcessor(container.resolve(RoutePlannerService)),
        )
        return container
