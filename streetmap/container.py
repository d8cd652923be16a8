"""Wiring for the street-map query service."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily builds the street-map service from registered factories.

    Factories are keyed by port type. Singletons are built on first
    resolve, so the graph is loaded and indexed only when needed.
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Drop cached singletons so the next resolve rebuilds them."""
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the production adapters and the query service for ``config``."""
        from .adapters.graph import AStarRouteSolver, CSVStreetMapRepository
        from .ports.graph import GraphRepositoryPort, RouteSolverPort, StreetMapGraphPort
        from .services import AugmentedStreetMapGraph

        config = config or get_config()
        container = cls(config=config)

        # Graph
        container.register(
            GraphRepositoryPort,
            lambda: CSVStreetMapRepository(config.graph),
        )
        container.register(
            StreetMapGraphPort,
            lambda: container.resolve(GraphRepositoryPort).load(),
        )
        container.register(RouteSolverPort, lambda: AStarRouteSolver())

        # Main service
        container.register(
            AugmentedStreetMapGraph,
            lambda: AugmentedStreetMapGraph.from_config(
                container.resolve(StreetMapGraphPort),
                config,
                route_solver=container.resolve(RouteSolverPort),
            ),
        )

        return container
