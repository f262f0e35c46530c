"""Dependency wiring for the CLI.

Ports are bound to factories and built on first resolve. Tests rebind a
port (for instance GeocoderPort to an offline fake) before resolving the
planner.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config

_UNBUILT = object()


@dataclass
class _Binding:
    factory: Callable[[], Any]
    singleton: bool
    instance: Any = _UNBUILT


@dataclass
class Container:
    """Port-to-factory registry.

    Usage:
        container = Container.create_default()
        container.register(RoutingServicePort, lambda: FakeRoutingService(path))
        planner = container.resolve(TravelPlannerService)
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind port_type to factory, replacing any earlier binding."""
        with self._lock:
            self._bindings[port_type] = _Binding(factory, singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Build (or reuse) the instance bound to port_type.

        Raises:
            KeyError: If nothing is bound to port_type.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            if not binding.singleton:
                return binding.factory()
            if binding.instance is _UNBUILT:
                binding.instance = binding.factory()
            return binding.instance

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind every port to its production adapter."""
        from .adapters.cache import InMemoryCache
        from .adapters.geocoding import NominatimGeocoderAdapter
        from .adapters.graph import CSVGraphRepository, DijkstraRouteSolver
        from .adapters.rendering import FoliumMapRenderer
        from .adapters.routing import OSRMRoutingAdapter
        from .ports.cache import CachePort
        from .ports.geocoding import GeocoderPort
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .ports.rendering import MapRendererPort
        from .ports.routing import RoutingServicePort
        from .services import TravelPlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(CachePort, lambda: InMemoryCache(name="geocode"))
        container.register(GraphRepositoryPort, lambda: CSVGraphRepository(config.graph))
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(
            GeocoderPort,
            lambda: NominatimGeocoderAdapter(
                config.geocoding, container.resolve(CachePort)
            ),
        )
        container.register(RoutingServicePort, lambda: OSRMRoutingAdapter(config.routing))
        container.register(MapRendererPort, lambda: FoliumMapRenderer(config.map))
        container.register(
            TravelPlannerService,
            lambda: TravelPlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                geocoder=container.resolve(GeocoderPort),
                routing_service=container.resolve(RoutingServicePort),
                map_renderer=container.resolve(MapRendererPort),
                routing_config=config.routing,
            ),
        )
        return container
