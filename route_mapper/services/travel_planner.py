"""Travel planner service - Main orchestrator.

Two planning modes share the same renderer:

1. Bundled: shortest path over the bundled city graph.
2. Driving: geocode both cities, fetch a real road route, price it and
   guess the towns it passes through.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import RoutingConfig, get_config
from ..domain.errors import ConfigurationError, GeocodingError, NoRouteFoundError
from ..domain.models import City, DrivingRoute, GeoLocation, RouteResult
from ..ports.geocoding import GeocoderPort
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.rendering import MapRendererPort
from ..ports.routing import RoutingServicePort


def sample_indices(
    length: int, start: int = 10, min_step: int = 30, divisions: int = 10
) -> List[int]:
    """Indices of the geometry points sampled for intermediate cities.

    Sampling starts at ``start`` and advances by ``max(min_step,
    length // divisions)``, so long routes get about ``divisions`` samples.
    """
    step = max(min_step, length // divisions)
    return list(range(start, length, step))


@dataclass
class TravelPlannerService:
    """Main service for planning a route between two cities.

    Attributes:
        graph_repository: Loads the bundled city graph
        route_solver: Computes shortest paths on the bundled graph
        geocoder: Resolves city names (driving mode)
        routing_service: Fetches road routes (driving mode)
        map_renderer: Optional map rendering
        routing_config: Pricing and waypoint sampling settings
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    geocoder: Optional[GeocoderPort] = None
    routing_service: Optional[RoutingServicePort] = None
    map_renderer: Optional[MapRendererPort] = None
    routing_config: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Bundled mode
    # ------------------------------------------------------------------
    def plan_bundled(self, source: str, destination: str) -> RouteResult:
        """Shortest route between two bundled cities.

        Raises:
            ValidationError: If a city name is empty.
            NoRouteFoundError: If the cities are unknown or not connected.
        """
        graph = self.graph_repository.load()
        route = self.route_solver.solve(graph, source, destination)

        if route.is_empty:
            raise NoRouteFoundError(
                f"No route from {source} to {destination}",
                source=source,
                destination=destination,
            )

        self._logger.info(
            "Bundled route planned",
            extra={"stops": route.num_stops, "distance": route.total_distance},
        )
        return route

    def render_bundled(self, route: RouteResult, output_path: Path) -> Optional[Path]:
        if self.map_renderer is None:
            return None
        return self.map_renderer.render(route.locations, output_path)

    # ------------------------------------------------------------------
    # Driving mode
    # ------------------------------------------------------------------
    def plan_driving(
        self, source: str, destination: str, sample_cities: bool = True
    ) -> DrivingRoute:
        """Real driving route between two geocoded cities.

        Raises:
            GeocodingError: If a city cannot be located.
            NoRouteFoundError: If the routing service has no route.
            RoutingServiceError: If the routing service fails.
        """
        if self.geocoder is None or self.routing_service is None:
            raise ConfigurationError(
                "Driving mode needs a geocoder and a routing service",
                setting_name="routing",
            )

        src_city = self._geocode(source)
        dest_city = self._geocode(destination)

        routed = self.routing_service.route(src_city.location, dest_city.location)
        if routed is None:
            raise NoRouteFoundError(
                f"No driving route from {source} to {destination}",
                source=source,
                destination=destination,
            )

        intermediate: tuple[City, ...] = ()
        if sample_cities:
            intermediate = tuple(
                self.sample_intermediate_cities(
                    routed.geometry,
                    exclude=(src_city.name, dest_city.name),
                )
            )

        route = DrivingRoute(
            source=src_city,
            destination=dest_city,
            geometry=routed.geometry,
            distance_km=routed.distance_km,
            duration_hours=routed.duration_hours,
            cost=routed.distance_km * self.routing_config.cost_per_km,
            intermediate_cities=intermediate,
        )
        self._logger.info(
            "Driving route planned",
            extra={
                "distance_km": round(route.distance_km, 2),
                "duration_hours": round(route.duration_hours, 2),
                "intermediate_cities": len(intermediate),
            },
        )
        return route

    def sample_intermediate_cities(
        self, geometry: Sequence[GeoLocation], exclude: Sequence[str] = ()
    ) -> List[City]:
        """Guess the settlements a route passes through.

        Reverse geocodes evenly spaced geometry points and keeps each
        settlement name once, in route order.
        """
        if self.geocoder is None:
            return []

        cfg = self.routing_config
        seen = set(exclude)
        cities: List[City] = []
        for idx in sample_indices(
            len(geometry), cfg.sample_start_index, cfg.min_sample_step, cfg.sample_divisions
        ):
            city = self.geocoder.reverse_geocode(geometry[idx])
            if city is None or city.name in seen:
                continue
            seen.add(city.name)
            cities.append(city)
        return cities

    def render_driving(self, route: DrivingRoute, output_path: Path) -> Optional[Path]:
        if self.map_renderer is None:
            return None
        return self.map_renderer.render_driving(route, output_path)

    def _geocode(self, query: str) -> City:
        city = self.geocoder.geocode(query) if self.geocoder else None
        if city is None:
            raise GeocodingError(f"Could not locate {query!r}", query=query)
        self._logger.info(
            "City located",
            extra={
                "query": query,
                "lat": city.location.latitude,
                "lon": city.location.longitude,
            },
        )
        return city

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    @staticmethod
    def format_bundled(route: RouteResult, map_path: Optional[Path] = None) -> str:
        result = (
            f"Route: {' -> '.join(route.path)}\n"
            f"Total distance: {route.total_distance:.2f} km\n"
            f"Total cost: {route.total_cost:.2f}"
        )
        if map_path:
            result += f"\nMap saved to: {map_path}"
        return result

    @staticmethod
    def format_driving(route: DrivingRoute, map_path: Optional[Path] = None) -> str:
        result = (
            f"Route: {route.source.name} -> {route.destination.name}\n"
            f"Route distance: {route.distance_km:.2f} km\n"
            f"Estimated duration: {route.duration_hours:.2f} hours\n"
            f"Estimated cost: {route.cost:.2f}"
        )
        if route.intermediate_cities:
            names = ", ".join(c.name for c in route.intermediate_cities)
            result += f"\nPasses through: {names}"
        if map_path:
            result += f"\nMap saved to: {map_path}"
        return result
