"""Immutable domain models for route-mapper.

All models are frozen dataclasses with slots. They have no external
dependencies and are shared by both the bundled (graph) mode and the
driving (geocoding + routing service) mode.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def as_lat_lon(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Location:
    """A named point of the bundled graph.

    Attributes:
        name: Unique location name, also the graph node key
        location: GPS coordinates
    """

    name: str
    location: GeoLocation

    @property
    def longitude(self) -> float:
        return self.location.longitude

    @property
    def latitude(self) -> float:
        return self.location.latitude


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected connection between two locations.

    Attributes:
        source: Name of the first endpoint
        destination: Name of the second endpoint
        distance: Edge weight used by the shortest-path search
        cost: Auxiliary cost, informational only
    """

    source: str
    destination: str
    distance: float
    cost: float = 0.0

    def other(self, name: str) -> Optional[str]:
        """Return the opposite endpoint, or None if name is not on this edge."""
        if name == self.source:
            return self.destination
        if name == self.destination:
            return self.source
        return None

    def connects(self, a: str, b: str) -> bool:
        return {a, b} == {self.source, self.destination}


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query over the bundled graph.

    An empty path with infinite distance means no route was found.

    Attributes:
        path: Ordered tuple of location names, source to destination inclusive
        total_distance: Sum of the edge distances along the path
        total_cost: Sum of the auxiliary edge costs along the path
        locations: Resolved location details for each stop
    """

    path: tuple[str, ...]
    total_distance: float
    total_cost: float = 0.0
    locations: tuple[Location, ...] = field(default_factory=tuple)

    @classmethod
    def not_found(cls) -> RouteResult:
        return cls(path=(), total_distance=math.inf)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class City:
    """A city resolved through geocoding.

    Attributes:
        name: City name
        location: GPS coordinates
        country: Country name
        admin_area: Administrative area (state, region, etc.)
    """

    name: str
    location: GeoLocation
    country: str = ""
    admin_area: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RoutedPath:
    """Raw answer of a routing service for a single source/destination pair.

    Attributes:
        geometry: Route polyline in (lat, lon) order
        distance_km: Driving distance in kilometers
        duration_hours: Estimated driving time in hours
    """

    geometry: tuple[GeoLocation, ...]
    distance_km: float
    duration_hours: float


@dataclass(frozen=True, slots=True)
class DrivingRoute:
    """A real driving route between two geocoded cities.

    Attributes:
        source: Geocoded departure city
        destination: Geocoded arrival city
        geometry: Route polyline in (lat, lon) order
        distance_km: Driving distance in kilometers
        duration_hours: Estimated driving time in hours
        cost: Estimated trip cost (distance times cost per km)
        intermediate_cities: Settlements sampled along the geometry
    """

    source: City
    destination: City
    geometry: tuple[GeoLocation, ...]
    distance_km: float
    duration_hours: float
    cost: float
    intermediate_cities: tuple[City, ...] = field(default_factory=tuple)
