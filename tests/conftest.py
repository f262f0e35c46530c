"""Shared fixtures: small graphs and offline fakes for the remote services."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import pytest

from route_mapper.config import reset_config
from route_mapper.domain.models import City, GeoLocation, RoutedPath
from route_mapper.graph.store import GraphStore


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def detach_log_handler():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "route_mapper":
            root.removeHandler(handler)


@pytest.fixture
def triangle() -> GraphStore:
    """A(0,0), B(0,1), C(0,2) with A-B 5, B-C 3, A-C 10."""
    graph = GraphStore()
    graph.add_location("A", 0.0, 0.0)
    graph.add_location("B", 0.0, 1.0)
    graph.add_location("C", 0.0, 2.0)
    graph.add_edge("A", "B", 5.0, 50.0)
    graph.add_edge("B", "C", 3.0, 30.0)
    graph.add_edge("A", "C", 10.0, 100.0)
    return graph


class FakeGeocoder:
    """Offline geocoder keyed by lowercase city name."""

    def __init__(
        self,
        cities: Dict[str, City],
        reverse: Optional[Dict[Tuple[float, float], str]] = None,
    ) -> None:
        self.cities = cities
        self.reverse = reverse or {}
        self.reverse_calls: List[GeoLocation] = []

    def geocode(self, query: str) -> Optional[City]:
        return self.cities.get(query.strip().lower())

    def reverse_geocode(self, location: GeoLocation) -> Optional[City]:
        self.reverse_calls.append(location)
        name = self.reverse.get(location.as_lat_lon())
        if name is None:
            return None
        return City(name=name, location=location, country="India")


class FakeRoutingService:
    def __init__(self, routed: Optional[RoutedPath]) -> None:
        self.routed = routed
        self.calls: List[Tuple[GeoLocation, GeoLocation]] = []

    def route(self, source: GeoLocation, destination: GeoLocation) -> Optional[RoutedPath]:
        self.calls.append((source, destination))
        return self.routed


def make_geometry(n: int) -> Tuple[GeoLocation, ...]:
    """n points on a straight line from Mumbai towards Pune."""
    return tuple(
        GeoLocation(latitude=19.0 - i * 0.001, longitude=72.8 + i * 0.001)
        for i in range(n)
    )


MUMBAI = City(name="Mumbai", location=GeoLocation(19.076, 72.8777), country="India")
PUNE = City(name="Pune", location=GeoLocation(18.5204, 73.8567), country="India")


@pytest.fixture
def fake_geocoder() -> FakeGeocoder:
    return FakeGeocoder({"mumbai": MUMBAI, "pune": PUNE})
