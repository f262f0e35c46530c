"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .cache import CachePort
from .geocoding import GeocoderPort
from .graph import GraphRepositoryPort, RouteSolverPort
from .rendering import MapRendererPort
from .routing import RoutingServicePort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Geocoding
    "GeocoderPort",
    # Routing service
    "RoutingServicePort",
    # Rendering
    "MapRendererPort",
    # Cache
    "CachePort",
]
