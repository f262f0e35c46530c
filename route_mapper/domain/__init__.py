"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GeocodingError,
    GraphError,
    GraphIntegrityError,
    NoRouteFoundError,
    RenderingError,
    RouteMapperError,
    RoutingServiceError,
    ValidationError,
)
from .models import (
    City,
    DrivingRoute,
    Edge,
    GeoLocation,
    Location,
    RoutedPath,
    RouteResult,
)

__all__ = [
    # Models
    "GeoLocation",
    "Location",
    "Edge",
    "RouteResult",
    "City",
    "RoutedPath",
    "DrivingRoute",
    # Errors
    "RouteMapperError",
    "ValidationError",
    "GraphIntegrityError",
    "GraphError",
    "NoRouteFoundError",
    "GeocodingError",
    "RoutingServiceError",
    "RenderingError",
    "ConfigurationError",
]
