"""Typed domain errors for route-mapper.

All errors inherit from RouteMapperError and can optionally wrap a root
cause exception for debugging.

A missing path is not an error at the engine level: shortest_path and
the route solver return RouteResult.not_found(). Only the service layer
turns that outcome into NoRouteFoundError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteMapperError(Exception):
    """Base error for the route-mapper domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ValidationError(RouteMapperError):
    """A caller passed an empty or malformed location name.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class GraphIntegrityError(RouteMapperError):
    """Graph data violates a load-time invariant.

    Raised for negative distances and for mutations of a frozen store.
    """

    source: str = ""
    destination: str = ""


@dataclass
class GraphError(RouteMapperError):
    """Graph loading failed.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NoRouteFoundError(RouteMapperError):
    """No route exists between the requested locations.

    Attributes:
        source: Source location name
        destination: Destination location name
    """

    source: str = ""
    destination: str = ""


@dataclass
class GeocodingError(RouteMapperError):
    """Failed to geocode a location.

    Attributes:
        query: The location query that failed
    """

    query: str = ""


@dataclass
class RoutingServiceError(RouteMapperError):
    """The remote routing service failed or answered with garbage.

    Attributes:
        url: Requested URL
        status_code: HTTP status code, if a response was received
    """

    url: str = ""
    status_code: Optional[int] = None


@dataclass
class RenderingError(RouteMapperError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(RouteMapperError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
