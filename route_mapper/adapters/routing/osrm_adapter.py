"""OSRM routing service adapter.

Talks to the OSRM ``/route`` endpoint and normalizes its answer:

- coordinates are sent as ``lon,lat`` pairs, as OSRM expects
- the GeoJSON geometry (``[lon, lat]``) comes back as GeoLocation(lat, lon)
- distance (meters) and duration (seconds) become kilometers and hours
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from ...config import RoutingConfig, get_config
from ...domain.errors import RoutingServiceError
from ...domain.models import GeoLocation, RoutedPath


def format_coordinates(*points: GeoLocation) -> str:
    """Convert points to OSRM's 'lon,lat;lon,lat' path segment."""
    return ";".join(f"{p.longitude:.6f},{p.latitude:.6f}" for p in points)


@dataclass
class OSRMRoutingAdapter:
    """OSRM driving route client.

    Attributes:
        config: Routing configuration (base URL, profile, timeout)
        session: HTTP session, injectable for tests
    """

    config: RoutingConfig = field(default_factory=lambda: get_config().routing)
    session: requests.Session = field(default_factory=requests.Session)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.session.headers.setdefault("User-Agent", self.config.user_agent)

    def route_url(self, source: GeoLocation, destination: GeoLocation) -> str:
        coordinates = format_coordinates(source, destination)
        return f"{self.config.base_url}/route/v1/{self.config.profile}/{coordinates}"

    def route(self, source: GeoLocation, destination: GeoLocation) -> Optional[RoutedPath]:
        """Fetch the driving route between two points.

        Returns:
            The first route OSRM proposes, or None if it found none.

        Raises:
            RoutingServiceError: On network failure, HTTP error status,
                malformed JSON or an OSRM error code.
        """
        url = self.route_url(source, destination)
        self._logger.debug("Requesting route", extra={"url": url})

        try:
            response = self.session.get(
                url,
                params={"overview": "full", "geometries": "geojson"},
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise RoutingServiceError("Routing service unreachable", url=url, cause=e)

        try:
            data: Dict[str, Any] = response.json()
        except ValueError as e:
            raise RoutingServiceError(
                "Routing service returned invalid JSON",
                url=url,
                status_code=response.status_code,
                cause=e,
            )

        if not isinstance(data, dict):
            raise RoutingServiceError(
                "Routing service returned an unexpected payload",
                url=url,
                status_code=response.status_code,
            )

        code = data.get("code")
        if code == "NoRoute":
            self._logger.info("Routing service found no route", extra={"url": url})
            return None

        if response.status_code >= 400 or code != "Ok":
            raise RoutingServiceError(
                f"Routing service error: {data.get('message') or code or response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        routes = data.get("routes") or []
        if not routes:
            return None

        try:
            return self._parse_route(routes[0])
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise RoutingServiceError(
                "Malformed route in routing service response",
                url=url,
                status_code=response.status_code,
                cause=e,
            )

    def _parse_route(self, route: Dict[str, Any]) -> RoutedPath:
        coordinates = route["geometry"]["coordinates"]
        geometry = tuple(
            GeoLocation(latitude=float(pair[1]), longitude=float(pair[0]))
            for pair in coordinates
        )
        path = RoutedPath(
            geometry=geometry,
            distance_km=float(route["distance"]) / 1000.0,
            duration_hours=float(route["duration"]) / 3600.0,
        )
        self._logger.info(
            "Route received",
            extra={
                "points": len(geometry),
                "distance_km": round(path.distance_km, 2),
                "duration_hours": round(path.duration_hours, 2),
            },
        )
        return path
