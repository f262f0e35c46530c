"""Folium map renderer adapter.

Produces self-contained Leaflet HTML maps for both planning modes:

- bundled routes: one marker per city and a segment per hop
- driving routes: the full road geometry, start/destination markers,
  the sampled intermediate cities and a route summary popup
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

import folium

from ...config import MapConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import DrivingRoute, Location

LatLon = Tuple[float, float]


def route_summary_html(route: DrivingRoute) -> str:
    return (
        f"<b>Distance:</b> {route.distance_km:.2f} km<br>"
        f"<b>Duration:</b> {route.duration_hours:.2f} hr<br>"
        f"<b>Cost:</b> {route.cost:.2f}"
    )


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    Attributes:
        config: Map configuration (initial zoom)
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, locations: Sequence[Location], output_path: Path) -> Path:
        """Render a bundled-graph route and save it as HTML.

        Raises:
            RenderingError: If the route is empty or rendering fails.
        """
        if not locations:
            raise RenderingError(
                "Cannot render empty route",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering route map",
            extra={"stops": len(locations), "output_path": str(output_path)},
        )

        coordinates: List[LatLon] = [(loc.latitude, loc.longitude) for loc in locations]

        def draw(m: folium.Map) -> None:
            last = len(locations) - 1
            for idx, location in enumerate(locations):
                color = "green" if idx == 0 else "red" if idx == last else "blue"
                folium.Marker(
                    location=coordinates[idx],
                    popup=f"{idx + 1}. {html.escape(location.name)}",
                    tooltip=html.escape(location.name),
                    icon=folium.Icon(color=color),
                ).add_to(m)

            for a, b in zip(coordinates, coordinates[1:]):
                folium.PolyLine(
                    locations=[a, b], color="blue", weight=5, opacity=0.8
                ).add_to(m)

        return self._save(coordinates, draw, output_path)

    def render_driving(self, route: DrivingRoute, output_path: Path) -> Path:
        """Render a driving route and save it as HTML.

        Raises:
            RenderingError: If rendering fails.
        """
        source = route.source.location.as_lat_lon()
        destination = route.destination.location.as_lat_lon()
        coordinates: List[LatLon] = [p.as_lat_lon() for p in route.geometry]
        if not coordinates:
            coordinates = [source, destination]

        self._logger.info(
            "Rendering driving map",
            extra={
                "points": len(coordinates),
                "intermediate_cities": len(route.intermediate_cities),
                "output_path": str(output_path),
            },
        )

        def draw(m: folium.Map) -> None:
            folium.PolyLine(
                locations=coordinates, color="blue", weight=5, opacity=0.8
            ).add_to(m)

            folium.Marker(
                location=source,
                popup=f"<b>Start: {html.escape(route.source.name)}</b>",
                icon=folium.Icon(color="green"),
            ).add_to(m)
            folium.Marker(
                location=destination,
                popup=f"<b>Destination: {html.escape(route.destination.name)}</b>",
                icon=folium.Icon(color="red"),
            ).add_to(m)

            for city in route.intermediate_cities:
                folium.CircleMarker(
                    location=city.location.as_lat_lon(),
                    radius=6,
                    color="orange",
                    fill=True,
                    popup=html.escape(city.name),
                ).add_to(m)

            midpoint = (
                (source[0] + destination[0]) / 2,
                (source[1] + destination[1]) / 2,
            )
            folium.Marker(
                location=midpoint,
                popup=folium.Popup(route_summary_html(route), show=True),
                tooltip="Route Info",
                icon=folium.Icon(color="gray", icon="info-sign"),
            ).add_to(m)

        return self._save(coordinates, draw, output_path)

    def _save(self, coordinates: List[LatLon], draw, output_path: Path) -> Path:
        try:
            m = folium.Map(
                location=coordinates[0],
                zoom_start=self.config.zoom_start,
                control_scale=True,
            )
            draw(m)
            if len(coordinates) >= 2:
                m.fit_bounds(coordinates)

            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except (OSError, ValueError, TypeError) as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info("Map rendered", extra={"output_path": str(output_path)})
        return output_path
