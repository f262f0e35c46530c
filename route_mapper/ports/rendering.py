"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import DrivingRoute, Location


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(self, locations: Sequence[Location], output_path: Path) -> Path:
        """Render a bundled-graph route on a map and save to file.

        Args:
            locations: Ordered locations forming the route.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...

    def render_driving(self, route: DrivingRoute, output_path: Path) -> Path:
        """Render a driving route with its geometry and sampled cities.

        Args:
            route: The driving route to draw.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...
