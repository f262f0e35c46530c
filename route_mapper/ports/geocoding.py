"""Geocoding port - Abstraction for resolving place names to coordinates.

This protocol defines the contract for geocoding services, allowing
different implementations (Nominatim, Google Maps, etc.) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import City, GeoLocation


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/nominatim_adapter.py
    """

    def geocode(self, query: str) -> Optional[City]:
        """Geocode a place name to coordinates and metadata.

        Args:
            query: The location name to geocode (e.g., "Mumbai").

        Returns:
            City with coordinates and metadata, or None if not found.
        """
        ...

    def reverse_geocode(self, location: GeoLocation) -> Optional[City]:
        """Reverse geocode coordinates to the settlement containing them.

        Args:
            location: GPS coordinates to look up.

        Returns:
            City information for the coordinates, or None if not found.
        """
        ...
