"""Routing port - Abstraction for a remote driving route service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeoLocation, RoutedPath


class RoutingServicePort(Protocol):
    """Port for driving route services.

    Implementation: adapters/routing/osrm_adapter.py
    """

    def route(self, source: GeoLocation, destination: GeoLocation) -> Optional[RoutedPath]:
        """Fetch a driving route with its full geometry.

        Args:
            source: Departure coordinates.
            destination: Arrival coordinates.

        Returns:
            The routed path, or None if the service knows no route.
        """
        ...
