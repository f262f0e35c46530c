"""Nominatim geocoder adapter.

Forward geocoding resolves a free-form place name to its first match.
Reverse geocoding names the settlement containing a coordinate and is
used to guess the towns a driving route passes through. Both calls go
through geopy's RateLimiter to respect the public endpoint's policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from geopy.exc import GeopyError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config
from ...domain.models import City, GeoLocation
from ...ports.cache import CachePort
from ..cache.memory_cache import InMemoryCache

SETTLEMENT_KEYS = ("city", "town", "village", "municipality")


def settlement_name(address: Dict[str, Any]) -> Optional[str]:
    """Pick the most specific settlement name from a Nominatim address."""
    for key in SETTLEMENT_KEYS:
        value = address.get(key)
        if value:
            return str(value)
    return None


@dataclass
class NominatimGeocoderAdapter:
    """Nominatim geocoder adapter with caching and rate limiting.

    Attributes:
        config: Geocoding configuration
        cache: Cache for forward geocoding results (misses included)
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    cache: CachePort[Optional[City]] = field(
        default_factory=lambda: InMemoryCache(name="geocode")
    )

    _geolocator: Optional[Nominatim] = field(default=None, repr=False)
    _geocode_fn: Optional[Any] = field(default=None, repr=False)
    _reverse_fn: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _rate_limited(self, fn: Any) -> Any:
        return RateLimiter(
            fn,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=self.config.max_retries,
            error_wait_seconds=self.config.error_wait_seconds,
            swallow_exceptions=False,
        )

    def _ensure_geocoder(self) -> None:
        if self._geocode_fn is not None and self._reverse_fn is not None:
            return

        self._logger.debug(
            "Initializing Nominatim geocoder",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )
        self._geolocator = Nominatim(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )
        self._geocode_fn = self._rate_limited(self._geolocator.geocode)
        self._reverse_fn = self._rate_limited(self._geolocator.reverse)

    def geocode(self, query: str) -> Optional[City]:
        """Geocode a place name.

        Returns:
            City with coordinates and metadata, or None if not found or
            if the service failed.
        """
        if not query or not query.strip():
            return None

        cache_key = f"{query.strip().lower()}:{self.config.language}"
        if self.cache.contains(cache_key):
            self._logger.debug("Geocode cache hit", extra={"query": query})
            return self.cache.get(cache_key)

        self._ensure_geocoder()
        try:
            location = self._geocode_fn(  # type: ignore[misc]
                query.strip(),
                exactly_one=True,
                language=self.config.language,
                addressdetails=True,
            )
        except GeopyError as e:
            self._logger.warning(
                "Geocode service error",
                extra={"query": query, "error": str(e)},
            )
            return None

        if location is None:
            self._logger.debug("Geocode returned no result", extra={"query": query})
            self.cache.set(cache_key, None)
            return None

        address = (location.raw or {}).get("address", {})
        city = City(
            name=settlement_name(address) or query.strip(),
            location=GeoLocation(
                latitude=float(location.latitude),
                longitude=float(location.longitude),
            ),
            country=address.get("country", ""),
            admin_area=address.get("state") or address.get("region"),
        )

        self._logger.debug(
            "Geocode success",
            extra={
                "query": query,
                "city": city.name,
                "lat": city.location.latitude,
                "lon": city.location.longitude,
            },
        )
        self.cache.set(cache_key, city)
        return city

    def reverse_geocode(self, location: GeoLocation) -> Optional[City]:
        """Reverse geocode coordinates to the settlement containing them.

        Returns:
            City information for the coordinates, or None if the point is
            not inside a named settlement or the service failed.
        """
        self._ensure_geocoder()
        try:
            result = self._reverse_fn(  # type: ignore[misc]
                location.as_lat_lon(),
                exactly_one=True,
                language=self.config.language,
                addressdetails=True,
            )
        except GeopyError as e:
            self._logger.warning(
                "Reverse geocode failed",
                extra={
                    "lat": location.latitude,
                    "lon": location.longitude,
                    "error": str(e),
                },
            )
            return None

        if result is None:
            return None

        address = (result.raw or {}).get("address", {})
        city_name = settlement_name(address)
        if not city_name:
            return None

        return City(
            name=city_name,
            location=location,
            country=address.get("country", ""),
            admin_area=address.get("state") or address.get("region"),
        )
