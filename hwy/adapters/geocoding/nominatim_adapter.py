"""Nominatim geocoder adapter.

Resolves "City, REGION" names to coordinates through OpenStreetMap's
Nominatim service, with:
- Configuration passed in explicitly
- Rate limiting via geopy's RateLimiter
- An in-process cache of answers, including misses
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from geopy.exc import GeopyError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config
from ...domain.errors import GeocodingError
from ...domain.models import GeoLocation


@dataclass
class NominatimGeocoderAdapter:
    """Nominatim geocoder adapter implementing GeocoderPort.

    Attributes:
        config: Geocoding configuration
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)

    _geocode_fn: Optional[Any] = field(default=None, repr=False)
    _cache: Dict[str, Optional[GeoLocation]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_geocoder(self) -> Any:
        """Get or initialize the rate-limited geocode function."""
        if self._geocode_fn is not None:
            return self._geocode_fn

        self._logger.debug(
            "Initializing Nominatim geocoder",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )

        geolocator = Nominatim(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )
        self._geocode_fn = RateLimiter(
            geolocator.geocode,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=self.config.max_retries,
            error_wait_seconds=self.config.error_wait_seconds,
            swallow_exceptions=False,
        )
        return self._geocode_fn

    def resolve_location(self, name: str) -> Optional[GeoLocation]:
        """Resolve a place name to coordinates.

        Args:
            name: Place name, e.g. "Springfield, IL".

        Returns:
            Coordinates of the first result, or None if nothing matched.

        Raises:
            GeocodingError: If Nominatim failed after retries.
        """
        if not name or not name.strip():
            return None

        key = name.strip().lower()
        if key in self._cache:
            self._logger.debug("Geocode cache hit", extra={"query": name})
            return self._cache[key]

        try:
            location = self._get_geocoder()(name, exactly_one=True)
        except GeopyError as e:
            self._logger.warning(
                "Geocode service error",
                extra={"query": name, "error": str(e)},
            )
            raise GeocodingError(
                f"Geocoding failed for {name!r}", cause=e, query=name
            ) from e

        if location is None:
            self._logger.debug("Geocode returned no result", extra={"query": name})
            self._cache[key] = None
            return None

        result = GeoLocation(
            latitude=float(location.latitude),
            longitude=float(location.longitude),
        )
        self._logger.debug(
            "Geocode success",
            extra={"query": name, "lat": result.latitude, "lon": result.longitude},
        )
        self._cache[key] = result
        return result

    def clear_cache(self) -> None:
        self._cache.clear()
