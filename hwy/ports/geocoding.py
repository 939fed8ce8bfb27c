"""Geocoding port - Abstraction for resolving place names to coordinates.

This protocol defines the contract for geocoding services, allowing
different implementations (Nominatim, Google Maps, etc.) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeoLocation


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/nominatim_adapter.py
    """

    def resolve_location(self, name: str) -> Optional[GeoLocation]:
        """Resolve a place name such as "Springfield, IL" to coordinates.

        Args:
            name: Free-form place name.

        Returns:
            The coordinates, or None if the name could not be resolved.

        Raises:
            GeocodingError: If the service itself failed.
        """
        ...
