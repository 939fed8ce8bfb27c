"""Offline distance matrix adapter.

Estimates edge weights without a routing service: the distance is the
geodesic (WGS-84) distance between the two places and the travel time
assumes a constant average speed. Useful for filling a freshly geocoded
graph before real driving data is available.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, Sequence, Union

from geopy.distance import geodesic

from ...config import DistanceConfig, get_config
from ...domain.errors import DistanceLookupError
from ...domain.models import Place, Weight


@dataclass
class GeodesicDistanceAdapter:
    """Distance matrix implementing DistanceMatrixPort from coordinates.

    Attributes:
        config: Distance configuration (average speed)
    """

    config: DistanceConfig = field(default_factory=lambda: get_config().distance)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve_travel(
        self, origin: Place, destinations: Sequence[Place]
    ) -> Dict[Place, Union[Weight, Exception]]:
        """Estimate weights from ``origin`` to every destination.

        Raises:
            DistanceLookupError: If the origin has no coordinates.
        """
        if not origin.has_location:
            raise DistanceLookupError(
                f"Origin has no coordinates: {origin.name}",
                origin=origin.name,
            )

        meters_per_second = self.config.average_speed_kmh * 1000 / 3600
        results: Dict[Place, Union[Weight, Exception]] = {}
        for destination in destinations:
            if not destination.has_location:
                results[destination] = DistanceLookupError(
                    f"Destination has no coordinates: {destination.name}",
                    origin=origin.name,
                )
                continue
            try:
                meters = geodesic(
                    (origin.latitude, origin.longitude),
                    (destination.latitude, destination.longitude),
                ).meters
            except ValueError as e:
                results[destination] = e
                continue
            results[destination] = Weight(
                distance=meters,
                travel_time=timedelta(seconds=round(meters / meters_per_second)),
            )

        self._logger.debug(
            "Distances estimated",
            extra={"origin": origin.name, "destinations": len(destinations)},
        )
        return results
