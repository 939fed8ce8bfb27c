"""Distance matrix port - Abstraction for measuring edges.

A distance matrix answers, for one origin and many destinations, the
driving distance and travel time to each destination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.models import Place, Weight


class DistanceMatrixPort(Protocol):
    """Port for distance matrix services.

    Implementation: adapters/distance/geodesic_adapter.py
    """

    def resolve_travel(
        self, origin: Place, destinations: Sequence[Place]
    ) -> Mapping[Place, Union[Weight, Exception]]:
        """Measure the edges from ``origin`` to each destination.

        Args:
            origin: The edge origin.
            destinations: The edge destinations.

        Returns:
            A weight per destination, or the exception describing why that
            single destination failed.

        Raises:
            DistanceLookupError: If the whole row could not be answered.
        """
        ...
