"""Graph enrichment service.

Fills in what a hand-written graph usually lacks: coordinates for each
place (via a geocoder) and weights for each edge (via a distance matrix).
A failed lookup never stops the run; it is recorded as a LookupFailure
and the item keeps its previous value (unchanged coordinates, or the
zero "unset" Weight).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..domain.errors import DistanceLookupError, GeocodingError
from ..domain.models import EnrichmentResult, Graph, LookupFailure, Place, Weight
from ..ports.distance import DistanceMatrixPort
from ..ports.geocoding import GeocoderPort
from ..graph.sorting import by_city, by_state


@dataclass
class GraphEnricher:
    """Orchestrates geocoding and distance lookups over a whole graph.

    Attributes:
        geocoder: Resolves place names to coordinates
        distances: Measures edges from one origin to many destinations
    """

    geocoder: GeocoderPort
    distances: DistanceMatrixPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def locate(self, graph: Graph) -> EnrichmentResult:
        """Geocode every vertex and destination of the graph.

        Returns:
            A new graph whose places carry the resolved coordinates, and
            the places that could not be resolved.
        """
        everything: Dict[Place, Place] = {}
        for origin, edges in graph.items():
            everything.setdefault(origin, origin)
            for destination in edges:
                everything.setdefault(destination, destination)

        located: Dict[Place, Place] = {}
        failures: List[LookupFailure] = []
        for place in sorted(everything.values(), key=by_state):
            query = f"{place.city}, {place.region}"
            try:
                location = self.geocoder.resolve_location(query)
            except GeocodingError as e:
                failures.append(LookupFailure(place=place, reason=str(e)))
                continue
            if location is None:
                failures.append(LookupFailure(place=place, reason="no result"))
                continue
            located[place] = place.located_at(location)

        result: Graph = {
            located.get(origin, origin): {
                located.get(destination, destination): weight
                for destination, weight in edges.items()
            }
            for origin, edges in graph.items()
        }

        self._logger.info(
            "Places located",
            extra={"located": len(located), "failed": len(failures)},
        )
        return EnrichmentResult(graph=result, failures=tuple(failures))

    def measure(self, graph: Graph, only_unset: bool = False) -> EnrichmentResult:
        """Ask the distance matrix for the weight of every edge.

        Args:
            graph: Graph whose edges should be measured.
            only_unset: Skip edges that already have a non-zero weight.

        Returns:
            A new graph with the measured weights, and the edges that
            could not be measured.
        """
        result: Graph = {origin: dict(edges) for origin, edges in graph.items()}
        failures: List[LookupFailure] = []

        for origin in sorted(graph, key=by_state):
            destinations = [
                destination
                for destination in sorted(graph[origin], key=by_city)
                if not only_unset or graph[origin][destination].is_unset
            ]
            if not destinations:
                continue

            try:
                answers = self.distances.resolve_travel(origin, destinations)
            except DistanceLookupError as e:
                self._logger.warning(
                    "Distance row failed",
                    extra={"origin": origin.name, "error": str(e)},
                )
                failures.extend(
                    LookupFailure(place=origin, destination=d, reason=str(e))
                    for d in destinations
                )
                continue

            for destination in destinations:
                answer = answers.get(destination)
                if isinstance(answer, Weight):
                    result[origin][destination] = answer
                    continue
                reason = "missing from response" if answer is None else str(answer)
                failures.append(
                    LookupFailure(place=origin, destination=destination, reason=reason)
                )

        self._logger.info(
            "Edges measured",
            extra={
                "edges": sum(len(edges) for edges in graph.values()),
                "failed": len(failures),
            },
        )
        return EnrichmentResult(graph=result, failures=tuple(failures))
