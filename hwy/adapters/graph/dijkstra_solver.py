"""Dijkstra Route Solver adapter.

Wraps ``hwy.graph.dijkstra.shortest_path`` and adds:
- Domain model output (RouteResult)
- Typed errors for unknown places and unreachable destinations
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError, OriginNotFoundError, PlaceNotFoundError
from ...domain.models import Graph, Place, RouteResult
from ...graph.dijkstra import shortest_path
from ...graph.search import DIST, Accessor


def _not_found(place: Place) -> PlaceNotFoundError:
    return PlaceNotFoundError(
        f"Place not in graph: {place.name}",
        city=place.city,
        region=place.region,
    )


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        departure: Place,
        arrival: Place,
        by: Accessor = DIST,
    ) -> RouteResult:
        """Find the cheapest route between two places.

        Raises:
            PlaceNotFoundError: If departure or arrival is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure.name, "arrival": arrival.name},
        )

        try:
            paths = shortest_path(graph, departure, by)
        except OriginNotFoundError as e:
            raise _not_found(departure) from e
        if arrival not in paths:
            raise _not_found(arrival)

        path, total = paths.path(arrival)
        if not path:
            self._logger.warning(
                "No route found",
                extra={"departure": departure.name, "arrival": arrival.name},
            )
            raise NoRouteFoundError(
                f"No path from {departure.name} to {arrival.name}",
                departure=departure.name,
                arrival=arrival.name,
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": departure.name,
                "arrival": arrival.name,
                "stops": len(path),
                "total": total,
            },
        )
        return RouteResult(path=tuple(path), total=total)

    def solve_safe(
        self,
        graph: Graph,
        departure: Place,
        arrival: Place,
        by: Accessor = DIST,
    ) -> RouteResult:
        """Like solve(), but returns an empty RouteResult instead of raising."""
        try:
            return self.solve(graph, departure, arrival, by)
        except (PlaceNotFoundError, NoRouteFoundError):
            return RouteResult(path=(), total=0.0)
