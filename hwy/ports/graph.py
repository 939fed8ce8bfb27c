"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the highway network and computing routes over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Graph, Place, RouteResult
    from ..graph.search import Accessor


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py
    """

    def load(self) -> Graph:
        """Load the highway graph.

        Returns:
            The graph as a mapping of origin place to outgoing edges.
        """
        ...

    def get_place(self, city: str, region: str) -> Optional[Place]:
        """Look up a vertex by name, ignoring case.

        Returns:
            The matching place, or None if not found.
        """
        ...

    def list_places(self) -> Sequence[Place]:
        """List all vertices, sorted by city then region."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: Graph,
        departure: Place,
        arrival: Place,
        by: Accessor,
    ) -> RouteResult:
        """Find the cheapest route between two places.

        Args:
            graph: The highway graph.
            departure: Departure place.
            arrival: Arrival place.
            by: Edge cost accessor (distance or travel time).

        Returns:
            RouteResult with the path and its total cost.
        """
        ...
