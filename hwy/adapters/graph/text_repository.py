"""Text Graph Repository adapter.

Loads the highway graph from the canonical text file named in the
configuration, and caches it for the lifetime of the repository.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphParseError, PlaceNotFoundError
from ...domain.models import Graph, Place
from ...graph.codec import load_graph
from ...graph.search import find_by_name
from ...graph.sorting import by_city


@dataclass
class TextGraphRepository:
    """Graph repository that loads from a text file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data directory, file name)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the highway graph from the configured file.

        Raises:
            GraphError: If the file cannot be read.
            GraphParseError: If a line is malformed.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.graph_path
        self._logger.debug("Loading graph", extra={"graph_path": str(path)})
        try:
            graph = load_graph(path)
        except GraphParseError as e:
            self._logger.error(
                "Graph file is malformed",
                extra={"graph_path": str(path), "line_number": e.line_number},
            )
            raise

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": sum(len(e) for e in graph.values())},
        )
        return graph

    def get_place(self, city: str, region: str) -> Optional[Place]:
        """Get a vertex by name, ignoring case."""
        return find_by_name(self.load(), city, region)

    def get_place_or_raise(self, city: str, region: str) -> Place:
        """Get a vertex by name, raising if not found.

        Raises:
            PlaceNotFoundError: If no vertex matches.
        """
        place = self.get_place(city, region)
        if place is None:
            raise PlaceNotFoundError(
                f"Place not found: {city}, {region}",
                city=city,
                region=region,
            )
        return place

    def list_places(self) -> List[Place]:
        """List all vertices sorted by city then region."""
        return sorted(self.load(), key=by_city)

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
