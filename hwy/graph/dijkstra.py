"""Single-source shortest paths using Dijkstra's algorithm.

``shortest_path`` settles every vertex reachable from the origin and
returns a PathMap covering the whole vertex set, from which individual
routes are rebuilt with ``PathMap.path``.

https://en.wikipedia.org/wiki/Dijkstra%27s_algorithm
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import OriginNotFoundError
from ..domain.models import Graph, PathEntry, Place
from .search import DIST, Accessor
from .sorting import by_city

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathMap(Mapping):
    """Shortest-path data for every vertex, from a single origin.

    Attributes:
        origin: The place the search started from
        entries: Read-only mapping of vertex to its PathEntry
    """

    origin: Place
    entries: Mapping

    def __getitem__(self, place: Place) -> PathEntry:
        return self.entries[place]

    def __iter__(self) -> Iterator[Place]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def path(self, destination: Place) -> Tuple[List[Place], float]:
        """Rebuild the route from the origin to ``destination``.

        Returns:
            The places from origin to destination (inclusive) and the
            total cost. ``([], 0.0)`` if the destination is unreachable
            or not in the graph.
        """
        entry = self.entries.get(destination)
        if entry is None:
            return [], 0.0
        if entry.hops == 0 and destination != self.origin:
            return [], 0.0

        path = [destination]
        node = destination
        for _ in range(entry.hops):
            node = self.entries[node].parent
            path.append(node)
        path.reverse()
        return path, entry.distance


def _vertices(graph: Graph) -> List[Place]:
    """Origins plus any destination that has no line of its own."""
    seen: Dict[Place, Place] = {}
    for origin, edges in graph.items():
        seen.setdefault(origin, origin)
        for destination in edges:
            seen.setdefault(destination, destination)
    return sorted(seen.values(), key=by_city)


def shortest_path(graph: Graph, origin: Place, by: Accessor = DIST) -> PathMap:
    """Find the shortest paths between ``origin`` and all other vertices.

    Args:
        graph: The highway graph.
        origin: Starting place; must be a vertex of the graph.
        by: Edge cost, e.g. DIST (meters) or TIME (minutes). Must be
            nonnegative.

    Raises:
        OriginNotFoundError: If origin is not a vertex of the graph.
    """
    if origin not in graph:
        raise OriginNotFoundError(
            f"Origin not in graph: {origin.name}",
            place=origin.name,
        )

    inf = float("inf")
    vertices = _vertices(graph)
    index = {place: i for i, place in enumerate(vertices)}
    count = len(vertices)

    dist = [inf] * count
    hops = [0] * count
    parent: List[Optional[int]] = [None] * count
    visited = [False] * count

    start = index[origin]
    dist[start] = 0.0
    # (distance, vertex index); the index breaks ties deterministically
    heap: List[Tuple[float, int]] = [(0.0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True

        for neighbor, weight in graph.get(vertices[u], {}).items():
            v = index[neighbor]
            if visited[v]:
                continue
            candidate = current_distance + by(weight)
            if candidate < dist[v]:
                dist[v] = candidate
                hops[v] = hops[u] + 1
                parent[v] = u
                heapq.heappush(heap, (candidate, v))

    entries = {
        place: PathEntry(
            visited=visited[i],
            distance=dist[i],
            hops=hops[i],
            parent=None if parent[i] is None else vertices[parent[i]],
        )
        for i, place in enumerate(vertices)
    }

    _logger.debug(
        "Shortest paths computed",
        extra={
            "origin": origin.name,
            "vertices": count,
            "reachable": sum(visited),
        },
    )
    return PathMap(origin=vertices[start], entries=MappingProxyType(entries))
