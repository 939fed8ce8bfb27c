"""Lookups over the vertices and edges of a graph.

Every search enumerates vertices in ``by_city`` order so that ties and
first-match semantics are reproducible. A miss is reported as None.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Tuple

from ..domain.models import Graph, Place, Weight
from .sorting import by_city

# 6371 km
EARTH_RADIUS_METERS = 6371e3

# Picks the preferred of two values; MIN and MAX are the usual choices.
Selector = Callable[[float, float], float]
# Projects a Weight onto a scalar cost.
Accessor = Callable[[Weight], float]

MIN: Selector = min
MAX: Selector = max


def DIST(weight: Weight) -> float:
    """Weight distance in meters."""
    return weight.distance


def TIME(weight: Weight) -> float:
    """Weight travel time in minutes."""
    return weight.minutes


def spherical_law_of_cos(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters between two points given in degrees.

    d = acos( sin φ1 ⋅ sin φ2 + cos φ1 ⋅ cos φ2 ⋅ cos Δλ ) ⋅ R
    """
    if lat1 == lat2 and lon1 == lon2:
        return 0.0
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    cosine = math.sin(phi1) * math.sin(phi2) + math.cos(phi1) * math.cos(
        phi2
    ) * math.cos(math.radians(lon2 - lon1))
    # rounding can push the cosine just outside acos' domain
    d = EARTH_RADIUS_METERS * math.acos(max(-1.0, min(1.0, cosine)))
    # distinct points are never at distance 0, even when the cosine rounds to 1
    return d if d > 0.0 else math.nextafter(0.0, 1.0)


def find_by_name(graph: Graph, city: str, region: str) -> Optional[Place]:
    """Find a vertex by city and region, ignoring case."""
    city = city.lower()
    region = region.lower()
    for place in sorted(graph, key=by_city):
        if place.city.lower() == city and place.region.lower() == region:
            return place
    return None


def find_within(
    graph: Graph, lat: float, lon: float, radius: float
) -> Optional[Tuple[Place, float]]:
    """Find the vertex closest to (lat, lon) that lies within ``radius`` meters.

    Returns:
        The place and its distance in meters, or None if no vertex is
        close enough.
    """
    best: Optional[Tuple[Place, float]] = None
    for place in sorted(graph, key=by_city):
        d = spherical_law_of_cos(lat, lon, place.latitude, place.longitude)
        if d <= radius and (best is None or d < best[1]):
            best = (place, d)
    return best


def most_extreme(
    graph: Graph, origin: Place, select: Selector, by: Accessor
) -> Optional[Place]:
    """Find the "mostest" neighbour of ``origin``.

    ``most_extreme(g, home, MAX, DIST)`` is the farthest connected place
    by distance, ``most_extreme(g, home, MIN, TIME)`` the quickest to
    reach. On a tie the neighbour that sorts first by city wins.

    Returns:
        The chosen destination, or None if origin is not a vertex or has
        no outgoing edges.
    """
    edges = graph.get(origin)
    if not edges:
        return None

    destinations = sorted(edges, key=by_city)
    best = destinations[0]
    best_value = by(edges[best])
    for destination in destinations[1:]:
        value = by(edges[destination])
        if value != best_value and select(best_value, value) == value:
            best, best_value = destination, value
    return best


def edge(graph: Graph, origin: Place, destination: Place) -> Optional[Weight]:
    """Return the weight of origin -> destination, or None if not connected."""
    return graph.get(origin, {}).get(destination)
