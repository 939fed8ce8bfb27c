"""Immutable domain models for the highway graph.

All models are frozen dataclasses with slots. A Place is identified by
its city and region only; coordinates are carried along but take no part
in equality or hashing, so the same city read with slightly different
coordinates is still one vertex.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Place:
    """A vertex of the graph: a city in a region (state, province...).

    Attributes:
        city: City name, e.g. 'Springfield'
        region: Region abbreviation, e.g. 'IL'
        latitude: Latitude in degrees (descriptive only)
        longitude: Longitude in degrees (descriptive only)
    """

    city: str
    region: str
    latitude: float = field(default=0.0, compare=False)
    longitude: float = field(default=0.0, compare=False)

    @property
    def name(self) -> str:
        """City and region joined by a comma, e.g. 'Springfield,IL'."""
        return f"{self.city},{self.region}"

    @property
    def has_location(self) -> bool:
        """Whether the place carries coordinates other than (0, 0)."""
        return self.latitude != 0.0 or self.longitude != 0.0

    def located_at(self, location: GeoLocation) -> Place:
        """Return a copy of this place at the given coordinates."""
        return Place(
            city=self.city,
            region=self.region,
            latitude=location.latitude,
            longitude=location.longitude,
        )

    def __str__(self) -> str:
        return f"{self.city}, {self.region}"


@dataclass(frozen=True, slots=True)
class Weight:
    """Edge data: driving distance and travel time.

    The zero value means the edge has not been measured yet.
    """

    distance: float = 0.0  # meters
    travel_time: timedelta = timedelta(0)

    @property
    def is_unset(self) -> bool:
        return self.distance == 0.0 and self.travel_time == timedelta(0)

    @property
    def minutes(self) -> float:
        return self.travel_time.total_seconds() / 60.0


# Outgoing edges of one vertex: destination -> weight
EdgeMap = Dict[Place, Weight]

# Directed weighted graph: origin -> outgoing edges
Graph = Dict[Place, EdgeMap]


@dataclass(frozen=True, slots=True)
class PathEntry:
    """Shortest-path bookkeeping for a single vertex.

    Attributes:
        visited: Whether the vertex was settled by the search
        distance: Shortest known distance from the origin (inf if unreachable)
        hops: Number of edges on the recorded shortest path
        parent: Previous vertex on that path, None for origin/unreachable
    """

    visited: bool = False
    distance: float = float("inf")
    hops: int = 0
    parent: Optional[Place] = None


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between two places.

    Attributes:
        path: Ordered places from departure to arrival (inclusive)
        total: Total cost of the route under the chosen accessor
    """

    path: tuple[Place, ...]
    total: float

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return max(len(self.path) - 1, 0)


@dataclass(frozen=True, slots=True)
class LookupFailure:
    """One failed external lookup during graph enrichment.

    Attributes:
        place: The place (or edge origin) the lookup was for
        destination: Edge destination for distance lookups, else None
        reason: Human-readable reason
    """

    place: Place
    destination: Optional[Place] = None
    reason: str = ""


@dataclass(frozen=True, slots=True)
class EnrichmentResult:
    """A graph after enrichment together with the lookups that failed."""

    graph: Graph
    failures: tuple[LookupFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """Check if every lookup succeeded."""
        return len(self.failures) == 0
