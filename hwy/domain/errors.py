"""Typed domain errors for the highway graph.

All errors inherit from HighwayError and can optionally wrap a root
cause exception for debugging. Search misses are not errors: lookups
such as ``find_by_name`` return None instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class HighwayError(Exception):
    """Base error for the highway graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphParseError(HighwayError):
    """A line of graph text could not be parsed.

    Attributes:
        line_number: 1-based number of the offending line
        line: The raw text of the line
    """

    line_number: int = 0
    line: str = ""


@dataclass
class GraphError(HighwayError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class OriginNotFoundError(HighwayError):
    """Shortest path requested from a place that is not a vertex."""

    place: str = ""


@dataclass
class PlaceNotFoundError(HighwayError):
    """A place looked up by name is not in the graph.

    Attributes:
        city: City that was searched for
        region: Region that was searched for
    """

    city: str = ""
    region: str = ""


@dataclass
class NoRouteFoundError(HighwayError):
    """No path exists between the requested places.

    Attributes:
        departure: Name of the departure place
        arrival: Name of the arrival place
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class GeocodingError(HighwayError):
    """Failed to geocode a place name.

    Attributes:
        query: The location query that failed
    """

    query: str = ""


@dataclass
class DistanceLookupError(HighwayError):
    """The distance matrix could not answer for a whole origin row.

    Attributes:
        origin: Name of the origin place
    """

    origin: str = ""


@dataclass
class ConfigurationError(HighwayError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
