"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DistanceLookupError,
    GeocodingError,
    GraphError,
    GraphParseError,
    HighwayError,
    NoRouteFoundError,
    OriginNotFoundError,
    PlaceNotFoundError,
)
from .models import (
    EdgeMap,
    EnrichmentResult,
    GeoLocation,
    Graph,
    LookupFailure,
    PathEntry,
    Place,
    RouteResult,
    Weight,
)

__all__ = [
    # Models
    "GeoLocation",
    "Place",
    "Weight",
    "EdgeMap",
    "Graph",
    "PathEntry",
    "RouteResult",
    "LookupFailure",
    "EnrichmentResult",
    # Errors
    "HighwayError",
    "GraphParseError",
    "GraphError",
    "OriginNotFoundError",
    "PlaceNotFoundError",
    "NoRouteFoundError",
    "GeocodingError",
    "DistanceLookupError",
    "ConfigurationError",
]
