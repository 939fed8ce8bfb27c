"""Distance matrix adapters - Implementations of DistanceMatrixPort.

Available implementations:
- GeodesicDistanceAdapter: offline estimate from coordinates
"""

from .geodesic_adapter import GeodesicDistanceAdapter

__all__ = ["GeodesicDistanceAdapter"]
