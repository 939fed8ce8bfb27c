"""Adapters layer - Concrete implementations of ports.

Subpackages:
- graph: TextGraphRepository, DijkstraRouteSolver
- geocoding: NominatimGeocoderAdapter
- distance: GeodesicDistanceAdapter
"""
