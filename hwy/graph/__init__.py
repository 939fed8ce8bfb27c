"""Graph core: text codec, search and shortest paths.

Everything in this subpackage is a pure function of an already built
Graph; nothing here performs I/O other than ``load_graph``.
"""

from .codec import load_graph, parse, places, pretty_print, serialize
from .consistency import asymmetric_edges, is_symmetric
from .dijkstra import PathMap, shortest_path
from .search import (
    DIST,
    MAX,
    MIN,
    TIME,
    edge,
    find_by_name,
    find_within,
    most_extreme,
    spherical_law_of_cos,
)
from .sorting import by_city, by_state, sorted_places

__all__ = [
    "parse",
    "serialize",
    "places",
    "load_graph",
    "pretty_print",
    "find_by_name",
    "find_within",
    "most_extreme",
    "edge",
    "spherical_law_of_cos",
    "DIST",
    "TIME",
    "MIN",
    "MAX",
    "shortest_path",
    "PathMap",
    "asymmetric_edges",
    "is_symmetric",
    "by_city",
    "by_state",
    "sorted_places",
]
