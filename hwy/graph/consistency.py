"""Data integrity checks for highway graphs.

Highway segments are normally two-way, but nothing in the model forces
a graph to be symmetric. These checks are meant for validating data
files; no query depends on them.
"""

import logging
from typing import List, Tuple

from ..domain.models import Graph, Place
from .sorting import by_city, by_state

_logger = logging.getLogger(__name__)


def asymmetric_edges(graph: Graph) -> List[Tuple[Place, Place]]:
    """List every edge a -> b for which b -> a is missing."""
    missing = []
    for a in sorted(graph, key=by_state):
        for b in sorted(graph[a], key=by_city):
            if a not in graph.get(b, {}):
                _logger.warning(
                    "One-way edge",
                    extra={"origin": a.name, "destination": b.name},
                )
                missing.append((a, b))
    return missing


def is_symmetric(graph: Graph) -> bool:
    return not asymmetric_edges(graph)
