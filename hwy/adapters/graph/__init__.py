"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads the graph from a text file
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .text_repository import TextGraphRepository

__all__ = ["TextGraphRepository", "DijkstraRouteSolver"]
