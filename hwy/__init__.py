"""Top-level package for the highway graph.

Models US highway connections as a directed weighted graph of places,
and provides parsing, search and shortest-path routing over it.
"""

__version__ = "0.1.0"
