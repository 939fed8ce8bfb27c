"""Services layer - Orchestration over the graph core and adapters.

Available services:
- GraphEnricher: fills coordinates and edge weights through collaborators
"""

from .graph_enricher import GraphEnricher

__all__ = ["GraphEnricher"]
