"""
Configuration constants for the directed graph library.

Defaults can be overridden through environment variables so applications
and test runs can switch behaviour without code changes.
"""

import os

# =============================================================================
# Search Configuration
# =============================================================================

# Frontier strategy used by DirectedGraph.dijkstra_shortest_path:
#   "heap" - binary heap with lazy deletion, O(E log V)
#   "scan" - linear scan over unfinalised records, O(V^2)
DIJKSTRA_FRONTIER = os.getenv("DIGRAPH_DIJKSTRA_FRONTIER", "heap")

# Edge weight used when no weight mapper is supplied to Dijkstra
DEFAULT_EDGE_WEIGHT = 0.0
