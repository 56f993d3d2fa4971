"""
Path-search interfaces.

Keeps search algorithms separate from graph storage and construction.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from graph import Graph
from paths import Path

# Maps an edge payload to a non-negative numeric weight.
WeightMapper = Callable[[Any], float]


class PathFinder(ABC):
    """
    Interface for unweighted start -> target path search.
    """

    @abstractmethod
    def find_path(self, graph: Graph, start_id: str, target_id: str) -> Optional[Path]:
        """
        Search for a path from the vertex with start_id to target_id.

        Returns:
            The path found, or None if either id does not resolve to a
            vertex or target is unreachable from start.
        """
        raise NotImplementedError


class WeightedPathFinder(ABC):
    """
    Interface for edge-weighted shortest-path search.
    """

    @abstractmethod
    def find_path(
        self,
        graph: Graph,
        start_id: str,
        target_id: str,
        weight_mapper: Optional[WeightMapper] = None,
    ) -> Optional[Path]:
        """
        Search for the minimum-weight path from start_id to target_id.

        weight_mapper must return non-negative weights; this is a caller
        obligation and is not checked. None weighs every edge as 0.0.

        Returns:
            The path with total_weight set, or None if either id is
            unresolved or target is unreachable.
        """
        raise NotImplementedError
