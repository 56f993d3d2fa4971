"""
Breadth-first PathFinder implementation.
"""

from collections import deque
from typing import Deque, Dict, List, Optional, Set
import logging

from algorithms import PathFinder
from graph import Graph
from paths import Path
from vertices import Vertex

logger = logging.getLogger(__name__)


class BreadthFirstEngine(PathFinder):
    """
    Level-order search yielding a path with the fewest edges.

    Edge payloads are ignored; for minimum weight use a Dijkstra engine.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_vertices_expanded = 0
        self.last_edges_examined = 0

    def find_path(self, graph: Graph, start_id: str, target_id: str) -> Optional[Path]:
        """
        Search outward from start one level at a time.

        Each newly seen neighbour remembers the vertex it was reached from.
        The search stops the moment target is seen as a neighbour, and the
        route is rebuilt by following those predecessor links back to start.
        Every vertex taken off the queue and examined is recorded as visited.
        """
        self.last_vertices_expanded = 0
        self.last_edges_examined = 0

        start = graph.get_vertex_by_id(start_id)
        target = graph.get_vertex_by_id(target_id)
        if start is None or target is None:
            return None

        visited: Set[Vertex] = {start}
        if start == target:
            return Path.build([start], visited)

        visited_from: Dict[Vertex, Optional[Vertex]] = {start: None}
        queue: Deque[Vertex] = deque([start])

        while queue:
            current = queue.popleft()
            visited.add(current)
            self.last_vertices_expanded += 1

            for neighbour in graph.outgoing(current):
                self.last_edges_examined += 1
                if neighbour in visited_from:
                    continue
                visited_from[neighbour] = current
                if neighbour == target:
                    route = _walk_back(visited_from, target)
                    logger.debug(
                        "BFS %s -> %s found %d-vertex path, visited %d",
                        start_id, target_id, len(route), len(visited),
                    )
                    return Path.build(route, visited)
                queue.append(neighbour)

        logger.debug("BFS %s -> %s found no path, visited %d", start_id, target_id, len(visited))
        return None


def _walk_back(visited_from: Dict[Vertex, Optional[Vertex]], target: Vertex) -> List[Vertex]:
    route: Deque[Vertex] = deque()
    current: Optional[Vertex] = target
    while current is not None:
        route.appendleft(current)
        current = visited_from[current]
    return list(route)
