"""
Depth-first PathFinder implementation.

Uses an explicit stack of (vertex, neighbour iterator) frames rather than
call recursion, so search depth is not bounded by the interpreter's
recursion limit.
"""

from typing import Iterator, List, Optional, Set, Tuple
import logging

from algorithms import PathFinder
from graph import Graph
from paths import Path
from vertices import Vertex

logger = logging.getLogger(__name__)


class DepthFirstEngine(PathFinder):
    """
    Depth-first search returning the first path found in neighbour order.

    Visited state is shared by the whole search and never un-marked: a dead
    end is not re-entered through another route. The result is therefore
    not necessarily the shortest path.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_vertices_expanded = 0
        self.last_edges_examined = 0

    def find_path(self, graph: Graph, start_id: str, target_id: str) -> Optional[Path]:
        self.last_vertices_expanded = 0
        self.last_edges_examined = 0

        start = graph.get_vertex_by_id(start_id)
        target = graph.get_vertex_by_id(target_id)
        if start is None or target is None:
            return None

        visited: Set[Vertex] = {start}
        if start == target:
            return Path.build([start], visited)

        # The stack holds the current route; each frame remembers where it
        # left off among its neighbours.
        stack: List[Tuple[Vertex, Iterator[Vertex]]] = [
            (start, iter(graph.outgoing(start)))
        ]
        self.last_vertices_expanded = 1

        while stack:
            _, neighbours = stack[-1]
            advanced = False
            for neighbour in neighbours:
                self.last_edges_examined += 1
                if neighbour in visited:
                    continue
                visited.add(neighbour)
                if neighbour == target:
                    route = [frame_vertex for frame_vertex, _ in stack]
                    route.append(neighbour)
                    logger.debug(
                        "DFS %s -> %s found %d-vertex path, visited %d",
                        start_id, target_id, len(route), len(visited),
                    )
                    return Path.build(route, visited)
                stack.append((neighbour, iter(graph.outgoing(neighbour))))
                self.last_vertices_expanded += 1
                advanced = True
                break
            if not advanced:
                stack.pop()

        logger.debug("DFS %s -> %s found no path, visited %d", start_id, target_id, len(visited))
        return None
