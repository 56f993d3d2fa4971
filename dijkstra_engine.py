"""
Dijkstra shortest-path engines.

Both engines keep a progress record per discovered vertex (cumulative
weight, predecessor, finalised flag) and differ only in how the next
frontier vertex is selected:

- HeapDijkstraEngine uses Python's heapq with lazy deletion.
- ScanDijkstraEngine scans every unfinalised record each iteration.

Ties on cumulative weight are broken by discovery order in both, so the two
return the same path for the same graph.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple
import heapq
import itertools
import logging

from algorithms import WeightMapper, WeightedPathFinder
from config import DEFAULT_EDGE_WEIGHT, DIJKSTRA_FRONTIER
from graph import Graph
from paths import Path
from vertices import Vertex

logger = logging.getLogger(__name__)


@dataclass
class ProgressRecord:
    """
    Search state for one discovered vertex.
    """
    vertex: Vertex
    weight_sum: float
    predecessor: Optional[Vertex]
    order: int             # discovery sequence, used to break weight ties
    finalised: bool = False


class _DijkstraBase(WeightedPathFinder):
    """
    Shared relaxation loop; subclasses supply the frontier.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_vertices_expanded = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0

    def find_path(
        self,
        graph: Graph,
        start_id: str,
        target_id: str,
        weight_mapper: Optional[WeightMapper] = None,
    ) -> Optional[Path]:
        """
        Expand the cheapest unfinalised vertex until target is selected.

        Selecting target (rather than merely discovering it) is what makes
        its weight final. Each outgoing edge of the selected vertex offers a
        candidate weight; a neighbour with no record yet, or a better
        candidate than its current record, takes the new weight and the
        selected vertex as predecessor. Every vertex that receives a record
        is counted as visited.
        """
        self.last_vertices_expanded = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0

        start = graph.get_vertex_by_id(start_id)
        target = graph.get_vertex_by_id(target_id)
        if start is None or target is None:
            return None

        visited: Set[Vertex] = {start}
        if start == target:
            return Path.build([start], visited)

        counter = itertools.count()
        progress: Dict[Vertex, ProgressRecord] = {
            start: ProgressRecord(start, 0.0, None, next(counter))
        }
        frontier = self._new_frontier()
        self._push(frontier, progress[start])

        current = self._pop_min(frontier, progress)
        while current is not None:
            if current.vertex == target:
                route = _walk_back(progress, current)
                logger.debug(
                    "Dijkstra %s -> %s weight=%f, %d vertices expanded",
                    start_id, target_id, current.weight_sum, self.last_vertices_expanded,
                )
                return Path.build(route, visited, current.weight_sum)

            self.last_vertices_expanded += 1
            for neighbour, edge in graph.outgoing(current.vertex).items():
                self.last_edges_examined += 1
                weight = DEFAULT_EDGE_WEIGHT if weight_mapper is None else weight_mapper(edge)
                candidate = current.weight_sum + weight

                record = progress.get(neighbour)
                if record is None:
                    record = ProgressRecord(neighbour, candidate, current.vertex, next(counter))
                    progress[neighbour] = record
                    visited.add(neighbour)
                elif not record.finalised and candidate < record.weight_sum:
                    record.weight_sum = candidate
                    record.predecessor = current.vertex
                else:
                    continue
                self.last_relaxed += 1
                self._push(frontier, record)

            current.finalised = True
            current = self._pop_min(frontier, progress)

        logger.debug("Dijkstra %s -> %s: target unreachable", start_id, target_id)
        return None

    # --- Frontier hooks ------------------------------------------------------
    # The frontier is created per call and passed in, so a weight mapper may
    # run another search on the same engine.

    def _new_frontier(self) -> List:
        raise NotImplementedError

    def _push(self, frontier: List, record: ProgressRecord) -> None:
        raise NotImplementedError

    def _pop_min(self, frontier: List, progress: Dict[Vertex, ProgressRecord]) -> Optional[ProgressRecord]:
        raise NotImplementedError


class HeapDijkstraEngine(_DijkstraBase):
    """
    Dijkstra using a binary heap.

    Complexity:
        O(E log V) over the vertices reachable from the start.
    """

    def __init__(self) -> None:
        super().__init__()
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def _new_frontier(self) -> List[Tuple[float, int, Vertex]]:
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        return []

    def _push(self, frontier: List[Tuple[float, int, Vertex]], record: ProgressRecord) -> None:
        heapq.heappush(frontier, (record.weight_sum, record.order, record.vertex))
        self.last_heap_pushes += 1

    def _pop_min(
        self, frontier: List[Tuple[float, int, Vertex]], progress: Dict[Vertex, ProgressRecord]
    ) -> Optional[ProgressRecord]:
        while frontier:
            weight_sum, _, vertex = heapq.heappop(frontier)
            self.last_heap_pops += 1
            record = progress[vertex]
            # Skip outdated entries
            if record.finalised or weight_sum != record.weight_sum:
                continue
            return record
        return None


class ScanDijkstraEngine(_DijkstraBase):
    """
    Dijkstra selecting the frontier minimum by linear scan.

    Complexity:
        O(V^2); useful as a reference for the heap engine.
    """

    def _new_frontier(self) -> List:
        return []

    def _push(self, frontier: List, record: ProgressRecord) -> None:
        pass

    def _pop_min(self, frontier: List, progress: Dict[Vertex, ProgressRecord]) -> Optional[ProgressRecord]:
        # Records are scanned in discovery order, so min() keeps the earliest
        # of equally weighted candidates.
        candidates = [r for r in progress.values() if not r.finalised]
        if not candidates:
            return None
        return min(candidates, key=lambda r: r.weight_sum)


def make_dijkstra_engine(frontier: Optional[str] = None) -> _DijkstraBase:
    """
    Build a Dijkstra engine for the named frontier strategy.

    frontier defaults to config.DIJKSTRA_FRONTIER.
    """
    frontier = (frontier or DIJKSTRA_FRONTIER).lower()
    if frontier == "heap":
        return HeapDijkstraEngine()
    if frontier == "scan":
        return ScanDijkstraEngine()
    raise ValueError(f"unknown Dijkstra frontier strategy: {frontier!r}")


def _walk_back(progress: Dict[Vertex, ProgressRecord], record: ProgressRecord) -> List[Vertex]:
    route: List[Vertex] = []
    current: Optional[ProgressRecord] = record
    while current is not None:
        route.append(current.vertex)
        current = None if current.predecessor is None else progress[current.predecessor]
    route.reverse()
    return route
