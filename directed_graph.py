"""
Concrete directed graph with path search.

Implements the Graph interface on top of a VertexStore (arena of vertices
indexed by integer handle) and an EdgeStore (per-handle adjacency).
Operations taking a vertex also accept its id string.
"""

from typing import Dict, List, Optional, TypeVar, Union
import logging

from algorithms import PathFinder, WeightMapper, WeightedPathFinder
from breadth_first_engine import BreadthFirstEngine
from depth_first_engine import DepthFirstEngine
from dijkstra_engine import make_dijkstra_engine
from graph import Graph
from paths import Path
from stores import EdgeStore, VertexStore
from vertices import Vertex

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Vertex)
E = TypeVar("E")

VertexRef = Union[Vertex, str]


class DirectedGraph(Graph[V, E]):
    """
    Directed graph over vertices of type V with edge payloads of type E.

    Representation invariants:
    1. every vertex is stored once, under its id
    2. at most one directed edge exists per ordered (from, to) pair
    3. every edge endpoint is a stored vertex

    Mutation and search assume no concurrent modification.
    """

    def __init__(
        self,
        dijkstra_engine: Optional[WeightedPathFinder] = None,
        depth_first_engine: Optional[PathFinder] = None,
        breadth_first_engine: Optional[PathFinder] = None,
    ) -> None:
        self._vertices: VertexStore[V] = VertexStore()
        self._edges: EdgeStore[E] = EdgeStore()
        self._dfs = depth_first_engine or DepthFirstEngine()
        self._bfs = breadth_first_engine or BreadthFirstEngine()
        self._dijkstra = dijkstra_engine or make_dijkstra_engine()

    # --- Construction --------------------------------------------------------

    def add_or_get_vertex(self, vertex: Optional[V]) -> Optional[V]:
        """
        Add vertex unless one with the same id exists.

        Returns the stored instance: the pre-existing duplicate, or vertex
        itself if it was added.
        """
        if vertex is None:
            return None
        handle = self._vertices.add_or_get(vertex)
        self._edges.register(handle)
        return self._vertices.get(handle)

    def add_edge(self, from_: Optional[VertexRef], to: Optional[VertexRef], edge: Optional[E]) -> bool:
        """
        Add a directed edge from_ -> to carrying edge.

        Vertex arguments are added to the graph first if missing; id
        arguments must already resolve. No change is made if the edge
        already exists.

        Returns: whether the edge was added.
        """
        if from_ is None or to is None or edge is None:
            return False
        # Unknown ids fail before any instance argument is inserted.
        if not self._resolvable(from_) or not self._resolvable(to):
            return False
        src = self._handle_for_insert(from_)
        dst = self._handle_for_insert(to)
        return self._edges.add(src, dst, edge)

    def add_connection(self, v1: Optional[VertexRef], v2: Optional[VertexRef], edge: Optional[E]) -> bool:
        """
        Add edge in both directions between v1 and v2.

        Safe to repeat: a one-way link gets its missing direction.

        Returns: whether both directions are present after the call.
        """
        if edge is None:
            return False
        self.add_edge(v1, v2, edge)
        self.add_edge(v2, v1, edge)
        return self.get_edge(v1, v2) is not None and self.get_edge(v2, v1) is not None

    def remove_unconnected_vertices(self) -> List[V]:
        """
        Remove every vertex without outgoing edges.

        Only out-degree is considered, so a vertex reached solely by
        incoming edges is removed as well; those incoming edges go with it.

        Returns: the removed vertices.
        """
        unconnected = [h for h in self._vertices.handles() if self._edges.out_degree(h) == 0]
        removed: List[V] = []
        for handle in unconnected:
            dropped = self._edges.discard_vertex(handle)
            vertex = self._vertices.remove(handle)
            logger.debug("Removed unconnected vertex %s (%d incoming edges)", vertex.id, dropped)
            removed.append(vertex)
        return removed

    # --- Queries -------------------------------------------------------------

    def get_vertices(self) -> List[V]:
        return self._vertices.vertices()

    def get_vertex_by_id(self, vertex_id: Optional[str]) -> Optional[V]:
        if vertex_id is None:
            return None
        return self._vertices.get_by_id(vertex_id)

    def get_neighbours(self, vertex: Optional[VertexRef]) -> Optional[List[V]]:
        """
        Vertices reachable over one outgoing edge.

        Returns None if vertex is not in the graph, an empty list if it has
        no outgoing edges.
        """
        handle = self._lookup(vertex)
        if handle is None:
            return None
        return [self._vertices.get(h) for h in self._edges.outgoing(handle)]

    def get_edges(self, vertex: Optional[VertexRef]) -> Optional[List[E]]:
        """
        Payloads of the outgoing edges of vertex.

        Returns None if vertex is not in the graph, an empty list if it has
        no outgoing edges.
        """
        handle = self._lookup(vertex)
        if handle is None:
            return None
        return list(self._edges.outgoing(handle).values())

    def get_edge(self, from_: Optional[VertexRef], to: Optional[VertexRef]) -> Optional[E]:
        """Payload of the directed edge from_ -> to, or None."""
        src = self._lookup(from_)
        dst = self._lookup(to)
        if src is None or dst is None:
            return None
        return self._edges.get(src, dst)

    def get_num_vertices(self) -> int:
        return len(self._vertices)

    def get_num_edges(self) -> int:
        """Number of directed edges; a connection counts twice."""
        return len(self._edges)

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> List[V]:
        return self.get_vertices()

    def outgoing(self, vertex: V) -> Dict[V, E]:
        handle = self._lookup(vertex)
        if handle is None:
            return {}
        return {self._vertices.get(h): e for h, e in self._edges.outgoing(handle).items()}

    # --- Search --------------------------------------------------------------

    def depth_first_search(self, start_id: str, target_id: str) -> Optional[Path[V]]:
        """
        Any path from start to target, found depth-first.

        Returns None if either id is unknown or no path exists.
        """
        return self._dfs.find_path(self, start_id, target_id)

    def breadth_first_search(self, start_id: str, target_id: str) -> Optional[Path[V]]:
        """
        Path from start to target with the fewest edges.

        Returns None if either id is unknown or no path exists.
        """
        return self._bfs.find_path(self, start_id, target_id)

    def dijkstra_shortest_path(
        self,
        start_id: str,
        target_id: str,
        weight_mapper: Optional[WeightMapper] = None,
    ) -> Optional[Path[V]]:
        """
        Minimum-weight path from start to target.

        weight_mapper turns an edge payload into a weight and must never
        return a negative value. Returns None if either id is unknown or no
        path exists.
        """
        return self._dijkstra.find_path(self, start_id, target_id, weight_mapper)

    # --- Dunder helpers ------------------------------------------------------

    def __len__(self) -> int:
        return self.get_num_vertices()

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, (Vertex, str)):
            return self._lookup(vertex) is not None
        return False

    def __str__(self) -> str:
        lines = []
        for handle in self._vertices.handles():
            vertex = self._vertices.get(handle)
            edges = ",".join(
                f"{self._vertices.get(h).id}({e})" for h, e in self._edges.outgoing(handle).items()
            )
            lines.append(f"{vertex.id}: [{edges}]")
        return "{ " + ",\n  ".join(lines) + "\n}"

    # --- Internal helpers ----------------------------------------------------

    def _lookup(self, vertex: Optional[VertexRef]) -> Optional[int]:
        if vertex is None:
            return None
        key = vertex if isinstance(vertex, str) else vertex.id
        return self._vertices.handle_of(key)

    def _resolvable(self, vertex: VertexRef) -> bool:
        return not isinstance(vertex, str) or self._lookup(vertex) is not None

    def _handle_for_insert(self, vertex: VertexRef) -> int:
        # Ids must already be known; instances are added on demand.
        if isinstance(vertex, str):
            return self._vertices.handle_of(vertex)
        handle = self._vertices.add_or_get(vertex)
        self._edges.register(handle)
        return handle
