"""
Directed graph abstraction consumed by the path-search engines.

Vertices are Vertex instances.
Edges are directed: u -> v carrying an opaque payload.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Mapping, Optional, TypeVar

from vertices import Vertex

V = TypeVar("V", bound=Vertex)
E = TypeVar("E")


class Graph(ABC, Generic[V, E]):
    """Read-only view of a directed graph over Vertex objects."""

    @abstractmethod
    def vertices(self) -> Iterable[V]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def get_vertex_by_id(self, vertex_id: Optional[str]) -> Optional[V]:
        """Return the stored vertex with this id, or None."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: V) -> Mapping[V, E]:
        """
        Outgoing neighbours and edge payloads for a given vertex.

        Returns: dict[Vertex, payload], empty for unknown vertices.
        """
        raise NotImplementedError
