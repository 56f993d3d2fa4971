"""
Path result returned by the search engines.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Generic, Iterator, List, Optional, Tuple, TypeVar

from vertices import Vertex

V = TypeVar("V", bound=Vertex)


@dataclass(frozen=True)
class Path(Generic[V]):
    """
    Route discovered by a single search.

    vertices: start..target, each consecutive pair joined by a directed edge.
        A path with one vertex has no edges.
    total_weight: accumulated edge weight; only Dijkstra fills this in.
    visited: vertices touched by the search. Diagnostic only, not part of
        the route.
    """

    vertices: Tuple[V, ...]
    total_weight: float = 0.0
    visited: FrozenSet[V] = field(default_factory=frozenset)

    @classmethod
    def build(cls, route: List[V], visited, total_weight: float = 0.0) -> "Path[V]":
        """Freeze the mutable working state of a search into a result."""
        return cls(tuple(route), float(total_weight), frozenset(visited))

    @property
    def start(self) -> Optional[V]:
        return self.vertices[0] if self.vertices else None

    @property
    def end(self) -> Optional[V]:
        return self.vertices[-1] if self.vertices else None

    @property
    def num_edges(self) -> int:
        return max(len(self.vertices) - 1, 0)

    def ids(self) -> List[str]:
        return [v.id for v in self.vertices]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices)

    def __str__(self) -> str:
        return "Weight=%f Length=%d visited=%d (%s)" % (
            self.total_weight,
            len(self.vertices),
            len(self.visited),
            ", ".join(self.ids()),
        )
