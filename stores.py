"""
Backing stores for DirectedGraph.

Vertices live in an arena indexed by integer handle, with a key index for
lookups by id. Edges are kept per source handle as an insertion-ordered
mapping of destination handle -> payload, so neighbour iteration order is
the order in which edges were added.
"""

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from exceptions import InvalidVertexError
from vertices import Vertex

V = TypeVar("V", bound=Vertex)
E = TypeVar("E")


class VertexStore(Generic[V]):
    """
    Arena of vertices addressed by integer handle, unique by id.

    Removed slots are left as None so handles held by the edge store never
    shift.
    """

    def __init__(self) -> None:
        self._slots: List[Optional[V]] = []
        self._handles: Dict[str, int] = {}

    def add_or_get(self, vertex: V) -> int:
        """Return the handle of the stored vertex with this id, adding it if new."""
        key = _key_of(vertex)
        handle = self._handles.get(key)
        if handle is None:
            handle = len(self._slots)
            self._slots.append(vertex)
            self._handles[key] = handle
        return handle

    def handle_of(self, key: str) -> Optional[int]:
        return self._handles.get(key)

    def get(self, handle: int) -> V:
        vertex = self._slots[handle]
        if vertex is None:
            raise KeyError(handle)
        return vertex

    def get_by_id(self, key: str) -> Optional[V]:
        handle = self._handles.get(key)
        return None if handle is None else self._slots[handle]

    def remove(self, handle: int) -> V:
        vertex = self.get(handle)
        del self._handles[vertex.id]
        self._slots[handle] = None
        return vertex

    def handles(self) -> Iterator[int]:
        """Live handles in insertion order."""
        return iter(list(self._handles.values()))

    def vertices(self) -> List[V]:
        return [self._slots[h] for h in self._handles.values()]

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, key: object) -> bool:
        return key in self._handles


class EdgeStore(Generic[E]):
    """
    Directed adjacency: source handle -> (destination handle -> payload).
    """

    def __init__(self) -> None:
        self._out: Dict[int, Dict[int, E]] = {}

    def register(self, handle: int) -> None:
        """Ensure handle has an (initially empty) outgoing map."""
        self._out.setdefault(handle, {})

    def add(self, src: int, dst: int, payload: E) -> bool:
        """
        Add src -> dst with payload unless that directed edge already exists.
        """
        out = self._out.setdefault(src, {})
        if dst in out:
            return False
        out[dst] = payload
        return True

    def get(self, src: int, dst: int) -> Optional[E]:
        return self._out.get(src, {}).get(dst)

    def outgoing(self, src: int) -> Dict[int, E]:
        return self._out.get(src, {})

    def out_degree(self, src: int) -> int:
        return len(self._out.get(src, ()))

    def discard_vertex(self, handle: int) -> int:
        """
        Drop every edge leaving or entering handle.

        Returns the number of directed edges removed.
        """
        removed = len(self._out.pop(handle, {}))
        for out in self._out.values():
            if handle in out:
                del out[handle]
                removed += 1
        return removed

    def __len__(self) -> int:
        return sum(len(out) for out in self._out.values())


def _key_of(vertex: Vertex) -> str:
    key = getattr(vertex, "id", None)
    if not isinstance(key, str) or not key:
        raise InvalidVertexError(f"vertex {vertex!r} has no usable string id")
    return key
