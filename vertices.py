"""
Vertex abstraction for the directed graph.

Concrete vertex types (countries, junctions, test dummies) implement this
interface. Identity is the string key returned by ``id`` and nothing else.
"""

from abc import ABC, abstractmethod


class Vertex(ABC):
    """Abstract graph vertex identified by a stable string key."""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        # Installed on every subclass so a later @dataclass (eq=True by
        # default) finds them in the class dict and leaves them alone.
        cls.__eq__ = Vertex.__eq__
        cls.__hash__ = Vertex.__hash__

    @property
    @abstractmethod
    def id(self) -> str:
        """
        Unique identifying key of this vertex within a graph.
        """
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"
