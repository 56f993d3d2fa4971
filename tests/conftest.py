"""
Shared fixtures for the graph tests.
"""

from dataclasses import dataclass

import pytest

from directed_graph import DirectedGraph
from vertices import Vertex


@dataclass(frozen=True, eq=False)
class Country(Vertex):
    """
    Minimal concrete Vertex keyed by country code.
    """

    code: str

    @property
    def id(self) -> str:
        return self.code


@pytest.fixture
def europe() -> DirectedGraph:
    """
    NL, BE, DE and LUX joined by five two-way connections weighted in km.
    """
    g: DirectedGraph[Country, int] = DirectedGraph()
    g.add_or_get_vertex(Country("NL"))
    g.add_or_get_vertex(Country("BE"))
    g.add_connection("BE", "NL", 100)
    g.add_or_get_vertex(Country("DE"))
    g.add_connection("NL", "DE", 200)
    g.add_connection("BE", "DE", 30)
    g.add_or_get_vertex(Country("LUX"))
    g.add_connection("LUX", "BE", 60)
    g.add_connection("LUX", "DE", 50)
    return g
