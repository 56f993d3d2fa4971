"""
Road-network route planning on top of DirectedGraph.

Junctions are vertices keyed by name; roads are edge payloads carrying a
length and a speed limit, so the same network can be searched for the
shortest, the fastest or the fewest-junctions route.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from directed_graph import DirectedGraph
from paths import Path
from vertices import Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Junction(Vertex):
    """
    Road junction identified by its name.

    Coordinates do not take part in equality or hashing.
    """
    name: str
    x: float = 0.0
    y: float = 0.0

    @property
    def id(self) -> str:
        return self.name


@dataclass(frozen=True)
class Road:
    """
    Road segment between two junctions.
    """
    length_km: float
    max_speed_kmh: float
    name: str = ""

    def __post_init__(self) -> None:
        if self.max_speed_kmh <= 0:
            raise ValueError(f"max_speed_kmh must be positive, got {self.max_speed_kmh}")
        if self.length_km < 0:
            raise ValueError(f"length_km must not be negative, got {self.length_km}")

    @property
    def travel_time_h(self) -> float:
        """Hours needed to drive the road at its speed limit."""
        return self.length_km / self.max_speed_kmh

    def __str__(self) -> str:
        return self.name or f"{self.length_km:g}km"


def road_length(road: Road) -> float:
    """Weight mapper: distance in kilometres."""
    return road.length_km


def road_travel_time(road: Road) -> float:
    """Weight mapper: travel time in hours."""
    return road.travel_time_h


class RoutePlanner:
    """
    Facade over a DirectedGraph[Junction, Road].
    """

    def __init__(self, graph: Optional[DirectedGraph[Junction, Road]] = None) -> None:
        self.graph: DirectedGraph[Junction, Road] = graph if graph is not None else DirectedGraph()

    def add_junction(self, name: str, x: float = 0.0, y: float = 0.0) -> Junction:
        """Add a junction, or return the existing one with this name."""
        return self.graph.add_or_get_vertex(Junction(name, x, y))

    def add_road(self, a: str, b: str, road: Road, one_way: bool = False) -> bool:
        """
        Connect junctions a and b, adding them if unknown.

        Two-way roads are stored as a connection (one edge per direction).
        Returns whether every requested direction is present.
        """
        ja = self.add_junction(a)
        jb = self.add_junction(b)
        if not one_way:
            return self.graph.add_connection(ja, jb, road)
        if not self.graph.add_edge(ja, jb, road):
            logger.debug("Road %s -> %s already present, kept existing", a, b)
        return self.graph.get_edge(ja, jb) is not None

    def shortest_route(self, start: str, target: str) -> Optional[Path[Junction]]:
        """Route with the least total distance (km)."""
        return self.graph.dijkstra_shortest_path(start, target, road_length)

    def fastest_route(self, start: str, target: str) -> Optional[Path[Junction]]:
        """Route with the least total travel time (hours)."""
        return self.graph.dijkstra_shortest_path(start, target, road_travel_time)

    def fewest_junctions_route(self, start: str, target: str) -> Optional[Path[Junction]]:
        return self.graph.breadth_first_search(start, target)

    def any_route(self, start: str, target: str) -> Optional[Path[Junction]]:
        return self.graph.depth_first_search(start, target)
