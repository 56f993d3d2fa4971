"""
Unit tests for the Dijkstra engines using DirectedGraph.
"""

from dataclasses import dataclass
import random

import pytest

from dijkstra_engine import HeapDijkstraEngine, ScanDijkstraEngine, make_dijkstra_engine
from directed_graph import DirectedGraph
from vertices import Vertex


@dataclass(frozen=True, eq=False)
class DummyVertex(Vertex):
    """
    Minimal concrete Vertex implementation for Dijkstra tests.
    """
    _id: str

    @property
    def id(self) -> str:
        return self._id


ENGINES = [HeapDijkstraEngine, ScanDijkstraEngine]


def _triangle(engine) -> DirectedGraph:
    g = DirectedGraph(dijkstra_engine=engine)
    a, b, c = DummyVertex("A"), DummyVertex("B"), DummyVertex("C")
    # A -> B (1), A -> C (4), B -> C (2)
    g.add_edge(a, b, 1.0)
    g.add_edge(a, c, 4.0)
    g.add_edge(b, c, 2.0)
    return g


@pytest.mark.parametrize("engine_cls", ENGINES)
def test_dijkstra_basic_path(engine_cls):
    g = _triangle(engine_cls())

    path = g.dijkstra_shortest_path("A", "C", lambda w: w)

    # Shortest A->C is A->B->C with cost 3.0
    assert path.ids() == ["A", "B", "C"]
    assert path.total_weight == 3.0


@pytest.mark.parametrize("engine_cls", ENGINES)
def test_dijkstra_start_equals_target(engine_cls):
    g = _triangle(engine_cls())

    path = g.dijkstra_shortest_path("B", "B", lambda w: w)

    assert path.ids() == ["B"]
    assert path.total_weight == 0.0
    assert path.visited == {DummyVertex("B")}


@pytest.mark.parametrize("engine_cls", ENGINES)
def test_dijkstra_unreachable_and_unknown(engine_cls):
    g = _triangle(engine_cls())
    g.add_or_get_vertex(DummyVertex("D"))  # unreachable from A

    assert g.dijkstra_shortest_path("A", "D", lambda w: w) is None
    assert g.dijkstra_shortest_path("C", "A", lambda w: w) is None
    assert g.dijkstra_shortest_path("A", "Z", lambda w: w) is None
    assert g.dijkstra_shortest_path("Z", "A", lambda w: w) is None


@pytest.mark.parametrize("engine_cls", ENGINES)
def test_dijkstra_without_mapper_weighs_edges_zero(engine_cls):
    g = _triangle(engine_cls())

    path = g.dijkstra_shortest_path("A", "C")

    assert path.end == DummyVertex("C")
    assert path.total_weight == 0.0


@pytest.mark.parametrize("engine_cls", ENGINES)
def test_dijkstra_europe_constant_weight(europe, engine_cls):
    europe._dijkstra = engine_cls()

    path = europe.dijkstra_shortest_path("NL", "LUX", lambda e: 2.0)

    assert path is not None
    assert path.start == europe.get_vertex_by_id("NL")
    assert path.end == europe.get_vertex_by_id("LUX")
    assert path.total_weight == 4.0
    # BE is discovered before DE, so it wins the tie
    assert path.ids() == ["NL", "BE", "LUX"]


def test_dijkstra_europe_payload_weight(europe):
    path = europe.dijkstra_shortest_path("NL", "LUX", float)

    # NL -> BE (100) -> LUX (60) beats NL -> BE -> DE -> LUX (180)
    assert path.ids() == ["NL", "BE", "LUX"]
    assert path.total_weight == 160.0
    assert {v.id for v in path.visited} == {"NL", "BE", "DE", "LUX"}


def test_dijkstra_improves_discovered_vertex():
    g = DirectedGraph()
    s, a, b, t = (DummyVertex(x) for x in ("S", "A", "B", "T"))
    g.add_edge(s, t, 10.0)
    g.add_edge(s, a, 1.0)
    g.add_edge(a, b, 1.0)
    g.add_edge(b, t, 1.0)

    path = g.dijkstra_shortest_path("S", "T", lambda w: w)

    assert path.ids() == ["S", "A", "B", "T"]
    assert path.total_weight == 3.0


def test_heap_and_scan_engines_agree_on_random_graphs():
    rng = random.Random(7)
    ids = [f"n{i}" for i in range(25)]
    heap_graph = DirectedGraph(dijkstra_engine=HeapDijkstraEngine())
    scan_graph = DirectedGraph(dijkstra_engine=ScanDijkstraEngine())
    for _ in range(80):
        a, b = rng.sample(ids, 2)
        w = rng.randint(1, 5)
        heap_graph.add_edge(DummyVertex(a), DummyVertex(b), w)
        scan_graph.add_edge(DummyVertex(a), DummyVertex(b), w)

    for target in ids[1:]:
        heap_path = heap_graph.dijkstra_shortest_path("n0", target, float)
        scan_path = scan_graph.dijkstra_shortest_path("n0", target, float)
        if heap_path is None:
            assert scan_path is None
            continue
        assert heap_path.ids() == scan_path.ids()
        assert heap_path.total_weight == scan_path.total_weight


def test_dijkstra_weight_not_above_bfs_route_weight():
    rng = random.Random(11)
    ids = [f"n{i}" for i in range(20)]
    g = DirectedGraph()
    for _ in range(60):
        a, b = rng.sample(ids, 2)
        g.add_edge(DummyVertex(a), DummyVertex(b), rng.randint(1, 9))

    for target in ids[1:]:
        bfs = g.breadth_first_search("n0", target)
        dsp = g.dijkstra_shortest_path("n0", target, float)
        if bfs is None:
            assert dsp is None
            continue
        bfs_weight = sum(g.get_edge(a, b) for a, b in zip(bfs.vertices, bfs.vertices[1:]))
        assert dsp.total_weight <= bfs_weight
        assert len(dsp) >= len(bfs)


def test_dijkstra_weight_is_minimal_over_all_simple_paths():
    rng = random.Random(3)
    ids = [f"n{i}" for i in range(7)]
    g = DirectedGraph()
    for _ in range(20):
        a, b = rng.sample(ids, 2)
        g.add_edge(DummyVertex(a), DummyVertex(b), rng.randint(0, 9))

    def all_path_weights(current, target, seen, total):
        if current == target:
            yield total
            return
        for neighbour, w in g.outgoing(g.get_vertex_by_id(current)).items():
            if neighbour.id not in seen:
                yield from all_path_weights(neighbour.id, target, seen | {neighbour.id}, total + w)

    for target in ids[1:]:
        weights = list(all_path_weights("n0", target, {"n0"}, 0))
        path = g.dijkstra_shortest_path("n0", target, float)
        if not weights:
            assert path is None
            continue
        assert path.total_weight == min(weights)
        assert sum(g.get_edge(a, b) for a, b in zip(path.vertices, path.vertices[1:])) == min(weights)


@pytest.mark.parametrize("engine_cls", ENGINES)
def test_weight_mapper_may_search_the_same_engine(engine_cls):
    g = _triangle(engine_cls())
    inner_results = []

    def weight_with_nested_search(w):
        inner_results.append(g.dijkstra_shortest_path("A", "C", lambda x: x))
        return w

    path = g.dijkstra_shortest_path("A", "C", weight_with_nested_search)

    assert path.ids() == ["A", "B", "C"]
    assert path.total_weight == 3.0
    assert all(p.ids() == ["A", "B", "C"] for p in inner_results)


def test_heap_engine_instrumentation():
    engine = HeapDijkstraEngine()
    g = _triangle(engine)

    g.dijkstra_shortest_path("A", "C", lambda w: w)

    assert engine.last_vertices_expanded == 2
    assert engine.last_edges_examined == 3
    assert engine.last_relaxed == 3
    assert engine.last_heap_pushes == 4


def test_make_dijkstra_engine():
    assert isinstance(make_dijkstra_engine("heap"), HeapDijkstraEngine)
    assert isinstance(make_dijkstra_engine("SCAN"), ScanDijkstraEngine)
    with pytest.raises(ValueError):
        make_dijkstra_engine("fibonacci")
