import itertools
import random

import pytest

from classics.data_structures.advanced.disjoint_set import DisjointSet
from classics.exceptions import InvalidArgumentError
from classics.graph.advanced.mst import KruskalMST, kruskals, mst_weight
from classics.performance.benchmark_system import DataGenerator
from classics.utils import Edge, Graph, Vertex

EDGES = [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("A", "C", 4), ("B", "D", 5)]


def _undirected(edges):
    return {frozenset((e.u.data, e.v.data)) for e in edges}


def test_kruskal_unique_mst():
    mst = kruskals(Graph.from_edges(EDGES))

    assert len(mst) == 6
    assert _undirected(mst) == {frozenset("AB"), frozenset("BC"), frozenset("CD")}
    assert mst_weight(mst) == 6
    for edge in mst:
        assert edge.reversed() in mst


def test_kruskal_without_cheapest_link_to_d():
    edges = [e for e in EDGES if e[:2] != ("C", "D")]
    mst = KruskalMST().execute(Graph.from_edges(edges))

    assert _undirected(mst) == {frozenset("AB"), frozenset("BC"), frozenset("BD")}
    assert mst_weight(mst) == 8


def test_kruskal_disconnected_graph_returns_none():
    edges = [e for e in EDGES if "D" not in e[:2]]
    assert kruskals(Graph.from_edges(edges, vertices=["D"])) is None


def test_kruskal_trivial_graphs():
    assert kruskals(Graph([], [])) == set()
    assert kruskals(Graph([Vertex("A")], [])) == set()


def test_kruskal_ignores_self_loops_and_parallel_edges():
    graph = Graph.from_edges([(1, 1, 0), (1, 2, 3), (1, 2, 2), (2, 3, 1)])
    mst = kruskals(graph)
    assert mst == {
        Edge(Vertex(1), Vertex(2), 2),
        Edge(Vertex(2), Vertex(1), 2),
        Edge(Vertex(2), Vertex(3), 1),
        Edge(Vertex(3), Vertex(2), 1),
    }


def test_kruskal_rejects_none():
    with pytest.raises(InvalidArgumentError):
        kruskals(None)


def _brute_force_weight(graph):
    vertices = list(graph.vertices)
    undirected = [e for e in graph.edges if repr(e.u.data) <= repr(e.v.data)]
    best = None
    for subset in itertools.combinations(undirected, len(vertices) - 1):
        ds = DisjointSet()
        for vertex in vertices:
            ds.make_set(vertex)
        if all(ds.union(e.u, e.v) for e in subset):
            weight = sum(e.weight for e in subset)
            best = weight if best is None else min(best, weight)
    return best


def test_kruskal_optimal_on_random_graphs():
    rng = random.Random(9)
    for _ in range(10):
        weights = rng.sample(range(1, 100), 9)
        pairs = rng.sample(list(itertools.combinations(range(6), 2)), 9)
        graph = Graph.from_edges(
            [(u, v, w) for (u, v), w in zip(pairs, weights)], vertices=range(6)
        )
        mst = kruskals(graph)
        expected = _brute_force_weight(graph)
        if expected is None:
            assert mst is None
            continue

        assert len(mst) == 2 * (len(graph.vertices) - 1)
        assert mst_weight(mst) == expected
        ds = DisjointSet()
        for edge in mst:
            ds.union(edge.u, edge.v)
        assert ds.count == 1


def test_kruskal_spans_generated_graph():
    graph = DataGenerator(seed=21).generate_connected_graph(50, extra_edges=100)
    mst = kruskals(graph)
    assert len(mst) == 2 * 49
    assert {e.u for e in mst} == graph.vertices
