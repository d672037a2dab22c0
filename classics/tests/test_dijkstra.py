"""Tests for the Dijkstra shortest path algorithm."""
import random

import pytest

from classics.exceptions import InvalidArgumentError
from classics.graph.advanced.dijkstra import INFINITY, Dijkstra, dijkstras
from classics.performance.benchmark_system import DataGenerator
from classics.utils import Graph, Vertex


def test_dijkstra_unreachable_node() -> None:
    graph = Graph.from_edges(
        [("A", "B", 1), ("B", "C", 2), ("A", "C", 5)], vertices=["D"], undirected=False
    )
    distances = dijkstras(Vertex("A"), graph)

    assert {v.data: d for v, d in distances.items()} == {
        "A": 0,
        "B": 1,
        "C": 3,
        "D": INFINITY,
    }


def test_dijkstra_undirected_graph() -> None:
    graph = Graph.from_edges([("A", "B", 1), ("A", "C", 4), ("B", "C", 2), ("B", "D", 5)])
    distances = Dijkstra().execute(Vertex("A"), graph)

    assert distances[Vertex("C")] == 3  # via A -> B -> C
    assert distances[Vertex("D")] == 6  # via A -> B -> D


def test_dijkstra_zero_weights_and_parallel_edges() -> None:
    graph = Graph.from_edges([(1, 2, 0), (1, 2, 7), (2, 3, 0), (1, 3, 4)])
    distances = dijkstras(Vertex(1), graph)
    assert distances == {Vertex(1): 0, Vertex(2): 0, Vertex(3): 0}


def test_dijkstra_rejects_bad_input() -> None:
    graph = Graph.from_edges([("A", "B", 1)])
    with pytest.raises(InvalidArgumentError):
        dijkstras(Vertex("Z"), graph)
    with pytest.raises(InvalidArgumentError):
        dijkstras(None, graph)
    with pytest.raises(InvalidArgumentError):
        dijkstras(Vertex("A"), Graph.from_edges([("A", "B", -1)]))


def _bellman_ford(graph, start):
    distances = {v: INFINITY for v in graph.vertices}
    distances[start] = 0
    for _ in range(len(graph.vertices)):
        for edge in graph.edges:
            if distances[edge.u] != INFINITY and distances[edge.u] + edge.weight < distances[edge.v]:
                distances[edge.v] = distances[edge.u] + edge.weight
    return distances


def test_dijkstra_matches_bellman_ford_on_random_graphs() -> None:
    rng = random.Random(17)
    for _ in range(15):
        triples = [
            (rng.randrange(25), rng.randrange(25), rng.randrange(50))
            for _ in range(rng.randrange(20, 80))
        ]
        graph = Graph.from_edges(triples, vertices=range(25), undirected=rng.random() < 0.5)
        start = Vertex(rng.randrange(25))
        assert dijkstras(start, graph) == _bellman_ford(graph, start)


def test_dijkstra_on_generated_connected_graph() -> None:
    graph = DataGenerator(seed=8).generate_connected_graph(40, extra_edges=60)
    distances = dijkstras(Vertex(0), graph)
    assert INFINITY not in distances.values()
    assert distances == _bellman_ford(graph, Vertex(0))
