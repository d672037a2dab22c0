import pytest

from classics.data_structures.advanced.min_heap import MinHeap
from classics.exceptions import InvalidArgumentError
from classics.utils import Edge, Graph, Vertex, VertexDistance, swap


def test_vertex_equality_by_label():
    assert Vertex("A") == Vertex("A")
    assert hash(Vertex("A")) == hash(Vertex("A"))
    assert len({Vertex(1), Vertex(1), Vertex(2)}) == 2
    assert repr(Vertex("A")) == "Vertex('A')"


def test_edge_ordering_and_mirror():
    a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
    assert Edge(a, b, 1) < Edge(a, c, 2)
    assert Edge(a, c, 1) < Edge(b, a, 1)
    assert not Edge(a, b, 1) < Edge(a, b, 1)
    assert Edge(a, b, 3).reversed() == Edge(b, a, 3)


def test_vertex_distance_orders_by_distance_only():
    near = VertexDistance(Vertex("z"), 1)
    far = VertexDistance(Vertex("a"), 5)
    assert near < far
    assert VertexDistance(Vertex("a"), 1) != VertexDistance(Vertex("b"), 1)

    heap = MinHeap([far, near])
    assert heap.remove() is near


def test_graph_adjacency_follows_edge_order():
    graph = Graph.from_edges([("A", "B", 1), ("A", "C", 2), ("B", "C", 3)], vertices=["D"])

    assert [vd.vertex.data for vd in graph.adj_list[Vertex("A")]] == ["B", "C"]
    assert [vd.vertex.data for vd in graph.adj_list[Vertex("C")]] == ["A", "B"]
    assert graph.adj_list[Vertex("D")] == []
    assert graph.neighbors(Vertex("Z")) == []
    assert len(graph) == 4
    assert Vertex("D") in graph
    assert len(graph.edges) == 6
    assert repr(graph) == "Graph(|V|=4, |E|=6)"


def test_directed_graph_has_no_mirrors():
    graph = Graph.from_edges([("A", "B", 1)], undirected=False)
    assert graph.edges == (Edge(Vertex("A"), Vertex("B"), 1),)
    assert graph.adj_list[Vertex("B")] == []


def test_graph_rejects_invalid_edges():
    with pytest.raises(InvalidArgumentError):
        Graph([Vertex("A")], [Edge(Vertex("A"), Vertex("B"), 1)])
    with pytest.raises(InvalidArgumentError):
        Graph.from_edges([("A", "B", float("inf"))])
    with pytest.raises(InvalidArgumentError):
        Graph(None, [])


def test_swap():
    items = [1, 2, 3]
    swap(items, 0, 2)
    assert items == [3, 2, 1]
