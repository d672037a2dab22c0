"""算法的通用数据结构和辅助函数。

本模块提供排序算法使用的元素交换函数，以及图算法共享的
顶点、边、顶点距离和邻接表图结构。
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Hashable, Iterable, List, Tuple

from .exceptions import InvalidArgumentError


def swap(items: List[Any], i: int, j: int) -> None:
    """在列表中原地交换两个元素的位置。

    参数:
        items: 要操作的列表
        i: 第一个元素的索引
        j: 第二个元素的索引

    示例:
        >>> arr = [1, 2, 3]
        >>> swap(arr, 0, 2)
        >>> print(arr)  # [3, 2, 1]
    """
    items[i], items[j] = items[j], items[i]


@dataclass(frozen=True)
class Vertex:
    """图中的顶点。

    两个顶点相等当且仅当它们的标签相等，哈希值同样只由标签决定。

    属性:
        data: 顶点标签，必须可哈希
    """
    data: Hashable

    def __repr__(self) -> str:
        return f"Vertex({self.data!r})"


@dataclass(frozen=True)
class Edge:
    """有向带权边 ``(u, v, weight)``。

    边按权重升序排列；权重相同时按两端标签的 repr 排列，
    保证优先队列中的出队顺序是确定的。无向图中每条边的反向边
    ``(v, u, weight)`` 作为另一条独立的边存在。
    """
    u: Vertex
    v: Vertex
    weight: int

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> Tuple[Any, str, str]:
        return self.weight, repr(self.u.data), repr(self.v.data)

    def reversed(self) -> Edge:
        """返回方向相反、权重相同的边。"""
        return Edge(self.v, self.u, self.weight)


@dataclass(frozen=True)
class VertexDistance:
    """``(vertex, distance)`` 对。

    既用作邻接表中的 ``(邻居, 权重)``，也用作 Dijkstra 优先队列中的元素。
    只按距离比较大小，相等性同时比较两个字段。
    """
    vertex: Vertex
    distance: int

    def __lt__(self, other: VertexDistance) -> bool:
        if not isinstance(other, VertexDistance):
            return NotImplemented
        return self.distance < other.distance


class Graph:
    """使用邻接表表示的不可变带权图。

    属性:
        vertices: 顶点集合
        edges: 按输入顺序保存的边
        adj_list: 顶点到出边 ``VertexDistance`` 列表的映射，列表顺序与边的输入顺序一致，
            BFS 和 DFS 按这个顺序访问邻居

    无向图约定：每条无向边以两个方向的有向边同时出现在 edges 中。
    """

    def __init__(self, vertices: Iterable[Vertex], edges: Iterable[Edge]) -> None:
        if vertices is None or edges is None:
            raise InvalidArgumentError("Vertices and edges cannot be None")

        self._vertices: FrozenSet[Vertex] = frozenset(vertices)
        self._edges: Tuple[Edge, ...] = tuple(edges)
        # 先为每个顶点建立空列表，孤立顶点同样出现在邻接表中
        self._adj_list: Dict[Vertex, List[VertexDistance]] = {
            vertex: [] for vertex in self._vertices
        }

        for edge in self._edges:
            if edge.u not in self._vertices or edge.v not in self._vertices:
                raise InvalidArgumentError(f"Edge {edge} has an endpoint outside the graph")
            if isinstance(edge.weight, float) and not math.isfinite(edge.weight):
                raise InvalidArgumentError(f"Edge {edge} has a non-finite weight")
            self._adj_list[edge.u].append(VertexDistance(edge.v, edge.weight))

    @classmethod
    def from_edges(
        cls,
        triples: Iterable[Tuple[Hashable, Hashable, int]],
        vertices: Iterable[Hashable] = (),
        undirected: bool = True,
    ) -> Graph:
        """由 ``(u, v, weight)`` 三元组构建图。

        参数:
            triples: 边的三元组，u 和 v 是顶点标签
            vertices: 额外的顶点标签（例如孤立顶点）
            undirected: 为 True 时每条边紧跟着加入其反向边

        示例:
            >>> graph = Graph.from_edges([("A", "B", 1), ("B", "C", 2)])
            >>> [vd.vertex.data for vd in graph.adj_list[Vertex("B")]]
            ['A', 'C']
        """
        labels = list(vertices)
        edges: List[Edge] = []
        for u, v, weight in triples:
            edge = Edge(Vertex(u), Vertex(v), weight)
            edges.append(edge)
            if undirected:
                edges.append(edge.reversed())
            labels.extend((u, v))
        return cls((Vertex(label) for label in labels), edges)

    @property
    def vertices(self) -> FrozenSet[Vertex]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def adj_list(self) -> Dict[Vertex, List[VertexDistance]]:
        return self._adj_list

    def neighbors(self, vertex: Vertex) -> List[VertexDistance]:
        """返回指定顶点的出边列表；顶点不存在时返回空列表。"""
        return self._adj_list.get(vertex, [])

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(|V|={len(self._vertices)}, |E|={len(self._edges)})"


def validate_start(start: Vertex, graph: Graph) -> None:
    """图算法共用的输入检查：start 与 graph 不能为 None，且 start 必须在图中。"""
    if start is None:
        raise InvalidArgumentError("Start cannot be None")
    if graph is None:
        raise InvalidArgumentError("Graph cannot be None")
    if start not in graph.vertices:
        raise InvalidArgumentError(f"Start vertex {start!r} is not in the graph")
