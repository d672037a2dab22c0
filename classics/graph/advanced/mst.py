"""Minimum Spanning Tree algorithm using Kruskal's method."""
from __future__ import annotations

from typing import Iterable, Optional, Set

from ...data_structures.advanced.disjoint_set import DisjointSet
from ...data_structures.advanced.min_heap import MinHeap
from ...exceptions import InvalidArgumentError
from ...template import ProductionAlgorithm
from ...utils import Edge, Graph


class KruskalMST(ProductionAlgorithm):
    """基于 Kruskal 算法的最小生成树实现。

    输入是用双向有向边表示的无向图。结果同时包含生成树每条边的两个方向，
    因此连通图的结果大小为 ``2 * (|V| - 1)``。如果图不连通，返回 ``None``。

    自环和平行边会被并查集检查自然排除。只有在最小生成树唯一时结果才与
    堆的出队顺序无关。
    """

    def _validate_inputs(self, graph: Graph) -> None:
        if graph is None:
            raise InvalidArgumentError("Graph cannot be None")

    def _execute_core(self, graph: Graph) -> Optional[Set[Edge]]:
        """计算图的最小生成树。

        参数:
            graph: 无向图，每条边的两个方向都在 edges 中

        返回:
            Optional[Set[Edge]]: 生成树的边（含反向边）；图不连通时为 None
        """
        queue = MinHeap.build_heap(graph.edges)
        components = DisjointSet()
        for vertex in graph.vertices:
            components.make_set(vertex)

        target = 2 * (len(graph.vertices) - 1)
        mst: Set[Edge] = set()
        while len(mst) < target:
            if queue.is_empty():
                if self.logger:
                    self.logger.debug("边已耗尽，图不连通")
                return None
            edge = queue.remove()
            if components.find(edge.u) != components.find(edge.v):
                mst.add(edge)
                mst.add(edge.reversed())
                components.union(edge.u, edge.v)

        return mst


def kruskals(graph: Graph) -> Optional[Set[Edge]]:
    """便捷函数：计算最小生成树，图不连通时返回 None。"""
    return KruskalMST().execute(graph)


def mst_weight(edges: Iterable[Edge]) -> int:
    """返回双向边集合所表示的生成树的总权重（每条无向边只计一次）。"""
    total = sum(edge.weight for edge in edges)
    return total // 2 if isinstance(total, int) else total / 2
