"""Dijkstra shortest path algorithm using a priority queue."""
from __future__ import annotations

import sys
from typing import Dict, Set

from ...data_structures.advanced.min_heap import MinHeap
from ...exceptions import InvalidArgumentError
from ...template import ProductionAlgorithm
from ...utils import Graph, Vertex, VertexDistance, validate_start

# 不可达顶点的距离
INFINITY = sys.maxsize


class Dijkstra(ProductionAlgorithm):
    """单源最短路径的 Dijkstra 算法实现。

    该算法使用 MinHeap 作为优先队列处理非负权图，计算源点到图中
    每个顶点的最短距离。不可达顶点的距离为 ``INFINITY``。

    循环在优先队列为空或所有顶点都已访问时结束；重复入队的过期条目
    由已访问集合过滤。多个顶点距离相同时的出队顺序由堆决定，
    但最终距离与出队顺序无关。
    """

    def _validate_inputs(self, start: Vertex, graph: Graph) -> None:
        validate_start(start, graph)
        for edge in graph.edges:
            if edge.weight < 0:
                raise InvalidArgumentError(f"Edge {edge} has a negative weight")

    def _execute_core(self, start: Vertex, graph: Graph) -> Dict[Vertex, int]:
        """计算源点到其他所有顶点的最短距离。

        参数:
            start: 源点
            graph: 非负权图

        返回:
            Dict[Vertex, int]: 每个顶点到源点的最短距离
        """
        adj_list = graph.adj_list
        distances: Dict[Vertex, int] = {
            vertex: INFINITY for vertex in graph.vertices
        }
        distances[start] = 0

        visited: Set[Vertex] = set()
        queue = MinHeap()
        queue.add(VertexDistance(start, 0))

        while not queue.is_empty() and len(visited) < len(graph.vertices):
            current = queue.remove()
            if current.vertex in visited:
                continue  # 过期条目
            visited.add(current.vertex)

            for neighbor in adj_list[current.vertex]:
                new_distance = current.distance + neighbor.distance
                if neighbor.vertex not in visited and new_distance < distances[neighbor.vertex]:
                    distances[neighbor.vertex] = new_distance
                    queue.add(VertexDistance(neighbor.vertex, new_distance))

        return distances


def dijkstras(start: Vertex, graph: Graph) -> Dict[Vertex, int]:
    """便捷函数：计算单源最短路径。"""
    return Dijkstra().execute(start, graph)
