"""Depth-first search algorithm."""
from typing import Dict, List, Set

from ...template import ProductionAlgorithm
from ...utils import Graph, Vertex, VertexDistance, validate_start


class DepthFirstSearch(ProductionAlgorithm):
    """深度优先搜索算法实现。

    深度优先搜索（DFS）沿着一条路径一直走到底，然后回溯到上一个节点，
    继续探索其他未访问的路径。这里使用递归的先序访问：先记录当前顶点，
    再按邻接表顺序递归访问每个未访问的邻居。

    递归深度最多为可达顶点数。
    """

    def _validate_inputs(self, start: Vertex, graph: Graph) -> None:
        validate_start(start, graph)

    def _execute_core(self, start: Vertex, graph: Graph) -> List[Vertex]:
        """从指定起始顶点开始执行深度优先搜索。

        参数:
            start: 搜索的起始顶点
            graph: 要遍历的图对象

        返回:
            List[Vertex]: 按DFS顺序访问的顶点列表

        时间复杂度: O(V + E)
        空间复杂度: O(V) - 需要存储访问状态和递归调用栈
        """
        visited: List[Vertex] = []
        seen: Set[Vertex] = set()
        self._dfs(graph.adj_list, start, visited, seen)
        return visited

    def _dfs(
        self,
        adj_list: Dict[Vertex, List[VertexDistance]],
        vertex: Vertex,
        visited: List[Vertex],
        seen: Set[Vertex],
    ) -> None:
        """深度优先搜索的递归实现。

        参数:
            adj_list: 图的邻接表
            vertex: 当前访问的顶点
            visited: 按访问顺序存储顶点的列表
            seen: 已访问顶点的集合
        """
        seen.add(vertex)
        visited.append(vertex)

        for neighbor in adj_list[vertex]:
            if neighbor.vertex not in seen:
                self._dfs(adj_list, neighbor.vertex, visited, seen)


def dfs(start: Vertex, graph: Graph) -> List[Vertex]:
    """便捷函数：执行深度优先搜索。"""
    return DepthFirstSearch().execute(start, graph)
