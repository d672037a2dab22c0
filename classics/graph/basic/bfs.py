"""Breadth-first search algorithm."""
from typing import List, Set

from ...data_structures.basic.deque import LinkedDeque
from ...template import ProductionAlgorithm
from ...utils import Graph, Vertex, validate_start


class BreadthFirstSearch(ProductionAlgorithm):
    """广度优先搜索算法实现。

    广度优先搜索（BFS）按层次顺序访问图中的节点：先访问起点，
    再访问所有距离为 1 的邻居，然后是距离为 2 的节点，以此类推。
    同一节点的邻居按邻接表中的顺序访问，因此结果是确定的。

    算法特点：
        - 使用队列（FIFO）来实现，这里用 LinkedDeque 作为队列
        - 按距离递增的顺序访问节点
        - 能找到最短路径（对于无权图）
    """

    def _validate_inputs(self, start: Vertex, graph: Graph) -> None:
        validate_start(start, graph)

    def _execute_core(self, start: Vertex, graph: Graph) -> List[Vertex]:
        """从指定起始顶点开始执行广度优先搜索。

        参数:
            start: 搜索的起始顶点
            graph: 要遍历的图对象

        返回:
            List[Vertex]: 按BFS顺序访问的顶点列表

        时间复杂度: O(V + E) - V为顶点数，E为边数
        空间复杂度: O(V) - 队列和访问标记集合最多存储所有顶点

        算法步骤:
            1. 将起始顶点加入结果与队列，并标记为已访问
            2. 当队列不为空时：
               - 从队列前端取出一个顶点
               - 按邻接表顺序，把未访问的邻居加入结果与队列，并标记为已访问
        """
        adj_list = graph.adj_list
        visited: List[Vertex] = [start]      # 访问顺序
        seen: Set[Vertex] = {start}          # 已访问顶点，避免重复访问
        queue = LinkedDeque()
        queue.add_last(start)

        while not queue.is_empty():
            vertex = queue.remove_first()
            for neighbor in adj_list[vertex]:
                if neighbor.vertex not in seen:
                    seen.add(neighbor.vertex)
                    visited.append(neighbor.vertex)
                    queue.add_last(neighbor.vertex)

        return visited


def bfs(start: Vertex, graph: Graph) -> List[Vertex]:
    """便捷函数：执行广度优先搜索。

    示例:
        >>> graph = Graph.from_edges([("A", "B", 1), ("A", "C", 1)], undirected=False)
        >>> [v.data for v in bfs(Vertex("A"), graph)]
        ['A', 'B', 'C']
    """
    return BreadthFirstSearch().execute(start, graph)
