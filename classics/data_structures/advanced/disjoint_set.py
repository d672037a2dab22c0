"""Disjoint-set (union-find) with union by rank and path compression."""
from __future__ import annotations

from typing import Any, Dict, Hashable, List

from classics.base import Algorithm
from classics.exceptions import require


class DisjointSet(Algorithm):
    """并查集，维护若干互不相交的等价类。

    每个元素恰好属于一个等价类，``find`` 返回该类的代表元。
    元素在第一次 ``find`` 时隐式创建为单元素集合。

    时间复杂度: find / union 均摊接近 O(1)（反阿克曼函数）。
    """

    def __init__(self) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        self._count = 0

    def make_set(self, item: Hashable) -> None:
        """创建只包含 item 的等价类；item 已存在时不做任何事。"""
        require(item, "item")
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0
            self._count += 1

    def find(self, item: Hashable) -> Hashable:
        """返回 item 所在等价类的代表元，并压缩查找路径。"""
        self.make_set(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # 第二遍把路径上的节点直接挂到根上
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: Hashable, second: Hashable) -> bool:
        """合并两个元素所在的等价类。

        返回:
            bool: 发生了合并返回 True；两者本就在同一类时返回 False
        """
        first_root, second_root = self.find(first), self.find(second)
        if first_root == second_root:
            return False
        if self._rank[first_root] < self._rank[second_root]:
            first_root, second_root = second_root, first_root
        self._parent[second_root] = first_root
        if self._rank[first_root] == self._rank[second_root]:
            self._rank[first_root] += 1
        self._count -= 1
        return True

    def connected(self, first: Hashable, second: Hashable) -> bool:
        return self.find(first) == self.find(second)

    def components(self) -> Dict[Hashable, List[Hashable]]:
        """按代表元分组返回所有等价类。"""
        groups: Dict[Hashable, List[Hashable]] = {}
        for item in list(self._parent):
            groups.setdefault(self.find(item), []).append(item)
        return groups

    @property
    def count(self) -> int:
        """当前等价类的个数。"""
        return self._count

    def __contains__(self, item: Any) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def execute(self, *args, **kwargs) -> Dict[Hashable, List[Hashable]]:
        return self.components()
