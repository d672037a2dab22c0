"""基于数组的二叉最小堆。"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from classics.base import Algorithm
from classics.config import get_config
from classics.exceptions import EmptyError, InvalidArgumentError, require
from classics.utils import swap


class MinHeap(Algorithm):
    """使用从 1 开始编号的数组实现的二叉最小堆。

    下标 0 不使用，节点 i 的子节点为 2i 与 2i+1，父节点为 i // 2。
    对所有有效下标满足 ``a[i] <= a[2i]`` 且 ``a[i] <= a[2i+1]``。
    数组满时容量翻倍，删除元素时容量不会缩小。

    元素之间只用 ``<`` 比较。调用方负责不插入重复元素。

    时间复杂度:
        - build_heap: O(n) - Floyd 自底向上建堆
        - add: 均摊 O(log n)
        - remove: O(log n)
        - peek: O(1)

    Dijkstra 和 Kruskal 使用它作为优先队列，HeapSort 用它排序。
    """

    def __init__(
        self,
        data: Optional[Iterable[Any]] = None,
        initial_capacity: Optional[int] = None,
    ) -> None:
        """创建空堆，或者用 data 自底向上建堆。

        参数:
            data: 可选的初始元素，建堆后底层数组长度为 2n+1
            initial_capacity: 空堆的底层数组长度，默认取全局配置

        异常:
            InvalidArgumentError: data 中含有 None
        """
        self._initial_capacity = initial_capacity or get_config().heap_initial_capacity
        if self._initial_capacity < 2:
            raise InvalidArgumentError("initial_capacity must be at least 2")

        if data is None:
            self._backing: List[Any] = [None] * self._initial_capacity
            self._size = 0
            return

        items = list(data)
        if any(item is None for item in items):
            raise InvalidArgumentError("Heap elements cannot be None")

        self._backing = [None] * (2 * len(items) + 1)
        self._backing[1:len(items) + 1] = items
        self._size = len(items)
        for i in range(self._size // 2, 0, -1):
            self._sift_down(i)

    @classmethod
    def build_heap(cls, data: Iterable[Any]) -> MinHeap:
        """用 Floyd 算法在 O(n) 时间内由 data 建堆。"""
        require(data, "data")
        return cls(data)

    def add(self, item: Any) -> None:
        """插入元素，必要时容量翻倍，然后上浮。"""
        require(item, "item")
        if self._size == len(self._backing) - 1:
            self._backing.extend([None] * len(self._backing))
        self._size += 1
        self._backing[self._size] = item
        self._sift_up(self._size)

    def remove(self) -> Any:
        """移除并返回最小元素。

        异常:
            EmptyError: 堆为空
        """
        if self._size == 0:
            raise EmptyError("The heap is empty")
        removed = self._backing[1]
        self._backing[1] = self._backing[self._size]
        self._backing[self._size] = None
        self._size -= 1
        self._sift_down(1)
        return removed

    def peek(self) -> Any:
        """返回最小元素但不移除。"""
        if self._size == 0:
            raise EmptyError("The heap is empty")
        return self._backing[1]

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """清空堆并恢复初始容量。"""
        self._backing = [None] * self._initial_capacity
        self._size = 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Any:
        # 按底层数组下标访问，下标 0 恒为 None
        return self._backing[index]

    @property
    def capacity(self) -> int:
        return len(self._backing)

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回按堆数组顺序排列的元素（不含下标 0）。"""
        return self._backing[1:self._size + 1]

    def _sift_up(self, index: int) -> None:
        while index > 1 and self._backing[index] < self._backing[index // 2]:
            swap(self._backing, index, index // 2)
            index //= 2

    def _sift_down(self, index: int) -> None:
        while 2 * index <= self._size:
            child = 2 * index
            # 选出较小的子节点；相等时取左子节点
            if child + 1 <= self._size and self._backing[child + 1] < self._backing[child]:
                child += 1
            if not self._backing[child] < self._backing[index]:
                break
            swap(self._backing, index, child)
            index = child
