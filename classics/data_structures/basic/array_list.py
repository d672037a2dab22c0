from typing import Any, List, Optional

from classics.base import Algorithm
from classics.config import get_config
from classics.exceptions import EmptyError, OutOfBoundsError, require


class ArrayList(Algorithm):
    """基于定长数组的动态数组。

    底层数组满时容量翻倍，删除元素时容量不会缩小。
    元素始终连续存放在 [0, size) 中，未使用的槽位为 None。

    时间复杂度:
        - add_to_back: 均摊 O(1)
        - add_at_index / remove_at_index: O(n)，需要移动后续元素
        - get: O(1)
    """

    def __init__(self, initial_capacity: Optional[int] = None) -> None:
        self._initial_capacity = initial_capacity or get_config().array_list_initial_capacity
        self._backing: List[Any] = [None] * self._initial_capacity
        self._size = 0

    def add_at_index(self, index: int, data: Any) -> None:
        """在指定索引处插入元素，后续元素整体后移一位。

        异常:
            OutOfBoundsError: index 不在 [0, size] 内
            InvalidArgumentError: data 为 None
        """
        if index < 0 or index > self._size:
            raise OutOfBoundsError(f"Index {index} is outside [0, {self._size}]")
        require(data, "data")

        if self._size == len(self._backing):
            self._backing.extend([None] * len(self._backing))

        for i in range(self._size, index, -1):
            self._backing[i] = self._backing[i - 1]
        self._backing[index] = data
        self._size += 1

    def add_to_front(self, data: Any) -> None:
        self.add_at_index(0, data)

    def add_to_back(self, data: Any) -> None:
        self.add_at_index(self._size, data)

    def remove_at_index(self, index: int) -> Any:
        """删除并返回指定索引处的元素，后续元素整体前移一位。"""
        if index < 0 or index >= self._size:
            raise OutOfBoundsError(f"Index {index} is outside [0, {self._size})")

        removed = self._backing[index]
        for i in range(index, self._size - 1):
            self._backing[i] = self._backing[i + 1]
        self._backing[self._size - 1] = None
        self._size -= 1
        return removed

    def remove_from_front(self) -> Any:
        if self._size == 0:
            raise EmptyError("Cannot remove from an empty list")
        return self.remove_at_index(0)

    def remove_from_back(self) -> Any:
        if self._size == 0:
            raise EmptyError("Cannot remove from an empty list")
        return self.remove_at_index(self._size - 1)

    def get(self, index: int) -> Any:
        if index < 0 or index >= self._size:
            raise OutOfBoundsError(f"Index {index} is outside [0, {self._size})")
        return self._backing[index]

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """清空列表并恢复初始容量。"""
        self._backing = [None] * self._initial_capacity
        self._size = 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._backing)

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回列表内容的快照。"""
        return self._backing[:self._size]
