from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from classics.base import Algorithm
from classics.exceptions import EmptyError, NotFoundError, OutOfBoundsError, require


@dataclass
class Node:
    """双向链表节点类。

    属性:
        data: 节点存储的值
        previous: 指向前一个节点的引用，头节点为 None
        next: 指向下一个节点的引用，尾节点为 None
    """
    data: Any
    previous: Optional[Node] = None
    next: Optional[Node] = None


class DoublyLinkedList(Algorithm):
    """带头尾指针的双向链表。

    主要操作：
        - add_at_index / add_to_front / add_to_back: 插入
        - remove_at_index / remove_from_front / remove_from_back: 删除
        - remove_last_occurrence: 删除最后一个与给定值相等的元素
        - get: 按索引访问
        - to_list: 转换为普通列表

    时间复杂度:
        - 两端插入、删除: O(1)
        - 按索引访问、插入、删除: O(min(i, n - i))，从较近的一端开始遍历
        - remove_last_occurrence: O(n)
    """

    def __init__(self) -> None:
        """初始化空链表。"""
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._size = 0

    def add_at_index(self, index: int, data: Any) -> None:
        """在指定索引处插入元素，index 允许等于 size。

        异常:
            OutOfBoundsError: index 不在 [0, size] 内
            InvalidArgumentError: data 为 None
        """
        if index < 0 or index > self._size:
            raise OutOfBoundsError(f"Index {index} is outside [0, {self._size}]")
        require(data, "data")

        if index == 0:
            self.add_to_front(data)
        elif index == self._size:
            self.add_to_back(data)
        else:
            successor = self._node_at(index)
            node = Node(data, previous=successor.previous, next=successor)
            successor.previous.next = node
            successor.previous = node
            self._size += 1

    def add_to_front(self, data: Any) -> None:
        require(data, "data")
        node = Node(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.previous = node
        self.head = node
        self._size += 1

    def add_to_back(self, data: Any) -> None:
        require(data, "data")
        node = Node(data, previous=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def remove_at_index(self, index: int) -> Any:
        """删除并返回指定索引处的元素。

        异常:
            OutOfBoundsError: index 不在 [0, size) 内
        """
        if index < 0 or index >= self._size:
            raise OutOfBoundsError(f"Index {index} is outside [0, {self._size})")
        node = self._node_at(index)
        self._unlink(node)
        return node.data

    def remove_from_front(self) -> Any:
        if self.head is None:
            raise EmptyError("Cannot remove from an empty list")
        return self.remove_at_index(0)

    def remove_from_back(self) -> Any:
        if self.tail is None:
            raise EmptyError("Cannot remove from an empty list")
        return self.remove_at_index(self._size - 1)

    def remove_last_occurrence(self, data: Any) -> Any:
        """从尾部开始查找并删除最后一个等于 data 的元素，返回链表中存储的值。

        异常:
            InvalidArgumentError: data 为 None
            NotFoundError: 链表中没有等于 data 的元素
        """
        require(data, "data")
        current = self.tail
        while current is not None:
            if current.data == data:
                self._unlink(current)
                return current.data
            current = current.previous
        raise NotFoundError(f"{data!r} is not in the list")

    def get(self, index: int) -> Any:
        if index < 0 or index >= self._size:
            raise OutOfBoundsError(f"Index {index} is outside [0, {self._size})")
        return self._node_at(index).data

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self.head = None
        self.tail = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def to_list(self) -> List[Any]:
        """将链表转换为普通列表。"""
        result: List[Any] = []
        current = self.head
        while current is not None:
            result.append(current.data)
            current = current.next
        return result

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回链表中所有元素的列表。"""
        return self.to_list()

    def _node_at(self, index: int) -> Node:
        # 索引位于后半段时从尾部向前走
        if index >= self._size // 2:
            current = self.tail
            for _ in range(self._size - 1 - index):
                current = current.previous
        else:
            current = self.head
            for _ in range(index):
                current = current.next
        return current

    def _unlink(self, node: Node) -> None:
        if node.previous is None:
            self.head = node.next
        else:
            node.previous.next = node.next
        if node.next is None:
            self.tail = node.previous
        else:
            node.next.previous = node.previous
        node.previous = node.next = None
        self._size -= 1
