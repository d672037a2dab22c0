from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from classics.base import Algorithm
from classics.exceptions import EmptyError, require


@dataclass
class LinkedNode:
    """双端队列节点，同时持有前驱与后继引用。"""
    data: Any
    previous: Optional[LinkedNode] = None
    next: Optional[LinkedNode] = None


class LinkedDeque(Algorithm):
    """基于双向链表的双端队列。

    两端的插入、删除和查看都是 O(1)。BFS 把它当作先进先出队列使用，
    AVL 的层序遍历和路径查找也依赖它。

    主要操作：
        - add_first / add_last: 在队头 / 队尾插入
        - remove_first / remove_last: 从队头 / 队尾移除
        - get_first / get_last: 查看队头 / 队尾元素但不移除

    空队列上的移除和查看会抛出 EmptyError，插入 None 会抛出 InvalidArgumentError。
    """

    def __init__(self) -> None:
        """初始化空双端队列。"""
        self.head: Optional[LinkedNode] = None
        self.tail: Optional[LinkedNode] = None
        self._size = 0

    def add_first(self, data: Any) -> None:
        """在队头插入元素。

        示例:
            >>> deque = LinkedDeque()
            >>> deque.add_first(1)
            >>> deque.add_first(0)
            >>> deque.get_first()  # 返回 0
        """
        require(data, "data")
        node = LinkedNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.previous = node
        self.head = node
        self._size += 1

    def add_last(self, data: Any) -> None:
        """在队尾插入元素。"""
        require(data, "data")
        node = LinkedNode(data, previous=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def remove_first(self) -> Any:
        """移除并返回队头元素。"""
        if self.head is None:
            raise EmptyError("Cannot remove from an empty deque")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.previous = None
        self._size -= 1
        return node.data

    def remove_last(self) -> Any:
        """移除并返回队尾元素。"""
        if self.tail is None:
            raise EmptyError("Cannot remove from an empty deque")
        node = self.tail
        self.tail = node.previous
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        self._size -= 1
        return node.data

    def get_first(self) -> Any:
        if self.head is None:
            raise EmptyError("The deque is empty")
        return self.head.data

    def get_last(self) -> Any:
        if self.tail is None:
            raise EmptyError("The deque is empty")
        return self.tail.data

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回从队头到队尾的元素快照。"""
        return list(self)
