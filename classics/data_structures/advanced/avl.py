from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from classics.base import Algorithm
from classics.data_structures.basic.deque import LinkedDeque
from classics.exceptions import InvalidArgumentError, NotFoundError, require


@dataclass
class AVLNode:
    """AVL 树节点。

    除了键和左右子节点，每个节点还缓存自身高度和平衡因子。

    属性:
        data: 节点存储的键
        left: 左子节点，不存在时为 None
        right: 右子节点，不存在时为 None
        height: 以该节点为根的子树高度，叶子为 0，空子树记为 -1
        balance_factor: 左子树高度减去右子树高度
    """
    data: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 0
    balance_factor: int = 0


def _height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


class AVL(Algorithm):
    """自平衡二叉搜索树（AVL 树）实现的有序集合。

    每次公开操作之后都满足：
    - 左子树所有键 < 节点键 < 右子树所有键，不存在重复键
    - height = 1 + max(左子树高度, 右子树高度)
    - balance_factor = 左子树高度 - 右子树高度，且 |balance_factor| <= 1

    主要操作：
        - add: 插入键，重复键不做任何事
        - remove: 删除键，双子节点情况使用前驱替换
        - get / contains: 查找
        - predecessor: 严格小于给定键的最大键
        - max_deepest_node: 最深层中最大的键
        - find_path_between: 两个键之间经过最深公共祖先的唯一路径

    时间复杂度:
        - add / remove / get / contains / predecessor: O(log n)
        - height / size: O(1)
        - max_deepest_node: O(log n)
        - 各种遍历: O(n)

    None 键一律抛出 InvalidArgumentError；查找失败抛出 NotFoundError，
    失败的操作不会修改树。
    """

    def __init__(self, data: Optional[Iterable[Any]] = None) -> None:
        """创建空树，或按顺序插入 data 中的所有键。

        异常:
            InvalidArgumentError: data 中含有 None，此时树保持为空
        """
        self._root: Optional[AVLNode] = None
        self._size = 0
        if data is not None:
            items = list(data)
            if any(item is None for item in items):
                raise InvalidArgumentError("Data cannot contain None")
            for item in items:
                self.add(item)

    @property
    def root(self) -> Optional[AVLNode]:
        return self._root

    def add(self, data: Any) -> None:
        """插入键，然后沿递归路径向上更新高度并旋转。

        示例:
            >>> tree = AVL()
            >>> for key in [10, 20, 30]:
            ...     tree.add(key)
            >>> tree.root.data
            20
        """
        require(data, "data")
        self._root = self._add(self._root, data)

    def _add(self, node: Optional[AVLNode], data: Any) -> AVLNode:
        if node is None:
            self._size += 1
            return AVLNode(data)
        if data < node.data:
            node.left = self._add(node.left, data)
        elif data > node.data:
            node.right = self._add(node.right, data)
        else:
            return node  # 重复键
        return self._rebalance(node)

    def remove(self, data: Any) -> Any:
        """删除与 data 相等的键并返回树中存储的那个键。

        三种情况：
        1. 叶子节点：直接删除
        2. 只有一个子节点：用子节点替换
        3. 有两个子节点：用前驱（左子树中的最大键）替换，并在左子树中删除前驱

        异常:
            InvalidArgumentError: data 为 None
            NotFoundError: 树中没有该键
        """
        require(data, "data")
        self._root, removed = self._remove(self._root, data)
        self._size -= 1
        return removed

    def _remove(self, node: Optional[AVLNode], data: Any) -> Tuple[Optional[AVLNode], Any]:
        if node is None:
            raise NotFoundError(f"{data!r} is not in the tree")

        if data < node.data:
            node.left, removed = self._remove(node.left, data)
        elif data > node.data:
            node.right, removed = self._remove(node.right, data)
        else:
            removed = node.data
            if node.left is None:
                return node.right, removed
            if node.right is None:
                return node.left, removed
            node.left, node.data = self._remove_max(node.left)
        return self._rebalance(node), removed

    def _remove_max(self, node: AVLNode) -> Tuple[Optional[AVLNode], Any]:
        """删除子树中的最大键，返回 (新子树, 被删除的键)。"""
        if node.right is None:
            return node.left, node.data
        node.right, predecessor = self._remove_max(node.right)
        return self._rebalance(node), predecessor

    def get(self, data: Any) -> Any:
        """返回树中与 data 相等的键。

        异常:
            NotFoundError: 树中没有该键
        """
        require(data, "data")
        node = self._find(data)
        if node is None:
            raise NotFoundError(f"{data!r} is not in the tree")
        return node.data

    def contains(self, data: Any) -> bool:
        require(data, "data")
        return self._find(data) is not None

    def __contains__(self, data: Any) -> bool:
        return self.contains(data)

    def _find(self, data: Any) -> Optional[AVLNode]:
        node = self._root
        while node is not None:
            if data < node.data:
                node = node.left
            elif data > node.data:
                node = node.right
            else:
                return node
        return None

    def height(self) -> int:
        """返回根节点高度，空树为 -1。"""
        return _height(self._root)

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def predecessor(self, data: Any) -> Optional[Any]:
        """返回严格小于 data 的最大键；不存在更小的键时返回 None。

        如果目标节点有左子树，前驱是左子树中最右的节点；否则前驱是
        查找路径上最后一个“向右走”的祖先。

        示例（树 76 / 34, 90 / 34 的右孩子 40, 90 的左孩子 81）:
            predecessor(76) == 40
            predecessor(81) == 76

        异常:
            NotFoundError: 树中没有 data
        """
        require(data, "data")
        candidate: Optional[AVLNode] = None
        node = self._root
        while node is not None and node.data != data:
            if data < node.data:
                node = node.left
            else:
                candidate = node
                node = node.right

        if node is None:
            raise NotFoundError(f"{data!r} is not in the tree")

        if node.left is not None:
            node = node.left
            while node.right is not None:
                node = node.right
            return node.data
        return None if candidate is None else candidate.data

    def max_deepest_node(self) -> Optional[Any]:
        """返回最深一层中最大的键，空树返回 None。

        由于 |balance_factor| <= 1，只需向更高的子树下降：
        bf > 0 向左，bf < 0 向右，bf == 0 时除非是叶子否则向右。
        """
        node = self._root
        while node is not None:
            if node.balance_factor > 0:
                node = node.left
            elif node.balance_factor < 0 or node.height > 0:
                node = node.right
            else:
                return node.data
        return None

    def find_path_between(self, first: Any, second: Any) -> List[Any]:
        """返回从 first 到 second 的唯一路径（包含两端）。

        先找到两者的最深公共祖先（DCA），再从 DCA 分别走向两个键：
        走向 first 途经的节点依次插到队头，走向 second 途经的节点依次插到队尾，
        整个过程只使用一个 LinkedDeque。

        示例（树 50 / 25, 75 / 12, 37 / 11, 15, 40 / 10）:
            find_path_between(10, 40) == [10, 11, 12, 25, 37, 40]
            find_path_between(75, 75) == [75]

        异常:
            NotFoundError: first 或 second 不在树中
        """
        require(first, "first")
        require(second, "second")

        dca = self._root
        while dca is not None:
            if first < dca.data and second < dca.data:
                dca = dca.left
            elif first > dca.data and second > dca.data:
                dca = dca.right
            else:
                break
        if dca is None:
            raise NotFoundError(f"{first!r} or {second!r} is not in the tree")

        path = LinkedDeque()
        path.add_first(dca.data)
        self._walk_from(dca, first, path.add_first)
        self._walk_from(dca, second, path.add_last)
        return list(path)

    @staticmethod
    def _walk_from(start: AVLNode, data: Any, emit) -> None:
        node = start
        while node is not None:
            if data < node.data:
                node = node.left
            elif data > node.data:
                node = node.right
            else:
                return
            if node is not None:
                emit(node.data)
        raise NotFoundError(f"{data!r} is not in the tree")

    def preorder(self) -> List[Any]:
        result: List[Any] = []
        self._preorder(self._root, result)
        return result

    def _preorder(self, node: Optional[AVLNode], result: List[Any]) -> None:
        if node:
            result.append(node.data)
            self._preorder(node.left, result)
            self._preorder(node.right, result)

    def inorder(self) -> List[Any]:
        """中序遍历，返回按升序排列的所有键。"""
        result: List[Any] = []
        self._inorder(self._root, result)
        return result

    def _inorder(self, node: Optional[AVLNode], result: List[Any]) -> None:
        if node:
            self._inorder(node.left, result)
            result.append(node.data)
            self._inorder(node.right, result)

    def postorder(self) -> List[Any]:
        result: List[Any] = []
        self._postorder(self._root, result)
        return result

    def _postorder(self, node: Optional[AVLNode], result: List[Any]) -> None:
        if node:
            self._postorder(node.left, result)
            self._postorder(node.right, result)
            result.append(node.data)

    def levelorder(self) -> List[Any]:
        """按层从上到下、每层从左到右返回所有键。"""
        result: List[Any] = []
        if self._root is None:
            return result
        queue = LinkedDeque()
        queue.add_last(self._root)
        while not queue.is_empty():
            node = queue.remove_first()
            result.append(node.data)
            if node.left is not None:
                queue.add_last(node.left)
            if node.right is not None:
                queue.add_last(node.right)
        return result

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回树的中序遍历结果。"""
        return self.inorder()

    # 平衡维护 -------------------------------------------------------------
    @staticmethod
    def _update(node: AVLNode) -> None:
        left_height = _height(node.left)
        right_height = _height(node.right)
        node.height = 1 + max(left_height, right_height)
        node.balance_factor = left_height - right_height

    def _rotate_left(self, node: AVLNode) -> AVLNode:
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        self._update(node)
        self._update(pivot)
        return pivot

    def _rotate_right(self, node: AVLNode) -> AVLNode:
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        self._update(node)
        self._update(pivot)
        return pivot

    def _rebalance(self, node: AVLNode) -> AVLNode:
        """重新计算 node 的高度与平衡因子，必要时执行单旋或双旋。"""
        self._update(node)
        if node.balance_factor <= -2:
            if node.right.balance_factor > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        if node.balance_factor >= 2:
            if node.left.balance_factor < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        return node
