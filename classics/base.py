from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """所有算法与数据结构的基类。

    图算法、排序、模式匹配以及各类容器都继承这个类。
    容器的 execute 返回其内容的快照（例如 AVL 的中序遍历），
    算法的 execute 返回计算结果。

    子类必须实现:
        execute: 执行算法并返回结果的抽象方法
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，具体参数取决于算法实现
            **kwargs: 关键字参数，具体参数取决于算法实现

        返回:
            Any: 算法执行的结果，类型取决于具体算法
        """
        raise NotImplementedError
