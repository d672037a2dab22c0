"""鸡尾酒排序（双向冒泡排序）算法实现。"""
from ...utils import swap
from ...base import Algorithm
from ...exceptions import require
from typing import Any, Callable, List, Optional


class CocktailSort(Algorithm):
    """使用鸡尾酒排序算法对列表进行排序。

    鸡尾酒排序是冒泡排序的双向版本：每一轮先从左向右把较大的元素
    "冒泡"到右端，再从右向左把较小的元素沉到左端。
    每一趟记录最后一次交换的位置，下一趟只需扫描到那里为止。
    """

    def execute(self, data: List[Any], key: Optional[Callable[[Any], Any]] = None) -> List[Any]:
        """返回数据的排序副本。

        参数:
            data: 待排序的数据列表
            key: 可选的键函数

        返回:
            List[Any]: 排序后的数据副本

        时间复杂度:
            - 最坏情况: O(n^2)
            - 最好情况: O(n) - 已经有序时一趟即可结束
        空间复杂度: O(1)

        算法特点:
            - 稳定排序：相等元素的相对位置不会改变
            - 原地排序：只需要常数额外空间
        """
        require(data, "data")
        arr = list(data)
        key = key or (lambda x: x)
        start = 0
        end = len(arr) - 1

        while start < end:
            last_swap = start
            # 正向扫描：较大的元素移到右侧
            for i in range(start, end):
                if key(arr[i]) > key(arr[i + 1]):
                    swap(arr, i, i + 1)
                    last_swap = i
            end = last_swap

            # 反向扫描：较小的元素移到左侧
            for i in range(end, start, -1):
                if key(arr[i - 1]) > key(arr[i]):
                    swap(arr, i - 1, i)
                    last_swap = i
            start = last_swap

        return arr
