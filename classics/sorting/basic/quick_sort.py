"""快速排序算法实现。"""
import random
from ...utils import swap
from ...base import Algorithm
from ...exceptions import require
from typing import Any, Callable, List, Optional


class QuickSort(Algorithm):
    """使用快速排序算法对列表进行排序。

    快速排序是一种高效的分治排序算法。这里随机选择基准元素，
    把它换到区间开头，然后用左右两个指针向中间扫描完成分区。
    传入固定种子的 ``random.Random`` 可以得到可复现的执行过程。
    """

    def execute(
        self,
        data: List[Any],
        key: Optional[Callable[[Any], Any]] = None,
        rand: Optional[random.Random] = None,
    ) -> List[Any]:
        """返回数据的排序副本。

        参数:
            data: 待排序的数据列表
            key: 可选的键函数
            rand: 选择基准元素所用的随机数生成器

        返回:
            List[Any]: 排序后的数据副本

        时间复杂度:
            - 期望: O(n log n)
            - 最坏情况: O(n^2)
        空间复杂度: O(log n) - 期望的递归深度
        """
        require(data, "data")
        arr = list(data)
        self._key = key or (lambda x: x)
        self._rand = rand or random.Random()
        self._quicksort(arr, 0, len(arr) - 1)
        return arr

    def _quicksort(self, arr: List[Any], low: int, high: int) -> None:
        """递归执行快速排序。

        参数:
            arr: 待排序的数组
            low: 排序范围的起始索引
            high: 排序范围的结束索引
        """
        if high - low < 1:
            return
        pivot = self._partition(arr, low, high)
        self._quicksort(arr, low, pivot - 1)
        self._quicksort(arr, pivot + 1, high)

    def _partition(self, arr: List[Any], low: int, high: int) -> int:
        """以随机基准分区，返回基准的最终位置。"""
        key = self._key
        swap(arr, low, self._rand.randint(low, high))
        pivot = key(arr[low])

        i, j = low + 1, high
        while i <= j:
            while i <= j and key(arr[i]) <= pivot:
                i += 1
            while i <= j and key(arr[j]) >= pivot:
                j -= 1
            if i <= j:
                swap(arr, i, j)
                i += 1
                j -= 1

        # 将基准值放到正确的位置
        swap(arr, low, j)
        return j
