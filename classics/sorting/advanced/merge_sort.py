"""归并排序算法实现。"""
from ...base import Algorithm
from ...exceptions import require
from typing import Any, Callable, List, Optional


class MergeSort(Algorithm):
    """使用归并排序算法对列表进行排序。

    归并排序是一种高效、稳定的分治排序算法，它将数组分为两半，
    分别排序后再合并。合并时键相等的元素优先取左半部分，从而保持稳定。
    """

    def execute(self, data: List[Any], key: Optional[Callable[[Any], Any]] = None) -> List[Any]:
        """返回数据的排序副本。

        参数:
            data: 待排序的数据列表
            key: 可选的键函数

        返回:
            List[Any]: 排序后的数据副本

        时间复杂度: O(n log n)
        空间复杂度: O(n)
        """
        require(data, "data")
        self._key = key or (lambda x: x)
        return self._merge_sort(list(data))

    def _merge_sort(self, arr: List[Any]) -> List[Any]:
        if len(arr) <= 1:
            return arr
        mid = len(arr) // 2
        left = self._merge_sort(arr[:mid])
        right = self._merge_sort(arr[mid:])
        return self._merge(left, right)

    def _merge(self, left: List[Any], right: List[Any]) -> List[Any]:
        key = self._key
        merged: List[Any] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if key(left[i]) <= key(right[j]):
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged
