"""堆排序算法实现。"""
from ...base import Algorithm
from ...data_structures.advanced.min_heap import MinHeap
from ...exceptions import require
from typing import List, Any


class HeapSort(Algorithm):
    """使用最小堆对列表进行排序。

    先用 Floyd 算法在 O(n) 时间内建立 MinHeap，
    再不断取出堆顶元素，得到升序序列。
    """

    def execute(self, data: List[Any], reverse: bool = False) -> List[Any]:
        """返回数据的排序副本。

        参数:
            data: 待排序的数据列表，元素之间必须可以用 < 比较
            reverse: 是否按降序排序，默认为 False(升序)

        返回:
            List[Any]: 排序后的数据副本

        时间复杂度: O(n log n)
        空间复杂度: O(n) - 堆的底层数组
        """
        require(data, "data")
        heap = MinHeap.build_heap(data)
        arr = [heap.remove() for _ in range(len(heap))]

        if reverse:
            arr.reverse()
        return arr
