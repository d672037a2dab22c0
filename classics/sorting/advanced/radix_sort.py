"""LSD radix sort for integers, including negative values."""
from typing import List

from ...base import Algorithm
from ...exceptions import InvalidArgumentError, require

# 有符号数位 -9..9 对应的桶数
_BUCKETS = 19


class LsdRadixSort(Algorithm):
    """Least-significant-digit radix sort over Python ``int``.

    Every integer is read as signed decimal digits: ``-123`` has digits
    ``-3, -2, -1``. Each pass distributes the values into 19 buckets indexed by
    ``digit + 9`` and collects them back in bucket order. Passes are stable, so
    after ``k`` passes (``k`` = digit count of the largest magnitude) the list is
    sorted, negatives included.

    Digits are taken from ``abs(value)``; Python's floor division on negative
    numbers would otherwise produce digits of the wrong sign.
    """

    def execute(self, data: List[int]) -> List[int]:
        """Return a sorted copy of ``data``.

        Time complexity: O(k * n); space: O(n).
        """
        require(data, "data")
        arr = list(data)
        for value in arr:
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidArgumentError(f"Radix sort only accepts integers, got {value!r}")
        if not arr:
            return arr

        largest = max(abs(value) for value in arr)
        divisor = 1
        while True:
            buckets: List[List[int]] = [[] for _ in range(_BUCKETS)]
            for value in arr:
                digit = abs(value) // divisor % 10
                if value < 0:
                    digit = -digit
                buckets[digit + 9].append(value)
            arr = [value for bucket in buckets for value in bucket]

            divisor *= 10
            if divisor > largest:
                break
        return arr
