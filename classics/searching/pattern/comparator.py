"""Character comparator that counts how many comparisons a matcher performs."""
from __future__ import annotations


class CharacterComparator:
    """Compare two characters and record the number of comparisons made.

    The count lets tests and benchmarks check that a matcher skips as much of
    the text as it should, not only that it finds the right indices.
    """

    def __init__(self) -> None:
        self.comparison_count = 0

    def compare(self, first: str, second: str) -> int:
        """Return a negative number, zero or a positive number like ``cmp``."""
        self.comparison_count += 1
        return ord(first) - ord(second)

    def reset(self) -> None:
        self.comparison_count = 0
