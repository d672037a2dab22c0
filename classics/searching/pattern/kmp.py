"""Knuth-Morris-Pratt 字符串匹配算法。"""
from typing import List, Optional, Sequence

from ...template import ProductionAlgorithm
from ...exceptions import require
from ._validation import check_inputs
from .comparator import CharacterComparator


def build_failure_table(
    pattern: Sequence[str], comparator: Optional[CharacterComparator] = None
) -> List[int]:
    """构建 KMP 失配表。

    table[j] 是 pattern[0..j] 中既是真前缀又是后缀的最长串的长度。

    示例:
        >>> build_failure_table("ababac")
        [0, 0, 1, 2, 3, 0]
    """
    require(pattern, "pattern")
    comparator = comparator or CharacterComparator()
    table = [0] * len(pattern)
    i, j = 0, 1
    while j < len(pattern):
        if comparator.compare(pattern[i], pattern[j]) == 0:
            table[j] = i + 1
            i += 1
            j += 1
        elif i == 0:
            table[j] = 0
            j += 1
        else:
            i = table[i - 1]
    return table


class KnuthMorrisPratt(ProductionAlgorithm):
    """KMP 算法，返回 pattern 在 text 中所有出现位置的起始下标。

    时间复杂度: O(m + n)，m 为模式长度，n 为文本长度
    """

    def _validate_inputs(self, pattern, text, comparator=None) -> None:
        check_inputs(pattern, text, comparator)

    def _execute_core(
        self,
        pattern: Sequence[str],
        text: Sequence[str],
        comparator: Optional[CharacterComparator] = None,
    ) -> List[int]:
        comparator = check_inputs(pattern, text, comparator)
        matches: List[int] = []
        m, n = len(pattern), len(text)
        if n < m:
            return matches

        table = build_failure_table(pattern, comparator)
        i = 0  # 文本中的窗口起点
        j = 0  # 模式中已匹配的长度
        while i + m <= n:
            while j < m and comparator.compare(pattern[j], text[i + j]) == 0:
                j += 1
            if j == 0:
                i += 1
                continue
            if j == m:
                matches.append(i)
            i += j - table[j - 1]
            j = table[j - 1]
        return matches


def kmp(
    pattern: Sequence[str], text: Sequence[str], comparator: Optional[CharacterComparator] = None
) -> List[int]:
    return KnuthMorrisPratt().execute(pattern, text, comparator)
