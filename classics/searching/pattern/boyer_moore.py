"""Boyer-Moore 字符串匹配算法（坏字符规则，以及带 Galil 规则的版本）。"""
from typing import Dict, List, Optional, Sequence

from ...template import ProductionAlgorithm
from ...exceptions import require
from ._validation import check_inputs
from .comparator import CharacterComparator
from .kmp import build_failure_table


def build_last_table(pattern: Sequence[str]) -> Dict[str, int]:
    """返回每个字符在 pattern 中最后一次出现的下标。

    示例:
        >>> build_last_table("abacab")
        {'a': 4, 'b': 5, 'c': 3}
    """
    require(pattern, "pattern")
    return {char: index for index, char in enumerate(pattern)}


class BoyerMoore(ProductionAlgorithm):
    """Boyer-Moore 算法，从模式末尾向前比较，失配时按坏字符规则跳跃。

    时间复杂度: 最好 O(n / m)，最坏 O(mn)
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
        last = build_last_table(pattern)
        matches: List[int] = []
        m, n = len(pattern), len(text)

        i = 0
        while i <= n - m:
            j = m - 1
            while j >= 0 and comparator.compare(pattern[j], text[i + j]) == 0:
                j -= 1
            if j == -1:
                matches.append(i)
                i += 1
                continue
            shift = last.get(text[i + j], -1)
            i += j - shift if shift < j else 1
        return matches


class BoyerMooreGalil(ProductionAlgorithm):
    """带 Galil 规则的 Boyer-Moore 算法。

    找到一次匹配后，窗口按模式的周期 k 前移，并且已知前 m - k 个字符一定匹配，
    下一轮只需比较到下标 m - k 为止。周期由 KMP 失配表得到：
    ``k = m - table[m - 1]``。
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
        if m > n:
            return matches

        last = build_last_table(pattern)
        period = m - build_failure_table(pattern, comparator)[m - 1]

        i = 0
        lower = 0  # 本轮比较的下界
        while i <= n - m:
            j = m - 1
            while j >= lower and comparator.compare(pattern[j], text[i + j]) == 0:
                j -= 1
            if j < lower:
                matches.append(i)
                lower = m - period
                i += period
                continue
            lower = 0
            shift = last.get(text[i + j], -1)
            i += j - shift if shift < j else 1
        return matches


def boyer_moore(
    pattern: Sequence[str], text: Sequence[str], comparator: Optional[CharacterComparator] = None
) -> List[int]:
    return BoyerMoore().execute(pattern, text, comparator)


def boyer_moore_galil(
    pattern: Sequence[str], text: Sequence[str], comparator: Optional[CharacterComparator] = None
) -> List[int]:
    return BoyerMooreGalil().execute(pattern, text, comparator)
