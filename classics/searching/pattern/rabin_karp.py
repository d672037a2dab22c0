"""Rabin-Karp 字符串匹配算法。"""
from typing import List, Optional, Sequence

from ...config import get_config
from ...template import ProductionAlgorithm
from ._validation import check_inputs
from .comparator import CharacterComparator

# 滚动哈希的模数（梅森素数 2^61 - 1）
MODULUS = (1 << 61) - 1


class RabinKarp(ProductionAlgorithm):
    """Rabin-Karp 算法，用滚动哈希筛选候选窗口，再逐字符确认。

    哈希值为 ``sum(ord(c_i) * base^(m-1-i)) mod MODULUS``，窗口右移一位时
    在 O(1) 时间内更新。base 默认为 113，可以通过全局配置调整。

    时间复杂度: 期望 O(m + n)，最坏 O(mn)
    """

    def __init__(self, base: Optional[int] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base = base or get_config().rabin_karp_base

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

        base = self.base
        # 窗口最高位字符的权重 base^(m-1)
        high = pow(base, m - 1, MODULUS)
        pattern_hash = 0
        text_hash = 0
        for k in range(m):
            pattern_hash = (pattern_hash * base + ord(pattern[k])) % MODULUS
            text_hash = (text_hash * base + ord(text[k])) % MODULUS

        for i in range(n - m + 1):
            if text_hash == pattern_hash:
                j = 0
                while j < m and comparator.compare(text[i + j], pattern[j]) == 0:
                    j += 1
                if j == m:
                    matches.append(i)
            if i < n - m:
                text_hash = (
                    (text_hash - ord(text[i]) * high) * base + ord(text[i + m])
                ) % MODULUS
        return matches


def rabin_karp(
    pattern: Sequence[str], text: Sequence[str], comparator: Optional[CharacterComparator] = None
) -> List[int]:
    return RabinKarp().execute(pattern, text, comparator)
