from typing import Optional, Sequence

from ...exceptions import InvalidArgumentError
from .comparator import CharacterComparator


def check_inputs(
    pattern: Sequence[str], text: Sequence[str], comparator: Optional[CharacterComparator]
) -> CharacterComparator:
    """校验匹配算法的输入，返回要使用的比较器。"""
    if pattern is None or len(pattern) == 0:
        raise InvalidArgumentError("Pattern cannot be None or empty")
    if text is None:
        raise InvalidArgumentError("Text cannot be None")
    return comparator if comparator is not None else CharacterComparator()
