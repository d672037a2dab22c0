"""classics 项目级异常处理工具。

本模块定义了数据结构与算法库统一的异常层次结构，以及标准化的
错误记录函数。

异常分类:
    - InvalidArgumentError: 参数缺失、为空或不满足前置条件
    - NotFoundError: 查找、删除等操作要求存在的数据不存在
    - EmptyError: 从空的堆、双端队列或列表中取出元素
    - OutOfBoundsError: 索引越界
    - AlgorithmExecutionError: 算法执行过程中出现的非预期错误

每个异常同时继承一个内置异常类型，调用方既可以按本库的类型捕获，
也可以按 ``ValueError``、``LookupError``、``IndexError`` 捕获。
"""

from __future__ import annotations

import logging
from typing import Optional


class ClassicsError(Exception):
    """classics 库所有自定义异常的基类。"""
    pass


class InvalidArgumentError(ClassicsError, ValueError):
    """参数为 None、为空，或起始顶点不在图中。"""
    pass


class NotFoundError(ClassicsError, LookupError):
    """要求存在的键或数据不存在。"""
    pass


class EmptyError(ClassicsError, IndexError):
    """从空容器中取出元素。"""
    pass


class OutOfBoundsError(ClassicsError, IndexError):
    """索引超出 ``[0, size)``（插入时为 ``[0, size]``）。"""
    pass


class AlgorithmExecutionError(ClassicsError, RuntimeError):
    """算法核心逻辑抛出了非本库定义的异常。"""
    pass


def require(value, name: str) -> None:
    """当 ``value`` 为 None 时抛出 :class:`InvalidArgumentError`。"""
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None")


def log_and_format_exception(
    exc: Exception, logger: Optional[logging.Logger] = None
) -> dict[str, str]:
    """记录异常日志并返回标准化的错误表示。

    参数:
        exc: 要处理的异常对象
        logger: 可选的日志记录器，如果未提供则使用本模块的记录器

    返回:
        dict[str, str]: 包含错误类型和消息的字典
            - error_type: 异常类的名称
            - message: 异常的字符串表示

    使用示例:
        try:
            tree.remove(42)
        except NotFoundError as e:
            error_info = log_and_format_exception(e)
    """
    log = logger or logging.getLogger(__name__)

    # 记录完整的堆栈跟踪
    log.exception("%s: %s", type(exc).__name__, exc)

    return {
        "error_type": type(exc).__name__,
        "message": str(exc),
    }
