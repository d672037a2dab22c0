"""
算法基础模板模块

提供带有输入验证、日志记录和性能统计的算法基类。
图算法、排序算法和模式匹配算法都基于这里的 ProductionAlgorithm 实现。
"""

import logging
import time
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import Algorithm
from .config import LOGGER_NAME, get_config
from .exceptions import AlgorithmExecutionError, ClassicsError


@dataclass
class AlgorithmResult:
    """算法执行结果封装"""
    result: Any
    execution_time: float
    metadata: Optional[Dict[str, Any]] = None
    success: bool = True
    error_message: Optional[str] = None


class ProductionAlgorithm(Algorithm):
    """
    生产级算法基础类

    提供标准的错误处理、日志记录、性能监控等功能。
    子类实现 _execute_core，按需重写 _validate_inputs / _validate_output。
    """

    def __init__(self, enable_logging: bool = True, enable_metrics: Optional[bool] = None):
        """
        初始化生产级算法

        Args:
            enable_logging: 是否启用日志记录
            enable_metrics: 是否启用性能指标收集，默认取全局配置
        """
        self.enable_logging = enable_logging
        self.enable_metrics = (
            get_config().enable_metrics if enable_metrics is None else enable_metrics
        )
        self.logger = (
            logging.getLogger(f"{LOGGER_NAME}.{self.__class__.__name__}")
            if enable_logging
            else None
        )
        self._execution_count = 0
        self._total_execution_time = 0.0

    def execute(self, *args, **kwargs) -> Any:
        """
        执行算法（带监控和错误处理）

        Args:
            *args: 位置参数
            **kwargs: 关键字参数

        Returns:
            算法执行结果

        Raises:
            ClassicsError: 输入无效等本库定义的错误，原样抛出
            AlgorithmExecutionError: 核心逻辑抛出的其他异常
        """
        start_time = time.perf_counter()

        try:
            self._validate_inputs(*args, **kwargs)

            if self.logger:
                self.logger.debug(f"开始执行算法 {self.__class__.__name__}")

            result = self._execute_core(*args, **kwargs)

            self._validate_output(result)

            execution_time = time.perf_counter() - start_time

            if self.enable_metrics:
                self._update_metrics(execution_time)

            if self.logger:
                self.logger.debug(f"算法执行成功，耗时: {execution_time:.4f}s")

            return result

        except ClassicsError as e:
            if self.logger:
                self.logger.error(f"算法执行失败: {e}")
            raise

        except Exception as e:
            execution_time = time.perf_counter() - start_time

            if self.logger:
                self.logger.error(f"算法执行失败: {e}, 耗时: {execution_time:.4f}s")

            raise AlgorithmExecutionError(
                f"算法 {self.__class__.__name__} 执行失败: {e}"
            ) from e

    def run(self, *args, **kwargs) -> AlgorithmResult:
        """执行算法并返回带耗时的 AlgorithmResult，而不是直接抛出异常。"""
        start_time = time.perf_counter()
        try:
            result = self.execute(*args, **kwargs)
        except ClassicsError as e:
            return AlgorithmResult(
                result=None,
                execution_time=time.perf_counter() - start_time,
                success=False,
                error_message=str(e),
            )
        return AlgorithmResult(
            result=result,
            execution_time=time.perf_counter() - start_time,
            metadata={"algorithm_name": self.__class__.__name__},
        )

    @abstractmethod
    def _execute_core(self, *args, **kwargs) -> Any:
        """
        核心算法逻辑实现

        子类必须实现此方法
        """
        pass

    def _validate_inputs(self, *args, **kwargs) -> None:
        """
        输入参数验证

        Raises:
            InvalidArgumentError: 输入参数无效
        """
        pass

    def _validate_output(self, result: Any) -> None:
        """输出结果验证"""
        pass

    def _update_metrics(self, execution_time: float) -> None:
        """更新性能指标"""
        self._execution_count += 1
        self._total_execution_time += execution_time

    def get_performance_stats(self) -> Dict[str, Any]:
        """
        获取性能统计信息

        Returns:
            性能统计字典
        """
        if self._execution_count == 0:
            return {"execution_count": 0}

        return {
            "execution_count": self._execution_count,
            "total_execution_time": self._total_execution_time,
            "average_execution_time": self._total_execution_time / self._execution_count,
            "algorithm_name": self.__class__.__name__
        }
