"""
算法管理器 - 算法注册、执行和性能统计

提供统一的按名称调用接口：所有图算法、排序算法和模式匹配算法
在这里注册，执行时记录耗时、成功与否和输入规模。
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .base import Algorithm
from .config import get_config
from .exceptions import InvalidArgumentError, NotFoundError
from .graph.advanced.dijkstra import Dijkstra
from .graph.advanced.mst import KruskalMST
from .graph.basic.bfs import BreadthFirstSearch
from .graph.basic.dfs import DepthFirstSearch
from .searching.pattern.boyer_moore import BoyerMoore, BoyerMooreGalil
from .searching.pattern.kmp import KnuthMorrisPratt
from .searching.pattern.rabin_karp import RabinKarp
from .sorting.advanced.heap_sort import HeapSort
from .sorting.advanced.merge_sort import MergeSort
from .sorting.advanced.radix_sort import LsdRadixSort
from .sorting.basic.cocktail_sort import CocktailSort
from .sorting.basic.insertion_sort import InsertionSort
from .sorting.basic.quick_sort import QuickSort


class AlgorithmCategory(Enum):
    """算法分类枚举"""
    GRAPH = "graph"
    SORTING = "sorting"
    PATTERN_MATCHING = "pattern_matching"


@dataclass
class AlgorithmMetrics:
    """算法执行指标"""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None


@dataclass
class AlgorithmConfig:
    """单个算法的配置"""
    enable_metrics: bool = True  # 是否启用指标收集


class AlgorithmRegistry:
    """算法注册表"""

    def __init__(self):
        self._algorithms: Dict[str, Type[Algorithm]] = {}
        self._categories: Dict[str, AlgorithmCategory] = {}
        self._configs: Dict[str, AlgorithmConfig] = {}
        self._register_default_algorithms()

    def _register_default_algorithms(self) -> None:
        """注册默认算法"""
        # 图算法
        self.register("bfs", BreadthFirstSearch, AlgorithmCategory.GRAPH)
        self.register("dfs", DepthFirstSearch, AlgorithmCategory.GRAPH)
        self.register("dijkstra", Dijkstra, AlgorithmCategory.GRAPH)
        self.register("kruskal", KruskalMST, AlgorithmCategory.GRAPH)

        # 排序算法
        self.register("insertion_sort", InsertionSort, AlgorithmCategory.SORTING)
        self.register("cocktail_sort", CocktailSort, AlgorithmCategory.SORTING)
        self.register("quick_sort", QuickSort, AlgorithmCategory.SORTING)
        self.register("merge_sort", MergeSort, AlgorithmCategory.SORTING)
        self.register("heap_sort", HeapSort, AlgorithmCategory.SORTING)
        self.register("radix_sort", LsdRadixSort, AlgorithmCategory.SORTING)

        # 模式匹配算法
        self.register("kmp", KnuthMorrisPratt, AlgorithmCategory.PATTERN_MATCHING)
        self.register("boyer_moore", BoyerMoore, AlgorithmCategory.PATTERN_MATCHING)
        self.register("boyer_moore_galil", BoyerMooreGalil, AlgorithmCategory.PATTERN_MATCHING)
        self.register("rabin_karp", RabinKarp, AlgorithmCategory.PATTERN_MATCHING)

    def register(self, name: str, algorithm_class: Type[Algorithm],
                 category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
        """
        注册算法

        Args:
            name: 算法名称
            algorithm_class: 算法类
            category: 算法分类
            config: 算法配置
        """
        if not isinstance(algorithm_class, type) or not issubclass(algorithm_class, Algorithm):
            raise InvalidArgumentError(f"算法类 {algorithm_class} 必须继承自 Algorithm")

        self._algorithms[name] = algorithm_class
        self._categories[name] = category
        self._configs[name] = config or AlgorithmConfig()

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise NotFoundError(f"未找到算法: {name}")
        return self._algorithms[name]

    def get_category(self, name: str) -> Optional[AlgorithmCategory]:
        """获取算法分类"""
        return self._categories.get(name)

    def get_config(self, name: str) -> AlgorithmConfig:
        """获取算法配置"""
        return self._configs.get(name, AlgorithmConfig())

    def list_algorithms(self, category: Optional[AlgorithmCategory] = None) -> List[str]:
        """列出算法"""
        if category is None:
            return list(self._algorithms.keys())
        return [name for name, cat in self._categories.items() if cat == category]


class AlgorithmManager:
    """
    算法管理器

    按名称执行已注册的算法并记录执行指标。所有执行都是同步的。
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.registry = AlgorithmRegistry()
        self._metrics_history: Dict[str, List[AlgorithmMetrics]] = {}

    def execute_algorithm(self, algorithm_name: str, *args, **kwargs) -> Any:
        """
        执行算法

        Args:
            algorithm_name: 算法名称
            *args: 算法参数
            **kwargs: 算法关键字参数

        Returns:
            算法执行结果

        Raises:
            NotFoundError: 算法不存在
            Exception: 算法执行错误，原样抛出
        """
        algorithm_class = self.registry.get_algorithm(algorithm_name)
        config = self.registry.get_config(algorithm_name)
        record = config.enable_metrics and get_config().enable_metrics

        start_time = time.perf_counter()

        try:
            result = algorithm_class().execute(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            if record:
                self._record_metrics(algorithm_name, AlgorithmMetrics(
                    execution_time=execution_time,
                    success=False,
                    error_message=str(e),
                    input_size=self._estimate_input_size(args, kwargs)
                ))
            self.logger.error(f"算法 {algorithm_name} 执行失败: {e}")
            raise

        execution_time = time.perf_counter() - start_time
        if record:
            self._record_metrics(algorithm_name, AlgorithmMetrics(
                execution_time=execution_time,
                success=True,
                input_size=self._estimate_input_size(args, kwargs)
            ))

        self.logger.info(f"算法 {algorithm_name} 执行成功，耗时: {execution_time:.4f}s")
        return result

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        """获取算法执行指标"""
        return self._metrics_history.get(algorithm_name, [])

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """
        获取算法性能摘要

        Args:
            algorithm_name: 算法名称

        Returns:
            性能摘要字典，没有执行记录时为空字典
        """
        metrics = self.get_metrics(algorithm_name)
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times)
        }

    def _estimate_input_size(self, args: tuple, kwargs: dict) -> Optional[int]:
        """估算输入数据大小：所有带长度的参数的长度之和"""
        total_size = 0
        for value in list(args) + list(kwargs.values()):
            try:
                total_size += len(value)
            except TypeError:
                continue
        return total_size if total_size > 0 else None

    def _record_metrics(self, algorithm_name: str, metrics: AlgorithmMetrics) -> None:
        """记录算法执行指标"""
        history = self._metrics_history.setdefault(algorithm_name, [])
        history.append(metrics)

        # 限制历史记录数量
        max_history = get_config().max_metrics_history
        if len(history) > max_history:
            self._metrics_history[algorithm_name] = history[-max_history:]


# 全局算法管理器实例
_algorithm_manager = None


def get_algorithm_manager() -> AlgorithmManager:
    """获取全局算法管理器实例"""
    global _algorithm_manager
    if _algorithm_manager is None:
        _algorithm_manager = AlgorithmManager()
    return _algorithm_manager


def execute_algorithm(algorithm_name: str, *args, **kwargs) -> Any:
    """便捷函数：执行算法"""
    return get_algorithm_manager().execute_algorithm(algorithm_name, *args, **kwargs)


def register_algorithm(name: str, algorithm_class: Type[Algorithm],
                       category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
    """便捷函数：注册算法"""
    get_algorithm_manager().registry.register(name, algorithm_class, category, config)
