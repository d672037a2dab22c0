"""
算法性能基准测试系统

对排序、图算法等进行多规模、多轮次的计时，并给出汇总统计。
结果只保存在内存中，由调用方决定是否持久化。
"""

import logging
import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ..exceptions import ClassicsError, InvalidArgumentError
from ..utils import Graph


class BenchmarkStatus(Enum):
    """基准测试状态"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    algorithm_name: str
    test_sizes: List[int]
    iterations: int = 3
    warmup_iterations: int = 1
    seed: Optional[int] = None


@dataclass
class PerformanceMetrics:
    """性能指标"""
    algorithm_name: str
    input_size: int
    execution_time: float
    throughput: Optional[float] = None
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

        # 计算吞吐量（每秒处理的元素数）
        if self.throughput is None and self.execution_time > 0:
            self.throughput = self.input_size / self.execution_time


@dataclass
class BenchmarkResult:
    """基准测试结果"""
    config: BenchmarkConfig
    status: BenchmarkStatus
    start_time: str
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """按输入规模分组，返回执行时间与吞吐量的统计量"""
        size_groups: Dict[int, List[PerformanceMetrics]] = {}
        for metric in self.metrics:
            size_groups.setdefault(metric.input_size, []).append(metric)

        summary = {}
        for size, group_metrics in size_groups.items():
            execution_times = [m.execution_time for m in group_metrics]
            throughputs = [m.throughput for m in group_metrics if m.throughput]

            size_summary = {
                "input_size": size,
                "sample_count": len(execution_times),
                "execution_time": _describe(execution_times),
            }
            if throughputs:
                size_summary["throughput"] = _describe(throughputs)

            summary[f"size_{size}"] = size_summary

        return summary


def _describe(values: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.stdev(values) if len(values) > 1 else 0,
        "min": min(values),
        "max": max(values),
    }


class DataGenerator:
    """测试数据生成器，使用可设定种子的 NumPy 随机数生成器"""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def generate_random_integers(
        self, size: int, min_val: int = 0, max_val: Optional[int] = None
    ) -> List[int]:
        """生成 [min_val, max_val) 内的随机整数列表"""
        if max_val is None:
            max_val = max(size * 2, min_val + 1)
        return self.rng.integers(min_val, max_val, size).tolist()

    def generate_signed_integers(self, size: int, magnitude: int = 10_000) -> List[int]:
        """生成正负混合的随机整数，用于基数排序"""
        return self.rng.integers(-magnitude, magnitude + 1, size).tolist()

    def generate_sorted_integers(self, size: int, reverse: bool = False) -> List[int]:
        """生成有序整数列表"""
        data = list(range(size))
        return data[::-1] if reverse else data

    def generate_nearly_sorted(self, size: int, disorder_ratio: float = 0.1) -> List[int]:
        """生成接近有序的数据"""
        data = list(range(size))
        if size < 2:
            return data
        for _ in range(int(size * disorder_ratio)):
            i, j = self.rng.choice(size, 2, replace=False)
            data[i], data[j] = data[j], data[i]
        return data

    def generate_connected_graph(
        self, size: int, extra_edges: int = 0, max_weight: int = 100
    ) -> Graph:
        """生成连通的无向带权图。

        先连一棵随机生成树保证连通，再随机加入 extra_edges 条边
        （可能产生平行边，这对 Dijkstra 和 Kruskal 都是合法输入）。
        """
        if size < 1:
            raise InvalidArgumentError("Graph size must be positive")
        triples = []
        for vertex in range(1, size):
            parent = int(self.rng.integers(0, vertex))
            triples.append((parent, vertex, int(self.rng.integers(0, max_weight + 1))))
        for _ in range(extra_edges if size > 1 else 0):
            u, v = (int(x) for x in self.rng.choice(size, 2, replace=False))
            triples.append((u, v, int(self.rng.integers(0, max_weight + 1))))
        return Graph.from_edges(triples, vertices=range(size))


class PerformanceBenchmark:
    """
    性能基准测试系统

    algorithm_func 接收一份测试数据（整数列表）并返回结果。
    """

    def __init__(self, seed: Optional[int] = None):
        self.logger = logging.getLogger(__name__)
        self.data_generator = DataGenerator(seed)

    def run_benchmark(self, algorithm_func: Callable, config: BenchmarkConfig) -> BenchmarkResult:
        """
        运行基准测试

        Args:
            algorithm_func: 算法函数
            config: 测试配置

        Returns:
            测试结果；算法抛出本库异常时状态为 FAILED
        """
        if config.seed is not None:
            self.data_generator = DataGenerator(config.seed)

        result = BenchmarkResult(
            config=config,
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat()
        )

        try:
            self.logger.info(f"开始基准测试: {config.algorithm_name}")

            for size in config.test_sizes:
                test_data = self.data_generator.generate_random_integers(size)

                for _ in range(config.warmup_iterations):
                    algorithm_func(list(test_data))

                for _ in range(config.iterations):
                    result.metrics.append(self._measure_performance(
                        algorithm_func, test_data, config.algorithm_name, size
                    ))

            result.status = BenchmarkStatus.COMPLETED
            self.logger.info(f"基准测试完成: {config.algorithm_name}")

        except ClassicsError as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            self.logger.error(f"基准测试失败: {config.algorithm_name} - {e}")

        finally:
            result.end_time = datetime.now().isoformat()

        return result

    def run_comparative_benchmark(self, algorithms: Dict[str, Callable],
                                  test_sizes: List[int], iterations: int = 3,
                                  seed: Optional[int] = None) -> Dict[str, BenchmarkResult]:
        """
        运行对比基准测试，所有算法使用同一个种子生成的数据

        Args:
            algorithms: 算法字典 {名称: 函数}
            test_sizes: 测试数据大小列表
            iterations: 迭代次数
            seed: 数据种子

        Returns:
            测试结果字典
        """
        return {
            name: self.run_benchmark(algorithm_func, BenchmarkConfig(
                algorithm_name=name,
                test_sizes=test_sizes,
                iterations=iterations,
                seed=seed,
            ))
            for name, algorithm_func in algorithms.items()
        }

    def _measure_performance(self, algorithm_func: Callable, test_data: List[int],
                             algorithm_name: str, input_size: int) -> PerformanceMetrics:
        """测量性能指标"""
        # 复制数据以避免原地修改影响下一轮
        data_copy = list(test_data)

        start_time = time.perf_counter()
        algorithm_func(data_copy)
        execution_time = time.perf_counter() - start_time

        return PerformanceMetrics(
            algorithm_name=algorithm_name,
            input_size=input_size,
            execution_time=execution_time
        )
