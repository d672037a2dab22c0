import pytest

from classics.algorithm_manager import (
    AlgorithmCategory,
    AlgorithmConfig,
    AlgorithmManager,
    AlgorithmRegistry,
    execute_algorithm,
    get_algorithm_manager,
    register_algorithm,
)
from classics.base import Algorithm
from classics.config import ClassicsConfig, set_config
from classics.exceptions import InvalidArgumentError, NotFoundError
from classics.utils import Graph, Vertex


class _Doubler(Algorithm):
    def execute(self, data):
        return [item * 2 for item in data]


def test_default_registrations():
    registry = AlgorithmRegistry()
    assert set(registry.list_algorithms(AlgorithmCategory.GRAPH)) == {
        "bfs", "dfs", "dijkstra", "kruskal",
    }
    assert len(registry.list_algorithms(AlgorithmCategory.SORTING)) == 6
    assert len(registry.list_algorithms(AlgorithmCategory.PATTERN_MATCHING)) == 4
    assert len(registry.list_algorithms()) == 14
    assert registry.get_category("kmp") is AlgorithmCategory.PATTERN_MATCHING
    assert registry.get_category("missing") is None


def test_registry_rejects_non_algorithms():
    registry = AlgorithmRegistry()
    with pytest.raises(InvalidArgumentError):
        registry.register("bad", dict, AlgorithmCategory.SORTING)
    with pytest.raises(NotFoundError):
        registry.get_algorithm("missing")


def test_execute_by_name_records_metrics():
    manager = AlgorithmManager()
    assert manager.execute_algorithm("merge_sort", [3, 1, 2]) == [1, 2, 3]
    assert manager.execute_algorithm("kmp", "ab", "abab") == [0, 2]

    graph = Graph.from_edges([("A", "B", 2)])
    distances = manager.execute_algorithm("dijkstra", Vertex("A"), graph)
    assert distances[Vertex("B")] == 2

    metrics = manager.get_metrics("merge_sort")
    assert len(metrics) == 1
    assert metrics[0].success
    assert metrics[0].input_size == 3


def test_failures_are_recorded_and_reraised():
    manager = AlgorithmManager()
    with pytest.raises(InvalidArgumentError):
        manager.execute_algorithm("quick_sort", None)
    with pytest.raises(NotFoundError):
        manager.execute_algorithm("missing")

    summary = manager.get_performance_summary("quick_sort")
    assert summary == {"total_executions": 1, "success_rate": 0.0}
    assert manager.get_metrics("quick_sort")[0].error_message == "data cannot be None"


def test_performance_summary():
    manager = AlgorithmManager()
    assert manager.get_performance_summary("heap_sort") == {}
    for _ in range(3):
        manager.execute_algorithm("heap_sort", [2, 1])
    summary = manager.get_performance_summary("heap_sort")
    assert summary["total_executions"] == 3
    assert summary["successful_executions"] == 3
    assert summary["success_rate"] == 1.0
    assert summary["min_execution_time"] <= summary["avg_execution_time"] <= summary["max_execution_time"]


def test_metrics_history_is_capped():
    set_config(ClassicsConfig(max_metrics_history=2))
    try:
        manager = AlgorithmManager()
        for _ in range(5):
            manager.execute_algorithm("insertion_sort", [1])
        assert len(manager.get_metrics("insertion_sort")) == 2
    finally:
        set_config(None)


def test_metrics_can_be_disabled_per_algorithm():
    manager = AlgorithmManager()
    manager.registry.register(
        "doubler", _Doubler, AlgorithmCategory.SORTING, AlgorithmConfig(enable_metrics=False)
    )
    assert manager.execute_algorithm("doubler", [1, 2]) == [2, 4]
    assert manager.get_metrics("doubler") == []


def test_module_level_helpers():
    register_algorithm("doubler", _Doubler, AlgorithmCategory.SORTING)
    assert execute_algorithm("doubler", [5]) == [10]
    assert get_algorithm_manager() is get_algorithm_manager()
    assert len(get_algorithm_manager().get_metrics("doubler")) >= 1
