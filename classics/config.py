"""Library-wide configuration for :mod:`classics`.

The defaults cover the initial capacities of the array-backed containers and
the Rabin-Karp base. A YAML file can override them; nothing is read from disk unless :func:`load_config`
is called explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .exceptions import InvalidArgumentError

LOGGER_NAME = "classics"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ClassicsConfig:
    """Tunables shared by containers, algorithms and the manager.

    Parameters
    ----------
    heap_initial_capacity:
        Length of a fresh :class:`MinHeap` backing list (index 0 unused).
    array_list_initial_capacity:
        Length of a fresh :class:`ArrayList` backing list.
    rabin_karp_base:
        Multiplier of the Rabin-Karp rolling hash.
    enable_metrics:
        Whether :class:`ProductionAlgorithm` and the manager record timings.
    max_metrics_history:
        Number of metric records kept per algorithm by the manager.
    log_level:
        Level applied by :func:`configure_logging` when none is given.
    """

    heap_initial_capacity: int = 13
    array_list_initial_capacity: int = 9
    rabin_karp_base: int = 113
    enable_metrics: bool = True
    max_metrics_history: int = 1000
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.heap_initial_capacity < 2:
            raise InvalidArgumentError("heap_initial_capacity must be at least 2")
        if self.array_list_initial_capacity < 1:
            raise InvalidArgumentError("array_list_initial_capacity must be positive")
        if self.rabin_karp_base < 2:
            raise InvalidArgumentError("rabin_karp_base must be at least 2")
        if self.max_metrics_history < 1:
            raise InvalidArgumentError("max_metrics_history must be positive")


_config: Optional[ClassicsConfig] = None
_logging_configured = False


def get_config() -> ClassicsConfig:
    """Return the process-wide configuration, creating the defaults lazily."""
    global _config
    if _config is None:
        _config = ClassicsConfig()
    return _config


def set_config(config: Optional[ClassicsConfig]) -> None:
    """Replace the process-wide configuration; ``None`` restores the defaults."""
    global _config
    _config = config


def load_config(path: str) -> ClassicsConfig:
    """Load :class:`ClassicsConfig` from a YAML file."""
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"{path} must contain a mapping")

    known = {f.name for f in fields(ClassicsConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgumentError(f"Unknown config keys: {', '.join(unknown)}")
    return ClassicsConfig(**data)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the ``classics`` logger once.

    Library code only creates loggers; output appears after this is called
    (or after the application configures logging itself).
    """
    global _logging_configured

    logger = logging.getLogger(LOGGER_NAME)
    resolved = logging.getLevelName((level or get_config().log_level).upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.WARNING)

    if not _logging_configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _logging_configured = True
    return logger
