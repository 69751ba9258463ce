import collections
import contextlib
import time
from dataclasses import dataclass, field
from typing import Generator

import numpy as np


@dataclass
class Tracker:
    """Session metrics, keyed by "/"-joined scope names."""

    scopes: list[str] = field(default_factory=list)
    metrics: dict[str, list[float]] = field(default_factory=lambda: collections.defaultdict(list))

    @contextlib.contextmanager
    def scope(self, name: str) -> Generator[None, None, None]:
        self.scopes.append(name)
        try:
            yield
        finally:
            self.scopes.pop()

    def metric_key(self, metric_name: str) -> str:
        return "/".join(self.scopes + [metric_name])

    def log_value(self, metric_name: str, value: float | np.float64) -> None:
        self.metrics[self.metric_key(metric_name)].append(float(value))

    def count(self, metric_name: str) -> None:
        self.log_value(metric_name, 1)

    @contextlib.contextmanager
    def timer(self, metric_name: str) -> Generator[None, None, None]:
        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.log_value(metric_name, time.perf_counter() - start_time)

    def report(self) -> dict[str, float]:
        metrics = {}
        for metric_name, values in sorted(self.metrics.items()):
            values = np.asarray(values)
            metrics[f"{metric_name}_mean"] = values.mean().item()
            metrics[f"{metric_name}_sum"] = values.sum().item()
            metrics[f"{metric_name}_max"] = values.max().item()

        return metrics
