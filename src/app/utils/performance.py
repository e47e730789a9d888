import logging
import time
from typing import Optional

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)

# Prometheus Metrics
TASK_DURATION_SECONDS = Histogram(
    "task_duration_seconds",
    "Time spent performing the task",
    ["task_name"]
)

AUTOSORT_MEDIA_TOTAL = Counter(
    "autosort_media_total",
    "Media items processed by autosort runs",
)


class PerformanceMonitor:
    """Helper to measure wall-clock time of a task and export it to Prometheus."""

    def __init__(self):
        self.start_time = 0.0
        self.end_time = 0.0

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def start(self):
        self.start_time = time.perf_counter()

    def stop(self):
        self.end_time = time.perf_counter()

    @property
    def duration(self):
        return self.end_time - self.start_time

    def report(self, label: str, count: Optional[int] = None) -> str:
        count_str = f" (N={count})" if count is not None else ""
        msg = f"[{label}]{count_str} Time: {self.duration:.4f}s"

        TASK_DURATION_SECONDS.labels(task_name=label).observe(self.duration)
        logger.debug(msg)
        return msg
