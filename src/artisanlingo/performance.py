# src/artisanlingo/performance.py
"""
Performance monitoring utilities for ArtisanLingo.

Optional timing and memory tracking for translation operations (page
and batch translations), enabled with
``[logging] enable_performance_logging = true``.

Classes:
    PerformanceMonitor: Context manager for tracking operation performance
"""
import logging
import os
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

import psutil

from .config import config

logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """
    Monitor performance metrics during translation operations.

    Tracks execution time and memory usage for operations when enabled.

    Attributes:
        metrics (Dict[str, Any]): Collected performance metrics, keyed by
            operation name (the last run of each operation wins)
        enabled (bool): Whether performance monitoring is active
    """

    def __init__(self, enabled: Optional[bool] = None):
        self.metrics: Dict[str, Any] = {}
        if enabled is None:
            enabled = config.get('logging', 'enable_performance_logging', False)
        self.enabled = enabled

    @contextmanager
    def track_operation(self, operation_name: str):
        """
        Context manager to track operation performance metrics.

        The wrapped block may contain ``await`` expressions; wall time then
        includes time spent suspended.

        Example:
            with performance_monitor.track_operation("translate_page"):
                await context.translate_page(content)
        """
        if not self.enabled:
            yield
            return

        process = psutil.Process(os.getpid())
        start_time = time.perf_counter()
        start_memory = process.memory_info().rss

        try:
            yield
        finally:
            duration = time.perf_counter() - start_time
            memory_delta = process.memory_info().rss - start_memory

            self.metrics[operation_name] = {
                'duration_seconds': duration,
                'memory_delta_bytes': memory_delta,
                'memory_delta_mb': memory_delta / (1024 * 1024)
            }

            logger.info(
                "Performance: %s took %.2fs, memory change: %.2fMB",
                operation_name, duration, memory_delta / (1024 * 1024),
            )

    def get_metrics(self) -> Dict[str, Any]:
        """Return a copy of the collected metrics."""
        return self.metrics.copy()

    def reset(self):
        """Reset performance metrics to start fresh collection."""
        self.metrics.clear()


# Global performance monitor instance
performance_monitor = PerformanceMonitor()
