"""Memory profiling helpers for comparing lazy and eager iteration."""

import gc
import logging
import os
import time
import tracemalloc
from typing import Callable, Dict, Optional

import psutil

from .protocols import LoggerProtocol


def format_bytes(bytes_value: float) -> str:
    """Format bytes to human-readable format."""
    for unit in ["B", "KB", "MB", "GB"]:
        if abs(bytes_value) < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} TB"


class MemoryProfiler:
    """Tracks elapsed time and memory of a single operation."""

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)

    def profile(self, operation_name: str, operation_func: Callable[[], object]) -> Dict:
        """
        Profile memory usage of an operation.

        Args:
            operation_name: Name of the operation
            operation_func: Zero-argument callable to execute

        Returns:
            Dictionary with timing, tracemalloc and process memory figures
        """
        gc.collect()

        tracemalloc.start()
        try:
            start_time = time.time()
            operation_func()
            elapsed_time = time.time() - start_time
            current_mem, peak_mem = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        process = psutil.Process(os.getpid())
        mem_info = process.memory_info()

        stats = {
            "operation": operation_name,
            "elapsed_time": elapsed_time,
            "current_memory": current_mem,
            "peak_memory": peak_mem,
            "rss": mem_info.rss,
            "vms": mem_info.vms,
            "memory_percent": process.memory_percent(),
        }

        self._logger.info(
            f"{operation_name}: peak {format_bytes(peak_mem)} "
            f"in {elapsed_time:.3f}s"
        )
        return stats
