"""Benchmark of classic sorting algorithms with operation and timing metrics."""

__version__ = "0.1.0"
__all__ = ["algorithms", "benchmark", "generators", "metrics"]