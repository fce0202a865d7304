"""Binary search helpers: bounds, peaks, partitioning, gaps, k-th values and windows."""

__version__ = "0.1.0"
__all__ = ["allocation", "gaps", "kth", "searching", "windows"]