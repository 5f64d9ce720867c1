"""Sorting, searching, fixed-capacity stacks and queues, and binary trees."""

__version__ = "0.1.0"
__all__ = ["queues", "searching", "sorting", "stack", "trees"]