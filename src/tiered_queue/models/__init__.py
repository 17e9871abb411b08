# src/tiered_queue/models/__init__.py

"""
Initializes the 'models' sub-package.

Lifts the queue engine to this package level, e.g.:

from tiered_queue.models import PriorityQueue
"""

from .priority_queue import PriorityQueue

__all__ = [
    "PriorityQueue",
]
