# src/tiered_queue/base_element.py

"""
Defines the element contract for the tiered priority queue.

The queue is polymorphic over its payloads: a single queue may hold
announcements, events and jobs side by side. The only thing it asks
of an element is a readable and writable `.priority` attribute.

This module provides:
- `as_type`, the "view as type T" capability the queue uses for its
  typed retrieval methods. It returns the element itself on a match
  and `None` otherwise, so a type mismatch is an ordinary absence.
- `PriorityType`, an optional convenience base class for payloads.
  Subclassing it is not required; any object with `.priority` works.
"""

from typing import Any, Optional

# Local package imports
from .constants import Priority


def as_type(element: Any, cls) -> Optional[Any]:
    """
    Attempts to view `element` as an instance of `cls`.

    Args:
        element (Any): The candidate element, or None.
        cls: A class, or a tuple of classes, as accepted by `isinstance`.

    Returns:
        Optional[Any]: `element` unchanged if it is an instance of `cls`,
                       otherwise None.
    """
    if element is not None and isinstance(element, cls):
        return element
    return None


class PriorityType:
    """
    Base class for payloads that carry a queue priority.

    Example:

        class Announcement(PriorityType):
            def __init__(self, text, priority=Priority.MEDIUM):
                super().__init__(priority)
                self.text = text
    """

    def __init__(self, priority: Priority = Priority.MEDIUM):
        self.priority: Priority = priority

    def view_as(self, cls) -> Optional[Any]:
        """Returns self if it is an instance of `cls`, otherwise None."""
        return as_type(self, cls)

    def __repr__(self):
        return f"{type(self).__name__}(priority={self.priority})"
