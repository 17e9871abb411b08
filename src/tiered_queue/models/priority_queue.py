# src/tiered_queue/models/priority_queue.py

"""
Implements the three-tier priority queue engine.

This module provides the `PriorityQueue` class. Instead of a binary
heap over arbitrary weights, it keeps one `collections.deque` per
`Priority` member and always serves from the highest non-empty tier.
Within a tier, elements are served in insertion order (FIFO), unless
the caller deliberately places an element with `insert(..., index=)`.

**Element Contract:**
Elements processed by this queue *must* have a `.priority` attribute
holding a `Priority` (or an int that converts to one). Nothing else
about the payload is inspected; a single queue may hold several
unrelated payload types at once.

**Absence is not an error:**
Every retrieval or removal that finds nothing (empty queue, no match,
wrong type, invalid index) returns `None` (or `False` for `discard`).
Only genuine contract violations, such as an element without
`.priority`, raise.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterable, Iterator, List, Optional

# Local package imports
from ..base_element import as_type
from ..constants import Priority, TIER_ORDER

# Set up the module-level logger
log = logging.getLogger(__name__)


class PriorityQueue:
    """
    A prioritized collection of heterogeneous elements.

    Elements are ranked into three tiers (high, medium, low). The
    topmost element is the head of the highest-priority non-empty tier.
    Elements of equal priority keep their relative order, so the queue
    is FIFO within a tier but not across tiers.

    The queue is a plain in-memory structure with no internal locking.
    Callers sharing an instance between threads must guard every call
    with their own lock.
    """

    def __init__(self, elements: Optional[Iterable[Any]] = None):
        """
        Initializes an empty queue, optionally pre-populated.

        Args:
            elements (Optional[Iterable[Any]]): Elements to add, in order,
                                                as if by `add_all`.
        """
        # One deque per tier, keyed by the Priority member. A deque gives
        # O(1) removal from the head, which `pop` relies on.
        self.tiers: Dict[Priority, Deque[Any]] = {
            priority: deque() for priority in Priority
        }

        if elements is not None:
            self.add_all(elements)

        log.info(f"PriorityQueue initialized: Count={self.count}")

    # --- Size ---

    @property
    def count(self) -> int:
        """Total number of elements across all tiers."""
        return sum(len(tier) for tier in self.tiers.values())

    @property
    def is_empty(self) -> bool:
        """True if every tier is empty."""
        return not any(self.tiers.values())

    def counts(self) -> Dict[Priority, int]:
        """
        Returns the number of elements per tier, in service order
        (high, medium, low).
        """
        return {priority: len(self.tiers[priority]) for priority in TIER_ORDER}

    # --- Add / Insert ---

    def add(self, element: Any) -> None:
        """Appends `element` to the tail of the tier matching its priority."""
        self.insert(element)

    def add_all(self, elements: Iterable[Any]) -> None:
        """
        Adds every element of `elements` in iteration order.

        The net effect is an in-order append per tier.
        """
        for element in elements:
            self.insert(element)

    def insert(self, element: Any, index: Optional[int] = None) -> None:
        """
        Inserts an element at a position within its priority tier.

        The index is clamped rather than rejected:
        - No index, or an index >= the tier length, appends to the tail.
        - A negative index inserts at the head (position 0). Negative
          indices do NOT count from the end.

        Explicit positions deliberately override FIFO order within the
        tier.

        Args:
            element (Any): The element to insert. Must have `.priority`.
            index (Optional[int]): Position within the element's tier.

        Raises:
            AttributeError: If the element has no `.priority` attribute.
            ValueError: If `.priority` is not a valid Priority.
        """
        priority = self._priority_of(element)
        tier = self.tiers[priority]

        if index is None or index >= len(tier):
            tier.append(element)
            position = len(tier) - 1
        else:
            position = max(index, 0)
            tier.insert(position, element)

        log.debug("Inserted %r into %s tier at index %d (tier size=%d).",
                  element, priority, position, len(tier))

    # --- Peek ---

    def peek(self) -> Optional[Any]:
        """
        Returns the topmost element without removing it.

        Returns:
            Optional[Any]: The head of the highest non-empty tier, or
                           None if the queue is empty.
        """
        for priority in TIER_ORDER:
            tier = self.tiers[priority]
            if tier:
                return tier[0]
        return None

    def peek_as(self, cls) -> Optional[Any]:
        """
        Returns the topmost element only if it is an instance of `cls`.

        Returns None if the queue is empty or the topmost element is of
        another type. Never mutates the queue.
        """
        return as_type(self.peek(), cls)

    # --- Retrieve ---

    def pop(self) -> Optional[Any]:
        """
        Removes and returns the topmost element.

        Returns:
            Optional[Any]: The element `peek()` would have returned, or
                           None if the queue is empty.
        """
        for priority in TIER_ORDER:
            tier = self.tiers[priority]
            if tier:
                element = tier.popleft()
                log.debug("Popped %r from %s tier (remaining=%d).",
                          element, priority, self.count)
                return element
        return None

    def pop_as(self, cls) -> Optional[Any]:
        """
        Removes and returns the topmost element if it is an instance of
        `cls`.

        Note: on a type mismatch the topmost element is NOT removed and
        None is returned.
        """
        if self.peek_as(cls) is None:
            return None
        return self.pop()

    def discard(self) -> bool:
        """
        Removes the topmost element, if any.

        Returns:
            bool: True if an element was removed, False if the queue
                  was empty.
        """
        if self.is_empty:
            return False
        self.pop()
        return True

    def items_of(self, priority: Priority) -> List[Any]:
        """Returns a copy of the tier for `priority`, in order."""
        return list(self._tier(priority))

    # --- Remove ---

    def clear(self) -> None:
        """Removes every element from every tier."""
        for tier in self.tiers.values():
            tier.clear()
        log.debug("Cleared all tiers.")

    def remove_all_of(self, priority: Priority) -> List[Any]:
        """
        Empties the tier for `priority`.

        Returns:
            List[Any]: The removed elements, in their prior order.
        """
        tier = self._tier(priority)
        removed = list(tier)
        tier.clear()
        log.debug("Removed %d element(s) from %s tier.",
                  len(removed), Priority(priority))
        return removed

    def remove_where(self, priority: Priority,
                     predicate: Callable[[Any], bool]) -> Optional[Any]:
        """
        Removes the first element of one tier that satisfies `predicate`.

        Prefer this over `remove_first_where` when the priority of the
        wanted element is known; only one tier is scanned.

        Args:
            priority (Priority): The tier to scan, head to tail.
            predicate (Callable[[Any], bool]): Called with each candidate;
                returns True for a match. It must not modify the
                queue while the tier is being scanned; doing so raises
                RuntimeError from the underlying deque.

        Returns:
            Optional[Any]: The removed element, or None if nothing matched.
        """
        return self._remove_first(self._coerce(priority), predicate)

    def remove_first_where(
        self, predicate: Callable[[Any], bool]
    ) -> Optional[Any]:
        """
        Removes the first element, in service order, that satisfies
        `predicate`.

        Tiers are scanned high, then medium, then low, each from head
        to tail.

        The predicate must not modify the queue while it is being
        scanned; doing so raises RuntimeError from the underlying deque.

        Returns:
            Optional[Any]: The removed element, or None if nothing matched.
        """
        for priority in TIER_ORDER:
            element = self._remove_first(priority, predicate)
            if element is not None:
                return element
        return None

    def remove(self, element: Any) -> Optional[Any]:
        """
        Removes the first stored element equal to `element`.

        The tier is selected from `element.priority`, so the lookup only
        scans that tier. A candidate matches if it is an instance of
        `type(element)` and compares equal to it.

        Returns:
            Optional[Any]: The stored element that was removed, or None
                           if no equal element was found.
        """
        priority = self._priority_of(element)
        cls = type(element)
        return self._remove_first(
            priority,
            lambda candidate: isinstance(candidate, cls) and candidate == element
        )

    def remove_at(self, index: int, priority: Priority) -> Optional[Any]:
        """
        Removes the element at `index` within the tier for `priority`.

        An index outside `[0, len(tier))` returns None and leaves the
        tier untouched.
        """
        tier = self._tier(priority)
        if not self._valid_index(tier, index):
            return None
        return self._pop_at(tier, index, priority)

    def remove_at_as(self, index: int, priority: Priority,
                     cls) -> Optional[Any]:
        """
        Removes the element at `index` within the tier for `priority`,
        but only if it is an instance of `cls`.

        Note: if the index is valid but the element is of another type,
        the element is NOT removed and None is returned.
        """
        tier = self._tier(priority)
        if not self._valid_index(tier, index):
            return None
        if as_type(tier[index], cls) is None:
            return None
        return self._pop_at(tier, index, priority)

    # --- Python protocols ---

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Any]:
        """Iterates over all elements in service order without removing them."""
        for priority in TIER_ORDER:
            yield from self.tiers[priority]

    def __contains__(self, element: Any) -> bool:
        return any(candidate is element or candidate == element
                   for candidate in self)

    def __str__(self) -> str:
        return f"Queue with {self.count} item(s)"

    def __repr__(self) -> str:
        counts = self.counts()
        return (f"<PriorityQueue: {counts[Priority.HIGH]} high, "
                f"{counts[Priority.MEDIUM]} medium and "
                f"{counts[Priority.LOW]} low priority item(s) queued>")

    # --- Internal helpers ---

    def _priority_of(self, element: Any) -> Priority:
        """Reads and validates the `.priority` attribute of an element."""
        try:
            priority = element.priority
        except AttributeError:
            log.exception("Element %r does not have a '.priority' attribute. "
                          "Cannot process in PriorityQueue.", element)
            raise
        return self._coerce(priority)

    @staticmethod
    def _coerce(priority: Any) -> Priority:
        try:
            return Priority(priority)
        except ValueError:
            log.error("%r is not a valid Priority (expected one of %s).",
                      priority, [p.name for p in Priority])
            raise

    def _tier(self, priority: Any) -> Deque[Any]:
        return self.tiers[self._coerce(priority)]

    @staticmethod
    def _valid_index(tier: Deque[Any], index: int) -> bool:
        return 0 <= index < len(tier)

    def _pop_at(self, tier: Deque[Any], index: int, priority: Any) -> Any:
        element = tier[index]
        del tier[index]
        log.debug("Removed %r from %s tier at index %d.",
                  element, Priority(priority), index)
        return element

    def _remove_first(self, priority: Priority,
                      predicate: Callable[[Any], bool]) -> Optional[Any]:
        """Removes the first element of a tier matching `predicate`."""
        tier = self.tiers[priority]
        for index, candidate in enumerate(tier):
            if predicate(candidate):
                # Iteration stops here, so deleting from the deque is safe.
                return self._pop_at(tier, index, priority)
        return None
