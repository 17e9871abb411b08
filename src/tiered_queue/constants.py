# src/tiered_queue/constants.py

"""
Defines the priority enumeration used across the tiered queue.

A queue element is classified into exactly one of three tiers. The
integer value of each member doubles as the tier ordinal, so the
natural comparison operators give the ranking:

    Priority.LOW < Priority.MEDIUM < Priority.HIGH
"""

from enum import IntEnum


class Priority(IntEnum):
    """
    The fixed, totally ordered set of priority tiers.

    Elements with a higher priority are always served before elements
    with a lower one, regardless of insertion time.
    """

    LOW = 0
    MEDIUM = 1
    HIGH = 2

    def __str__(self) -> str:
        return self.name.lower()


# The order in which tiers are scanned when serving or searching.
TIER_ORDER = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)
