# src/tiered_queue/__init__.py

"""
Initializes the 'tiered_queue' package.

This file sets up the package-level logger and "lifts" the
public classes and enums to the top-level namespace, so users can
import them directly, e.g.:

from tiered_queue import PriorityQueue, Priority, PriorityType
"""

import logging

# Setup Package-Level Logger
# A NullHandler keeps the library silent unless the embedding
# application configures logging itself.
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# Lift constants
from .constants import Priority, TIER_ORDER

# Lift the element contract
from .base_element import PriorityType, as_type

# Lift the queue engine from the 'models' sub-package
from .models import PriorityQueue


# Define Public API with __all__
__all__ = [
    # Constants
    "Priority",
    "TIER_ORDER",

    # Element contract
    "PriorityType",
    "as_type",

    # Queue engine
    "PriorityQueue",
]
