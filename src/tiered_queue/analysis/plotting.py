# src/tiered_queue/analysis/plotting.py

"""
Provides optional plotting utilities for inspecting a queue's contents.

This module depends on 'matplotlib' and 'seaborn', which are not part
of the core package's dependencies. They are installed via the
'[analysis]' extra:

    pip install tiered-priority-queue[analysis]

All functions read a `PriorityQueue` without modifying it.
"""

import logging
from itertools import islice
from typing import Optional

# Optional Dependency Handling
try:
    import matplotlib.pyplot as plt
    import matplotlib.axes
    import seaborn as sns
    from matplotlib.ticker import MaxNLocator
except ImportError:
    log = logging.getLogger(__name__)
    log.error("Analysis dependencies (matplotlib, seaborn) not found.")
    log.error("Please install them with: pip install tiered-priority-queue[analysis]")
    raise

from ..constants import Priority, TIER_ORDER
from ..models import PriorityQueue

log = logging.getLogger(__name__)

sns.set_theme(style="whitegrid")


def plot_tier_counts(
    queue: PriorityQueue,
    ax: Optional[matplotlib.axes.Axes] = None
) -> matplotlib.axes.Axes:
    """
    Draws a bar chart of the number of elements in each tier.

    Bars are laid out in service order (high, medium, low).

    Args:
        queue (PriorityQueue): The queue to inspect.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))

    counts = queue.counts()
    if queue.is_empty:
        log.warning("Queue is empty. All tier bars will have zero height.")

    sns.barplot(
        x=[str(priority) for priority in counts],
        y=list(counts.values()),
        color="steelblue",
        ax=ax
    )

    ax.set_title(f"Elements per Priority Tier (total={queue.count})")
    ax.set_xlabel("Priority tier")
    ax.set_ylabel("Elements")
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))

    log.debug(f"Plotted tier counts: {counts}")

    return ax


def plot_service_order(
    queue: PriorityQueue,
    ax: Optional[matplotlib.axes.Axes] = None,
    limit: Optional[int] = None
) -> matplotlib.axes.Axes:
    """
    Generates a step plot of each element's tier, in the order the queue
    would serve them.

    A correct queue always yields a non-increasing staircase: every
    high element precedes every medium one, which precede every low one.

    Args:
        queue (PriorityQueue): The queue to inspect.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.
        limit (Optional[int]): Plot only the first `limit` elements.
            Negative values are treated as 0.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 5))

    if queue.is_empty:
        log.warning("Queue is empty. Nothing to plot.")
        ax.set_title("Service Order (No Data)")
        return ax

    if limit is not None:
        limit = max(limit, 0)

    ordinals = [int(element.priority) for element in islice(queue, limit)]
    positions = range(len(ordinals))

    ax.step(positions, ordinals, where='post')

    ax.set_yticks([int(priority) for priority in TIER_ORDER])
    ax.set_yticklabels([str(priority) for priority in TIER_ORDER])
    ax.set_ylim(int(Priority.LOW) - 0.5, int(Priority.HIGH) + 0.5)
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))

    ax.set_title(f"Service Order (first {len(ordinals)} of {queue.count})")
    ax.set_xlabel("Position in service order")
    ax.set_ylabel("Priority tier")

    log.debug(f"Plotted service order for {len(ordinals)} element(s).")

    return ax
