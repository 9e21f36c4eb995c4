"""Sequential and binary search over sequences."""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

__all__ = ["sequential_search", "binary_search"]


def sequential_search(items, value) -> Optional[int]:
    """Return the position of the first item equal to ``value``, or None."""
    return next(
        (position for position, item in enumerate(items) if item == value),
        None,
    )


def binary_search(items: Sequence[T], value: T) -> Optional[int]:
    """Return a position of ``value`` in the ascending ``items``, or None."""
    low, high = 0, len(items)
    while low < high:
        middle = (low + high) // 2
        if items[middle] == value:
            return middle
        if value < items[middle]:
            high = middle
        else:
            low = middle + 1
    return None