"""Binary and linear search over sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Return an index of ``key`` in the ascending ``items``, or None.

    The midpoint of each range is ``(low + high) // 2``, so among equal
    elements the first one probed at a midpoint is reported.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        probe = items[mid]
        if probe == key:
            return mid
        if key < probe:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Return the index of the first element equal to ``key``, or None."""
    return next((index for index, item in enumerate(items) if item == key), None)