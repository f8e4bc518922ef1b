"""Binary search, sliding windows and peak search over unimodal functions."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from collections.abc import Callable, Iterable, Sequence


def upper_bound(values: Sequence, target) -> int:
    """Index of the first element of sorted ``values`` greater than ``target``.

    Returns ``len(values)`` when no element is greater.
    """
    return bisect_right(values, target)


def max_window_sum(items: Iterable[tuple[int, int]], width: int) -> int:
    """Largest total weight of items whose positions span less than ``width``.

    ``items`` are ``(position, weight)`` pairs sorted by position.  A window
    holds the items whose positions differ from the newest one by less than
    ``width``.  The result is never below zero.
    """
    if width <= 0:
        raise ValueError(f"window width must be positive, got {width}")
    window: deque[tuple[int, int]] = deque()
    total = 0
    best = 0
    for position, weight in items:
        window.append((position, weight))
        total += weight
        while position - window[0][0] >= width:
            _, dropped = window.popleft()
            total -= dropped
        best = max(best, total)
    return best


def peak_search(func: Callable[[int], int], low: int, high: int):
    """Maximum of a unimodal ``func`` over the integers ``low..high``.

    Compares neighbouring values to decide which side the peak lies on,
    keeping the best value seen.  ``func`` is never called outside the range.
    """
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    best = None
    left, right = low, high
    while left <= right:
        mid = (left + right) // 2
        here = func(mid)
        if mid + 1 > high:
            best = here if best is None else max(best, here)
            right = mid - 1
            continue
        after = func(mid + 1)
        if here >= after:
            best = here if best is None else max(best, here)
            right = mid - 1
        else:
            best = after if best is None else max(best, after)
            left = mid + 1
    return best