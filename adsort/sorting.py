"""Sorting advertisements by view count, in ascending order."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from adsort.ad import Ad


def _views(ad: Ad) -> int:
    return ad.views


def _merge_sorted(items: list[Ad]) -> list[Ad]:
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    left = _merge_sorted(items[:middle])
    right = _merge_sorted(items[middle:])
    # On equal views heapq.merge takes from the left half first, which keeps the sort stable.
    return list(heapq.merge(left, right, key=_views))


def merge_sort(ads: Iterable[Ad]) -> list[Ad]:
    """Return the ads sorted by views, ascending; equal views keep their order."""
    return _merge_sorted(list(ads))


def _partition(items: list[Ad], low: int, high: int) -> int:
    pivot = items[high].views
    boundary = low
    for index in range(low, high):
        if items[index].views <= pivot:
            items[boundary], items[index] = items[index], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(ads: Iterable[Ad]) -> list[Ad]:
    """Return the ads sorted by views, ascending, using quicksort with a last-element pivot."""
    items = list(ads)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(items, low, high)
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))
    return items