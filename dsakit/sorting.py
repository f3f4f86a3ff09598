"""Merge sort and quick sort returning new sorted lists."""

from __future__ import annotations

from typing import Any, Iterable


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items sorted by merge sort."""
    return _merge_sort(list(items))


def _merge_sort(values: list[Any]) -> list[Any]:
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    left = _merge_sort(values[:mid])
    right = _merge_sort(values[mid:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items sorted by quick sort (first element as pivot)."""
    values = list(items)
    _quick_sort(values, 0, len(values) - 1)
    return values


def _partition(values: list[Any], start: int, end: int) -> int:
    pivot = values[start]
    pivot_index = start + sum(1 for value in values[start + 1 : end + 1] if value <= pivot)
    values[pivot_index], values[start] = values[start], values[pivot_index]
    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while i < pivot_index and values[i] <= pivot:
            i += 1
        while j > pivot_index and values[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    return pivot_index


def _quick_sort(values: list[Any], start: int, end: int) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while start < end:
        p = _partition(values, start, end)
        if p - start < end - p:
            _quick_sort(values, start, p - 1)
            start = p + 1
        else:
            _quick_sort(values, p + 1, end)
            end = p - 1