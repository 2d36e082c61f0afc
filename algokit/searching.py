"""Binary searches over sorted sequences and subset enumeration."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def binary_search(values: Sequence[int], target: int) -> int:
    """Index of some element equal to ``target`` in sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def _last_satisfying(values: Sequence[int], key: int, strict: bool) -> int:
    """Index of the last element ``< key`` (or ``<= key``), -1 if none."""
    n = len(values)
    i = -1
    step = n
    while step >= 1:
        while i + step < n and (values[i + step] < key if strict else values[i + step] <= key):
            i += step
        step //= 2
    return i


def contains(values: Sequence[int], key: int) -> bool:
    """Whether sorted ``values`` holds ``key``."""
    i = _last_satisfying(values, key, strict=False)
    return i >= 0 and values[i] == key


def lower_bound(values: Sequence[int], key: int) -> int:
    """First index whose element is not less than ``key``."""
    return _last_satisfying(values, key, strict=True) + 1


def upper_bound(values: Sequence[int], key: int) -> int:
    """First index whose element is greater than ``key``."""
    return _last_satisfying(values, key, strict=False) + 1


def all_subsets(values: Sequence[T]) -> list[list[T]]:
    """Every subset of ``values``, ordered by bitmask, element ``i`` for bit ``i``."""
    n = len(values)
    return [
        [value for i, value in enumerate(values) if mask >> i & 1]
        for mask in range(1 << n)
    ]