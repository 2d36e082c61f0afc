"""Suffix arrays by prefix doubling, LCP arrays and substring counting."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence

TERMINATOR = "$"

_Entry = tuple[tuple[int, int], int]


def _check(text: str) -> None:
    for ch in text:
        if ch <= TERMINATOR:
            raise ValueError(f"character {ch!r} does not sort after {TERMINATOR!r}")


def _assign_classes(order: Sequence[int], keys: Sequence[object]) -> list[int]:
    """Equivalence classes of positions listed in sorted ``order``."""
    classes = [0] * len(order)
    for prev, cur in zip(order, order[1:]):
        classes[cur] = classes[prev] + (keys[cur] != keys[prev])
    return classes


def _counting_pass(items: list[_Entry], key: Callable[[_Entry], int]) -> list[_Entry]:
    counts = [0] * len(items)
    for item in items:
        counts[key(item)] += 1
    positions = [0] * len(items)
    for i in range(1, len(items)):
        positions[i] = positions[i - 1] + counts[i - 1]
    result: list[_Entry | None] = [None] * len(items)
    for item in items:
        slot = key(item)
        result[positions[slot]] = item
        positions[slot] += 1
    return result  # type: ignore[return-value]


def _radix_sort(items: list[_Entry]) -> list[_Entry]:
    """Stable two-pass counting sort on the class pair; classes lie in ``0..n-1``."""
    by_second = _counting_pass(items, lambda item: item[0][1])
    return _counting_pass(by_second, lambda item: item[0][0])


def _build(text: str, sorter: Callable[[list[_Entry]], list[_Entry]]) -> tuple[list[int], list[int]]:
    _check(text)
    s = text + TERMINATOR
    n = len(s)
    order = sorted(range(n), key=lambda i: (s[i], i))
    classes = _assign_classes(order, s)
    shift = 1
    while shift < n:
        entries = [((classes[i], classes[(i + shift) % n]), i) for i in range(n)]
        entries = sorter(entries)
        order = [i for _, i in entries]
        pairs = {i: pair for pair, i in entries}
        classes = _assign_classes(order, [pairs[i] for i in range(n)])
        shift *= 2
    return order, classes


def suffix_array(text: str) -> list[int]:
    """Start positions of the suffixes of ``text + "$"`` in sorted order."""
    return _build(text, sorted)[0]


def suffix_array_radix(text: str) -> list[int]:
    """Same as :func:`suffix_array`, sorting each round with a radix sort."""
    return _build(text, _radix_sort)[0]


def lcp_array(text: str) -> list[int]:
    """Longest common prefix of each sorted suffix with the one before it.

    Element ``i`` belongs to the suffix at rank ``i + 1`` of
    ``suffix_array(text)``; the result has ``len(text)`` elements.
    """
    order, rank = _build(text, _radix_sort)
    s = text + TERMINATOR
    n = len(s)
    lcp = [0] * n
    k = 0
    for i in range(n - 1):
        pos = rank[i]
        j = order[pos - 1]
        while s[i + k] == s[j + k]:
            k += 1
        lcp[pos] = k
        k = max(k - 1, 0)
    return lcp[1:]


def count_occurrences(text: str, pattern: str) -> int:
    """Number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    _check(pattern)
    suffixes = suffix_array(text)[1:]
    m = len(pattern)

    def prefix(start: int) -> str:
        return text[start : start + m]

    low = bisect_left(suffixes, pattern, key=prefix)
    high = bisect_right(suffixes, pattern, key=prefix)
    return high - low