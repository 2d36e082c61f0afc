"""Solutions to a handful of contest problems, plus a Fenwick tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007

_ALPHABET = 26


class FenwickTree:
    """Binary indexed tree over positions ``1..size`` for prefix sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at the 1-based ``index``."""
        if index < 1:
            raise ValueError("index must be at least 1")
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of values at positions ``1..index``."""
        if index >= len(self._tree):
            raise IndexError("index out of range")
        total = 0
        while index >= 1:
            total += self._tree[index]
            index -= index & -index
        return total


def _comes_before(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[1] <= 1 or b[1] > 1


class _SlotHeap:
    """Binary heap ordered by the assignment rule of the styling problem.

    The rule is not a strict ordering, so the exact sift steps of the
    classic array heap are kept to give the same top element.
    """

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def top(self) -> tuple[int, int]:
        return self._items[0]

    def push(self, item: tuple[int, int]) -> None:
        self._items.append(item)
        self._sift_up(len(self._items) - 1, 0, item)

    def pop(self) -> None:
        items = self._items
        if len(items) > 1:
            value = items[-1]
            items[-1] = items[0]
            self._adjust(0, len(items) - 1, value)
        items.pop()

    def _sift_up(self, hole: int, top: int, value: tuple[int, int]) -> None:
        items = self._items
        parent = (hole - 1) // 2
        while hole > top and _comes_before(items[parent], value):
            items[hole] = items[parent]
            hole = parent
            parent = (hole - 1) // 2
        items[hole] = value

    def _adjust(self, hole: int, length: int, value: tuple[int, int]) -> None:
        items = self._items
        top = hole
        child = hole
        while child < (length - 1) // 2:
            child = 2 * (child + 1)
            if _comes_before(items[child], items[child - 1]):
                child -= 1
            items[hole] = items[child]
            hole = child
        if length % 2 == 0 and child == (length - 2) // 2:
            child = 2 * (child + 1)
            items[hole] = items[child - 1]
            hole = child - 1
        self._sift_up(hole, top, value)


def min_extra_changes(initial: Sequence[int], rounds: Iterable[Sequence[int]]) -> int:
    """Count reassignments beyond the first for each slot over all rounds.

    Each slot starts with a value from ``initial``. In every round, slots
    whose value is requested again keep it; the remaining requests go to
    the lowest free slots, each such move counting as a change. The result
    is the sum over slots of changes beyond the first.
    """
    m = len(initial)
    changes = [0] * m
    queues: dict[int, _SlotHeap] = {}
    for index, value in enumerate(initial):
        queues.setdefault(value, _SlotHeap()).push((index, changes[index]))

    for requested in rounds:
        if len(requested) != m:
            raise ValueError("every round must name as many values as there are slots")
        next_queues: dict[int, _SlotHeap] = {}
        free = set(range(m))
        kept = [False] * m
        for value in requested:
            queue = queues.get(value)
            if queue:
                entry = queue.top()
                next_queues.setdefault(value, _SlotHeap()).push(entry)
                free.discard(entry[0])
                kept[entry[0]] = True
                queue.pop()
        free_slots = iter(sorted(free))
        for j, value in enumerate(requested):
            if not kept[j]:
                slot = next(free_slots)
                changes[slot] += 1
                next_queues.setdefault(value, _SlotHeap()).push((slot, changes[slot]))
        queues = next_queues

    return sum(count - 1 for count in changes if count > 1)


def count_right_triangles(points: Sequence[tuple[int, int]]) -> int:
    """Count triangles with legs parallel to the axes among ``points``."""
    x_counts: dict[int, int] = {}
    y_counts: dict[int, int] = {}
    for x, y in points:
        x_counts[x] = x_counts.get(x, 0) + 1
        y_counts[y] = y_counts.get(y, 0) + 1
    return sum((x_counts[x] - 1) * (y_counts[y] - 1) for x, y in points)


def count_non_right_triples(points: Sequence[tuple[int, int]]) -> int:
    """Number of point triples that do not form an axis-aligned right triangle."""
    n = len(points)
    return n * (n - 1) * (n - 2) // 6 - count_right_triangles(points)


def sum_squared_distances(
    first: Sequence[tuple[int, int]], second: Sequence[tuple[int, int]]
) -> int:
    """Sum of squared distances over all pairs across two point sets, mod 1e9+7."""
    n, k = len(first), len(second)
    sq_first = sum(x * x + y * y for x, y in first)
    sq_second = sum(x * x + y * y for x, y in second)
    sx_first = sum(x for x, _ in first)
    sy_first = sum(y for _, y in first)
    sx_second = sum(x for x, _ in second)
    sy_second = sum(y for _, y in second)
    total = (
        k * sq_first
        + n * sq_second
        - 2 * (sx_first * sx_second + sy_first * sy_second)
    )
    return total % MOD


def count_almost_palindromes(text: str, queries: Iterable[tuple[int, int]]) -> int:
    """Count queries whose substring becomes a palindrome after removing one letter.

    Queries are 1-based inclusive ranges. Only odd-length ranges with a
    single odd letter count qualify, and then only when one half of the
    range holds exactly half of the remaining letters.
    """
    prefix = [[0] * _ALPHABET]
    for ch in text:
        code = ord(ch) - ord("a")
        if not 0 <= code < _ALPHABET:
            raise ValueError(f"unsupported character {ch!r}")
        row = prefix[-1].copy()
        row[code] += 1
        prefix.append(row)

    def counts(start: int, stop: int) -> list[int]:
        return [b - a for a, b in zip(prefix[start], prefix[stop])]

    answer = 0
    for left, right in queries:
        if left < 1 or right > len(text):
            raise IndexError("query range out of bounds")
        if left > right:
            raise ValueError("query start after its end")
        lo, hi = left - 1, right - 1
        if (hi - lo) % 2:
            continue
        letters = counts(lo, hi + 1)
        if sum(c % 2 for c in letters) != 1:
            continue
        halves = [(c - c % 2) // 2 for c in letters]
        half = (hi - lo) // 2
        if counts(lo, lo + half) == halves or counts(hi - half + 1, hi + 1) == halves:
            answer += 1
    return answer