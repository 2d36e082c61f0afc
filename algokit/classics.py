"""Classic exercises: eight queens, bubble sort, job sequencing and friends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

BOARD_SIZE = 8


def _safe(placed: Sequence[int], column: int) -> bool:
    row = len(placed)
    return all(
        other != column and abs(other - column) != row - r
        for r, other in enumerate(placed)
    )


def _place(placed: list[int]) -> Iterator[tuple[int, ...]]:
    if len(placed) == BOARD_SIZE:
        yield tuple(placed)
        return
    for column in range(1, BOARD_SIZE + 1):
        if _safe(placed, column):
            placed.append(column)
            yield from _place(placed)
            placed.pop()


def eight_queens() -> list[tuple[int, ...]]:
    """Every placement of eight non-attacking queens.

    Each solution gives, row by row, the 1-based column of the queen.
    Solutions come in lexicographic order.
    """
    return list(_place([]))


def bubble_sort(values: Iterable[int]) -> list[int]:
    """A new list with ``values`` in ascending order, sorted by bubble sort."""
    items = list(values)
    size = len(items)
    for step in range(size):
        swapped = False
        for i in range(size - step - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


@dataclass(frozen=True)
class Job:
    """A unit-time job with a deadline and the profit it earns."""

    id: str
    deadline: int
    profit: int


def job_sequence(jobs: Iterable[Job]) -> list[str]:
    """Ids of the jobs chosen to maximise profit, in the order they run.

    Jobs are taken by falling profit, each put in the latest free time
    slot before its deadline; jobs that find no slot are dropped.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    n = len(ordered)
    slots: list[Job | None] = [None] * n
    for job in ordered:
        for slot in range(min(n, job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job.id for job in slots if job is not None]


def count_pairs_with_sum(first: Iterable[int], second: Iterable[int], x: int) -> int:
    """Number of elements of ``second`` that some element of ``first`` adds up to ``x`` with."""
    seen = set(first)
    return sum(1 for value in second if x - value in seen)


def most_water(heights: Sequence[int]) -> int:
    """Largest area held between two of the vertical lines ``heights``."""
    best = 0
    i, j = 0, len(heights) - 1
    while i < j:
        best = max(best, (j - i) * min(heights[i], heights[j]))
        if heights[i] < heights[j]:
            i += 1
        else:
            j -= 1
    return best