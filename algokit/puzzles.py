"""Short puzzle solutions over lists of integers and digit strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_STRIPS = "1234"


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity pulls every cube to the right."""
    return sorted(columns)


def horseshoes_to_buy(colors: Iterable[int]) -> int:
    """Horseshoes to buy so that all of them have different colours."""
    return sum(count - 1 for count in Counter(colors).values())


def untreated_crimes(events: Iterable[int]) -> int:
    """Crimes left untreated.

    A positive event hires that many officers; a negative one is a
    crime, handled by a free officer if there is one.
    """
    untreated = 0
    officers = 0
    for event in events:
        if event < 0:
            if officers == 0:
                untreated += -event
            else:
                officers += event
        else:
            officers += event
    return untreated


def sereja_and_dima(cards: Sequence[int]) -> tuple[int, int]:
    """Scores of Sereja and Dima, who take turns picking the larger end card.

    Sereja moves first; on a tie the left card is taken.
    """
    left, right = 0, len(cards) - 1
    scores = [0, 0]
    turn = 0
    while left <= right:
        if cards[left] >= cards[right]:
            value = cards[left]
            left += 1
        else:
            value = cards[right]
            right -= 1
        scores[turn] += value
        turn ^= 1
    return scores[0], scores[1]


def black_square_calories(costs: Sequence[int], strip: str) -> int:
    """Calories spent touching strips ``1``-``4``; other characters cost nothing."""
    if len(costs) != len(_STRIPS):
        raise ValueError("exactly four costs are required")
    counts = Counter(strip)
    return sum(counts[digit] * cost for digit, cost in zip(_STRIPS, costs))