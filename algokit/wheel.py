"""Rotations of a lettered wheel needed to print a word."""

from __future__ import annotations

_LETTERS = 26


def wheel_rotations(text: str) -> int:
    """Minimum single-step rotations to print ``text`` on an ``a``-``z`` wheel.

    The pointer starts at ``a`` and may turn either way each time.
    Raises ValueError for anything but lowercase Latin letters.
    """
    position = 0
    total = 0
    for ch in text:
        if not "a" <= ch <= "z":
            raise ValueError(f"unsupported character {ch!r}")
        target = ord(ch) - ord("a")
        forward = (target - position) % _LETTERS
        total += min(forward, _LETTERS - forward)
        position = target
    return total