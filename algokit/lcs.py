"""Length of the longest common subsequence of two strings."""

from __future__ import annotations

from collections.abc import Sequence


def longest_common_subsequence(a: Sequence[object], b: Sequence[object]) -> int:
    """Length of the longest subsequence shared by ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for x in reversed(a):
        current = [0] * (len(b) + 1)
        for j in range(len(b) - 1, -1, -1):
            if x == b[j]:
                current[j] = 1 + previous[j + 1]
            else:
                current[j] = max(current[j + 1], previous[j])
        previous = current
    return previous[0]