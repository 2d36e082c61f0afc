"""Huffman coding with an explicit binary min-heap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

INTERNAL_SYMBOL = "$"


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry ``$`` as symbol."""

    symbol: str
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _MinHeap:
    """1-based array heap keyed on frequency."""

    def __init__(self, nodes: list[HuffmanNode]) -> None:
        self._items: list[HuffmanNode | None] = [None, *nodes]
        for i in range(len(self) // 2, 0, -1):
            self._heapify(i)

    def __len__(self) -> int:
        return len(self._items) - 1

    def _freq(self, i: int) -> int:
        node = self._items[i]
        assert node is not None
        return node.freq

    def _heapify(self, i: int) -> None:
        n = len(self)
        while True:
            smallest = i
            left, right = 2 * i, 2 * i + 1
            if left <= n and self._freq(smallest) > self._freq(left):
                smallest = left
            if right <= n and self._freq(smallest) > self._freq(right):
                smallest = right
            if smallest == i:
                return
            items = self._items
            items[smallest], items[i] = items[i], items[smallest]
            i = smallest

    def push(self, node: HuffmanNode) -> None:
        self._items.append(node)
        x = len(self)
        parent = x // 2
        items = self._items
        while parent >= 1 and self._freq(parent) > self._freq(x):
            items[parent], items[x] = items[x], items[parent]
            x = parent
            parent = x // 2

    def pop(self) -> HuffmanNode:
        items = self._items
        smallest = items[1]
        items[1] = items[-1]
        items.pop()
        if len(self) > 0:
            self._heapify(1)
        assert smallest is not None
        return smallest


def build_huffman_tree(symbols: Iterable[tuple[str, int]]) -> HuffmanNode:
    """Build the Huffman tree for ``(symbol, frequency)`` pairs.

    The two least frequent subtrees are merged repeatedly, the first
    extracted becoming the left child. Raises ValueError for no symbols.
    """
    leaves = [HuffmanNode(symbol, freq) for symbol, freq in symbols]
    if not leaves:
        raise ValueError("at least one symbol is required")
    heap = _MinHeap(leaves)
    for _ in range(len(leaves) - 1):
        x = heap.pop()
        y = heap.pop()
        heap.push(HuffmanNode(INTERNAL_SYMBOL, x.freq + y.freq, x, y))
    return heap.pop()


def _codes(node: HuffmanNode, prefix: str) -> Iterator[tuple[str, str]]:
    if node.is_leaf:
        yield node.symbol, prefix
    if node.left is not None:
        yield from _codes(node.left, prefix + "0")
    if node.right is not None:
        yield from _codes(node.right, prefix + "1")


def huffman_codes(symbols: Iterable[tuple[str, int]]) -> dict[str, str]:
    """Map each symbol to its code, left edges ``0``, right edges ``1``."""
    return dict(_codes(build_huffman_tree(symbols), ""))