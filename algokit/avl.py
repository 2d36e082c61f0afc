"""Self-balancing AVL binary search tree of integer keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_ll(p: _Node) -> _Node:
    pl = p.left
    assert pl is not None
    p.left = pl.right
    pl.right = p
    _refresh(p)
    _refresh(pl)
    return pl


def _rotate_rr(p: _Node) -> _Node:
    pr = p.right
    assert pr is not None
    p.right = pr.left
    pr.left = p
    _refresh(p)
    _refresh(pr)
    return pr


def _rotate_lr(p: _Node) -> _Node:
    pl = p.left
    assert pl is not None and pl.right is not None
    plr = pl.right
    pl.right = plr.left
    p.left = plr.right
    plr.left = pl
    plr.right = p
    _refresh(pl)
    _refresh(p)
    _refresh(plr)
    return plr


def _rotate_rl(p: _Node) -> _Node:
    pr = p.right
    assert pr is not None and pr.left is not None
    prl = pr.left
    pr.left = prl.right
    p.right = prl.left
    prl.right = pr
    prl.left = p
    _refresh(pr)
    _refresh(p)
    _refresh(prl)
    return prl


def _rebalance(p: _Node) -> _Node:
    _refresh(p)
    factor = _balance(p)
    if factor == 2:
        return _rotate_lr(p) if _balance(p.left) == -1 else _rotate_ll(p)
    if factor == -2:
        return _rotate_rl(p) if _balance(p.right) == 1 else _rotate_rr(p)
    return p


def _insert(p: _Node | None, key: int) -> _Node:
    if p is None:
        return _Node(key)
    if key < p.key:
        p.left = _insert(p.left, key)
    elif key > p.key:
        p.right = _insert(p.right, key)
    else:
        return p
    return _rebalance(p)


def _delete(p: _Node | None, key: int) -> _Node | None:
    if p is None:
        return None
    if key < p.key:
        p.left = _delete(p.left, key)
    elif key > p.key:
        p.right = _delete(p.right, key)
    else:
        if p.left is None and p.right is None:
            return None
        if _height(p.left) > _height(p.right):
            q = p.left
            assert q is not None
            while q.right is not None:
                q = q.right
            p.key = q.key
            p.left = _delete(p.left, q.key)
        else:
            q = p.right
            assert q is not None
            while q.left is not None:
                q = q.left
            p.key = q.key
            p.right = _delete(p.right, q.key)
    return _rebalance(p)


def _walk(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _walk(node.left)
        yield node.key
        yield from _walk(node.right)


class AVLTree:
    """AVL tree; duplicate inserts and deletes of absent keys are ignored."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: int) -> None:
        """Insert ``key``, keeping the tree balanced."""
        self._root = _insert(self._root, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present, keeping the tree balanced."""
        self._root = _delete(self._root, key)

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(_walk(self._root))

    def height(self) -> int:
        """Height of the tree; an empty tree has height 0, a single node 1."""
        return _height(self._root)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False