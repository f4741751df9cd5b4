"""An ordered map on an unbalanced binary search tree, and a k-th largest tracker."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    key: int
    value: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class TreeMap:
    """A map from integer keys to integer values, kept in key order."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def _find(self, key: int) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: int, val: int) -> None:
        """Map ``key`` to ``val``, replacing any value it already had."""
        self._root = self._insert(self._root, key, val)

    def _insert(self, node: Optional[_Node], key: int, val: int) -> _Node:
        if node is None:
            return _Node(key, val)
        if key < node.key:
            node.left = self._insert(node.left, key, val)
        elif key > node.key:
            node.right = self._insert(node.right, key, val)
        else:
            node.value = val
        return node

    def get(self, key: int) -> int:
        """Return the value stored for ``key``."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def _extreme(self, side: str) -> _Node:
        if self._root is None:
            raise ValueError("the map is empty")
        node = self._root
        while getattr(node, side) is not None:
            node = getattr(node, side)
        return node

    def get_min(self) -> int:
        """Return the value stored under the smallest key."""
        return self._extreme("left").value

    def get_max(self) -> int:
        """Return the value stored under the largest key."""
        return self._extreme("right").value

    def remove(self, key: int) -> None:
        """Remove ``key`` if present; a missing key changes nothing."""
        self._root = self._remove(self._root, key)

    def _remove(self, node: Optional[_Node], key: int) -> Optional[_Node]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node.right = self._remove(node.right, successor.key)
        return node

    def _walk(self, node: Optional[_Node]) -> Iterator[_Node]:
        if node is not None:
            yield from self._walk(node.left)
            yield node
            yield from self._walk(node.right)

    def inorder_keys(self) -> list[int]:
        """Return all keys in ascending order."""
        return [node.key for node in self._walk(self._root)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self._walk(self._root))

    def __len__(self) -> int:
        return sum(1 for _ in self._walk(self._root))


class KthLargest:
    """Tracks the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self._k = k
        self._heap = list(nums)
        heapq.heapify(self._heap)
        while len(self._heap) > k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` to the stream and return the current k-th largest value.

        While fewer than ``k`` values have been seen, the smallest one is
        returned.
        """
        if len(self._heap) < self._k:
            heapq.heappush(self._heap, val)
        elif val > self._heap[0]:
            heapq.heapreplace(self._heap, val)
        return self._heap[0]