"""Hand-built containers: a growable array, stacks, deques, linked lists and a
browser history."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


class DynamicArray:
    """An array whose capacity doubles whenever a push finds it full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: list[int] = []

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._items):
            raise IndexError(f"index {i} outside 0..{len(self._items) - 1}")

    def get(self, i: int) -> int:
        """Return the element at position ``i``."""
        self._check_index(i)
        return self._items[i]

    def set(self, i: int, n: int) -> None:
        """Replace the element at position ``i`` with ``n``."""
        self._check_index(i)
        self._items[i] = n

    def pushback(self, n: int) -> None:
        """Append ``n``, doubling the capacity first if the array is full."""
        if len(self._items) == self._capacity:
            self.resize()
        self._items.append(n)

    def popback(self) -> int:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty array")
        return self._items.pop()

    def resize(self) -> None:
        """Double the capacity."""
        self._capacity *= 2

    @property
    def capacity(self) -> int:
        """The number of elements the array holds before it must grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, smallest))

    def _require_items(self) -> None:
        if not self._entries:
            raise IndexError("the stack is empty")

    def pop(self) -> None:
        """Remove the top element."""
        self._require_items()
        self._entries.pop()

    def top(self) -> int:
        """Return the top element."""
        self._require_items()
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        self._require_items()
        return self._entries[-1][1]

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(eq=False)
class _DNode:
    value: int
    prev: Optional["_DNode"] = None
    next: Optional["_DNode"] = None


def _insert_after(before: _DNode, value: int) -> None:
    after = before.next
    node = _DNode(value, before, after)
    before.next = node
    after.prev = node


def _unlink(node: _DNode) -> int:
    node.prev.next = node.next
    node.next.prev = node.prev
    return node.value


class _Sentinelled:
    """A doubly linked chain between two sentinel nodes."""

    def __init__(self) -> None:
        self._head = _DNode(-1)
        self._tail = _DNode(-1)
        self._head.next = self._tail
        self._tail.prev = self._head

    def _nodes(self) -> Iterator[_DNode]:
        node = self._head.next
        while node is not self._tail:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())


class Deque(_Sentinelled):
    """A double-ended queue built on a doubly linked list."""

    def is_empty(self) -> bool:
        """Tell whether the deque holds no elements."""
        return self._head.next is self._tail

    def append(self, value: int) -> None:
        """Add ``value`` at the right end."""
        _insert_after(self._tail.prev, value)

    def appendleft(self, value: int) -> None:
        """Add ``value`` at the left end."""
        _insert_after(self._head, value)

    def pop(self) -> int:
        """Remove and return the rightmost element."""
        if self.is_empty():
            raise IndexError("pop from an empty deque")
        return _unlink(self._tail.prev)

    def popleft(self) -> int:
        """Remove and return the leftmost element."""
        if self.is_empty():
            raise IndexError("pop from an empty deque")
        return _unlink(self._head.next)


@dataclass(eq=False)
class _SNode:
    value: int
    next: Optional["_SNode"] = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self) -> None:
        self._head = _SNode(-1)
        self._tail = self._head

    def _nodes(self) -> Iterator[_SNode]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def get(self, index: int) -> int:
        """Return the value at position ``index`` (0-based)."""
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node.value
        raise IndexError(f"index {index} out of range")

    def insert_head(self, val: int) -> None:
        """Insert ``val`` at the front."""
        node = _SNode(val, self._head.next)
        if node.next is None:
            self._tail = node
        self._head.next = node

    def insert_tail(self, val: int) -> None:
        """Insert ``val`` at the back."""
        self._tail.next = _SNode(val)
        self._tail = self._tail.next

    def remove(self, index: int) -> None:
        """Remove the node at position ``index`` (0-based)."""
        if index < 0:
            raise IndexError(f"index {index} out of range")
        before = self._head
        for _ in range(index):
            before = before.next
            if before is None:
                raise IndexError(f"index {index} out of range")
        if before.next is None:
            raise IndexError(f"index {index} out of range")
        before.next = before.next.next
        if before.next is None:
            self._tail = before

    def values(self) -> list[int]:
        """Return all values from head to tail."""
        return [node.value for node in self._nodes()]

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())


class DoublyLinkedList(_Sentinelled):
    """A doubly linked list addressed by position."""

    def get(self, index: int) -> int:
        """Return the value at position ``index`` (0-based)."""
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node.value
        raise IndexError(f"index {index} out of range")

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        _insert_after(self._head, val)

    def add_at_tail(self, val: int) -> None:
        """Insert ``val`` after the last element."""
        _insert_after(self._tail.prev, val)

    def _node_before(self, index: int) -> Optional[_DNode]:
        if index < 0:
            return None
        before = self._head
        for _ in range(index):
            before = before.next
            if before is self._tail:
                return None
        return before

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` so it lands at position ``index``.

        An index equal to the length appends; a larger or negative index
        leaves the list unchanged.
        """
        before = self._node_before(index)
        if before is not None:
            _insert_after(before, val)

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index``; an invalid index changes nothing."""
        before = self._node_before(index)
        if before is not None and before.next is not self._tail:
            _unlink(before.next)


class BrowserHistory:
    """A single-tab browsing history with back and forward moves."""

    def __init__(self, homepage: str) -> None:
        self._pages = [homepage]
        self._position = 0

    @property
    def current(self) -> str:
        """The page being shown."""
        return self._pages[self._position]

    def visit(self, url: str) -> None:
        """Go to ``url``, discarding any forward history."""
        del self._pages[self._position + 1 :]
        self._pages.append(url)
        self._position += 1

    @staticmethod
    def _check_steps(steps: int) -> None:
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")

    def back(self, steps: int) -> str:
        """Move back up to ``steps`` pages and return the page reached."""
        self._check_steps(steps)
        self._position = max(0, self._position - steps)
        return self.current

    def forward(self, steps: int) -> str:
        """Move forward up to ``steps`` pages and return the page reached."""
        self._check_steps(steps)
        self._position = min(len(self._pages) - 1, self._position + steps)
        return self.current


class QueueStack:
    """A last-in first-out stack using only queue operations."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Push ``x``, rotating the queue so it sits at the front."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the most recently pushed element."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the most recently pushed element."""
        if not self._queue:
            raise IndexError("the stack is empty")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)