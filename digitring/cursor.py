"""Bidirectional cursor over a doubly circular linked list."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from .linked_list import DoublyCircularLinkedList, Node

T = TypeVar("T")


class CursorStateError(RuntimeError):
    """Raised when remove() or set() has no element to act on."""


class ListCursor(Generic[T]):
    """Cursor sitting between elements of a ring, addressed ``0..len(ring)``.

    ``next()`` and ``previous()`` yield the element after and before the
    cursor. ``remove()`` and ``set()`` act on the element yielded last;
    ``add()`` inserts at the cursor position. Removing or adding invalidates
    the last yielded element until the cursor moves again.
    """

    def __init__(self, ring: DoublyCircularLinkedList[T], index: int = 0) -> None:
        if index < 0 or index > len(ring):
            raise IndexError(f"Index {index} out of range for size {len(ring)}.")
        self._ring = ring
        self._index = index
        # Node at position ``index``; at the end of the ring this wraps to the head.
        self._next: Optional[Node[T]] = None
        if len(ring) > 0:
            self._next = ring._node_at(index % len(ring))
        self._last: Optional[Node[T]] = None
        self._last_from_previous = False

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self.next()

    def has_next(self) -> bool:
        return self._index < len(self._ring)

    def has_previous(self) -> bool:
        return self._index > 0

    def next_index(self) -> int:
        return self._index

    def previous_index(self) -> int:
        return self._index - 1

    def next(self) -> T:
        if not self.has_next():
            raise StopIteration
        node = self._next
        assert node is not None and node.next is not None
        self._last = node
        self._last_from_previous = False
        self._next = node.next
        self._index += 1
        return node.value

    def previous(self) -> T:
        if not self.has_previous():
            raise StopIteration
        assert self._next is not None and self._next.prev is not None
        node = self._next.prev
        self._last = node
        self._last_from_previous = True
        self._next = node
        self._index -= 1
        return node.value

    def remove(self) -> None:
        """Remove the element returned by the last next() or previous()."""
        last = self._require_last()
        if self._last_from_previous:
            self._next = last.next
        else:
            self._index -= 1
        self._ring._unlink(last)
        if len(self._ring) == 0:
            self._next = None
        self._last = None

    def set(self, value: T) -> None:
        self._require_last().value = value

    def add(self, value: T) -> None:
        """Insert ``value`` immediately before the cursor."""
        if self._next is None or self._index == len(self._ring):
            self._ring.append(value)
            self._next = self._ring.head_node
        else:
            self._ring.insert(self._index, value)
        self._index += 1
        self._last = None

    def _require_last(self) -> Node[T]:
        if self._last is None:
            raise CursorStateError("No current element; call next() or previous() first.")
        return self._last
