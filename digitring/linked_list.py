"""Doubly circular linked list primitive that stores the digits of a number."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, Iterable, Iterator, Optional, TypeVar

if TYPE_CHECKING:
    from .cursor import ListCursor

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """Node in a doubly circular linked list."""

    value: T
    next: Optional["Node[T]"] = None
    prev: Optional["Node[T]"] = None


class DoublyCircularLinkedList(Generic[T]):
    """Doubly circular linked list addressed by index from its head node.

    Reordering operations (swap, sorting) exchange node values and never
    relink nodes. Shifting moves the head pointer around the ring.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        if self._head is None:
            return iter(())
        node = self._head
        values: list[T] = []
        for _ in range(self._size):
            values.append(node.value)
            assert node.next is not None  # circular invariant
            node = node.next
        return iter(values)

    def __contains__(self, value: object) -> bool:
        return self.find(lambda candidate: candidate == value) is not None

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __delitem__(self, index: int) -> None:
        self.remove_at(index)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DoublyCircularLinkedList):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(left == right for left, right in zip(self, other))

    def __hash__(self) -> int:
        result = 1
        for value in self:
            result = 31 * result + hash(value)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    @property
    def head_node(self) -> Node[T]:
        if self._head is None:
            raise ValueError("The list is empty.")
        return self._head

    @property
    def head_value(self) -> T:
        return self.head_node.value

    def is_empty(self) -> bool:
        return self._size == 0

    def to_list(self) -> list[T]:
        return list(self)

    def append(self, value: T) -> Node[T]:
        """Add a new value as the last element of the ring and return its node."""
        node = Node(value=value)
        if self._head is None:
            node.next = node.prev = node
            self._head = node
        else:
            assert self._head.prev is not None
            self._link_before(self._head, node)
        self._size += 1
        return node

    def contains_all(self, values: Iterable[object]) -> bool:
        return all(value in self for value in values)

    def extend(self, values: Iterable[T]) -> bool:
        """Append every value; return whether anything was added."""
        added = False
        for value in values:
            self.append(value)
            added = True
        return added

    def insert(self, index: int, value: T) -> Node[T]:
        """Insert ``value`` so that it ends up at ``index``."""
        if index < 0 or index > self._size:
            raise IndexError(f"Index {index} out of range for size {self._size}.")
        if index == self._size:
            return self.append(value)
        current = self._node_at(index)
        node = Node(value=value)
        self._link_before(current, node)
        if index == 0:
            self._head = node
        self._size += 1
        return node

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._node_at(index).value

    def set(self, index: int, value: T) -> T:
        """Replace the value at ``index`` and return the previous one."""
        self._check_index(index)
        node = self._node_at(index)
        previous = node.value
        node.value = value
        return previous

    def remove_at(self, index: int) -> T:
        """Remove the node at ``index`` and return its value."""
        self._check_index(index)
        node = self._node_at(index)
        self._unlink(node)
        return node.value

    def remove(self, value: T) -> bool:
        """Remove the first occurrence of ``value``; False when it is absent."""
        node = self.find(lambda candidate: candidate == value)
        if node is None:
            return False
        self._unlink(node)
        return True

    def remove_all(self, values: Iterable[T]) -> bool:
        """Remove every occurrence of each of ``values``."""
        modified = False
        for value in values:
            while self.remove(value):
                modified = True
        return modified

    def retain_all(self, values: Iterable[T]) -> bool:
        """Keep only the nodes whose value is one of ``values``."""
        keep = list(values)
        modified = False
        for node in self._nodes():
            if node.value not in keep:
                self._unlink(node)
                modified = True
        return modified

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def find(self, predicate: Callable[[T], bool]) -> Optional[Node[T]]:
        """Return the first node matching predicate, walking from the head."""
        if self._head is None:
            return None
        node = self._head
        for _ in range(self._size):
            if predicate(node.value):
                return node
            assert node.next is not None
            node = node.next
        return None

    def index_of(self, value: T) -> int:
        for index, candidate in enumerate(self):
            if candidate == value:
                return index
        return -1

    def last_index_of(self, value: T) -> int:
        if self._head is None:
            return -1
        node = self._head.prev
        for index in range(self._size - 1, -1, -1):
            assert node is not None
            if node.value == value:
                return index
            node = node.prev
        return -1

    def copy(self) -> "DoublyCircularLinkedList[T]":
        return self.sub_list(0, self._size)

    def sub_list(self, from_index: int, to_index: int) -> "DoublyCircularLinkedList[T]":
        """Return a detached copy of the values in ``[from_index, to_index)``."""
        if from_index < 0 or to_index > self._size or from_index > to_index:
            raise IndexError(
                f"Range [{from_index}, {to_index}) out of bounds for size {self._size}."
            )
        result = self._spawn()
        if from_index == to_index:
            return result
        node = self._node_at(from_index)
        for _ in range(to_index - from_index):
            result.append(node.value)
            assert node.next is not None
            node = node.next
        return result

    def list_iterator(self, index: int = 0) -> "ListCursor[T]":
        """Return a cursor positioned before the element at ``index``."""
        from .cursor import ListCursor

        return ListCursor(self, index)

    def swap(self, first: int, second: int) -> bool:
        """Exchange the values at two positions; False if either is out of range."""
        if not (0 <= first < self._size and 0 <= second < self._size):
            return False
        if first == second:
            return True
        left = self._node_at(first)
        right = self._node_at(second)
        left.value, right.value = right.value, left.value
        return True

    def sort_ascending(self) -> None:
        self._bubble_sort(lambda current, following: current > following)

    def sort_descending(self) -> None:
        self._bubble_sort(lambda current, following: current < following)

    def shift_left(self, steps: int = 1) -> None:
        """Rotate the ring so the head moves clockwise by ``steps`` nodes."""
        if self._size <= 1:
            return
        node = self.head_node
        for _ in range(steps % self._size):
            assert node.next is not None
            node = node.next
        self._head = node

    def shift_right(self, steps: int = 1) -> None:
        """Rotate the ring so the head moves counter-clockwise by ``steps`` nodes."""
        if self._size <= 1:
            return
        node = self.head_node
        for _ in range(steps % self._size):
            assert node.prev is not None
            node = node.prev
        self._head = node

    def _spawn(self) -> "DoublyCircularLinkedList[T]":
        return type(self)()

    def _bubble_sort(self, out_of_order: Callable[[T, T], bool]) -> None:
        if self._size < 2:
            return
        swapped = True
        while swapped:
            swapped = False
            node = self.head_node
            # The tail -> head edge is not compared.
            for _ in range(self._size - 1):
                following = node.next
                assert following is not None
                if out_of_order(node.value, following.value):
                    node.value, following.value = following.value, node.value
                    swapped = True
                node = following

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexError(f"Index {index} out of range for size {self._size}.")

    def _node_at(self, index: int) -> Node[T]:
        """Walk to ``index`` from whichever end of the ring is closer."""
        node = self.head_node
        if index <= self._size // 2:
            for _ in range(index):
                assert node.next is not None
                node = node.next
        else:
            for _ in range(self._size - index):
                assert node.prev is not None
                node = node.prev
        return node

    def _nodes(self) -> list[Node[T]]:
        nodes: list[Node[T]] = []
        if self._head is None:
            return nodes
        node = self._head
        for _ in range(self._size):
            nodes.append(node)
            assert node.next is not None
            node = node.next
        return nodes

    def _link_before(self, anchor: Node[T], node: Node[T]) -> None:
        previous = anchor.prev
        assert previous is not None
        previous.next = node
        node.prev = previous
        node.next = anchor
        anchor.prev = node

    def _unlink(self, node: Node[T]) -> None:
        if self._size == 1:
            self._head = None
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1
