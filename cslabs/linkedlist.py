"""A doubly linked list of integers with sentinel nodes and a positional iterator."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional


class _Node:
    __slots__ = ("value", "next", "previous")

    def __init__(self, value: int = 0):
        self.value = value
        self.next: Optional[_Node] = None
        self.previous: Optional[_Node] = None


class ListIterator:
    """A position in a LinkedList, possibly on the sentinel before or after the items."""

    __slots__ = ("_node", "_owner")

    def __init__(self, node: _Node, owner: "LinkedList"):
        self._node = node
        self._owner = owner

    def is_past_end(self) -> bool:
        """True when positioned on the sentinel after the last item."""
        return self._node.next is None

    def is_past_beginning(self) -> bool:
        """True when positioned on the sentinel before the first item."""
        return self._node.previous is None

    def move_forward(self) -> None:
        """Step to the next position unless already past the end."""
        if not self.is_past_end():
            self._node = self._node.next

    def move_backward(self) -> None:
        """Step to the previous position unless already past the beginning."""
        if not self.is_past_beginning():
            self._node = self._node.previous

    def retrieve(self) -> int:
        """Value at the current position."""
        if self.is_past_end() or self.is_past_beginning():
            raise IndexError("iterator is not positioned on an item")
        return self._node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        return self._node is other._node

    __hash__ = None


class LinkedList:
    """A doubly linked list with dummy head and tail nodes."""

    def __init__(self, values: Iterable[int] = ()):
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.previous = self._head
        self._count = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not self._tail:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail.previous
        while node is not self._head:
            yield node.value
            node = node.previous

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def copy(self) -> "LinkedList":
        """A new list holding the same values."""
        return LinkedList(self)

    def clear(self) -> None:
        """Remove every item, leaving a working empty list."""
        self._head.next = self._tail
        self._tail.previous = self._head
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def first(self) -> ListIterator:
        """Iterator on the first item, or past the end when empty."""
        return ListIterator(self._head.next, self)

    def last(self) -> ListIterator:
        """Iterator on the last item, or past the beginning when empty."""
        return ListIterator(self._tail.previous, self)

    def _check(self, position: ListIterator) -> _Node:
        if position._owner is not self:
            raise ValueError("iterator belongs to another list")
        return position._node

    def _link(self, value: int, before: _Node, after: _Node) -> None:
        node = _Node(value)
        node.previous = before
        node.next = after
        before.next = node
        after.previous = node
        self._count += 1

    def insert_after(self, value: int, position: ListIterator) -> None:
        """Insert value just after the iterator's position."""
        node = self._check(position)
        if position.is_past_end():
            raise ValueError("cannot insert past the end of the list")
        self._link(value, node, node.next)

    def insert_before(self, value: int, position: ListIterator) -> None:
        """Insert value just before the iterator's position."""
        node = self._check(position)
        if position.is_past_beginning():
            raise ValueError("cannot insert past the beginning of the list")
        self._link(value, node.previous, node)

    def append(self, value: int) -> None:
        """Insert value at the tail."""
        self._link(value, self._tail.previous, self._tail)

    def find(self, value: int) -> ListIterator:
        """Iterator on the first occurrence of value, or past the end if absent."""
        node = self._head.next
        while node is not self._tail:
            if node.value == value:
                return ListIterator(node, self)
            node = node.next
        return ListIterator(self._tail, self)

    def remove(self, value: int) -> None:
        """Remove the first occurrence of value; do nothing if absent."""
        position = self.find(value)
        if position.is_past_end():
            return
        node = position._node
        node.previous.next = node.next
        node.next.previous = node.previous
        self._count -= 1


def format_list(values: LinkedList, forward: bool = True) -> str:
    """The values, each followed by a space, front to back or back to front."""
    items = values if forward else reversed(values)
    return "".join(f"{value} " for value in items)