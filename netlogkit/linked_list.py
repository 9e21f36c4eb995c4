"""A singly linked list with set-like helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """A list cell holding a value and a link to the next cell."""

    value: Any = None
    next: Optional["Node"] = None

    def __str__(self) -> str:
        return str(self.value)


class LinkedList:
    """A singly linked list addressed by zero-based positions."""

    def __init__(self, values: Iterable = ()):
        self._head: Optional[Node] = None
        self._size = 0
        self._extend(values)

    def _extend(self, values: Iterable) -> None:
        tail = self._head
        while tail is not None and tail.next is not None:
            tail = tail.next
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        return (node.value for node in self._nodes())

    def __contains__(self, value) -> bool:
        return any(item == value for item in self)

    def __getitem__(self, position: int):
        return self.at(position).value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        return self._head is None

    def first(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    def at(self, position: int) -> Node:
        """The node at ``position``; raises IndexError when out of range."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range")
        for index, node in enumerate(self._nodes()):
            if index == position:
                return node
        raise IndexError(f"position {position} out of range")

    def insert(self, value, position: int) -> None:
        """Insert at ``position``; positions below 1 go to the front, beyond the end to the back."""
        node = Node(value)
        if self.is_empty() or position <= 0:
            node.next = self._head
            self._head = node
        else:
            previous = self.at(min(position, self._size) - 1)
            node.next = previous.next
            previous.next = node
        self._size += 1

    def insert_front(self, value) -> None:
        self.insert(value, 0)

    def insert_back(self, value) -> None:
        self.insert(value, self._size)

    def remove(self, position: int):
        """Remove the element at ``position`` and return its value."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range")
        if position == 0:
            node = self._head
            self._head = node.next
        else:
            previous = self.at(position - 1)
            node = previous.next
            previous.next = node.next
        node.next = None
        self._size -= 1
        return node.value

    def remove_value(self, value):
        """Remove the first element equal to ``value`` and return it."""
        return self.remove(self.index(value))

    def remove_front(self):
        return self.remove(0)

    def remove_back(self):
        return self.remove(self._size - 1)

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def index(self, value) -> int:
        """Position of the first element equal to ``value``; ValueError if absent."""
        for position, item in enumerate(self):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in the list")

    def count(self, value) -> int:
        return sum(1 for item in self if item == value)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def clone(self) -> "LinkedList":
        return LinkedList(self)

    def union(self, other: "LinkedList") -> "LinkedList":
        """A new list with the elements of this list followed by those of ``other``."""
        if other.is_empty():
            raise ValueError("cannot join an empty list")
        result = self.clone()
        result._extend(other)
        return result

    def intersection(self, other: "LinkedList") -> "LinkedList":
        """Elements of this list that also appear in ``other``, in order."""
        return LinkedList(value for value in self if value in other)

    def difference(self, other: "LinkedList") -> "LinkedList":
        """Elements of this list that do not appear in ``other``, in order."""
        return LinkedList(value for value in self if value not in other)

    def sublist(self, start: int, stop: int) -> "LinkedList":
        """A new list with the elements from ``start`` to ``stop``, both included."""
        self.at(start)
        self.at(stop)
        if start > stop:
            raise ValueError(f"start {start} is after stop {stop}")
        return LinkedList(
            value
            for position, value in enumerate(self)
            if start <= position <= stop
        )

    def delete_range(self, start: int, stop: int) -> None:
        """Remove the elements from ``start`` to ``stop``, both included.

        Positions outside the list are ignored.
        """
        for position in range(stop, start - 1, -1):
            if 0 <= position < self._size:
                self.remove(position)