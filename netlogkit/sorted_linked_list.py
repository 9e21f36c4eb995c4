"""A singly linked list that keeps its elements in ascending order."""

from __future__ import annotations

from typing import Iterable

from netlogkit.linked_list import LinkedList, Node

__all__ = ["SortedLinkedList"]


class SortedLinkedList(LinkedList):
    """A linked list whose elements are always kept in ascending order.

    Positional insertion is not offered: every value goes where its order
    places it, ahead of any equal values already stored.
    """

    def __init__(self, values: Iterable = ()):
        super().__init__()
        for value in values:
            self.insert(value)

    def insert(self, value) -> None:  # type: ignore[override]
        """Insert ``value`` before the first element that is not smaller."""
        node = Node(value)
        previous = None
        current = self._head
        while current is not None and current.value < value:
            previous, current = current, current.next
        node.next = current
        if previous is None:
            self._head = node
        else:
            previous.next = node
        self._size += 1

    def insert_front(self, value) -> None:
        raise TypeError("a sorted list places values itself; use insert()")

    def insert_back(self, value) -> None:
        raise TypeError("a sorted list places values itself; use insert()")

    def index(self, value) -> int:
        """Position of the first element equal to ``value``; ValueError if absent."""
        for position, item in enumerate(self):
            if item < value:
                continue
            if item == value:
                return position
            break
        raise ValueError(f"{value!r} is not in the list")

    def count(self, value) -> int:
        """Occurrences of ``value``, stopping at the first larger element."""
        occurrences = 0
        for item in self:
            if item == value:
                occurrences += 1
            elif item > value:
                break
        return occurrences

    def remove_duplicates(self) -> None:
        """Keep a single element of every run of equal values."""
        node = self._head
        while node is not None and node.next is not None:
            if node.next.value == node.value:
                node.next = node.next.next
                self._size -= 1
            else:
                node = node.next