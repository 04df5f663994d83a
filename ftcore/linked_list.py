"""A singly linked list with in-order iteration, mapping and conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional


@dataclass
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list of arbitrary contents."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or ``None`` when the list is empty."""
        return self._head

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` when the list is empty."""
        return self._tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every element, passing each content to ``delete`` in order."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list holding ``func`` applied to every content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        mapped = LinkedList()
        try:
            for content in self:
                mapped.push_back(func(content))
        except BaseException:
            mapped.clear(delete)
            raise
        return mapped

    def to_list(self, terminated: bool = False) -> List[Any]:
        """Return the contents as a Python list.

        With ``terminated`` true, a trailing ``None`` marks the end.
        """
        items = list(self)
        if terminated:
            items.append(None)
        return items

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"