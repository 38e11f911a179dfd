"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    content: T
    next: "Optional[_Node[T]]" = None


class LinkedList(Generic[T]):
    """Singly linked list; iteration runs from the front to the back."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: T) -> None:
        """Insert ``content`` before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: T) -> None:
        """Append ``content`` after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def last(self) -> Optional[T]:
        """Content of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def apply(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on the content of every element, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """New list holding ``func`` of every content, in the same order."""
        return LinkedList(func(content) for content in self)

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element front to back, passing each content to ``delete``."""
        while self._head is not None:
            node = self._head
            self._head = node.next
            self._size -= 1
            if self._head is None:
                self._tail = None
            if delete is not None:
                delete(node.content)