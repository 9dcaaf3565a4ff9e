"""A bounded array-backed stack and an unbounded linked stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class StackError(Exception):
    """Base class for stack errors."""


class StackOverflow(StackError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(StackError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack(Generic[T]):
    """A stack with a fixed capacity, backed by a list."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top; raise StackOverflow if the stack is full."""
        if len(self._items) == self.capacity:
            raise StackOverflow("Stack Overflow")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self.capacity}, items={list(self)!r})"


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional[_Node[T]] = None


class LinkedStack(Generic[T]):
    """An unbounded stack made of singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node[T]] = None
        self._size = 0

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._top is None:
            raise StackUnderflow("Stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackUnderflow("Stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        items: list[Any] = list(self)
        return f"LinkedStack(items={items!r})"