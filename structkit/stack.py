"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional


class Stack:
    """A LIFO stack. Iteration runs from the bottom element to the top."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = []
        if iterable is not None:
            for element in iterable:
                self.push(element)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack([{', '.join(repr(e) for e in self._items)}])"

    def push(self, element: Any) -> None:
        """Push ``element`` onto the top of the stack."""
        self._items.append(element)

    def peek(self) -> Any:
        """Return the top element without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def map(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on each element, from the bottom to the top."""
        for element in self._items:
            fn(element)


class StackIterator:
    """Iterates over a stack from bottom to top; the element last returned
    may be replaced."""

    def __init__(self, stack: Stack) -> None:
        self._items = stack._items
        self._index = 0

    def __iter__(self) -> StackIterator:
        return self

    def __next__(self) -> Any:
        if self._index >= len(self._items):
            raise StopIteration
        element = self._items[self._index]
        self._index += 1
        return element

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one.

        Raises IndexError if no element has been returned yet.
        """
        if self._index == 0 or self._index > len(self._items):
            raise IndexError("no element to replace")
        position = self._index - 1
        old = self._items[position]
        self._items[position] = element
        return old


class StackZipIterator:
    """Iterates over two stacks in step, stopping at the end of the shorter."""

    def __init__(self, first: Stack, second: Stack) -> None:
        self._first = first._items
        self._second = second._items
        self._index = 0

    def __iter__(self) -> StackZipIterator:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._index >= len(self._first) or self._index >= len(self._second):
            raise StopIteration
        pair = self._first[self._index], self._second[self._index]
        self._index += 1
        return pair

    def replace(self, first_element: Any, second_element: Any) -> tuple[Any, Any]:
        """Replace the pair last returned and return the old pair.

        Raises IndexError if no pair has been returned yet.
        """
        position = self._index - 1
        if position < 0 or position >= len(self._first) or position >= len(self._second):
            raise IndexError("no pair to replace")
        old = self._first[position], self._second[position]
        self._first[position] = first_element
        self._second[position] = second_element
        return old