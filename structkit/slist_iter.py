"""Iterators over singly linked lists that can modify the list as they go."""

from __future__ import annotations

from typing import Any, Optional

from structkit.slist import SList, _Node


class _Cursor:
    """Walks one list, remembering the nodes around the last one returned."""

    __slots__ = ("slist", "current", "current_prev", "before", "next")

    def __init__(self, slist: SList) -> None:
        self.slist = slist
        self.current: Optional[_Node] = None
        self.current_prev: Optional[_Node] = None
        self.before: Optional[_Node] = None
        self.next: Optional[_Node] = slist._head

    def exhausted(self) -> bool:
        return self.next is None

    def advance(self) -> Any:
        node = self.next
        self.current_prev = self.before
        self.current = node
        self.before = node
        self.next = node.next
        return node.data

    def remove(self) -> Any:
        node = self.current
        prev = self.current_prev
        data = self.slist._unlink(node, prev)
        self.current = None
        self.before = prev
        return data

    def add(self, element: Any) -> None:
        self.before = self.slist._insert_after(self.current, element)

    def replace(self, element: Any) -> Any:
        old, self.current.data = self.current.data, element
        return old


class SListIterator:
    """Iterates over an SList; the element last returned may be removed,
    replaced, or have a new element added after it."""

    def __init__(self, slist: SList) -> None:
        self._cursor = _Cursor(slist)
        self._index = 0

    def __iter__(self) -> SListIterator:
        return self

    def __next__(self) -> Any:
        if self._cursor.exhausted():
            raise StopIteration
        self._index += 1
        return self._cursor.advance()

    def _require_current(self) -> None:
        if self._cursor.current is None:
            raise ValueError("no element has been returned, or it was removed")

    def remove(self) -> Any:
        """Remove the element last returned and return it."""
        self._require_current()
        self._index -= 1
        return self._cursor.remove()

    def add(self, element: Any) -> None:
        """Insert ``element`` after the element last returned.

        The new element is not visited by this iterator.
        """
        self._require_current()
        self._cursor.add(element)
        self._index += 1

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one."""
        self._require_current()
        return self._cursor.replace(element)

    def index(self) -> int:
        """Return the index of the element last returned."""
        return self._index - 1


class SListZipIterator:
    """Iterates over two SLists in step, stopping at the end of the shorter."""

    def __init__(self, first: SList, second: SList) -> None:
        self._first = _Cursor(first)
        self._second = _Cursor(second)
        self._index = 0

    def __iter__(self) -> SListZipIterator:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._first.exhausted() or self._second.exhausted():
            raise StopIteration
        self._index += 1
        return self._first.advance(), self._second.advance()

    def _require_current(self) -> None:
        if self._first.current is None or self._second.current is None:
            raise ValueError("no pair has been returned, or it was removed")

    def remove(self) -> tuple[Any, Any]:
        """Remove the pair last returned and return it."""
        self._require_current()
        self._index -= 1
        return self._first.remove(), self._second.remove()

    def add(self, first_element: Any, second_element: Any) -> None:
        """Insert a pair after the pair last returned; it is not visited."""
        self._require_current()
        self._first.add(first_element)
        self._second.add(second_element)
        self._index += 1

    def replace(self, first_element: Any, second_element: Any) -> tuple[Any, Any]:
        """Replace the pair last returned and return the old pair."""
        self._require_current()
        return self._first.replace(first_element), self._second.replace(second_element)

    def index(self) -> int:
        """Return the index of the pair last returned."""
        return self._index - 1