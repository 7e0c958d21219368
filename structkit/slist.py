"""A singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any, Optional

Comparator = Callable[[Any, Any], int]


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _same(a: Any, b: Any) -> bool:
    return a is b or a == b


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: Optional[_Node] = None) -> None:
        self.data = data
        self.next = next_node


class SList:
    """A singly linked list with cheap insertion at both ends."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        if iterable is not None:
            for element in iterable:
                self.add_last(element)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"SList([{', '.join(repr(e) for e in self)}])"

    # Internal node handling, shared with the iterators.

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _locate(self, index: int) -> tuple[Optional[_Node], _Node]:
        """Return ``(previous, node)`` for ``index``; raise IndexError if out of range."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        prev: Optional[_Node] = None
        node = self._head
        for _ in range(index):
            prev = node
            node = node.next
        return prev, node

    def _find(self, element: Any) -> tuple[Optional[_Node], _Node]:
        prev: Optional[_Node] = None
        node = self._head
        while node is not None:
            if _same(node.data, element):
                return prev, node
            prev = node
            node = node.next
        raise ValueError(f"{element!r} is not in the list")

    def _unlink(self, node: _Node, prev: Optional[_Node]) -> Any:
        """Detach ``node`` whose predecessor is ``prev`` and return its data."""
        if prev is not None:
            prev.next = node.next
        else:
            self._head = node.next
        if node.next is None:
            self._tail = prev
        node.next = None
        self._size -= 1
        return node.data

    def _insert_after(self, node: _Node, element: Any) -> _Node:
        """Insert ``element`` right after ``node`` and return the new node."""
        new = _Node(element, node.next)
        node.next = new
        if self._tail is node:
            self._tail = new
        self._size += 1
        return new

    def _chain(self, elements: Iterable[Any]) -> tuple[Optional[_Node], Optional[_Node], int]:
        head: Optional[_Node] = None
        tail: Optional[_Node] = None
        count = 0
        for element in elements:
            new = _Node(element)
            if tail is None:
                head = new
            else:
                tail.next = new
            tail = new
            count += 1
        return head, tail, count

    # Adding.

    def add(self, element: Any) -> None:
        """Append ``element`` to the end of the list."""
        self.add_last(element)

    def add_first(self, element: Any) -> None:
        """Prepend ``element``, making it the new head."""
        node = _Node(element, self._head)
        if self._size == 0:
            self._tail = node
        self._head = node
        self._size += 1

    def add_last(self, element: Any) -> None:
        """Append ``element``, making it the new tail."""
        node = _Node(element)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_at(self, element: Any, index: int) -> None:
        """Insert ``element`` before the element at ``index``.

        The index must name an existing element, so this cannot be done
        on an empty list; raises IndexError otherwise.
        """
        prev, node = self._locate(index)
        if prev is None:
            self._head = _Node(element, node)
        else:
            prev.next = _Node(element, node)
        self._size += 1

    def add_all(self, other: Iterable[Any]) -> None:
        """Append copies of every element of ``other`` to this list."""
        head, tail, count = self._chain(list(other))
        if count == 0:
            return
        if self._tail is None:
            self._head = head
        else:
            self._tail.next = head
        self._tail = tail
        self._size += count

    def add_all_at(self, other: Iterable[Any], index: int) -> None:
        """Insert every element of ``other`` before the element at ``index``."""
        elements = list(other)
        if not elements:
            return
        prev, node = self._locate(index)
        head, tail, count = self._chain(elements)
        tail.next = node
        if prev is None:
            self._head = head
        else:
            prev.next = head
        self._size += count

    def splice(self, other: SList) -> None:
        """Move every element of ``other`` to the end of this list, emptying it."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if other._size == 0:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
        self._tail = other._tail
        self._size += other._size
        other._reset()

    def splice_at(self, other: SList, index: int) -> None:
        """Move every element of ``other`` before the element at ``index``."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if other._size == 0:
            return
        prev, node = self._locate(index)
        other._tail.next = node
        if prev is None:
            self._head = other._head
        else:
            prev.next = other._head
        self._size += other._size
        other._reset()

    def _reset(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    # Removing.

    def remove(self, element: Any) -> Any:
        """Remove the first occurrence of ``element`` and return it.

        Raises ValueError if the element is not in the list.
        """
        prev, node = self._find(element)
        return self._unlink(node, prev)

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        prev, node = self._locate(index)
        return self._unlink(node, prev)

    def remove_first(self) -> Any:
        """Remove and return the head; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("remove from an empty list")
        return self._unlink(self._head, None)

    def remove_last(self) -> Any:
        """Remove and return the tail; raise IndexError if empty."""
        if self._size == 0:
            raise IndexError("remove from an empty list")
        prev, node = self._locate(self._size - 1)
        return self._unlink(node, prev)

    def clear(self) -> None:
        """Remove every element."""
        self._reset()

    # Access.

    def replace_at(self, element: Any, index: int) -> Any:
        """Put ``element`` at ``index`` and return the element it replaced."""
        _, node = self._locate(index)
        old, node.data = node.data, element
        return old

    def first(self) -> Any:
        """Return the head element; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    def last(self) -> Any:
        """Return the tail element; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    def get_at(self, index: int) -> Any:
        """Return the element at ``index``; raise IndexError if out of range."""
        return self._locate(index)[1].data

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        if self._size < 2:
            return
        prev: Optional[_Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev

    def sublist(self, start: int, end: int) -> SList:
        """Return a new list holding the elements from ``start`` to ``end`` inclusive.

        Raises ValueError if ``start > end`` or ``end`` is past the last index.
        """
        if start < 0 or start > end or end >= self._size:
            raise ValueError(f"invalid range {start}..{end}")
        _, node = self._locate(start)
        sub = SList()
        for _ in range(end - start + 1):
            sub.add_last(node.data)
            node = node.next
        return sub

    def copy(self) -> SList:
        """Return a shallow copy; the elements themselves are shared."""
        return SList(self)

    def deep_copy(self, copy_fn: Callable[[Any], Any]) -> SList:
        """Return a copy whose elements are ``copy_fn`` applied to each element."""
        return SList(copy_fn(element) for element in self)

    def count(self, element: Any) -> int:
        """Return the number of occurrences of ``element``."""
        return sum(1 for item in self if _same(item, element))

    def count_value(self, element: Any, cmp: Comparator) -> int:
        """Return how many elements ``cmp`` reports equal (0) to ``element``."""
        return sum(1 for item in self if cmp(item, element) == 0)

    def index_of(self, element: Any) -> int:
        """Return the index of the first occurrence of ``element``.

        Raises ValueError if it is not in the list.
        """
        for index, item in enumerate(self):
            if _same(item, element):
                return index
        raise ValueError(f"{element!r} is not in the list")

    def to_list(self) -> list[Any]:
        """Return the elements as a Python list."""
        return list(self)

    def sort(self, cmp: Optional[Comparator] = None) -> None:
        """Sort in place by a three-way comparator, natural order by default."""
        if self._size < 2:
            return
        key = cmp_to_key(cmp if cmp is not None else _natural_order)
        ordered = sorted(self, key=key)
        for node, element in zip(self._nodes(), ordered):
            node.data = element

    def filter(self, pred: Callable[[Any], bool]) -> SList:
        """Return a new list of the elements for which ``pred`` is true.

        Raises IndexError if this list is empty.
        """
        if self._size == 0:
            raise IndexError("filter of an empty list")
        return SList(element for element in self if pred(element))

    def filter_mut(self, pred: Callable[[Any], bool]) -> None:
        """Remove every element for which ``pred`` is false.

        Raises IndexError if the list is empty.
        """
        if self._size == 0:
            raise IndexError("filter of an empty list")
        prev: Optional[_Node] = None
        for node in self._nodes():
            if pred(node.data):
                prev = node
            else:
                self._unlink(node, prev)