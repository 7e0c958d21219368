"""An ordered set backed by a tree table."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from structkit.rbtree import Comparator
from structkit.treetable import TreeTable, TreeTableIterator

_MEMBER = True


class TreeSet:
    """A set whose elements are kept sorted by a three-way comparator.

    Without a comparator the elements' natural ordering is used.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._table = TreeTable(cmp)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, element: Any) -> bool:
        return element in self._table

    def __iter__(self) -> Iterator[Any]:
        return self._table.keys()

    def __repr__(self) -> str:
        return f"TreeSet([{', '.join(repr(e) for e in self)}])"

    def add(self, element: Any) -> None:
        """Add ``element``; adding an element already present does nothing."""
        self._table.add(element, _MEMBER)

    def remove(self, element: Any) -> None:
        """Remove ``element``; raise KeyError if it is not in the set."""
        self._table.remove(element)

    def clear(self) -> None:
        """Remove every element."""
        self._table.clear()

    def first(self) -> Any:
        """Return the lowest element; raise KeyError if the set is empty."""
        return self._table.first_key()

    def last(self) -> Any:
        """Return the highest element; raise KeyError if the set is empty."""
        return self._table.last_key()

    def greater_than(self, element: Any) -> Any:
        """Return the element immediately after ``element``."""
        return self._table.greater_than(element)

    def lesser_than(self, element: Any) -> Any:
        """Return the element immediately before ``element``."""
        return self._table.lesser_than(element)


class TreeSetIterator:
    """Iterates over a set in order; the last element returned may be removed."""

    def __init__(self, tree_set: TreeSet) -> None:
        self._entries = TreeTableIterator(tree_set._table)
        self._last: Any = None

    def __iter__(self) -> TreeSetIterator:
        return self

    def __next__(self) -> Any:
        self._last = next(self._entries).key
        return self._last

    def remove(self) -> Any:
        """Remove the element last returned and return it.

        Raises KeyError if there is no such element.
        """
        self._entries.remove()
        return self._last