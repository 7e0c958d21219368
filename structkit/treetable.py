"""An ordered key-value table backed by a red-black tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from structkit.rbtree import Comparator, Node, RedBlackTree


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class TreeTableEntry:
    """A key and the value it maps to."""

    key: Any
    value: Any


class TreeTable:
    """A mapping whose keys are kept sorted by a three-way comparator.

    ``cmp(a, b)`` returns a negative number, zero or a positive number.
    Without a comparator the keys' natural ordering is used.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._tree = RedBlackTree(cmp if cmp is not None else _natural_order)

    def __len__(self) -> int:
        return len(self._tree)

    def __contains__(self, key: Any) -> bool:
        return self._tree.find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.add(key, value)

    def __delitem__(self, key: Any) -> None:
        self.remove(key)

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"TreeTable({{{body}}})"

    def _node(self, key: Any) -> Node:
        node = self._tree.find(key)
        if node is None:
            raise KeyError(key)
        return node

    def add(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any value already mapped."""
        self._tree.insert(key, value)

    def get(self, key: Any) -> Any:
        """Return the value mapped to ``key``; raise KeyError if absent."""
        return self._node(key).value

    def _first(self) -> Node:
        node = self._tree.first()
        if node is None:
            raise KeyError("table is empty")
        return node

    def _last(self) -> Node:
        node = self._tree.last()
        if node is None:
            raise KeyError("table is empty")
        return node

    def first_key(self) -> Any:
        """Return the lowest key; raise KeyError if the table is empty."""
        return self._first().key

    def last_key(self) -> Any:
        """Return the highest key; raise KeyError if the table is empty."""
        return self._last().key

    def first_value(self) -> Any:
        """Return the value of the lowest key; raise KeyError if empty."""
        return self._first().value

    def last_value(self) -> Any:
        """Return the value of the highest key; raise KeyError if empty."""
        return self._last().value

    def greater_than(self, key: Any) -> Any:
        """Return the key immediately after ``key``.

        Raises KeyError if ``key`` is absent or has no successor.
        """
        following = self._tree.successor(self._node(key))
        if following is None:
            raise KeyError(key)
        return following.key

    def lesser_than(self, key: Any) -> Any:
        """Return the key immediately before ``key``.

        Raises KeyError if ``key`` is absent or has no predecessor.
        """
        preceding = self._tree.predecessor(self._node(key))
        if preceding is None:
            raise KeyError(key)
        return preceding.key

    def count_value(self, value: Any) -> int:
        """Return how many keys map to a value equal to ``value``."""
        return sum(1 for node in self._tree.nodes() if node.value == value)

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        node = self._node(key)
        self._tree.delete(node)
        return node.value

    def remove_first(self) -> Any:
        """Remove the lowest key and return its value."""
        node = self._first()
        self._tree.delete(node)
        return node.value

    def remove_last(self) -> Any:
        """Remove the highest key and return its value."""
        node = self._last()
        self._tree.delete(node)
        return node.value

    def clear(self) -> None:
        """Remove every entry."""
        self._tree.clear()

    def keys(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        for node in self._tree.nodes():
            yield node.key

    def values(self) -> Iterator[Any]:
        """Yield the values in ascending key order."""
        for node in self._tree.nodes():
            yield node.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        for node in self._tree.nodes():
            yield node.key, node.value

    def entries(self) -> TreeTableIterator:
        """Return an iterator over the entries that can remove them."""
        return TreeTableIterator(self)


class TreeTableIterator:
    """Iterates over a table's entries in key order.

    The entry last returned may be removed with :meth:`remove` without
    disturbing the iteration.
    """

    def __init__(self, table: TreeTable) -> None:
        self._tree = table._tree
        self._current: Optional[Node] = None
        self._next: Optional[Node] = self._tree.first()

    def __iter__(self) -> TreeTableIterator:
        return self

    def __next__(self) -> TreeTableEntry:
        if self._next is None:
            raise StopIteration
        self._current = self._next
        self._next = self._tree.successor(self._current)
        return TreeTableEntry(self._current.key, self._current.value)

    def remove(self) -> Any:
        """Remove the entry last returned and return its value.

        Raises KeyError if no entry has been returned yet or it was
        already removed.
        """
        if self._current is None:
            raise KeyError("no entry to remove")
        node = self._current
        self._current = None
        self._tree.delete(node)
        return node.value