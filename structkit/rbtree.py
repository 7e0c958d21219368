"""A red-black tree ordered by a three-way comparator."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

Comparator = Callable[[Any, Any], int]


class RBViolation(Exception):
    """Raised by :meth:`RedBlackTree.check` when a tree invariant is broken."""


class Node:
    """A tree node holding one key and its value."""

    __slots__ = ("key", "value", "red", "left", "right", "parent")

    def __init__(self, key: Any, value: Any, red: bool, nil: Optional[Node] = None) -> None:
        self.key = key
        self.value = value
        self.red = red
        link = self if nil is None else nil
        self.left: Node = link
        self.right: Node = link
        self.parent: Node = link

    def __repr__(self) -> str:
        colour = "red" if self.red else "black"
        return f"Node(key={self.key!r}, value={self.value!r}, {colour})"


class RedBlackTree:
    """Balanced binary search tree; ``cmp(a, b)`` returns <0, 0 or >0."""

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self._nil = Node(None, None, red=False)
        self._root = self._nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _wrap(self, node: Node) -> Optional[Node]:
        return None if node is self._nil else node

    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding ``key``, or None."""
        node = self._root
        while node is not self._nil:
            c = self._cmp(key, node.key)
            if c < 0:
                node = node.left
            elif c > 0:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: Any, value: Any) -> Node:
        """Map ``key`` to ``value``, replacing an existing value; return the node."""
        nil = self._nil
        parent = nil
        node = self._root
        went_left = False
        while node is not nil:
            c = self._cmp(key, node.key)
            parent = node
            if c < 0:
                node = node.left
                went_left = True
            elif c > 0:
                node = node.right
                went_left = False
            else:
                node.value = value
                return node

        new = Node(key, value, red=True, nil=nil)
        new.parent = parent
        self._size += 1
        if parent is nil:
            new.red = False
            self._root = new
        else:
            if went_left:
                parent.left = new
            else:
                parent.right = new
            self._rebalance_after_insert(new)
        return new

    def delete(self, node: Node) -> None:
        """Unlink ``node`` from the tree."""
        if node is None or node is self._nil:
            raise ValueError("cannot delete an empty node")
        nil = self._nil
        z = node
        y = z
        y_red = y.red
        if z.left is nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._min(z.right)
            y_red = y.red
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.red = z.red
        if not y_red:
            self._rebalance_after_delete(x)
        z.left = z.right = z.parent = nil
        self._size -= 1

    def first(self) -> Optional[Node]:
        """Return the node with the lowest key, or None when empty."""
        if self._root is self._nil:
            return None
        return self._min(self._root)

    def last(self) -> Optional[Node]:
        """Return the node with the highest key, or None when empty."""
        if self._root is self._nil:
            return None
        return self._max(self._root)

    def successor(self, node: Node) -> Optional[Node]:
        """Return the node following ``node`` in key order, or None."""
        nil = self._nil
        if node.right is not nil:
            return self._min(node.right)
        parent = node.parent
        while parent is not nil and node is parent.right:
            node = parent
            parent = parent.parent
        return self._wrap(parent)

    def predecessor(self, node: Node) -> Optional[Node]:
        """Return the node preceding ``node`` in key order, or None."""
        nil = self._nil
        if node.left is not nil:
            return self._max(node.left)
        parent = node.parent
        while parent is not nil and node is parent.left:
            node = parent
            parent = parent.parent
        return self._wrap(parent)

    def nodes(self) -> Iterator[Node]:
        """Yield nodes in key order; the yielded node may be deleted meanwhile."""
        node = self.first()
        while node is not None:
            following = self.successor(node)
            yield node
            node = following

    def clear(self) -> None:
        """Remove every node."""
        self._root = self._nil
        self._nil.parent = self._nil
        self._size = 0

    def check(self) -> int:
        """Verify ordering and colour rules; return the black height."""
        if self._root.red:
            raise RBViolation("root is red")
        return self._check(self._root)

    def _check(self, node: Node) -> int:
        nil = self._nil
        if node is nil:
            return 1
        if node.left is not nil and self._cmp(node.left.key, node.key) >= 0:
            raise RBViolation(f"left child of {node.key!r} is out of order")
        if node.right is not nil and self._cmp(node.right.key, node.key) <= 0:
            raise RBViolation(f"right child of {node.key!r} is out of order")
        if node.red and node.parent.red:
            raise RBViolation(f"consecutive red nodes at {node.key!r}")
        left = self._check(node.left)
        right = self._check(node.right)
        if left != right:
            raise RBViolation(f"unequal black height below {node.key!r}")
        return left if node.red else left + 1

    def _min(self, node: Node) -> Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _max(self, node: Node) -> Node:
        while node.right is not self._nil:
            node = node.right
        return node

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _rotate_left(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _rebalance_after_insert(self, z: Node) -> None:
        while z.parent.red:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_left(z.parent.parent)
        self._root.red = False

    def _rebalance_after_delete(self, x: Node) -> None:
        while x is not self._root and not x.red:
            if x is x.parent.left:
                w = x.parent.right
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if not w.left.red and not w.right.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.right.red:
                        w.left.red = False
                        w.red = True
                        self._rotate_right(w)
                        w = x.parent.right
                    w.red = x.parent.red
                    x.parent.red = False
                    w.right.red = False
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if not w.right.red and not w.left.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.left.red:
                        w.right.red = False
                        w.red = True
                        self._rotate_left(w)
                        w = x.parent.left
                    w.red = x.parent.red
                    x.parent.red = False
                    w.left.red = False
                    self._rotate_right(x.parent)
                    x = self._root
        x.red = False