"""Comparator-ordered red-black tree, tree table and tree set, a singly linked list and a stack."""

__version__ = "0.1.0"

__all__ = ["rbtree", "treetable", "treeset", "slist", "slist_iter", "stack"]