# structkit

Container types for Python. The ordered ones sort by a three-way comparator you can supply.

| Module | Contents |
| --- | --- |
| `structkit.rbtree` | `RedBlackTree`, `Node`, `RBViolation` |
| `structkit.treetable` | `TreeTable`, `TreeTableIterator`, `TreeTableEntry` |
| `structkit.treeset` | `TreeSet`, `TreeSetIterator` |
| `structkit.slist` | `SList` |
| `structkit.slist_iter` | `SListIterator`, `SListZipIterator` |
| `structkit.stack` | `Stack`, `StackIterator`, `StackZipIterator` |

A comparator `cmp(a, b)` returns a negative number, zero or a positive number. `TreeTable`, `TreeSet` and `SList.sort` fall back to the elements' natural ordering when you give them no comparator. `RedBlackTree` always needs one.

The package has no dependencies beyond the standard library.

## Installation

```
pip install structkit
```

To include the test dependencies (pytest and hypothesis):

```
pip install "structkit[test]"
```

## Red-black tree

`RedBlackTree(cmp)` stores `Node` objects that carry `key` and `value`. It provides these methods:

- `insert(key, value)` replaces the value if the key is already present. It returns the node.
- `find(key)` returns the node for a key.
- `delete(node)` removes a node from the tree.
- `first()` and `last()` return the lowest and highest nodes.
- `successor(node)` and `predecessor(node)` return the neighbouring nodes.
- `nodes()` yields the nodes in key order. It is safe to delete the node just yielded.
- `clear()` removes everything.
- `check()` verifies key order, the red rule and equal black heights. It returns the black height, or raises `RBViolation` if a rule is broken.

`find`, `first`, `last`, `successor` and `predecessor` return `None` when there is no such node.

## Ordered map

```python
from structkit.treetable import TreeTable, TreeTableIterator

table = TreeTable()          # natural ordering
table[3] = "c"
table[1] = "a"
table.add(2, "b")

assert list(table.keys()) == [1, 2, 3]
assert table.greater_than(1) == 2
assert table.lesser_than(3) == 2
assert table.remove_first() == "a"
assert table.count_value("b") == 1

it = table.entries()         # a TreeTableIterator
for entry in it:
    if entry.key == 2:
        it.remove()          # returns the removed value
assert list(table.items()) == [(3, "c")]
```

`TreeTable` also provides these methods:

- `get`, `first_key`, `last_key`, `first_value` and `last_value`
- `remove`, `remove_last` and `clear`
- `values`
- `in`, `len`, `del` and iteration over keys

## Ordered set

```python
from structkit.treeset import TreeSet, TreeSetIterator

s = TreeSet(lambda a, b: (a > b) - (a < b))
for n in (3, 1, 2, 3):
    s.add(n)
assert len(s) == 3
assert s.first() == 1 and s.last() == 3

it = TreeSetIterator(s)
for n in it:
    if n == 2:
        it.remove()
assert list(s) == [1, 3]
```

## Singly linked list

```python
from structkit.slist import SList
from structkit.slist_iter import SListIterator, SListZipIterator

items = SList([1, 2, 3, 4])
items.add_at(99, 1)
assert items.to_list() == [1, 99, 2, 3, 4]

it = SListIterator(items)
for n in it:
    if n == 3:
        it.add(30)           # inserted after 3, not visited
assert items.to_list() == [1, 99, 2, 3, 30, 4]

a, b = SList("abcd"), SList("efg")
zipped = SListZipIterator(a, b)
for x, y in zipped:
    if x == "b":
        zipped.remove()      # returns ("b", "f")
assert a.to_list() == ["a", "c", "d"] and b.to_list() == ["e", "g"]
```

### SList methods

- Adding: `add`, `add_first`, `add_last`, `add_at`, `add_all` and `add_all_at`.
- Moving nodes from another `SList`: `splice` and `splice_at`. These empty the other list.
- Removing: `remove`, `remove_at`, `remove_first`, `remove_last` and `clear`.
- Access: `replace_at`, `first`, `last` and `get_at`.
- Reordering: `reverse` and `sort(cmp)`.
- Copies: `sublist(start, end)` includes both ends. `copy` makes a shallow copy and `deep_copy(copy_fn)` copies each element with `copy_fn`.
- Searching: `count` and `index_of`, plus `count_value(element, cmp)` for comparator-based matching.
- Filtering: `filter` returns a new list and `filter_mut` changes the list in place.

`add_at` and `add_all_at` insert before an existing index. For this reason they cannot target an empty list.

### Iterators

Both iterators remember the element or pair they last returned. For that element or pair they offer `remove()`, `add(...)`, `replace(...)` and `index()`.

## Stack

```python
from structkit.stack import Stack, StackIterator, StackZipIterator

st = Stack([1, 2])
st.push(3)
assert st.peek() == 3
assert st.pop() == 3

it = StackIterator(st)       # bottom to top
for n in it:
    if n == 2:
        it.replace(20)
assert list(st) == [1, 20]
```

- `Stack.map(fn)` calls `fn` on each element, from the bottom to the top.
- `StackZipIterator` walks two stacks in step and can `replace` the pair it last returned.

## Errors

Operations that cannot complete raise exceptions.

- **`IndexError`**
  - Reading from or removing from an empty `SList` or `Stack`.
  - An out-of-range `SList` index.
  - Filtering an empty `SList`.
  - Calling `replace` on a stack iterator before it has returned anything.
- **`ValueError`**
  - `SList.remove` or `SList.index_of` with an element that is not in the list.
  - An invalid `sublist` range.
  - Splicing a list into itself.
  - Using an `SList` iterator before it has returned anything, or after its element was removed.
- **`KeyError`**
  - A missing key or element in `TreeTable` or `TreeSet`.
  - An empty table or set.
  - A key with no neighbour in `greater_than` or `lesser_than`.
  - Calling `remove` on a tree iterator when there is nothing to remove.

## Limits

The containers are in-memory only. They have no persistence and no locking for use from several threads.

## Running the tests

```
pytest
```