import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.treetable import TreeTable, TreeTableEntry


def cmp(a, b):
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


@pytest.fixture
def table():
    t = TreeTable(cmp)
    for key, value in [(5, "e"), (1, "a"), (3, "c"), (2, "b"), (4, "d")]:
        t.add(key, value)
    return t


def test_add_and_get(table):
    assert table.get(3) == "c"
    assert table[5] == "e"
    assert len(table) == 5


def test_add_replaces_existing_value(table):
    table.add(3, "z")
    assert table.get(3) == "z"
    assert len(table) == 5


def test_get_missing_raises(table):
    with pytest.raises(KeyError):
        table.get(42)


def test_contains(table):
    assert 1 in table
    assert 42 not in table


def test_remove_returns_value(table):
    assert table.remove(2) == "b"
    assert 2 not in table
    assert len(table) == 4


def test_remove_missing_raises(table):
    with pytest.raises(KeyError):
        table.remove(42)


def test_delitem(table):
    del table[4]
    assert list(table) == [1, 2, 3, 5]


def test_clear(table):
    table.clear()
    assert len(table) == 0
    assert 1 not in table
    assert list(table.keys()) == []


def test_first_and_last(table):
    assert table.first_key() == 1
    assert table.last_key() == 5
    assert table.first_value() == "a"
    assert table.last_value() == "e"


def test_first_and_last_on_empty_raise():
    t = TreeTable(cmp)
    with pytest.raises(KeyError):
        t.first_key()
    with pytest.raises(KeyError):
        t.last_key()
    with pytest.raises(KeyError):
        t.first_value()
    with pytest.raises(KeyError):
        t.last_value()


def test_remove_first_and_last(table):
    assert table.remove_first() == "a"
    assert table.remove_last() == "e"
    assert list(table.keys()) == [2, 3, 4]


def test_remove_first_and_last_on_empty_raise():
    t = TreeTable(cmp)
    with pytest.raises(KeyError):
        t.remove_first()
    with pytest.raises(KeyError):
        t.remove_last()


def test_greater_than(table):
    assert table.greater_than(2) == 3
    with pytest.raises(KeyError):
        table.greater_than(5)
    with pytest.raises(KeyError):
        table.greater_than(42)


def test_lesser_than(table):
    assert table.lesser_than(4) == 3
    with pytest.raises(KeyError):
        table.lesser_than(1)
    with pytest.raises(KeyError):
        table.lesser_than(42)


def test_count_value(table):
    table.add(6, "a")
    assert table.count_value("a") == 2
    assert table.count_value("q") == 0


def test_ordering_of_views(table):
    assert list(table.keys()) == [1, 2, 3, 4, 5]
    assert list(table.values()) == ["a", "b", "c", "d", "e"]
    assert list(table.items())[0] == (1, "a")


def test_natural_order_by_default():
    t = TreeTable()
    for word in ["pear", "apple", "fig"]:
        t[word] = len(word)
    assert list(t) == ["apple", "fig", "pear"]


def test_entries_yield_entries(table):
    entries = list(table.entries())
    assert entries[0] == TreeTableEntry(1, "a")
    assert [e.key for e in entries] == [1, 2, 3, 4, 5]


def test_iterator_remove(table):
    it = table.entries()
    removed = None
    for entry in it:
        if entry.key == 3:
            removed = it.remove()
    assert removed == "c"
    assert list(table.keys()) == [1, 2, 4, 5]


def test_iterator_remove_all_entries(table):
    it = table.entries()
    for _ in it:
        it.remove()
    assert len(table) == 0


def test_iterator_remove_twice_raises(table):
    it = table.entries()
    next(it)
    it.remove()
    with pytest.raises(KeyError):
        it.remove()


def test_iterator_remove_before_next_raises(table):
    with pytest.raises(KeyError):
        table.entries().remove()


@given(st.lists(st.tuples(st.booleans(), st.integers(-50, 50))))
def test_matches_dict_model(operations):
    t = TreeTable(cmp)
    model = {}
    for insert, key in operations:
        if insert:
            t.add(key, key * 2)
            model[key] = key * 2
        elif key in model:
            assert t.remove(key) == model.pop(key)
        else:
            with pytest.raises(KeyError):
                t.remove(key)
    assert len(t) == len(model)
    assert list(t.items()) == sorted(model.items())