import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.slist import SList
from structkit.slist_iter import SListIterator, SListZipIterator


def _pair():
    return SList(["a", "b", "c", "d"]), SList(["e", "f", "g"])


def test_iterates_in_order_and_tracks_index():
    data = [5, 12, 848, 23]
    it = SListIterator(SList(data))
    seen = []
    for position, element in enumerate(it):
        seen.append(element)
        assert it.index() == position
    assert seen == data


def test_remove_during_iteration():
    data = [1, 2, 3, 4]
    lst = SList(data)
    it = SListIterator(lst)
    for element in it:
        if element == 3:
            assert it.remove() == 3
    assert lst.to_list() == [1, 2, 4]
    assert lst.count(3) == 0
    assert len(lst) == 3


def test_remove_last_element_updates_tail():
    lst = SList([1, 2, 3])
    it = SListIterator(lst)
    for element in it:
        if element == 3:
            it.remove()
    assert lst.last() == 2
    lst.add(9)
    assert lst.to_list() == [1, 2, 9]


def test_remove_twice_raises():
    it = SListIterator(SList([1, 2]))
    next(it)
    it.remove()
    with pytest.raises(ValueError):
        it.remove()


def test_operations_before_next_raise():
    it = SListIterator(SList([1]))
    with pytest.raises(ValueError):
        it.remove()
    with pytest.raises(ValueError):
        it.replace(2)
    with pytest.raises(ValueError):
        it.add(2)


def test_add_inserts_after_current_and_is_skipped():
    lst = SList([1, 2, 3, 4])
    it = SListIterator(lst)
    visited = []
    for element in it:
        visited.append(element)
        if element == 3:
            it.add(80)
    assert visited == [1, 2, 3, 4]
    assert lst.to_list() == [1, 2, 3, 80, 4]
    assert lst.get_at(3) == 80
    assert len(lst) == 5


def test_add_after_last_updates_tail():
    lst = SList([1, 2])
    it = SListIterator(lst)
    for element in it:
        if element == 2:
            it.add(7)
    assert lst.last() == 7
    lst.add(8)
    assert lst.to_list() == [1, 2, 7, 8]


def test_remove_after_add_keeps_list_consistent():
    lst = SList([1, 2, 3])
    it = SListIterator(lst)
    next(it)
    it.add(10)
    assert next(it) == 2
    assert it.remove() == 2
    assert lst.to_list() == [1, 10, 3]
    assert next(it) == 3
    assert it.remove() == 3
    assert lst.last() == 10


def test_replace_returns_old():
    lst = SList([5, 12, 848, 23])
    it = SListIterator(lst)
    for element in it:
        if element == 848:
            assert it.replace(42) == 848
    assert lst.index_of(42) == 2
    assert lst.count(848) == 0


@given(st.lists(st.integers()))
def test_removing_matches_filter(data):
    lst = SList(data)
    it = SListIterator(lst)
    for element in it:
        if element % 2:
            it.remove()
    kept = [x for x in data if not x % 2]
    assert lst.to_list() == kept
    assert len(lst) == len(kept)
    if kept:
        assert lst.last() == kept[-1]


def test_zip_next_pairs():
    first, second = _pair()
    pairs = list(SListZipIterator(first, second))
    assert pairs == list(zip(first.to_list(), second.to_list()))
    assert pairs[0] == ("a", "e")
    assert pairs[2] == ("c", "g")


def test_zip_remove():
    first, second = _pair()
    zipper = SListZipIterator(first, second)
    removed = None
    for e1, _ in zipper:
        if e1 == "b":
            removed = zipper.remove()
    assert removed == ("b", "f")
    assert first.count("b") == 0
    assert second.count("f") == 0
    assert len(first) == 3
    assert len(second) == 2


def test_zip_add():
    first, second = _pair()
    zipper = SListZipIterator(first, second)
    for e1, _ in zipper:
        if e1 == "b":
            zipper.add("h", "i")
    assert first.index_of("h") == 2
    assert second.index_of("i") == 2
    assert first.index_of("c") == 3
    assert first.count("h") == 1
    assert second.count("i") == 1
    assert len(first) == 5
    assert len(second) == 4


def test_zip_add_at_tail_updates_both_tails():
    first, second = SList(["a"]), SList(["e"])
    zipper = SListZipIterator(first, second)
    next(zipper)
    zipper.add("h", "i")
    assert first.last() == "h"
    assert second.last() == "i"


def test_zip_replace():
    first, second = _pair()
    zipper = SListZipIterator(first, second)
    old = None
    for e1, _ in zipper:
        if e1 == "b":
            old = zipper.replace("h", "i")
            assert zipper.index() == 1
    assert old == ("b", "f")
    assert first.index_of("h") == 1
    assert second.index_of("i") == 1


def test_zip_remove_without_pair_raises():
    first, second = _pair()
    zipper = SListZipIterator(first, second)
    with pytest.raises(ValueError):
        zipper.remove()
    next(zipper)
    zipper.remove()
    with pytest.raises(ValueError):
        zipper.replace("x", "y")