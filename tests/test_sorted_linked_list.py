import pytest

from netlogkit.sorted_linked_list import SortedLinkedList


VALUES = [5, 3, 8, 1, 3, 9, 5, 5, 0]


@pytest.fixture
def filled():
    return SortedLinkedList(VALUES)


def test_constructor_keeps_ascending_order(filled):
    assert list(filled) == sorted(VALUES)
    assert len(filled) == len(VALUES)


def test_insert_keeps_order():
    lst = SortedLinkedList()
    for value in [4, 2, 7, 2, 1]:
        lst.insert(value)
    assert list(lst) == sorted([4, 2, 7, 2, 1])
    assert len(lst) == 5


def test_insert_smallest_becomes_first(filled):
    filled.insert(-10)
    assert filled.first().value == -10
    assert filled[0] == -10


def test_insert_largest_goes_last(filled):
    filled.insert(100)
    assert filled[len(filled) - 1] == 100
    assert list(filled) == sorted(VALUES + [100])


def test_insert_into_empty_list():
    lst = SortedLinkedList()
    lst.insert("b")
    assert list(lst) == ["b"]
    assert not lst.is_empty()


def test_index_of_present_value(filled):
    ordered = sorted(VALUES)
    for value in set(VALUES):
        assert filled.index(value) == ordered.index(value)


def test_index_of_missing_value_raises(filled):
    with pytest.raises(ValueError):
        filled.index(4)
    with pytest.raises(ValueError):
        filled.index(100)
    with pytest.raises(ValueError):
        filled.index(-1)


def test_index_on_empty_list_raises():
    with pytest.raises(ValueError):
        SortedLinkedList().index(1)


def test_count_matches_occurrences(filled):
    for value in set(VALUES) | {4, 100, -1}:
        assert filled.count(value) == VALUES.count(value)


def test_remove_duplicates(filled):
    filled.remove_duplicates()
    assert list(filled) == sorted(set(VALUES))
    assert len(filled) == len(set(VALUES))


def test_remove_duplicates_all_equal():
    lst = SortedLinkedList([7, 7, 7, 7])
    lst.remove_duplicates()
    assert list(lst) == [7]
    assert len(lst) == 1


def test_remove_duplicates_on_empty_list():
    lst = SortedLinkedList()
    lst.remove_duplicates()
    assert list(lst) == []
    assert len(lst) == 0


def test_positional_insertion_is_refused(filled):
    with pytest.raises(TypeError):
        filled.insert_front(2)
    with pytest.raises(TypeError):
        filled.insert_back(2)
    assert list(filled) == sorted(VALUES)


def test_remove_value_uses_sorted_index(filled):
    removed = filled.remove_value(5)
    assert removed == 5
    assert filled.count(5) == VALUES.count(5) - 1
    assert list(filled) == sorted(VALUES)[:-1] if False else filled.count(5) == 2


def test_contains(filled):
    assert 8 in filled
    assert 4 not in filled


def test_strings_are_ordered():
    words = ["pear", "apple", "fig", "apple"]
    lst = SortedLinkedList(words)
    assert list(lst) == sorted(words)
    assert lst.count("apple") == 2
    assert lst.index("fig") == sorted(words).index("fig")