import pytest

from cslabs.linkedlist import LinkedList, format_list


def test_construct_and_iterate():
    values = [4, 8, 15, 16, 23, 42]
    items = LinkedList(values)
    assert list(items) == values
    assert list(reversed(items)) == values[::-1]
    assert len(items) == len(values)
    assert not items.is_empty()


def test_empty_list_iterators_sit_on_sentinels():
    items = LinkedList()
    assert items.is_empty()
    assert len(items) == 0
    assert items.first().is_past_end()
    assert items.last().is_past_beginning()


def test_iterator_walks_both_ways():
    items = LinkedList([1, 2, 3])
    itr = items.first()
    seen = []
    while not itr.is_past_end():
        seen.append(itr.retrieve())
        itr.move_forward()
    assert seen == [1, 2, 3]
    itr.move_forward()
    assert itr.is_past_end()
    back = []
    itr = items.last()
    while not itr.is_past_beginning():
        back.append(itr.retrieve())
        itr.move_backward()
    assert back == [3, 2, 1]


def test_retrieve_on_sentinel_raises():
    items = LinkedList([5])
    itr = items.first()
    itr.move_forward()
    with pytest.raises(IndexError):
        itr.retrieve()


def test_find_present_and_absent():
    items = LinkedList([7, 9, 7])
    assert items.find(9).retrieve() == 9
    assert items.find(7) == items.first()
    assert items.find(0).is_past_end()


def test_insert_after_and_before():
    items = LinkedList([1, 3])
    items.insert_after(2, items.find(1))
    items.insert_before(0, items.first())
    items.insert_before(4, items.find(3).__class__(items.find(3)._node.next, items)
                        if False else items.last())
    assert list(items) == [0, 1, 2, 4, 3]
    assert list(reversed(items)) == [3, 4, 2, 1, 0]
    assert len(items) == 5


def test_insert_before_past_end_appends():
    items = LinkedList([1])
    items.insert_before(2, items.find(99))
    assert list(items) == [1, 2]


def test_insert_at_sentinels_rejected():
    items = LinkedList([1])
    with pytest.raises(ValueError):
        items.insert_after(2, items.find(99))
    itr = items.first()
    itr.move_backward()
    with pytest.raises(ValueError):
        items.insert_before(2, itr)


def test_insert_with_foreign_iterator_rejected():
    items = LinkedList([1])
    other = LinkedList([1])
    with pytest.raises(ValueError):
        items.insert_after(2, other.first())


def test_remove_first_occurrence():
    items = LinkedList([5, 6, 5])
    items.remove(5)
    assert list(items) == [6, 5]
    items.remove(42)
    assert list(items) == [6, 5]
    assert len(items) == 2
    assert list(reversed(items)) == [5, 6]


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    duplicate = original.copy()
    original.clear()
    assert list(duplicate) == [1, 2, 3]
    assert list(original) == []
    assert original.is_empty()
    duplicate.append(4)
    assert list(original) == []


def test_clear_leaves_working_list():
    items = LinkedList([1, 2])
    items.clear()
    items.append(3)
    assert list(items) == [3]
    assert list(reversed(items)) == [3]


def test_format_list_both_directions():
    items = LinkedList([1, 2, 3])
    assert format_list(items, True) == "1 2 3 "
    assert format_list(items, False) == "3 2 1 "
    assert format_list(LinkedList(), True) == ""