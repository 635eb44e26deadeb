import pytest

from dsakit.linkedlist import LinkedList, Node, merge_two_lists, reverse_linked_list


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], []),
        ([1], [1]),
        ([1, 2], [2, 1]),
        ([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]),
    ],
    ids=["empty", "single", "two", "multiple"],
)
def test_reverse_linked_list(values, expected):
    ll = LinkedList()
    for value in values:
        ll.insert_at_end(value)

    reverse_linked_list(ll)

    assert ll.to_list() == expected
    if expected:
        assert ll.head is not None and ll.head.val == expected[0]
        assert ll.tail is not None and ll.tail.val == expected[-1]
        assert ll.tail.next is None
    else:
        assert ll.head is None


def test_insert_at_end_and_head():
    ll = LinkedList()
    ll.insert_at_end(2)
    ll.insert_at_end(3)
    ll.insert_at_head(1)
    assert ll.to_list() == [1, 2, 3]
    assert len(ll) == 3
    assert ll.head.val == 1
    assert ll.tail.val == 3


def test_insert_at_head_on_empty_sets_tail():
    ll = LinkedList()
    ll.insert_at_head(7)
    assert ll.head is ll.tail
    assert ll.tail == Node(7)


def test_insert_at_positions():
    ll = LinkedList([1, 3])
    ll.insert_at(1, 2)
    ll.insert_at(0, 0)
    ll.insert_at(4, 4)
    assert ll.to_list() == [0, 1, 2, 3, 4]
    assert len(ll) == 5
    assert ll.tail.val == 4


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_at_out_of_range(index):
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.insert_at(index, 9)
    assert ll.to_list() == [1, 2]


def test_delete_at_middle_and_ends():
    ll = LinkedList([1, 2, 3, 4])
    ll.delete_at(1)
    assert ll.to_list() == [1, 3, 4]
    ll.delete_at(2)
    assert ll.to_list() == [1, 3]
    assert ll.tail.val == 3
    ll.delete_at(0)
    assert ll.to_list() == [3]
    assert len(ll) == 1
    assert ll.head is ll.tail


def test_delete_last_remaining_empties_list():
    ll = LinkedList([5])
    ll.delete_at(0)
    assert ll.to_list() == []
    assert ll.head is None and ll.tail is None
    assert len(ll) == 0


@pytest.mark.parametrize("index", [-1, 2])
def test_delete_at_out_of_range(index):
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.delete_at(index)


def test_str():
    assert str(LinkedList([1, 2, 3])) == "1 -> 2 -> 3 -> nil"
    assert str(LinkedList()) == "nil"


def test_iteration_matches_to_list():
    ll = LinkedList([4, 5, 6])
    assert list(ll) == ll.to_list() == [4, 5, 6]


def test_merge_two_lists():
    merged = merge_two_lists(LinkedList([1, 3, 5]), LinkedList([2, 3, 4, 6, 7]))
    assert merged.to_list() == [1, 2, 3, 3, 4, 5, 6, 7]
    assert len(merged) == 8
    assert merged.tail.val == 7


def test_merge_with_empty_returns_other_list():
    full = LinkedList([1, 2])
    empty = LinkedList()
    assert merge_two_lists(empty, full) is full
    assert merge_two_lists(full, empty) is full