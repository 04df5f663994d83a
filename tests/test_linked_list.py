import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftcore.linked_list import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert lst.head is None
    assert lst.to_list() == []


def test_push_back_keeps_order():
    lst = LinkedList()
    lst.push_back("a")
    lst.push_back("b")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_front(item)
    assert list(lst) == ["c", "b", "a"]
    assert lst.last().content == "a"


def test_push_returns_node():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert isinstance(node, Node)
    assert node.content == 2
    assert lst.last() is node
    assert lst.head.next is node


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    lst.push_back("y")
    assert lst.last().content == "y"


def test_clear_calls_delete_in_order():
    items = ["one", "two", "three"]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert lst.to_list() == []
    lst.push_back(5)
    assert lst.to_list() == [5]


def test_for_each_visits_all():
    items = [3, 1, 4]
    seen = []
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_produces_new_list():
    lst = LinkedList(["ab", "cd"])
    mapped = lst.map(str.upper)
    assert mapped.to_list() == ["AB", "CD"]
    assert lst.to_list() == ["ab", "cd"]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(lambda x: x)) == 0


def test_map_failure_deletes_partial_results():
    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    deleted = []
    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == [func(1), func(2)]
    assert lst.to_list() == [1, 2, 3, 4]


def test_to_list_terminated():
    items = ["x", "y"]
    lst = LinkedList(items)
    assert lst.to_list(terminated=True) == items + [None]
    assert lst.to_list() == items


@given(st.lists(st.integers()))
def test_round_trip(items):
    lst = LinkedList(items)
    assert lst.to_list() == items
    assert len(lst) == len(items)
    if items:
        assert lst.last().content == items[-1]
    else:
        assert lst.last() is None


@given(st.lists(st.integers()))
def test_push_front_is_reverse(items):
    lst = LinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == list(reversed(items))