import pytest

from cubscene.linked import LinkedList, Node


def test_add_back_keeps_order():
    items = LinkedList()
    for value in ("a", "b", "c"):
        items.add_back(value)
    assert list(items) == ["a", "b", "c"]


def test_add_front_prepends():
    items = LinkedList(["b"])
    items.add_front("a")
    assert list(items) == ["a", "b"]
    assert items.head.content == "a"


def test_len_counts_nodes():
    assert len(LinkedList()) == 0
    assert len(LinkedList(range(5))) == 5


def test_last_on_empty_is_none():
    assert LinkedList().last() is None


def test_last_returns_tail_node():
    items = LinkedList([1, 2, 3])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_add_back_returns_new_tail():
    items = LinkedList([1])
    node = items.add_back(2)
    assert items.last() is node


def test_clear_calls_delete_for_each_content():
    items = LinkedList(["x", "y"])
    deleted = []
    items.clear(deleted.append)
    assert deleted == ["x", "y"]
    assert items.head is None
    assert len(items) == 0


def test_clear_without_delete_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_iterate_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list_and_leaves_original():
    items = LinkedList([1, 2, 3])
    doubled = items.map(lambda value: value * 2)
    assert list(doubled) == [2, 4, 6]
    assert list(items) == [1, 2, 3]
    assert doubled is not items


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_iterate_propagates_errors():
    def boom(_):
        raise RuntimeError("stop")

    with pytest.raises(RuntimeError):
        LinkedList([1]).iterate(boom)