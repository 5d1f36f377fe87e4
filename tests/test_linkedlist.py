import pytest

from libft.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_add_back_keeps_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.add_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_add_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.add_front(item)
    assert list(lst) == [3, 2, 1]


def test_add_returns_node_linked_in():
    lst = LinkedList()
    first = lst.add_back("x")
    second = lst.add_back("y")
    assert lst.head is first
    assert first.next is second
    assert second.next is None
    assert isinstance(first, Node) and first.content == "x"


def test_add_front_becomes_head():
    lst = LinkedList(["b"])
    node = lst.add_front("a")
    assert lst.head is node
    assert node.next.content == "b"


def test_constructor_from_iterable():
    assert list(LinkedList(range(5))) == [0, 1, 2, 3, 4]


def test_last_returns_final_node():
    lst = LinkedList([10, 20, 30])
    tail = lst.last()
    assert tail.content == 30
    assert tail.next is None


def test_clear_calls_delete_in_order_and_empties():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_each_content():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.iterate(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list_and_keeps_original():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper, lambda _: None)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper, lambda _: None)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [10, 20]


def test_map_requires_functions():
    with pytest.raises(TypeError):
        LinkedList([1]).map(None, lambda _: None)
    with pytest.raises(TypeError):
        LinkedList([1]).map(lambda x: x, None)


def test_len_matches_additions():
    lst = LinkedList()
    for i in range(7):
        lst.add_front(i) if i % 2 else lst.add_back(i)
    assert len(lst) == 7
    assert sorted(lst) == list(range(7))