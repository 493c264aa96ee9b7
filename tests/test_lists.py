import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.ft.lists import LinkedList, Node


def test_init_keeps_order():
    items = ["Hola", "cómo", "estás?"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front_puts_item_first():
    lst = LinkedList(["segundo"])
    node = lst.push_front("primero")
    assert list(lst) == ["primero", "segundo"]
    assert lst.head is node
    assert node.next.content == "segundo"


def test_push_back_appends():
    lst = LinkedList(["Hola", "cómo", "estás?"])
    lst.push_back("yo estoy bien :)")
    assert list(lst) == ["Hola", "cómo", "estás?", "yo estoy bien :)"]
    assert lst.last().content == "yo estoy bien :)"


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last().content == "x"
    assert len(lst) == 1


def test_last_is_node():
    lst = LinkedList([1, 2, 3])
    last = lst.last()
    assert isinstance(last, Node) and last.content == 3
    assert last.next is None


def test_pop_front_returns_and_deletes():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]
    assert lst.pop_front() == "b"
    assert lst.last() is None
    assert len(lst) == 0


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content_in_order():
    deleted = []
    lst = LinkedList(["Hola", "cómo", "estás?"])
    lst.clear(deleted.append)
    assert deleted == ["Hola", "cómo", "estás?"]
    assert len(lst) == 0
    assert lst.head is None


def test_for_each_visits_all():
    seen = []
    lst = LinkedList(["hola", "mundo", "libft"])
    lst.for_each(seen.append)
    assert seen == ["hola", "mundo", "libft"]


def test_map_builds_new_list():
    lst = LinkedList(["hola", "mundo", "libft"])
    mapped = lst.map(str.upper, lambda _: None)
    assert list(mapped) == ["HOLA", "MUNDO", "LIBFT"]
    assert list(lst) == ["hola", "mundo", "libft"]
    assert mapped is not lst


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == [10, 20]
    assert list(lst) == [1, 2, 3, 4]


@given(st.lists(st.integers()))
def test_round_trip(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)
    assert list(lst.map(lambda x: x)) == items


@given(st.lists(st.integers()), st.integers())
def test_push_front_then_pop(items, value):
    lst = LinkedList(items)
    lst.push_front(value)
    assert lst.pop_front() == value
    assert list(lst) == items