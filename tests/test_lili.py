import pytest

from pctoolkit.lili import EmptyListError, LinkedList


def _filled(*items):
    lst = LinkedList()
    for item in items:
        lst.record(item)
    return lst


@pytest.mark.parametrize("operation", ["play", "forward", "reverse", "remove", "pop"])
def test_empty_list_operations_raise(operation):
    with pytest.raises(EmptyListError):
        getattr(LinkedList(), operation)()


def test_replace_on_empty_raises():
    with pytest.raises(EmptyListError):
        LinkedList().replace("x")


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        LinkedList().play()


def test_record_appends_and_moves_cursor():
    lst = _filled("a", "b", "c")
    assert lst.play() == "c"
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3
    assert lst.quant() == len(lst)


def test_navigation_stops_at_ends():
    lst = _filled("a", "b", "c")
    lst.reverse()
    assert lst.play() == "b"
    lst.reverse()
    lst.reverse()
    assert lst.play() == "a"
    lst.forward()
    lst.forward()
    lst.forward()
    assert lst.play() == "c"


def test_record_away_from_end_raises():
    lst = _filled("a", "b")
    lst.reverse()
    with pytest.raises(ValueError):
        lst.record("c")
    assert list(lst) == ["a", "b"]


def test_remove_first_moves_cursor_forward():
    lst = _filled("a", "b", "c")
    lst.reverse()
    lst.reverse()
    lst.remove()
    assert lst.play() == "b"
    assert list(lst) == ["b", "c"]
    lst.reverse()
    assert lst.play() == "b"


def test_remove_last_moves_cursor_back():
    lst = _filled("a", "b", "c")
    lst.remove()
    assert lst.play() == "b"
    assert list(lst) == ["a", "b"]
    lst.record("d")
    assert list(lst) == ["a", "b", "d"]


def test_remove_middle_moves_cursor_back():
    lst = _filled("a", "b", "c")
    lst.reverse()
    lst.remove()
    assert lst.play() == "a"
    assert list(lst) == ["a", "c"]
    assert len(lst) == 2


def test_remove_only_element_empties_list():
    lst = _filled("a")
    lst.remove()
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(EmptyListError):
        lst.play()


def test_clear():
    lst = _filled("a", "b", "c")
    lst.reverse()
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []


def test_insert_after_cursor():
    lst = _filled("a", "c")
    lst.reverse()
    lst.insert("b")
    assert lst.play() == "b"
    assert list(lst) == ["a", "b", "c"]
    lst.forward()
    assert lst.play() == "c"


def test_insert_into_empty_list():
    lst = LinkedList()
    lst.insert("x")
    assert lst.play() == "x"
    assert list(lst) == ["x"]


def test_insert_at_head_extends_list():
    lst = _filled("a")
    lst.insert("b")
    lst.record("c")
    assert list(lst) == ["a", "b", "c"]


def test_replace_changes_cursor_data():
    lst = _filled("a", "b")
    lst.reverse()
    lst.replace("z")
    assert list(lst) == ["z", "b"]
    assert lst.play() == "z"


def test_push_appends_from_anywhere():
    lst = _filled("a", "b")
    lst.reverse()
    lst.push("c")
    assert lst.play() == "c"
    assert list(lst) == ["a", "b", "c"]


def test_pop_is_last_in_first_out():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.push(item)
    lst.reverse()
    assert lst.pop() == "c"
    assert lst.play() == "b"
    assert [lst.pop(), lst.pop()] == ["b", "a"]
    assert len(lst) == 0
    with pytest.raises(EmptyListError):
        lst.pop()


def test_data_length_limit():
    lst = LinkedList()
    lst.record("x" * 255)
    assert lst.play() == "x" * 255
    with pytest.raises(ValueError):
        lst.record("y" * 256)
    assert len(lst) == 1