import pytest

from pctoolkit.circbuffer import BoundedCircularBuffer, CircularBuffer


def test_put_then_get_number():
    circ = CircularBuffer(4)
    circ.put(7)
    assert circ.get() == 7
    assert circ.get() == 0


def test_get_on_empty_returns_zero():
    assert CircularBuffer(4).get() == 0


def test_put_masks_to_byte():
    circ = CircularBuffer(4)
    circ.put(0x141)
    assert circ.get() == 0x41


def test_puts_gets_round_trip():
    circ = CircularBuffer(4)
    circ.puts("ab")
    assert circ.gets() == "ab"
    assert circ.gets() == ""


def test_puts_wraps_around():
    circ = CircularBuffer(4)
    circ.puts("ab")
    assert circ.gets() == "ab"
    circ.puts("cd")
    assert circ.gets() == "cd"


def test_puts_overlong_keeps_tail_end():
    circ = CircularBuffer(4)
    circ.puts("hello")
    assert circ.gets() == "o"


def test_gets_is_bounded_by_ring():
    circ = CircularBuffer(4)
    for ch in "abcd":
        circ.put(ch)
    assert circ.gets() == "abcd"


def test_circular_rejects_bad_size():
    with pytest.raises(ValueError):
        CircularBuffer(0)


def test_put_rejects_multichar_string():
    with pytest.raises(ValueError):
        CircularBuffer(4).put("ab")


def test_bounded_capacity():
    circ = BoundedCircularBuffer(4)
    assert [circ.put(n) for n in (1, 2, 3)] == [True, True, True]
    assert circ.put(4) is False
    assert [circ.get() for _ in range(4)] == [1, 2, 3, 0]


def test_bounded_wraps():
    circ = BoundedCircularBuffer(4)
    for n in (1, 2, 3):
        circ.put(n)
    assert circ.get() == 1
    assert circ.put(9) is True
    assert [circ.get() for _ in range(3)] == [2, 3, 9]


def test_bounded_put_string():
    circ = BoundedCircularBuffer(4)
    assert circ.put_string("ola!") == 3
    assert [circ.get() for _ in range(4)] == [ord("o"), ord("l"), ord("a"), 0]


def test_bounded_rejects_bad_size():
    with pytest.raises(ValueError):
        BoundedCircularBuffer(256)
    with pytest.raises(ValueError):
        BoundedCircularBuffer(0)