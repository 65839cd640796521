import pytest

from cnake.body import SnakeBody
from cnake.coord import Coord


def test_new_body_is_empty():
    body = SnakeBody()
    assert body.is_empty()
    assert len(body) == 0


def test_push_front_and_back_order():
    body = SnakeBody()
    body.push_back(Coord(2, 0))
    body.push_front(Coord(1, 0))
    body.push_back(Coord(3, 0))
    assert list(body) == [Coord(1, 0), Coord(2, 0), Coord(3, 0)]
    assert body.head == Coord(1, 0)


def test_pop_front_and_back():
    body = SnakeBody([Coord(1, 1), Coord(2, 2), Coord(3, 3)])
    assert body.pop_front() == Coord(1, 1)
    assert body.pop_back() == Coord(3, 3)
    assert list(body) == [Coord(2, 2)]
    assert body.pop_back() == Coord(2, 2)
    assert body.is_empty()


def test_pop_from_empty_raises():
    body = SnakeBody()
    with pytest.raises(IndexError):
        body.pop_front()
    with pytest.raises(IndexError):
        body.pop_back()


def test_push_pop_round_trip_after_emptying():
    body = SnakeBody()
    body.push_front(Coord(5, 5))
    assert body.pop_front() == Coord(5, 5)
    body.push_back(Coord(6, 6))
    assert body.pop_front() == Coord(6, 6)
    assert body.is_empty()


def test_contains():
    body = SnakeBody([Coord(1, 2), Coord(3, 4)])
    assert Coord(3, 4) in body
    assert Coord(4, 3) not in body


def test_len_tracks_changes():
    body = SnakeBody()
    for i in range(4):
        body.push_front(Coord(i, i))
    assert len(body) == 4
    body.pop_back()
    assert len(body) == 3


def test_str_joins_with_arrows():
    body = SnakeBody([Coord(1, 2), Coord(3, 4)])
    assert str(body) == "Coord(x=1, y=2) -> Coord(x=3, y=4)"


def test_str_of_empty_body():
    assert str(SnakeBody()) == ""