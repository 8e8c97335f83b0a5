import pytest

from advisor.functional import Left, Nothing, Right, Some, pipe


def test_maybe_map_and_bind():
    assert Some(5).map(lambda x: x * 2).get_or_else(0) == 10
    assert Nothing().map(lambda x: x * 2).get_or_else(0) == 0
    assert Some(0).bind(lambda x: Nothing() if x == 0 else Some(10 // x)).is_none()
    assert Some(2).bind(lambda x: Some(10 // x)) == Some(5)
    assert Nothing().bind(lambda x: Some(x)).is_none()


def test_right_and_left():
    right = Right(4)
    assert not right.is_left()
    assert right.get_or_else(0) == 4
    with pytest.raises(ValueError):
        right.get_error()

    left = Left({"error": "bad"})
    assert left.is_left()
    assert left.get_or_else(0) == 0
    assert left.get_error() == {"error": "bad"}


def test_pipe():
    assert pipe(3, lambda x: x + 1, lambda x: x * 2) == 8
    assert pipe("x") == "x"
