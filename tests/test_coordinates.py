import pytest

from minesweeper.coordinates import Coordinates


def test_add_coordinates():
    assert Coordinates(2, 3) + Coordinates(4, 5) == Coordinates(6, 8)


def test_add_offset_moves_position():
    assert Coordinates(5, 5) + (-1, 1) == Coordinates(4, 6)


def test_add_offset_below_zero_wraps():
    assert Coordinates(0, 0) + (-1, -1) == Coordinates(65535, 65535)


def test_add_overflow_raises():
    with pytest.raises(OverflowError):
        Coordinates(65535, 0) + Coordinates(1, 0)


def test_sub_saturates_at_zero():
    assert Coordinates(2, 10) - Coordinates(5, 4) == Coordinates(0, 6)


def test_str_format():
    assert str(Coordinates(1, 2)) == "Coordinates: 1, 2"


def test_negative_component_rejected():
    with pytest.raises(ValueError):
        Coordinates(-1, 0)


def test_hashable_and_equal():
    assert {Coordinates(1, 1), Coordinates(1, 1)} == {Coordinates(1, 1)}


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Coordinates(1, 1) + 3