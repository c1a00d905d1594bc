import pytest

from blockfall.position import Position


def test_fields_hold_given_values():
    pos = Position(4, 7)
    assert pos.row == 4
    assert pos.column == 7


def test_keyword_construction_matches_positional():
    assert Position(row=2, column=3) == Position(2, 3)


def test_equality_depends_on_both_fields():
    assert Position(1, 2) == Position(1, 2)
    assert not Position(1, 2) == Position(2, 1)


def test_hashable_and_usable_in_sets():
    cells = {Position(0, 0), Position(0, 0), Position(1, 1)}
    assert len(cells) == 2
    assert Position(1, 1) in cells


def test_positions_are_immutable():
    pos = Position(0, 0)
    with pytest.raises(AttributeError):
        pos.row = 5  # type: ignore[misc]
    assert pos.row == 0
    assert pos == Position(0, 0)