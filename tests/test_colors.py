import pytest

from blockfall.colors import (
    BLACK,
    BLUE,
    CYAN,
    DARK_BLUE,
    GREEN,
    LIGHT_BLUE,
    ORANGE,
    PURPLE,
    RED,
    YELLOW,
    Color,
    get_cell_colors,
)


def test_palette_order():
    assert get_cell_colors() == [BLACK, GREEN, RED, ORANGE, YELLOW, PURPLE, CYAN, BLUE]


def test_empty_cell_colour_is_black():
    assert get_cell_colors()[0] == (0, 0, 0, 255)


@pytest.mark.parametrize(
    "color, expected",
    [
        (GREEN, (47, 230, 23, 255)),
        (RED, (232, 18, 18, 255)),
        (ORANGE, (226, 116, 17, 255)),
        (YELLOW, (237, 234, 4, 255)),
        (PURPLE, (166, 0, 247, 255)),
        (CYAN, (21, 204, 209, 255)),
        (BLUE, (13, 64, 216, 255)),
        (LIGHT_BLUE, (59, 85, 162, 255)),
        (DARK_BLUE, (44, 44, 127, 255)),
    ],
)
def test_colour_components(color, expected):
    assert tuple(color) == expected


def test_alpha_defaults_to_opaque():
    assert Color(1, 2, 3) == Color(1, 2, 3, 255)


def test_each_call_returns_fresh_list():
    first = get_cell_colors()
    first.clear()
    assert len(get_cell_colors()) == 8


def test_all_components_in_byte_range():
    for color in get_cell_colors():
        assert all(0 <= part <= 255 for part in color)