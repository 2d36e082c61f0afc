import string

import pytest

from algokit.wheel import wheel_rotations


@pytest.mark.parametrize("text, expected", [("zeus", 18), ("map", 35), ("", 0)])
def test_known_words(text, expected):
    assert wheel_rotations(text) == expected


def test_turning_either_way_is_symmetric():
    assert wheel_rotations("b") == wheel_rotations("z")


def test_repeating_a_letter_costs_nothing_more():
    assert wheel_rotations("qqqq") == wheel_rotations("q")


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_single_letter_at_most_half_turn(letter):
    assert wheel_rotations(letter) <= 26 // 2


def test_invalid_character():
    with pytest.raises(ValueError):
        wheel_rotations("Abc")