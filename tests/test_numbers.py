import pytest

from utils.numbers import round_half_up, round_one_decimal


@pytest.mark.parametrize("value, expected", [
    (0.5, 1),
    (2.5, 3),
    (66.66, 67),
    (49.4, 49),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("value, expected", [
    (52.25, 52.3),
    (3.25, 3.3),
    (0.05, 0.1),
    (81.24, 81.2),
    (85.0, 85.0),
])
def test_round_one_decimal_ties_go_up(value, expected):
    assert round_one_decimal(value) == expected
