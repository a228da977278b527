import math

import pytest

from problemset.arithmetic import (
    ALL_GOOD,
    IMPOSSIBLE,
    absolute_difference,
    batting_average,
    best_buy,
    carrots_earned,
    chicken_message,
    is_halloween,
    judge_moose,
    missing_r2,
    moscow_dream,
    quadrant,
    remaining_megabytes,
    temperature_point,
    total_qaly,
)


def test_batting_average_skips_walks():
    assert batting_average([3, -1, 3]) == 3.0


@pytest.mark.parametrize("values", [[0, 1, 2, 4], [4, 4, -1, 0], [1]])
def test_batting_average_within_bounds(values):
    counted = [v for v in values if v >= 0]
    result = batting_average(values)
    assert min(counted) <= result <= max(counted)


def test_batting_average_without_at_bats_raises():
    with pytest.raises(ValueError):
        batting_average([-1, -1])


def test_carrots_equal_solved():
    assert carrots_earned(["first", "second"], 5) == 5


@pytest.mark.parametrize("a,b", [(10, 12), (71293781758123, 72784), (1, 12345677654321)])
def test_absolute_difference_symmetric(a, b):
    assert absolute_difference(a, b) == absolute_difference(b, a)
    assert absolute_difference(a, b) >= 0
    assert min(a, b) + absolute_difference(a, b) == max(a, b)


def test_absolute_difference_of_equal_values():
    assert absolute_difference(7, 7) == 0


@pytest.mark.parametrize("r1,mean", [(11, 15), (4, 3), (-1000, 1000)])
def test_missing_r2_restores_mean(r1, mean):
    r2 = missing_r2(r1, mean)
    assert r1 + r2 == 2 * mean


def test_remaining_megabytes_without_history():
    assert remaining_megabytes(10, []) == 10


def test_remaining_megabytes_full_usage_keeps_quota():
    assert remaining_megabytes(10, [10, 10, 10]) == 10


def test_total_qaly_empty_and_single():
    assert total_qaly([]) == 0.0
    assert total_qaly([(1.0, 2.5)]) == 2.5


def test_total_qaly_is_additive():
    first = [(0.5, 2.0), (0.25, 4.0)]
    second = [(1.0, 3.0)]
    assert math.isclose(total_qaly(first + second), total_qaly(first) + total_qaly(second))


def test_temperature_special_cases():
    assert temperature_point(0, 1) == ALL_GOOD
    assert temperature_point(5, 1) == IMPOSSIBLE


@pytest.mark.parametrize("x,y", [(32, 2), (-10, 0.5), (7, 3)])
def test_temperature_point_is_fixed(x, y):
    t = temperature_point(x, y)
    assert math.isclose(x + y * t, t, abs_tol=1e-9)


@pytest.mark.parametrize(
    "args,expected",
    [
        ((1, 1, 1, 3), True),
        ((0, 1, 1, 3), False),
        ((1, 1, 1, 2), False),
        ((1, 1, 1, 4), False),
        ((2, 3, 4, 9), True),
    ],
)
def test_moscow_dream(args, expected):
    assert moscow_dream(*args) is expected


@pytest.mark.parametrize(
    "x,y,expected", [(10, 6, 1), (-5, 3, 2), (-1, -1, 3), (9, -4, 4)]
)
def test_quadrant(x, y, expected):
    assert quadrant(x, y) == expected


@pytest.mark.parametrize("x,y", [(0, 5), (5, 0), (0, 0)])
def test_quadrant_on_axis_raises(x, y):
    with pytest.raises(ValueError):
        quadrant(x, y)


def test_judge_moose():
    assert judge_moose(0, 0) == "Not a moose"
    assert judge_moose(3, 3) == "Even 6"
    assert judge_moose(2, 3) == "Odd 6"


def test_chicken_single_piece_messages():
    assert chicken_message(5, 6) == "Dr. Chaz will have 1 piece of chicken left over!"
    assert chicken_message(6, 5) == "Dr. Chaz needs 1 more piece of chicken!"


@pytest.mark.parametrize("k", [2, 5, 17])
def test_chicken_plural_messages(k):
    assert chicken_message(10, 10 + k) == f"Dr. Chaz will have {k} pieces of chicken left over!"
    assert chicken_message(10 + k, 10) == f"Dr. Chaz needs {k} more pieces of chicken!"


@pytest.mark.parametrize(
    "hand,expected",
    [
        ((0, 0, 0), "Copper"),
        ((0, 0, 2), "Estate or Copper"),
        ((1, 0, 0), "Estate or Silver"),
        ((1, 1, 0), "Duchy or Silver"),
        ((2, 0, 0), "Duchy or Gold"),
        ((2, 1, 0), "Province or Gold"),
    ],
)
def test_best_buy(hand, expected):
    assert best_buy(*hand) == expected


@pytest.mark.parametrize(
    "month,day,expected",
    [("OCT", 31, True), ("DEC", 25, True), ("JUN", 24, False), ("OCT", 30, False)],
)
def test_is_halloween(month, day, expected):
    assert is_halloween(month, day) is expected