"""Short computations on a handful of numbers each."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

ALL_GOOD = "ALL GOOD"
IMPOSSIBLE = "IMPOSSIBLE"


def batting_average(at_bats: Iterable[int]) -> float:
    """Mean of the non-negative at-bat results; walks (negative values) are skipped."""
    counted = [value for value in at_bats if value >= 0]
    if not counted:
        raise ValueError("no official at-bats to average")
    return sum(counted) / len(counted)


def carrots_earned(descriptions: Iterable[str], solved: int) -> int:
    """Carrots earned equal the number of problems solved.

    The contestant descriptions are read but do not affect the result;
    each must be a string.
    """
    for description in descriptions:
        if not isinstance(description, str):
            raise TypeError(f"description must be a string, got {description!r}")
    return solved


def absolute_difference(a: int, b: int) -> int:
    """Distance between two integers."""
    return abs(a - b)


def missing_r2(r1: int, mean: int) -> int:
    """The second number given the first and the mean of both."""
    return 2 * mean - r1


def remaining_megabytes(quota: int, usage: Iterable[int]) -> int:
    """Data available next month after carrying over unused quota."""
    return quota + sum(quota - used for used in usage)


def total_qaly(periods: Iterable[tuple[float, float]]) -> float:
    """Sum of quality times years over all periods."""
    return sum((quality * years for quality, years in periods), 0.0)


def temperature_point(x: float, y: float) -> float | str:
    """Temperature where scale B (B = x + y*A) equals scale A.

    Returns ``ALL_GOOD`` when every temperature matches and ``IMPOSSIBLE``
    when none does.
    """
    if y == 1:
        return ALL_GOOD if x == 0 else IMPOSSIBLE
    return x / (1 - y)


def moscow_dream(easy: int, medium: int, hard: int, total: int) -> bool:
    """Whether a contest of ``total`` problems with at least one of each level can be set."""
    if easy <= 0 or medium <= 0 or hard <= 0:
        return False
    if easy + medium + hard < total or total < 3:
        return False
    return True


def quadrant(x: int, y: int) -> int:
    """Quadrant number of a point that lies on neither axis."""
    if x > 0 and y > 0:
        return 1
    if x < 0 and y > 0:
        return 2
    if x < 0 and y < 0:
        return 3
    if x > 0 and y < 0:
        return 4
    raise ValueError(f"point ({x}, {y}) lies on an axis")


def judge_moose(left: int, right: int) -> str:
    """Classify a moose by the tines on each side of its antlers."""
    if left == 0 and right == 0:
        return "Not a moose"
    if left == right:
        return f"Even {left + right}"
    return f"Odd {2 * max(left, right)}"


def chicken_message(people: int, pieces: int) -> str:
    """What Dr. Chaz says about the chicken he has for ``people`` guests."""
    if pieces < people:
        missing = people - pieces
        if missing == 1:
            return "Dr. Chaz needs 1 more piece of chicken!"
        return f"Dr. Chaz needs {missing} more pieces of chicken!"
    spare = pieces - people
    if spare == 1:
        return "Dr. Chaz will have 1 piece of chicken left over!"
    return f"Dr. Chaz will have {spare} pieces of chicken left over!"


_PURCHASES: Sequence[tuple[int, str]] = (
    (8, "Province or Gold"),
    (6, "Duchy or Gold"),
    (5, "Duchy or Silver"),
    (3, "Estate or Silver"),
    (2, "Estate or Copper"),
)


def best_buy(gold: int, silver: int, copper: int) -> str:
    """Best victory card and treasure affordable with the given hand."""
    buying_power = gold * 3 + silver * 2 + copper
    for threshold, purchase in _PURCHASES:
        if buying_power >= threshold:
            return purchase
    return "Copper"


def is_halloween(month: str, day: int) -> bool:
    """True on OCT 31 and DEC 25."""
    return (month, day) in {("OCT", 31), ("DEC", 25)}