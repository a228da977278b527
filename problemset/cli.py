"""Command line front end: read a problem's input, print its answer."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Sequence

from problemset.arithmetic import (
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
from problemset.games import left_beehind, mia_winner
from problemset.sequences import (
    denied_groups,
    describe_range,
    digits_steps,
    find_king,
    fizzbuzz,
    launch_day,
    parity_report,
    poker_strength,
    time_loop,
    vote_result,
)
from problemset.text import farewell, hello, help_phd, hiss

Solver = Callable[[str], list[str]]

_SOLVERS: dict[str, Solver] = {}

_MAX_BEEHIVE_CASES = 15


def _problem(name: str) -> Callable[[Solver], Solver]:
    def register(solver: Solver) -> Solver:
        _SOLVERS[name] = solver
        return solver

    return register


class _Reader:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._words = deque(text.split())

    def word(self) -> str:
        if not self._words:
            raise ValueError("unexpected end of input")
        return self._words.popleft()

    def next_int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def next_float(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.next_int() for _ in range(count)]

    def remaining(self) -> int:
        return len(self._words)


def _first_line(text: str) -> str:
    lines = text.splitlines()
    return lines[0] if lines else ""


def _counted_lines(text: str) -> tuple[_Reader, list[str]]:
    """Reader over the first line and the lines that follow it."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("unexpected end of input")
    return _Reader(lines[0]), lines[1:]


def _take_lines(lines: list[str], count: int) -> list[str]:
    if len(lines) < count:
        raise ValueError("unexpected end of input")
    return lines[:count]


@_problem("batterup")
def _batterup(text: str) -> list[str]:
    reader = _Reader(text)
    at_bats = reader.ints(reader.next_int())
    return [f"{batting_average(at_bats):g}"]


@_problem("carrots")
def _carrots(text: str) -> list[str]:
    header, rest = _counted_lines(text)
    count = header.next_int()
    solved = header.next_int()
    return [str(carrots_earned(rest[:count], solved))]


@_problem("different")
def _different(text: str) -> list[str]:
    reader = _Reader(text)
    answers = []
    while reader.remaining() >= 2:
        a, b = reader.ints(2)
        answers.append(str(absolute_difference(a, b)))
    return answers


@_problem("digits")
def _digits(text: str) -> list[str]:
    reader = _Reader(text)
    answers = []
    while reader.remaining():
        number = reader.word()
        if number == "END":
            break
        answers.append(str(digits_steps(number)))
    return answers


@_problem("fizzbuzz")
def _fizzbuzz(text: str) -> list[str]:
    fizz, buzz, limit = _Reader(text).ints(3)
    return fizzbuzz(fizz, buzz, limit)


@_problem("hangingout")
def _hangingout(text: str) -> list[str]:
    reader = _Reader(text)
    capacity, count = reader.ints(2)
    events = [(reader.word(), reader.next_int()) for _ in range(count)]
    return [str(denied_groups(capacity, events))]


@_problem("hello")
def _hello(text: str) -> list[str]:
    return [hello()]


@_problem("helpaphd")
def _helpaphd(text: str) -> list[str]:
    header, rest = _counted_lines(text)
    count = header.next_int()
    return [help_phd(line) for line in _take_lines(rest, count)]


@_problem("hissingmicrophone")
def _hissingmicrophone(text: str) -> list[str]:
    return [hiss(_first_line(text))]


@_problem("isithalloween")
def _isithalloween(text: str) -> list[str]:
    parts = _first_line(text).split()
    month = parts[0] if parts else ""
    day = int(parts[1]) if len(parts) > 1 else 0
    return ["yup" if is_halloween(month, day) else "nope"]


@_problem("judgingmoose")
def _judgingmoose(text: str) -> list[str]:
    left, right = _Reader(text).ints(2)
    return [judge_moose(left, right)]


@_problem("leftbeehind")
def _leftbeehind(text: str) -> list[str]:
    reader = _Reader(text)
    answers = []
    for _ in range(_MAX_BEEHIVE_CASES):
        if reader.remaining() < 2:
            break
        sour, sweet = reader.ints(2)
        if sour == 0 and sweet == 0:
            break
        answers.append(left_beehind(sour, sweet))
    return answers


@_problem("licensetolaunch")
def _licensetolaunch(text: str) -> list[str]:
    reader = _Reader(text)
    costs = reader.ints(reader.next_int())
    return [str(launch_day(costs) if costs else 0)]


@_problem("mia")
def _mia(text: str) -> list[str]:
    reader = _Reader(text)
    answers = []
    while reader.remaining() >= 4:
        s0, s1, r0, r1 = reader.ints(4)
        if s0 == s1 == r0 == r1 == 0:
            break
        answers.append(mia_winner(s0, s1, r0, r1))
    return answers


@_problem("moscowdream")
def _moscowdream(text: str) -> list[str]:
    easy, medium, hard, total = _Reader(text).ints(4)
    return ["YES" if moscow_dream(easy, medium, hard, total) else "NO"]


@_problem("oddgnome")
def _oddgnome(text: str) -> list[str]:
    reader = _Reader(text)
    answers = []
    for _ in range(reader.next_int()):
        size = reader.next_int()
        positions = [reader.next_int(), *reader.ints(size - 1)]
        answers.append(str(find_king(positions)))
    return answers


@_problem("oddities")
def _oddities(text: str) -> list[str]:
    reader = _Reader(text)
    return parity_report(reader.ints(reader.next_int()))


@_problem("onechicken")
def _onechicken(text: str) -> list[str]:
    people, pieces = _Reader(text).ints(2)
    return [chicken_message(people, pieces)]


@_problem("pokerhand")
def _pokerhand(text: str) -> list[str]:
    return [str(poker_strength(_first_line(text).split()))]


@_problem("provincesandgold")
def _provincesandgold(text: str) -> list[str]:
    gold, silver, copper = _Reader(text).ints(3)
    return [best_buy(gold, silver, copper)]


@_problem("qaly")
def _qaly(text: str) -> list[str]:
    reader = _Reader(text)
    periods = [
        (reader.next_float(), reader.next_float()) for _ in range(reader.next_int())
    ]
    return [f"{total_qaly(periods):.3f}"]


@_problem("quadrant")
def _quadrant(text: str) -> list[str]:
    x, y = _Reader(text).ints(2)
    try:
        return [str(quadrant(x, y))]
    except ValueError:
        return []


@_problem("r2")
def _r2(text: str) -> list[str]:
    r1, mean = _Reader(text).ints(2)
    return [str(missing_r2(r1, mean))]


@_problem("statistics")
def _statistics(text: str) -> list[str]:
    reader = _Reader(text)
    answers = []
    case = 1
    while reader.remaining():
        count = reader.next_int()
        values = [reader.next_int(), *reader.ints(count - 1)]
        low, high, spread = describe_range(values)
        answers.append(f"Case {case}: {low} {high} {spread}")
        case += 1
    return answers


@_problem("tarifa")
def _tarifa(text: str) -> list[str]:
    reader = _Reader(text)
    quota, months = reader.ints(2)
    return [str(remaining_megabytes(quota, reader.ints(months)))]


@_problem("temperature")
def _temperature(text: str) -> list[str]:
    reader = _Reader(text)
    result = temperature_point(reader.next_float(), reader.next_float())
    return [result if isinstance(result, str) else f"{result:.9f}"]


@_problem("thelastproblem")
def _thelastproblem(text: str) -> list[str]:
    return [farewell(_first_line(text))]


@_problem("timeloop")
def _timeloop(text: str) -> list[str]:
    return time_loop(_Reader(text).next_int())


@_problem("vote")
def _vote(text: str) -> list[str]:
    reader = _Reader(text)
    answers = []
    for _ in range(reader.next_int()):
        votes = reader.ints(reader.next_int())
        answers.append(vote_result(votes))
    return answers


def solve(problem: str, text: str) -> str:
    """Output that ``problem`` prints for the input ``text``."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    lines = solver(text)
    return "".join(f"{line}\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one problem, reading its input from standard input."""
    parser = argparse.ArgumentParser(
        prog="problemset", description="Solve a problem from standard input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"problemset: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())