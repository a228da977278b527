"""Computations over lists of values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise


def fizzbuzz(fizz: int, buzz: int, limit: int) -> list[str]:
    """FizzBuzz lines for 1..limit with the given divisors."""
    lines = []
    for k in range(1, limit + 1):
        word = ("Fizz" if k % fizz == 0 else "") + ("Buzz" if k % buzz == 0 else "")
        lines.append(word or str(k))
    return lines


def time_loop(count: int) -> list[str]:
    """Numbered incantation lines."""
    return [f"{k} Abracadabra" for k in range(1, count + 1)]


def parity_report(values: Iterable[int]) -> list[str]:
    """Whether each value is even or odd."""
    return [f"{value} is {'even' if value % 2 == 0 else 'odd'}" for value in values]


def digits_steps(number: str) -> int:
    """Smallest i for which taking the digit count i times reaches a fixed point."""
    steps = 1
    previous = number
    current = str(len(number))
    while current != previous:
        previous, current = current, str(len(current))
        steps += 1
    return steps


def find_king(positions: Sequence[int]) -> int:
    """1-based position of the first gnome that breaks the +1 sequence, or -1."""
    for index, (before, value) in enumerate(pairwise(positions), start=2):
        if value != before + 1:
            return index
    return -1


def launch_day(costs: Sequence[int]) -> int:
    """Index of the first cheapest day."""
    if not costs:
        raise ValueError("no launch days given")
    return min(range(len(costs)), key=costs.__getitem__)


def describe_range(values: Iterable[int]) -> tuple[int, int, int]:
    """Minimum, maximum and their difference."""
    values = list(values)
    if not values:
        raise ValueError("no values given")
    low, high = min(values), max(values)
    return low, high, high - low


def denied_groups(capacity: int, events: Iterable[tuple[str, int]]) -> int:
    """Number of entering groups turned away for lack of room."""
    present = 0
    denied = 0
    for kind, size in events:
        if kind == "enter":
            if present + size > capacity:
                denied += 1
            else:
                present += size
        elif kind == "leave":
            present -= size
    return denied


def vote_result(votes: Sequence[int]) -> str:
    """Outcome of an election given each candidate's votes."""
    if not votes:
        raise ValueError("no candidates given")
    best = -1
    winner = -1
    tied = False
    for index, count in enumerate(votes):
        if count > best:
            best, winner, tied = count, index, False
        elif count == best:
            tied = True
    if tied:
        return "no winner"
    kind = "majority" if best > sum(votes) // 2 else "minority"
    return f"{kind} winner {winner + 1}"


def poker_strength(cards: Iterable[str]) -> int:
    """Largest number of cards sharing a rank; 0 for no cards."""
    counts = Counter(card[0] for card in cards)
    return max(counts.values(), default=0)