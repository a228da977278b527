"""Small dice and drink games."""

from __future__ import annotations

_MIA = 21
_PLAYER_ONE = "Player 1 wins."
_PLAYER_TWO = "Player 2 wins."


def mia_score(first: int, second: int) -> int:
    """Two-digit value of a Mia roll, higher die first."""
    return max(first, second) * 10 + min(first, second)


def _is_mia(score: int) -> bool:
    return score in (12, _MIA)


def _is_double(score: int) -> bool:
    return score // 10 == score % 10


def mia_winner(s0: int, s1: int, r0: int, r1: int) -> str:
    """Winner of a round of Mia between rolls (s0, s1) and (r0, r1)."""
    first = mia_score(s0, s1)
    second = mia_score(r0, r1)
    if _is_mia(first) and not _is_mia(second):
        return _PLAYER_ONE
    if _is_mia(second) and not _is_mia(first):
        return _PLAYER_TWO
    if _is_double(first) and not _is_double(second):
        return _PLAYER_ONE
    if _is_double(second) and not _is_double(first):
        return _PLAYER_TWO
    if first > second:
        return _PLAYER_ONE
    if second > first:
        return _PLAYER_TWO
    return "Tie."


def left_beehind(sour: int, sweet: int) -> str:
    """Verdict for a pair of sour and sweet jar counts."""
    if sour + sweet == 13:
        return "Never speak again."
    if sour > sweet:
        return "To the convention."
    if sour < sweet:
        return "Left beehind."
    return "Undecided."