"""Problems about lines of text."""

from __future__ import annotations

import re

_SUM = re.compile(r"\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)")


def hello() -> str:
    """The classic greeting."""
    return "Hello World!"


def farewell(name: str) -> str:
    """Farewell message for the given name."""
    return f"Thank you, {name}, and farewell!"


def hiss(line: str) -> str:
    """Return 'hiss' if the line holds two consecutive s characters, else 'no hiss'."""
    hisses = "ss" in line
    if hisses:
        return "hiss"
    return "no hiss"


def help_phd(line: str) -> str:
    """Answer to one problem line: 'skipped' for P=NP, else the sum of a+b."""
    if line == "P=NP":
        return "skipped"
    match = _SUM.match(line)
    if match is None:
        raise ValueError(f"not a sum: {line!r}")
    return str(int(match.group(1)) + int(match.group(3)))