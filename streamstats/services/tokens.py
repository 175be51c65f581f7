# streamstats/services/tokens.py
import math
import re
from typing import Iterable, Iterator

TOKEN_RE = re.compile(r"\S+")
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class InvalidInputError(ValueError):
    """Raised for a token that is not a finite decimal number."""

    def __init__(self, token: str, position: int):
        super().__init__(f"malformed numeric token {token!r} at position {position}")
        self.token = token
        self.position = position


def parse_value(token: str, position: int = 1) -> float:
    """
    Parse a single token in decimal or scientific notation.
    Spellings like 'nan', 'inf' or '1_000' and values that overflow are rejected.
    """
    if not NUMBER_RE.fullmatch(token):
        raise InvalidInputError(token, position)
    value = float(token)
    if math.isinf(value):
        raise InvalidInputError(token, position)
    return value


def read_values(lines: Iterable[str]) -> Iterator[float]:
    """
    Yield floats from whitespace-delimited tokens, one line at a time.
    Stops with InvalidInputError at the first malformed token.
    """
    position = 0
    for line in lines:
        for token in TOKEN_RE.findall(line):
            position += 1
            yield parse_value(token, position)
