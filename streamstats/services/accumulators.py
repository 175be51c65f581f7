"""Streaming statistic accumulators.

Each accumulator ingests one value at a time and reports its current result
on demand. A result asked for before any value was ingested is ``nan``.
"""
from __future__ import annotations

import bisect
import math
from abc import ABC, abstractmethod
from statistics import pstdev
from typing import Sequence

__all__: list[str] = [
    "Accumulator",
    "Minimum",
    "Maximum",
    "Mean",
    "StandardDeviation",
    "Percentile",
    "DEFAULT_PERCENTILES",
    "default_accumulators",
]

DEFAULT_PERCENTILES: tuple[float, ...] = (50.0, 90.0)


class Accumulator(ABC):
    """A statistic updated incrementally from a stream of floats."""

    @abstractmethod
    def ingest(self, value: float) -> None:
        ...

    @abstractmethod
    def result(self) -> float:
        ...

    @abstractmethod
    def label(self) -> str:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.label()}={self.result()}>"


class Minimum(Accumulator):
    def __init__(self) -> None:
        self._value = math.inf
        self._count = 0

    def ingest(self, value: float) -> None:
        if value < self._value:
            self._value = value
        self._count += 1

    def result(self) -> float:
        # inf is a legitimate extreme once something was seen
        if self._count == 0:
            return math.nan
        return self._value

    def label(self) -> str:
        return "min"


class Maximum(Accumulator):
    def __init__(self) -> None:
        self._value = -math.inf
        self._count = 0

    def ingest(self, value: float) -> None:
        if value > self._value:
            self._value = value
        self._count += 1

    def result(self) -> float:
        if self._count == 0:
            return math.nan
        return self._value

    def label(self) -> str:
        return "max"


class Mean(Accumulator):
    """Running sum and count; keeps no history."""

    def __init__(self) -> None:
        self._sum = 0.0
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def ingest(self, value: float) -> None:
        self._sum += value
        self._count += 1

    def result(self) -> float:
        if self._count == 0:
            return math.nan
        return self._sum / self._count

    def label(self) -> str:
        return "mean"


class StandardDeviation(Accumulator):
    """
    Population standard deviation (divisor is the value count).

    All values are retained and the result is recomputed on every call by
    `statistics.pstdev`, which works on exact fractions: identical values give
    exactly 0 and huge magnitudes do not overflow mid-computation. Fine for a
    single query at the end of a run; repeated queries over a growing stream
    would want a single-pass variance instead.
    """

    def __init__(self) -> None:
        self._values: list[float] = []

    def ingest(self, value: float) -> None:
        self._values.append(value)

    def result(self) -> float:
        if not self._values:
            return math.nan
        return pstdev(self._values)

    def label(self) -> str:
        return "std"


class Percentile(Accumulator):
    """
    Nearest-rank percentile over the full history.

    Values are kept in ascending order with ``bisect.insort`` (binary search,
    linear shift per insert). The result is the sorted value at
    ``floor(count * p / 100)``, clamped to the last index.
    """

    def __init__(self, p: float) -> None:
        p = float(p)
        if not p >= 0.0:  # also catches nan
            p = 0.0
        elif p > 100.0:
            p = 100.0
        self._p = p
        self._sorted: list[float] = []

    @property
    def p(self) -> float:
        return self._p

    def ingest(self, value: float) -> None:
        bisect.insort(self._sorted, value)

    def result(self) -> float:
        count = len(self._sorted)
        if count == 0:
            return math.nan
        index = min(math.floor(count * self._p / 100), count - 1)
        return self._sorted[index]

    def label(self) -> str:
        text = repr(self._p)
        if text.endswith(".0"):
            text = text[:-2]
        return f"pct{text}"


def default_accumulators(percentiles: Sequence[float] = DEFAULT_PERCENTILES) -> list[Accumulator]:
    """
    Build the fixed statistic set in reporting order:
    min, max, mean, std, then one percentile per entry of ``percentiles``.
    """
    accumulators: list[Accumulator] = [
        Minimum(),
        Maximum(),
        Mean(),
        StandardDeviation(),
    ]
    accumulators.extend(Percentile(p) for p in percentiles)
    return accumulators
