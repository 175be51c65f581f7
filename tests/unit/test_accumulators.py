import math
import random

import pytest
from streamstats.services.accumulators import (
    Maximum,
    Mean,
    Minimum,
    Percentile,
    StandardDeviation,
    default_accumulators,
)

def feed(accumulator, values):
    for v in values:
        accumulator.ingest(v)
    return accumulator.result()

def test_basic_sequence():
    data = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert feed(Minimum(), data) == 1
    assert feed(Maximum(), data) == 5
    assert feed(Mean(), data) == 3
    assert feed(StandardDeviation(), data) == pytest.approx(math.sqrt(2))
    assert feed(Percentile(50), data) == 3
    assert feed(Percentile(90), data) == 5

def test_single_value():
    results = {acc.label(): feed(acc, [7.0]) for acc in default_accumulators()}
    assert results == {"min": 7, "max": 7, "mean": 7, "std": 0, "pct50": 7, "pct90": 7}

@pytest.mark.parametrize("acc", default_accumulators(), ids=lambda a: a.label())
def test_empty_is_nan(acc):
    assert math.isnan(acc.result())

def test_min_max_bound_every_value():
    rng = random.Random(1)
    data = [rng.uniform(-1e6, 1e6) for _ in range(500)]
    lo, hi = feed(Minimum(), data), feed(Maximum(), data)
    assert all(lo <= v <= hi for v in data)
    assert lo == min(data)
    assert hi == max(data)

def test_min_max_negative_values():
    data = [-3.5, -10.0, -0.25]
    assert feed(Minimum(), data) == -10.0
    assert feed(Maximum(), data) == -0.25

def test_mean_is_order_independent():
    rng = random.Random(2)
    data = [rng.uniform(0, 100) for _ in range(200)]
    shuffled = data[:]
    rng.shuffle(shuffled)
    assert feed(Mean(), data) == pytest.approx(sum(data) / len(data))
    assert feed(Mean(), shuffled) == pytest.approx(feed(Mean(), data))

def test_std_uses_population_divisor():
    # sample stdev of this set would be 1.581
    assert round(feed(StandardDeviation(), [1, 2, 3, 4, 5]), 3) == 1.414

@pytest.mark.parametrize("value", [2.5, 0.1, 0.7, 1.1, -3.3])
@pytest.mark.parametrize("count", [1, 3, 5, 7, 10, 50])
def test_std_identical_values_is_zero(value, count):
    assert feed(StandardDeviation(), [value] * count) == 0.0

def test_std_huge_magnitudes():
    assert feed(StandardDeviation(), [1e200, -1e200]) == 1e200
    assert feed(StandardDeviation(), [1e308, 1e308]) == 0.0
    assert feed(StandardDeviation(), [1e308, -1e308, 1e308, -1e308]) == 1e308

def test_std_permutation_invariant():
    rng = random.Random(3)
    data = [rng.gauss(10, 3) for _ in range(300)]
    shuffled = data[:]
    rng.shuffle(shuffled)
    a = feed(StandardDeviation(), data)
    b = feed(StandardDeviation(), shuffled)
    assert a >= 0
    assert a == pytest.approx(b)

@pytest.mark.parametrize("p", [0, 10, 25, 50, 75, 90, 99, 100])
def test_percentile_nearest_rank(p):
    rng = random.Random(p)
    for count in (1, 2, 3, 10, 37):
        data = [float(rng.randint(0, 20)) for _ in range(count)]
        expected = sorted(data)[min(math.floor(count * p / 100), count - 1)]
        assert feed(Percentile(p), data) == expected
        rng.shuffle(data)
        assert feed(Percentile(p), data) == expected

def test_percentile_100_clamps_to_last():
    assert feed(Percentile(100), [3.0, 1.0, 2.0]) == 3.0

def test_percentile_keeps_duplicates():
    assert feed(Percentile(50), [5.0, 5.0, 5.0, 1.0]) == 5.0

def test_percentile_clamps_parameter():
    assert Percentile(-5).p == 0
    assert Percentile(250).p == 100
    assert Percentile(float("nan")).p == 0
    assert feed(Percentile(-5), [4.0, 2.0, 9.0]) == 2.0
    assert feed(Percentile(250), [4.0, 2.0, 9.0]) == 9.0

def test_labels():
    labels = [a.label() for a in default_accumulators()]
    assert labels == ["min", "max", "mean", "std", "pct50", "pct90"]
    assert Percentile(99.9).label() == "pct99.9"
    assert Percentile(250).label() == "pct100"
    assert Percentile(33.333333333).label() == "pct33.333333333"
    assert Percentile(0.5).label() == "pct0.5"

def test_min_max_accept_infinite_extremes():
    assert feed(Minimum(), [math.inf]) == math.inf
    assert feed(Maximum(), [-math.inf]) == -math.inf
