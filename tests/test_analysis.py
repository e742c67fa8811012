import random

import pytest

from hashpass.analysis import analyze_distribution, histogram_stats
from hashpass.errors import AnalysisCancelled, InvalidInput
from hashpass.hashing import Algorithm, HashFunction


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_uniformity_floor(algorithm):
    histogram, stats = analyze_distribution(
        HashFunction.create(algorithm), 100000, 100, rng=random.Random(42)
    )
    assert len(histogram) == 100
    assert sum(histogram) == 100000
    assert stats.expected == 1000.0
    assert stats.uniformity >= 90.0
    assert stats.minimum <= 1000 <= stats.maximum


def test_accepts_algorithm_label():
    histogram, stats = analyze_distribution("division", 1000, 10, rng=random.Random(1))
    assert sum(histogram) == 1000
    assert stats.algorithm == Algorithm.DIVISION.label


def test_histogram_stats_perfectly_uniform():
    stats = histogram_stats([5, 5, 5, 5])
    assert stats.std_dev == 0.0
    assert stats.uniformity == 100.0
    assert (stats.minimum, stats.maximum) == (5, 5)


def test_histogram_stats_skewed():
    stats = histogram_stats([0, 4])
    assert stats.expected == 2.0
    assert stats.std_dev == 2.0
    assert stats.uniformity == 0.0


@pytest.mark.parametrize("samples, buckets", [(0, 10), (10, 0), (-1, 5)])
def test_rejects_bad_sizes(samples, buckets):
    with pytest.raises(InvalidInput):
        analyze_distribution(Algorithm.DIVISION, samples, buckets)


def test_cancellation_between_iterations():
    calls = []

    def cancelled():
        calls.append(1)
        return len(calls) > 10

    with pytest.raises(AnalysisCancelled):
        analyze_distribution(Algorithm.MULTIPLICATIVE, 100000, 100, cancelled=cancelled)
    assert len(calls) == 11
