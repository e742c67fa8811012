import logging
import math
import random

from dataclasses import dataclass
from typing import Callable, List, Tuple

from hashpass.errors import AnalysisCancelled, InvalidInput
from hashpass.hashing import Algorithm, HashFunction, random_int64

logger = logging.getLogger(__name__)

DEFAULT_BUCKETS = 100


@dataclass(frozen=True)
class DistributionStats:
    """Population statistics of one bucket histogram."""

    algorithm: str
    samples: int
    buckets: int
    expected: float
    minimum: int
    maximum: int
    std_dev: float
    uniformity: float


def check_cancelled(cancelled: Callable[[], bool] | None) -> None:
    if cancelled is not None and cancelled():
        raise AnalysisCancelled("Analysis cancelled by caller.")


def histogram_stats(histogram: List[int], algorithm: str = "") -> DistributionStats:
    """
    Compute expected count, min/max, population standard deviation and
    uniformity (``100 * (1 - stdDev / expected)``) of a histogram.
    """
    buckets = len(histogram)
    samples = sum(histogram)
    if buckets == 0 or samples == 0:
        raise InvalidInput("Histogram must have at least one bucket and one sample.")

    expected = samples / buckets
    variance = sum((count - expected) ** 2 for count in histogram) / buckets
    std_dev = math.sqrt(variance)

    return DistributionStats(
        algorithm=algorithm,
        samples=samples,
        buckets=buckets,
        expected=expected,
        minimum=min(histogram),
        maximum=max(histogram),
        std_dev=std_dev,
        uniformity=100.0 * (1.0 - std_dev / expected),
    )


def analyze_distribution(
    hash_fn: "HashFunction | Algorithm | str",
    samples: int,
    buckets: int = DEFAULT_BUCKETS,
    rng: random.Random | None = None,
    cancelled: Callable[[], bool] | None = None,
) -> Tuple[List[int], DistributionStats]:
    """
    Hash ``samples`` random 64-bit values into ``buckets`` buckets.

    Inputs come from a general-purpose generator (``random.Random`` unless
    one is injected); the absolute value is taken before hashing. Returns
    the histogram and its statistics.
    """
    if samples <= 0:
        raise InvalidInput("Sample count must be positive.")
    if buckets <= 0:
        raise InvalidInput("Bucket count must be positive.")

    if not isinstance(hash_fn, HashFunction):
        hash_fn = HashFunction.create(hash_fn)
    rng = rng or random.Random()

    histogram = [0] * buckets
    for _ in range(samples):
        check_cancelled(cancelled)
        histogram[hash_fn.hash(abs(random_int64(rng)), buckets)] += 1

    stats = histogram_stats(histogram, hash_fn.name)
    logger.debug("%s uniformity over %d samples: %.2f%%", hash_fn.name, samples, stats.uniformity)
    return histogram, stats
