import collections
import logging
import random
import time

from dataclasses import dataclass
from typing import Callable, Iterable, List

from hashpass.analysis import check_cancelled
from hashpass.errors import InvalidInput
from hashpass.hashing import Algorithm, HashFunction

logger = logging.getLogger(__name__)

DEFAULT_LENGTHS = (8, 16, 32)
ANALYSIS_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!@#$%^&*"
MAX_ACCESS_ITERATIONS = 1000


@dataclass(frozen=True)
class BenchmarkResult:
    algorithm: str
    length: int
    iterations: int
    total_ms: float

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.iterations


@dataclass(frozen=True)
class ContainerResult:
    container: str
    operation: str
    count: int
    elapsed_ms: float


def _elapsed_ms(start_ns: int) -> float:
    return (time.perf_counter_ns() - start_ns) / 1_000_000.0


def benchmark(
    algorithms: Iterable["Algorithm | str"] = tuple(Algorithm),
    lengths: Iterable[int] = DEFAULT_LENGTHS,
    iterations: int = 1000,
    charset: str = ANALYSIS_CHARSET,
    cancelled: Callable[[], bool] | None = None,
) -> List[BenchmarkResult]:
    """
    Time ``iterations`` full password syntheses for every (length, algorithm).

    Results are ordered by length first, then by algorithm, as listed.
    Unknown algorithm labels raise UnsupportedAlgorithm before any timing.
    """
    if iterations <= 0:
        raise InvalidInput("Iteration count must be positive.")
    lengths = list(lengths)
    if any(length <= 0 for length in lengths):
        raise InvalidInput("Password lengths must be positive.")

    functions = [HashFunction.create(algorithm) for algorithm in algorithms]
    results: List[BenchmarkResult] = []

    for length in lengths:
        for hash_fn in functions:
            start = time.perf_counter_ns()
            for _ in range(iterations):
                check_cancelled(cancelled)
                hash_fn.generate_password(charset, length)
            results.append(
                BenchmarkResult(
                    algorithm=hash_fn.name,
                    length=length,
                    iterations=iterations,
                    total_ms=_elapsed_ms(start),
                )
            )
            logger.debug("Benchmarked %s at length %d", hash_fn.name, length)

    return results


def benchmark_containers(
    iterations: int,
    rng: random.Random | None = None,
    cancelled: Callable[[], bool] | None = None,
) -> List[ContainerResult]:
    """
    Compare container trade-offs: ``list`` vs ``collections.deque`` for
    appends and random indexing, plus ``dict`` insert and key lookup.
    """
    if iterations <= 0:
        raise InvalidInput("Iteration count must be positive.")

    rng = rng or random.Random()
    results: List[ContainerResult] = []
    containers = (("list", []), ("deque", collections.deque()))

    for name, container in containers:
        start = time.perf_counter_ns()
        for i in range(iterations):
            check_cancelled(cancelled)
            container.append(f"password{i}")
        results.append(ContainerResult(name, "insert", iterations, _elapsed_ms(start)))

    accesses = min(iterations, MAX_ACCESS_ITERATIONS)
    for name, container in containers:
        start = time.perf_counter_ns()
        for _ in range(accesses):
            check_cancelled(cancelled)
            container[rng.randrange(len(container))]
        results.append(ContainerResult(name, "random access", accesses, _elapsed_ms(start)))

    table = {}
    start = time.perf_counter_ns()
    for i in range(iterations):
        check_cancelled(cancelled)
        table[f"password{i}"] = i
    results.append(ContainerResult("dict", "insert", iterations, _elapsed_ms(start)))

    start = time.perf_counter_ns()
    for _ in range(accesses):
        check_cancelled(cancelled)
        table[f"password{rng.randrange(iterations)}"]
    results.append(ContainerResult("dict", "lookup", accesses, _elapsed_ms(start)))

    return results
