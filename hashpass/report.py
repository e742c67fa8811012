import enum
import logging
import random
import secrets
import time

from datetime import datetime
from typing import Callable, List

from hashpass.analysis import DEFAULT_BUCKETS, analyze_distribution, check_cancelled
from hashpass.benchmark import ANALYSIS_CHARSET, DEFAULT_LENGTHS, benchmark, benchmark_containers
from hashpass.errors import InvalidInput
from hashpass.hashing import Algorithm, HashFunction

logger = logging.getLogger(__name__)

MIN_ITERATIONS = 100
MAX_ITERATIONS = 100000

TRACE_PASSWORDS = 10
TRACE_SAMPLES = 20
TRACE_LENGTH = 12


class ReportKind(enum.Enum):
    PERFORMANCE = "performance"
    DISTRIBUTION = "distribution"
    CONTAINERS = "containers"
    COMPLETE = "complete"
    TRACE = "trace"


def _banner(title: str, width: int = 60) -> List[str]:
    return ["=" * width, title, "=" * width, ""]


def performance_report(iterations: int, cancelled: Callable[[], bool] | None = None) -> str:
    lines = _banner("Hash Function Performance Analysis")
    results = benchmark(tuple(Algorithm), DEFAULT_LENGTHS, iterations, cancelled=cancelled)

    for length in DEFAULT_LENGTHS:
        lines.append(f"Password Length: {length} characters")
        lines.append("-" * 40)
        for result in results:
            if result.length != length:
                continue
            lines.append(
                f"{result.algorithm:<30}: Total {result.total_ms:8.2f} ms, "
                f"Average {result.average_ms:8.4f} ms"
            )
        lines.append("")

    return "\n".join(lines) + "\n"


def distribution_report(iterations: int, cancelled: Callable[[], bool] | None = None) -> str:
    lines = _banner("Hash Function Distribution Analysis")
    rng = random.Random()

    for algorithm in Algorithm:
        _, stats = analyze_distribution(algorithm, iterations, DEFAULT_BUCKETS, rng=rng, cancelled=cancelled)
        lines.append(stats.algorithm)
        lines.append("-" * 40)
        lines.append(f"Expected: {stats.expected:.2f}")
        lines.append(f"Min: {stats.minimum}, Max: {stats.maximum}")
        lines.append(f"Standard Deviation: {stats.std_dev:.2f}")
        lines.append(f"Uniformity: {stats.uniformity:.2f}%")
        lines.append("")

    return "\n".join(lines) + "\n"


def containers_report(iterations: int, cancelled: Callable[[], bool] | None = None) -> str:
    lines = _banner("Data Structure Performance Analysis")
    results = benchmark_containers(iterations, cancelled=cancelled)

    lines.append("1. list vs deque vs dict")
    lines.append("-" * 40)
    for operation in ("insert", "random access", "lookup"):
        rows = [r for r in results if r.operation == operation]
        if not rows:
            continue
        lines.append(f"{operation.capitalize()} {rows[0].count} elements:")
        for row in rows:
            lines.append(f"{row.container}: {row.elapsed_ms:.2f} ms")
        lines.append("")

    return "\n".join(lines) + "\n"


def complete_report(iterations: int, cancelled: Callable[[], bool] | None = None) -> str:
    lines = _banner("Password Generator - Complete Performance Report", width=80)
    lines.append("Test Configuration:")
    lines.append(f"- Test Iterations: {iterations}")
    lines.append(f"- Character Set Size: {len(ANALYSIS_CHARSET)}")
    lines.append(f"- Test Time: {datetime.now():%Y-%m-%d %H:%M:%S}")
    lines.append("")

    return "\n".join(
        [
            "\n".join(lines),
            performance_report(iterations, cancelled),
            distribution_report(iterations, cancelled),
            containers_report(iterations, cancelled),
        ]
    )


def trace_report(iterations: int = 0, cancelled: Callable[[], bool] | None = None) -> str:
    """Print sample passwords and raw hash mappings for every variant (debug aid)."""
    charset = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    rng = secrets.SystemRandom()
    lines: List[str] = []

    for algorithm in Algorithm:
        hash_fn = HashFunction.create(algorithm)
        lines.append(f"=== {hash_fn.name} Debug Test ===")
        if hash_fn.params is not None:
            lines.append(f"Parameters: {hash_fn.describe_parameters()}")

        lines.append(f"Testing {TRACE_PASSWORDS} password generations:")
        for i in range(TRACE_PASSWORDS):
            check_cancelled(cancelled)
            lines.append(f"{i + 1}. {hash_fn.generate_password(charset, TRACE_LENGTH, rng)}")

        lines.append("")
        lines.append(f"Testing hash distribution (first {TRACE_SAMPLES} values):")
        for i in range(TRACE_SAMPLES):
            value = time.perf_counter_ns() + i * 1000
            index = hash_fn.hash(value, len(charset))
            lines.append(f"Input: {value} -> Hash: {index} -> Char: {charset[index]}")
        lines.append("")

    return "\n".join(lines) + "\n"


_BUILDERS = {
    ReportKind.PERFORMANCE: performance_report,
    ReportKind.DISTRIBUTION: distribution_report,
    ReportKind.CONTAINERS: containers_report,
    ReportKind.COMPLETE: complete_report,
    ReportKind.TRACE: trace_report,
}


def build_report(
    kind: "ReportKind | str",
    iterations: int,
    cancelled: Callable[[], bool] | None = None,
) -> str:
    """Run one analysis mode and return its text report."""
    try:
        kind = ReportKind(kind)
    except ValueError:
        raise InvalidInput(f"Unknown report kind: {kind!r}") from None
    if not MIN_ITERATIONS <= iterations <= MAX_ITERATIONS:
        raise InvalidInput(
            f"Iterations must be between {MIN_ITERATIONS} and {MAX_ITERATIONS}, got {iterations}"
        )

    logger.info("Running %s report with %d iterations", kind.value, iterations)
    started = time.monotonic()
    text = _BUILDERS[kind](iterations, cancelled)
    logger.info("Finished %s report in %.2f s", kind.value, time.monotonic() - started)
    return text
