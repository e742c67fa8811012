from hashpass.errors import (
    AnalysisCancelled,
    ConfigurationError,
    HashPassError,
    InvalidInput,
    UnsupportedAlgorithm,
)
from hashpass.hashing import Algorithm, HashFunction, UniversalParameters
from hashpass.generator import build_charset, estimate_entropy, synthesize
from hashpass.strength import StrengthResult, score_password
from hashpass.analysis import DistributionStats, analyze_distribution
from hashpass.benchmark import BenchmarkResult, ContainerResult, benchmark, benchmark_containers

__all__ = [
    "Algorithm",
    "AnalysisCancelled",
    "BenchmarkResult",
    "ConfigurationError",
    "ContainerResult",
    "DistributionStats",
    "HashFunction",
    "HashPassError",
    "InvalidInput",
    "StrengthResult",
    "UniversalParameters",
    "UnsupportedAlgorithm",
    "analyze_distribution",
    "benchmark",
    "benchmark_containers",
    "build_charset",
    "estimate_entropy",
    "score_password",
    "synthesize",
]

__version__ = "1.0.0"
