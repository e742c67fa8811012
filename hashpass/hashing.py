import enum
import logging
import random
import secrets
import time

from dataclasses import dataclass
from typing import Sequence

from hashpass.errors import ConfigurationError, InvalidInput, UnsupportedAlgorithm

logger = logging.getLogger(__name__)


# =========================
#        CONSTANTS
# =========================

# Knuth's multiplier: 2^32 / golden ratio
KNUTH_MULTIPLIER = 2654435769
MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

LARGE_PRIMES: Sequence[int] = (
    1000000007,
    1000000009,
    1000000021,
    1000000033,
    1000000087,
)

# Spacing between the entropy values of consecutive password positions.
POSITION_STRIDE = 1009


def to_int64(value: int) -> int:
    """Wrap an arbitrary Python int to the signed 64-bit range."""
    value &= MASK_64
    if value > INT64_MAX:
        value -= 1 << 64
    return value


def random_int64(rng: random.Random) -> int:
    """Draw a uniformly distributed signed 64-bit integer from ``rng``."""
    return to_int64(rng.getrandbits(64))


def next_entropy(position: int, rng: random.Random) -> int:
    """
    Derive a fresh 64-bit entropy value for one password position.

    Mixes a monotonic nanosecond clock reading, a position-dependent offset
    and a 64-bit draw from ``rng`` (a CSPRNG in production).
    """
    return to_int64(time.perf_counter_ns() + position * POSITION_STRIDE + rng.getrandbits(64))


# =========================
#        VARIANTS
# =========================

class Algorithm(enum.Enum):
    DIVISION = "division"
    MULTIPLICATIVE = "multiplicative"
    UNIVERSAL = "universal"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, text: "str | Algorithm") -> "Algorithm":
        """Resolve a member from its name, value or display label (case-insensitive)."""
        if isinstance(text, cls):
            return text
        wanted = str(text).strip().lower()
        for member in cls:
            if wanted in (member.name.lower(), member.value, member.label.lower()):
                return member
        raise UnsupportedAlgorithm(f"Unsupported hash algorithm: {text!r}")


_LABELS = {
    Algorithm.DIVISION: "Simple Hash (Division Method)",
    Algorithm.MULTIPLICATIVE: "Multiplication Hash (Fixed)",
    Algorithm.UNIVERSAL: "Universal Hash",
}


@dataclass(frozen=True)
class UniversalParameters:
    """Coefficients of one member of the universal family h(k) = ((a*k + b) mod p) mod m."""

    a: int
    b: int
    p: int

    def __post_init__(self) -> None:
        if self.p < 2:
            raise ConfigurationError(f"Universal hash modulus must be a prime >= 2, got {self.p}")
        if not 1 <= self.a <= self.p - 1:
            raise ConfigurationError(f"Coefficient a={self.a} outside [1, {self.p - 1}]")
        if not 0 <= self.b <= self.p - 1:
            raise ConfigurationError(f"Coefficient b={self.b} outside [0, {self.p - 1}]")

    @classmethod
    def draw(cls, rng: random.Random, primes: Sequence[int] = LARGE_PRIMES) -> "UniversalParameters":
        if not primes:
            raise ConfigurationError("Prime table is empty; cannot choose universal hash parameters.")
        p = primes[rng.randrange(len(primes))]
        a = rng.randrange(1, p)
        b = rng.randrange(0, p)
        return cls(a=a, b=b, p=p)

    def __str__(self) -> str:
        return f"a={self.a}, b={self.b}, p={self.p}"


# =========================
#      HASH FUNCTION
# =========================

class HashFunction:
    """
    One hash variant, ready to map 64-bit integers into ``[0, mod)``.

    - Division and Multiplicative carry no state beyond fixed constants.
    - Universal carries ``(a, b, p)`` chosen once, at construction, and never
      changed afterwards. Two instances therefore usually disagree.

    Use :meth:`create` to build an instance from an :class:`Algorithm`.
    """

    __slots__ = ("algorithm", "params")

    def __init__(self, algorithm: Algorithm, params: UniversalParameters | None = None) -> None:
        if algorithm is Algorithm.UNIVERSAL and params is None:
            raise ConfigurationError("Universal hash requires (a, b, p) parameters.")
        if algorithm is not Algorithm.UNIVERSAL and params is not None:
            raise ConfigurationError(f"{algorithm.label} takes no parameters.")
        self.algorithm = algorithm
        self.params = params

    @classmethod
    def create(
        cls,
        algorithm: "Algorithm | str",
        rng: random.Random | None = None,
        primes: Sequence[int] = LARGE_PRIMES,
    ) -> "HashFunction":
        algorithm = Algorithm.parse(algorithm)
        if algorithm is not Algorithm.UNIVERSAL:
            return cls(algorithm)
        params = UniversalParameters.draw(rng or secrets.SystemRandom(), primes)
        logger.debug("Universal hash parameters chosen: %s", params)
        return cls(algorithm, params)

    @classmethod
    def universal(cls, params: UniversalParameters) -> "HashFunction":
        """Build a Universal instance with pinned parameters (reproducible mapping)."""
        return cls(Algorithm.UNIVERSAL, params)

    @property
    def name(self) -> str:
        return self.algorithm.label

    def describe_parameters(self) -> str:
        return str(self.params) if self.params is not None else ""

    def __repr__(self) -> str:
        if self.params is None:
            return f"HashFunction({self.algorithm.name})"
        return f"HashFunction({self.algorithm.name}, {self.params})"

    # ---------- HASHING ----------

    def hash(self, value: int, mod: int) -> int:
        """Map ``value`` to an index in ``[0, mod)``."""
        if mod <= 0:
            raise InvalidInput(f"Modulus must be positive, got {mod}")

        if self.algorithm is Algorithm.DIVISION:
            return abs(value % mod)

        if self.algorithm is Algorithm.MULTIPLICATIVE:
            k = value & MASK_32
            high = (k * KNUTH_MULTIPLIER) >> 32
            return abs(high % mod)

        # Both operands reduced mod p before the multiplication.
        a, b, p = self.params.a, self.params.b, self.params.p
        ak = ((a % p) * (value % p)) % p
        return abs(((ak + b) % p) % mod)

    # ---------- GENERATION ----------

    def generate_password(self, charset: str, length: int, rng: random.Random | None = None) -> str:
        """
        Build a password of ``length`` characters drawn from ``charset``.

        Every position gets its own entropy value (see :func:`next_entropy`)
        which is then hashed into an index of ``charset``.
        """
        if not charset:
            raise InvalidInput("Character set is empty; no characters to choose from.")
        if length <= 0:
            raise InvalidInput("Password length must be positive.")

        rng = rng or secrets.SystemRandom()
        size = len(charset)
        return "".join(charset[self.hash(next_entropy(i, rng), size)] for i in range(length))
