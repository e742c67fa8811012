import math
import random

from hashpass.errors import InvalidInput
from hashpass.hashing import Algorithm, HashFunction

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"

DEFAULT_LENGTH = 12


def build_charset(
    uppercase: bool = True,
    lowercase: bool = True,
    numbers: bool = True,
    symbols: bool = False,
) -> str:
    """Concatenate the selected character groups (upper, lower, numbers, symbols order)."""
    groups = []
    if uppercase:
        groups.append(UPPERCASE)
    if lowercase:
        groups.append(LOWERCASE)
    if numbers:
        groups.append(NUMBERS)
    if symbols:
        groups.append(SYMBOLS)
    return "".join(groups)


def estimate_entropy(length: int, alphabet_size: int) -> float:
    """Return Shannon entropy (in bits) for a uniformly random password."""
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)


def synthesize(
    charset: str,
    length: int,
    algorithm: "Algorithm | str" = Algorithm.UNIVERSAL,
    rng: random.Random | None = None,
) -> str:
    """
    Generate one password with a freshly constructed hash function.

    Raises InvalidInput for an empty charset or a non-positive length, and
    UnsupportedAlgorithm for an unknown algorithm label.
    """
    if not charset:
        raise InvalidInput("Character set is empty; no characters to choose from.")
    if length <= 0:
        raise InvalidInput("Password length must be positive.")

    hash_fn = HashFunction.create(algorithm, rng=rng)
    return hash_fn.generate_password(charset, length, rng=rng)
