class HashPassError(Exception):
    """Base class for every error raised by the password engine."""


class InvalidInput(HashPassError, ValueError):
    """Raised when a caller passes an empty character set, a bad length or modulus."""


class UnsupportedAlgorithm(InvalidInput):
    """Raised when an algorithm label does not name a known hash variant."""


class ConfigurationError(HashPassError):
    """Raised when built-in constants (e.g. the prime table) are unusable."""


class AnalysisCancelled(HashPassError):
    """Raised inside a long-running analysis once cancellation was requested."""
