import random

import pytest

from hashpass.errors import InvalidInput, UnsupportedAlgorithm
from hashpass.generator import (
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    build_charset,
    estimate_entropy,
    synthesize,
)
from hashpass.hashing import Algorithm, HashFunction


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_synthesize_two_letter_charset(algorithm):
    for _ in range(50):
        password = synthesize("AB", 5, algorithm)
        assert len(password) == 5
        assert set(password) <= {"A", "B"}


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_synthesize_rejects_empty_charset(algorithm):
    with pytest.raises(InvalidInput):
        synthesize("", 5, algorithm)


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("length", [0, -3])
def test_synthesize_rejects_non_positive_length(algorithm, length):
    with pytest.raises(InvalidInput):
        synthesize("AB", length, algorithm)


def test_synthesize_single_character_charset():
    assert synthesize("x", 8, Algorithm.MULTIPLICATIVE) == "x" * 8


def test_synthesize_accepts_labels():
    assert len(synthesize(UPPERCASE, 16, "universal")) == 16
    with pytest.raises(UnsupportedAlgorithm):
        synthesize(UPPERCASE, 16, "md5")


def test_generated_passwords_vary():
    hash_fn = HashFunction.create(Algorithm.UNIVERSAL)
    charset = build_charset(symbols=True)
    passwords = {hash_fn.generate_password(charset, 16) for _ in range(20)}
    assert len(passwords) == 20


def test_generate_with_injected_rng_stays_in_charset():
    hash_fn = HashFunction.create(Algorithm.DIVISION)
    password = hash_fn.generate_password(NUMBERS, 32, rng=random.Random(3))
    assert len(password) == 32
    assert set(password) <= set(NUMBERS)


def test_build_charset_order_and_selection():
    assert build_charset() == UPPERCASE + LOWERCASE + NUMBERS
    assert build_charset(uppercase=False, lowercase=False, numbers=False, symbols=True) == SYMBOLS
    assert build_charset(False, False, False, False) == ""


def test_estimate_entropy():
    assert estimate_entropy(8, 2) == 8.0
    assert estimate_entropy(0, 62) == 0.0
    assert estimate_entropy(10, 1) == 0.0
