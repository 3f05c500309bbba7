"""Hamming comparison of LSH hash codes."""

import math

from ..errors import InvalidHashCodeError, LengthMismatchError

_BITS = frozenset('01')


def _check_hash(code: str, name: str) -> None:
    if not isinstance(code, str) or not set(code) <= _BITS:
        raise InvalidHashCodeError(
            f"Hash code {name} must be a string of '0' and '1'",
            {'argument': name}
        )


def hamming_distance(hash1: str, hash2: str) -> int:
    """
    Count positions where two equal-length hash codes differ.

    Raises:
        LengthMismatchError: If the codes have different lengths
        InvalidHashCodeError: If a code contains other characters
    """
    _check_hash(hash1, 'hash1')
    _check_hash(hash2, 'hash2')
    if len(hash1) != len(hash2):
        raise LengthMismatchError(len(hash1), len(hash2))
    return sum(1 for a, b in zip(hash1, hash2) if a != b)


def hash_similarity(hash1: str, hash2: str) -> float:
    """Fraction of agreeing bits, in [0, 1]. Empty codes count as identical."""
    distance = hamming_distance(hash1, hash2)
    if not hash1:
        return 1.0
    return 1.0 - distance / len(hash1)


def estimated_cosine(hash1: str, hash2: str) -> float:
    """
    Estimate the cosine similarity of the hashed vectors.

    Uses the SimHash relation theta ~= pi * d / B.
    """
    distance = hamming_distance(hash1, hash2)
    if not hash1:
        return 1.0
    return math.cos(math.pi * distance / len(hash1))
