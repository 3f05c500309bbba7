"""
Locality-sensitive hashing for dense vectors.

This module provides seeded hyperplane generation, sign-based hashing, and
Hamming comparison of the resulting bit strings.
"""

from .hyperplanes import generate_hyperplanes
from .hasher import LSHHasher
from .hamming import hamming_distance, hash_similarity, estimated_cosine

__all__ = [
    'generate_hyperplanes',
    'LSHHasher',
    'hamming_distance',
    'hash_similarity',
    'estimated_cosine',
]
