"""
Random-hyperplane LSH (SimHash) for dense vectors.

Each bit records which side of a random hyperplane the vector falls on. Two
vectors at angle theta disagree on a bit with probability theta / pi, so the
Hamming distance between hashes estimates the angle between the vectors.
"""

import logging
from typing import Any, Iterable, List

import numpy as np

from ..vectors import as_vector
from .hyperplanes import generate_hyperplanes

logger = logging.getLogger(__name__)


class LSHHasher:
    """
    Fixed set of hyperplanes turning D-dimensional vectors into B-bit strings.

    Instances are read-only after construction and may be shared between
    threads.
    """

    def __init__(self, num_bits: int, dimension: int, seed: int = 42):
        """
        Initialize hasher.

        Args:
            num_bits: Hash width B
            dimension: Vector dimension D
            seed: Seed for hyperplane generation
        """
        self._hyperplanes = generate_hyperplanes(seed, num_bits, dimension)
        self._num_bits = int(num_bits)
        self._dimension = int(dimension)
        self._seed = int(seed)
        logger.debug(
            "Created LSH hasher: %d bits, dimension %d, seed %d",
            self._num_bits, self._dimension, self._seed
        )

    @property
    def num_bits(self) -> int:
        return self._num_bits

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def hyperplanes(self) -> np.ndarray:
        """Read-only (num_bits, dimension) hyperplane matrix."""
        return self._hyperplanes

    def compute_hash(self, vector: Any) -> str:
        """
        Hash ``vector`` to a string of '0'/'1', one char per hyperplane.

        A dot product of exactly zero yields '1'.

        Raises:
            DimensionMismatchError: If ``len(vector) != dimension``
        """
        vec = as_vector(vector, self._dimension)
        dots = self._hyperplanes @ vec
        return ''.join('1' if d >= 0 else '0' for d in dots)

    def compute_hashes(self, vectors: Iterable[Any]) -> List[str]:
        """Hash several vectors, preserving order."""
        return [self.compute_hash(v) for v in vectors]

    def __repr__(self) -> str:
        return f"LSHHasher(num_bits={self._num_bits}, dimension={self._dimension}, seed={self._seed})"
