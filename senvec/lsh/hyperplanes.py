"""
Seeded random hyperplane generation.

Hyperplanes are rows of standard normal draws. Normal draws give directions
uniformly distributed on the sphere, which is what sign-based LSH needs for
the collision probability to depend only on the angle between vectors.
"""

import numpy as np

from ..errors import InvalidDimensionError, InvalidHashWidthError, InvalidSeedError
from ..vectors import check_int64, check_positive_int

_SEED_MODULUS = 1 << 64


def generate_hyperplanes(seed: int, count: int, dimension: int) -> np.ndarray:
    """
    Generate ``count`` hyperplanes of ``dimension`` from ``seed``.

    Same arguments always give the same matrix within one numpy release.
    No global RNG state is read or modified.

    Args:
        seed: Any signed 64-bit integer
        count: Number of hyperplanes (hash width B)
        dimension: Vector dimension D

    Returns:
        Read-only float64 array of shape (count, dimension)
    """
    if not check_positive_int(dimension):
        raise InvalidDimensionError(dimension)
    if not check_positive_int(count):
        raise InvalidHashWidthError(count)
    if not check_int64(seed):
        raise InvalidSeedError(seed)

    # Two's-complement fold: int64 seeds map one-to-one onto uint64
    rng = np.random.default_rng(int(seed) % _SEED_MODULUS)
    planes = rng.standard_normal((int(count), int(dimension)), dtype=np.float64)
    planes.setflags(write=False)
    return planes
