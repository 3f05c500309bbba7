"""Canonical vector coercion shared by the codec, hasher and similarity code."""

from typing import Any, Optional

import numpy as np

from .errors import DimensionMismatchError, InvalidDimensionError

VECTOR_DTYPE = np.float64


def as_vector(values: Any, dimension: Optional[int] = None) -> np.ndarray:
    """
    Return a private, read-only float64 copy of ``values``.

    Args:
        values: Any 1-D array-like of numbers
        dimension: Expected length, checked when given

    Returns:
        1-D float64 array that does not alias the input

    Raises:
        InvalidDimensionError: If the input is empty or not one-dimensional
        DimensionMismatchError: If ``dimension`` is given and does not match
    """
    vec = np.array(values, dtype=VECTOR_DTYPE, copy=True)
    if vec.ndim != 1:
        raise InvalidDimensionError(vec.shape)
    if dimension is not None and vec.shape[0] != dimension:
        raise DimensionMismatchError(dimension, vec.shape[0])
    if vec.size == 0:
        raise InvalidDimensionError(0)
    vec.setflags(write=False)
    return vec


def is_finite(vec: np.ndarray) -> bool:
    """True when no element is NaN or infinite."""
    return bool(np.all(np.isfinite(vec)))


def check_positive_int(value: Any) -> bool:
    """True for a real ``int`` greater than zero (``bool`` excluded)."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value > 0


def check_int64(value: Any) -> bool:
    """True for a real ``int`` within the signed 64-bit range (``bool`` excluded)."""
    return (
        isinstance(value, (int, np.integer))
        and not isinstance(value, bool)
        and -(1 << 63) <= value < (1 << 63)
    )
