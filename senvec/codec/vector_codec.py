"""
Binary codec for vectors.

Layout::

    +----------------+----------------------------------+
    | D  (>u4, 4 B)  | D values (>f8, 8 B each)         |
    +----------------+----------------------------------+

The header makes the blob self-describing, so ``decode`` needs no external
hint about the dimension. Values are IEEE-754 doubles, big-endian, which
round-trip any float64 (and any widened float32) bit-for-bit.
"""

import logging
import struct
from typing import Any

import numpy as np

from ..errors import CorruptPayloadError, InvalidDimensionError, MalformedPayloadError
from ..vectors import as_vector, is_finite

logger = logging.getLogger(__name__)

_HEADER = struct.Struct(">I")
_WIRE_DTYPE = np.dtype(">f8")
HEADER_SIZE = _HEADER.size
VALUE_SIZE = _WIRE_DTYPE.itemsize
MAX_DIMENSION = 0xFFFFFFFF


def encoded_size(dimension: int) -> int:
    """Number of bytes ``encode`` produces for a vector of ``dimension``."""
    return HEADER_SIZE + VALUE_SIZE * dimension


class VectorCodec:
    """Serialize vectors to and from the length-prefixed binary layout."""

    def __init__(self, allow_non_finite: bool = False):
        """
        Args:
            allow_non_finite: Accept NaN/Inf values when decoding
        """
        self.allow_non_finite = allow_non_finite

    def encode(self, vector: Any) -> bytes:
        vec = as_vector(vector)
        dimension = vec.shape[0]
        if dimension > MAX_DIMENSION:
            raise InvalidDimensionError(dimension)
        return _HEADER.pack(dimension) + vec.astype(_WIRE_DTYPE).tobytes()

    def decode(self, data: bytes) -> np.ndarray:
        """
        Rebuild a vector from ``encode`` output.

        Raises:
            MalformedPayloadError: Header missing, zero dimension, or body
                length inconsistent with the declared dimension
            CorruptPayloadError: Non-finite values while they are not allowed
        """
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise MalformedPayloadError(
                f"Payload too short for header: {len(data)} bytes",
                {'length': len(data), 'header_size': HEADER_SIZE}
            )

        (dimension,) = _HEADER.unpack_from(data)
        if dimension == 0:
            raise MalformedPayloadError("Payload declares dimension 0", {'dimension': 0})

        expected = encoded_size(dimension)
        if len(data) != expected:
            raise MalformedPayloadError(
                f"Payload length {len(data)} does not match dimension {dimension} "
                f"(expected {expected} bytes)",
                {'length': len(data), 'expected_length': expected, 'dimension': dimension}
            )

        vec = np.frombuffer(data, dtype=_WIRE_DTYPE, offset=HEADER_SIZE).astype(np.float64)
        if not self.allow_non_finite and not is_finite(vec):
            bad = int(np.count_nonzero(~np.isfinite(vec)))
            raise CorruptPayloadError(
                f"Decoded vector contains {bad} non-finite value(s)",
                {'dimension': dimension, 'non_finite': bad}
            )

        vec.setflags(write=False)
        logger.debug("Decoded vector of dimension %d", dimension)
        return vec
