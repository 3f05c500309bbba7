"""
Consolidated error types for senvec.

Two families sit under one base class: precondition errors raised for bad
arguments (programmer error) and integrity errors raised when stored or
transmitted data cannot be trusted (data or security error).
"""

from typing import Optional, Any, Dict


class SenvecError(Exception):
    """
    Base exception for all senvec errors.

    Provides common functionality for error tracking and reporting.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize senvec error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PreconditionError(SenvecError, ValueError):
    """Raised when a caller violates a local precondition."""


class InvalidDimensionError(PreconditionError):
    """Vector dimension is not a positive integer."""

    def __init__(self, dimension: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Dimension must be a positive integer, got {dimension!r}", details)
        self.dimension = dimension
        self.details['dimension'] = dimension


class InvalidHashWidthError(PreconditionError):
    """Number of hash bits is not a positive integer."""

    def __init__(self, num_bits: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Hash width must be a positive integer, got {num_bits!r}", details)
        self.num_bits = num_bits
        self.details['num_bits'] = num_bits


class DimensionMismatchError(PreconditionError):
    """Vector length differs from the dimension the operation expects."""

    def __init__(self, expected: int, actual: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Expected a vector of dimension {expected}, got {actual}", details)
        self.expected = expected
        self.actual = actual
        self.details.update({
            'expected': expected,
            'actual': actual
        })


class LengthMismatchError(PreconditionError):
    """Two hash codes of different lengths were compared."""

    def __init__(self, left: int, right: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Hash lengths must match ({left} != {right})", details)
        self.left = left
        self.right = right
        self.details.update({
            'left': left,
            'right': right
        })


class InvalidHashCodeError(PreconditionError):
    """Hash code contains characters other than '0' and '1'."""


class InvalidSeedError(PreconditionError):
    """Seed is not an integer in the signed 64-bit range."""

    def __init__(self, seed: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Seed must be an integer in [-2**63, 2**63), got {seed!r}", details)
        self.seed = seed
        self.details['seed'] = seed


class InvalidKeySizeError(PreconditionError):
    """Key length is not a supported AES key size."""

    def __init__(self, bits: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Key size must be 128, 192 or 256 bits, got {bits!r}", details)
        self.bits = bits
        self.details['bits'] = bits


class IntegrityError(SenvecError):
    """Raised when a payload or ciphertext fails an integrity check."""


class MalformedPayloadError(IntegrityError):
    """Serialized vector is structurally inconsistent with its header."""


class CorruptPayloadError(IntegrityError):
    """Serialized vector decoded to values the caller does not accept."""


class DecryptionFailedError(IntegrityError):
    """Ciphertext could not be authenticated with the supplied key."""


def is_precondition_error(error: Exception) -> bool:
    """Check if error is a caller precondition violation."""
    return isinstance(error, PreconditionError)


def is_integrity_error(error: Exception) -> bool:
    """Check if error is a data integrity failure."""
    return isinstance(error, IntegrityError)
