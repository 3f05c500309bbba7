"""Tests for the error hierarchy."""

import pytest

from senvec.errors import (
    CorruptPayloadError,
    DecryptionFailedError,
    DimensionMismatchError,
    IntegrityError,
    InvalidDimensionError,
    InvalidHashWidthError,
    InvalidSeedError,
    LengthMismatchError,
    MalformedPayloadError,
    PreconditionError,
    SenvecError,
    is_integrity_error,
    is_precondition_error,
)


class TestErrorHierarchy:

    @pytest.mark.parametrize("error", [
        InvalidDimensionError(0),
        InvalidHashWidthError(-1),
        InvalidSeedError(2 ** 64),
        DimensionMismatchError(4, 3),
        LengthMismatchError(2, 5),
    ])
    def test_precondition_errors(self, error):
        assert isinstance(error, PreconditionError)
        assert isinstance(error, ValueError)
        assert isinstance(error, SenvecError)
        assert is_precondition_error(error)
        assert not is_integrity_error(error)

    @pytest.mark.parametrize("cls", [MalformedPayloadError, CorruptPayloadError, DecryptionFailedError])
    def test_integrity_errors(self, cls):
        error = cls("bad data", {'length': 3})

        assert isinstance(error, IntegrityError)
        assert not isinstance(error, ValueError)
        assert is_integrity_error(error)
        assert not is_precondition_error(error)
        assert error.details == {'length': 3}
        assert str(error) == "bad data"

    def test_details_record_failed_check(self):
        error = DimensionMismatchError(300, 299)

        assert error.details == {'expected': 300, 'actual': 299}
        assert "300" in error.message and "299" in error.message

    def test_plain_exceptions_not_classified(self):
        assert not is_precondition_error(ValueError("x"))
        assert not is_integrity_error(OSError("x"))
