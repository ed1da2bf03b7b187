"""Tests for the response envelope."""

import pytest
from pydantic import ValidationError

from ledgerpy import (
    ErrorKind,
    Failure,
    LedgerAPIError,
    LedgerAuthError,
    LedgerDeserializationError,
    LedgerNotFoundError,
    LedgerRateLimitError,
    LedgerServerError,
    LedgerValidationError,
    Success,
)


def make_failure(
    status_code: int, kind: ErrorKind = ErrorKind.API_ERROR
) -> Failure:
    return Failure(
        kind=kind,
        error_code="SomeError",
        message="Something went wrong",
        status_code=status_code,
    )


class TestSuccess:
    """Test the success arm."""

    def test_tag(self):
        envelope = Success(value=1, status_code=200)
        assert envelope.success is True
        assert envelope.unwrap() == 1

    def test_is_frozen(self):
        envelope = Success(value=1, status_code=200)
        with pytest.raises(ValidationError):
            envelope.value = 2


class TestFailure:
    """Test the failure arm."""

    def test_tag(self):
        envelope = make_failure(400)
        assert envelope.success is False
        assert envelope.raw_body == ""

    @pytest.mark.parametrize(
        ("status_code", "exception_type"),
        [
            (400, LedgerValidationError),
            (401, LedgerAuthError),
            (403, LedgerAuthError),
            (404, LedgerNotFoundError),
            (429, LedgerRateLimitError),
            (500, LedgerServerError),
            (503, LedgerServerError),
            (409, LedgerAPIError),
        ],
    )
    def test_to_exception(self, status_code: int, exception_type: type):
        error = make_failure(status_code).to_exception()
        assert type(error) is exception_type
        assert error.status_code == status_code
        assert error.error_code == "SomeError"
        assert str(error) == f"[{status_code}] Something went wrong"

    def test_deserialization_failure(self):
        error = make_failure(200, ErrorKind.DESERIALIZATION_ERROR).to_exception()
        assert isinstance(error, LedgerDeserializationError)

    def test_unwrap_raises(self):
        envelope = make_failure(404)
        with pytest.raises(LedgerNotFoundError) as exc_info:
            envelope.unwrap()
        assert exc_info.value.failure is envelope
