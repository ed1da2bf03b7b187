"""Exceptions for the ledgerpy library."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from ledgerpy.envelope import Failure


class LedgerTransportError(httpx.TransportError):
    """Raised when a request never produced an HTTP response.

    Extends httpx.TransportError so users can catch both LedgerTransportError
    and httpx.TransportError to handle connection problems.
    """

    def __init__(self, message: str, request: httpx.Request | None = None) -> None:
        """Initialize LedgerTransportError.

        Args:
            message: Error message
            request: The request that could not be completed
        """
        super().__init__(message, request=request)
        self.message = message


class LedgerAPIError(Exception):
    """Base exception for API failures raised through ``Failure.unwrap()``.

    The client itself never raises these; they exist for callers who prefer
    exceptions over branching on the response envelope.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
        failure: Failure | None = None,
    ) -> None:
        """Initialize LedgerAPIError.

        Args:
            message: Error message
            status_code: HTTP status code from the API response
            error_code: Server-defined error code, if the body carried one
            failure: The envelope the error was built from
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.failure = failure

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class LedgerValidationError(LedgerAPIError):
    """Raised when request validation fails (400)."""

    pass


class LedgerAuthError(LedgerAPIError):
    """Raised when authentication fails (401/403)."""

    pass


class LedgerNotFoundError(LedgerAPIError):
    """Raised when a resource is not found (404)."""

    pass


class LedgerRateLimitError(LedgerAPIError):
    """Raised when rate limit is exceeded (429)."""

    pass


class LedgerServerError(LedgerAPIError):
    """Raised when server encounters an error (5xx)."""

    pass


class LedgerDeserializationError(LedgerAPIError):
    """Raised when a successful response could not be parsed."""

    pass
