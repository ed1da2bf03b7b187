"""ledgerpy - Typed Python client for an accounting platform REST API."""

import logging

from ledgerpy._version import __version__
from ledgerpy.auth import ApiKeyAuth, BearerTokenAuth
from ledgerpy.client_async import AsyncLedgerClient
from ledgerpy.client_base import ClientConfig
from ledgerpy.client_sync import LedgerClient
from ledgerpy.envelope import ErrorKind, Failure, LedgerResponse, Success
from ledgerpy.exceptions import (
    LedgerAPIError,
    LedgerAuthError,
    LedgerDeserializationError,
    LedgerNotFoundError,
    LedgerRateLimitError,
    LedgerServerError,
    LedgerTransportError,
    LedgerValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "LedgerClient",
    "AsyncLedgerClient",
    "ClientConfig",
    "ApiKeyAuth",
    "BearerTokenAuth",
    "Success",
    "Failure",
    "ErrorKind",
    "LedgerResponse",
    "LedgerAPIError",
    "LedgerAuthError",
    "LedgerDeserializationError",
    "LedgerNotFoundError",
    "LedgerRateLimitError",
    "LedgerServerError",
    "LedgerTransportError",
    "LedgerValidationError",
]
