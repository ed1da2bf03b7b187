"""Response envelope returned by every API call."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeAliasType

from ledgerpy.exceptions import (
    LedgerAPIError,
    LedgerAuthError,
    LedgerDeserializationError,
    LedgerNotFoundError,
    LedgerRateLimitError,
    LedgerServerError,
    LedgerValidationError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Why a call ended in a ``Failure``."""

    API_ERROR = "api_error"
    UNSTRUCTURED_ERROR = "unstructured_error"
    DESERIALIZATION_ERROR = "deserialization_error"


class Success(BaseModel, Generic[T]):
    """A 2xx response whose body was parsed into ``value``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: Literal[True] = True
    value: T
    status_code: int

    def unwrap(self) -> T:
        """Return the parsed payload."""
        return self.value


class Failure(BaseModel):
    """A response that did not yield the expected payload.

    Attributes:
        kind: Which failure path produced this envelope
        error_code: Server-defined error code, ``None`` when the body had none
        message: Server message, or a generic message for unstructured bodies
        status_code: The HTTP status code as received
        raw_body: Response body text, kept for diagnostics
    """

    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    kind: ErrorKind
    error_code: str | None = None
    message: str
    status_code: int
    raw_body: str = ""

    def to_exception(self) -> LedgerAPIError:
        """Build the exception matching this failure.

        Returns:
            Appropriate LedgerAPIError subclass
        """
        args: dict[str, Any] = {
            "status_code": self.status_code,
            "error_code": self.error_code,
            "failure": self,
        }
        status_code = self.status_code

        if self.kind is ErrorKind.DESERIALIZATION_ERROR:
            return LedgerDeserializationError(self.message, **args)
        elif status_code == 400:
            return LedgerValidationError(self.message, **args)
        elif status_code in (401, 403):
            return LedgerAuthError(self.message, **args)
        elif status_code == 404:
            return LedgerNotFoundError(self.message, **args)
        elif status_code == 429:
            return LedgerRateLimitError(self.message, **args)
        elif status_code >= 500:
            return LedgerServerError(self.message, **args)
        else:
            return LedgerAPIError(self.message, **args)

    def unwrap(self) -> Any:
        """Raise the exception matching this failure."""
        raise self.to_exception()


LedgerResponse = TypeAliasType(
    "LedgerResponse", Union[Success[T], Failure], type_params=(T,)
)
