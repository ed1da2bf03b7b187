"""Shared model base and result containers."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

T = TypeVar("T")
S = TypeVar("S")

# Monetary values are kept as Decimal end to end and written as JSON numbers.
Amount = Decimal


def wire_data(value: Any) -> Any:
    """Make dumped model data JSON compatible, leaving ``Decimal`` values exact.

    Timestamps come out as ISO 8601 with microsecond precision and ``Z`` for
    UTC; finer fractions sent by the server are truncated on parse.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Mapping):
        return {str(key): wire_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [wire_data(item) for item in value]
    return to_jsonable_python(value)


class LedgerModel(BaseModel):
    """Base for all API records.

    Field names are snake_case in Python and camelCase on the wire. Fields the
    server returns that are not declared here are kept as extras so records
    survive a read-modify-write cycle unchanged.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict:
        """Dump the fields that were actually provided, keyed by wire name."""
        return wire_data(self.model_dump(by_alias=True, exclude_unset=True))


class FetchResult(LedgerModel, Generic[T]):
    """One page of query results."""

    records: list[T] | None = None
    total_count: int | None = None
    page_size: int | None = None
    page_number: int | None = None


class SummaryAgingTotalsModel(LedgerModel):
    """Outstanding totals for one aging bucket."""

    bucket: str | None = None
    total_outstanding_amount: Amount | None = None


class SummaryFetchResult(FetchResult[T], Generic[T, S]):
    """One page of query results with an aggregate summary."""

    summary: S | None = None
    aging_summary: list[SummaryAgingTotalsModel] | None = None


class ActionResultModel(LedgerModel):
    """Result of an action such as a delete or archive."""

    messages: list[str] | None = None


class DeleteResultModel(LedgerModel):
    """Result of deleting an accounting profile contact."""

    messages: list[str] | None = None


class ErrorResult(BaseModel):
    """Structured error body returned with non-success status codes."""

    model_config = ConfigDict(alias_generator=to_camel, extra="allow")

    error_code: str
    message: str
