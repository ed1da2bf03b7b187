"""Pytest fixtures for ledgerpy tests."""

from collections.abc import Callable
from typing import Any

import pytest

from ledgerpy import AsyncLedgerClient, LedgerClient


@pytest.fixture
def api_key() -> str:
    """Return a test API key."""
    return "test_api_key_12345"


@pytest.fixture
def bearer_token() -> str:
    """Return a test bearer token."""
    return "test_bearer_token"


@pytest.fixture
def base_url() -> str:
    """Return the sandbox API URL."""
    return "https://api.sbx.lockstep.io"


@pytest.fixture
def payment_id() -> str:
    """Return a payment identifier."""
    return "11111111-1111-1111-1111-111111111111"


@pytest.fixture
def sync_client(api_key: str):
    """Create a sync LedgerClient for testing."""
    client = LedgerClient(api_key=api_key)
    yield client
    client.close()


@pytest.fixture
async def async_client(api_key: str):
    """Create an async LedgerClient for testing."""
    client = AsyncLedgerClient(api_key=api_key)
    yield client
    await client.close()


@pytest.fixture
def mock_payment(payment_id: str) -> dict[str, Any]:
    """Return mock payment data."""
    return {
        "paymentId": payment_id,
        "companyId": "22222222-2222-2222-2222-222222222222",
        "paymentType": "Check",
        "paymentAmount": 100.0,
        "unappliedAmount": 0.0,
        "currencyCode": "USD",
        "isOpen": True,
        "paymentDate": "2024-01-15",
    }


@pytest.fixture
def mock_company() -> dict[str, Any]:
    """Return mock company data."""
    return {
        "companyId": "22222222-2222-2222-2222-222222222222",
        "companyName": "Test Company Inc",
        "companyType": "Customer",
        "isActive": True,
        "defaultCurrencyCode": "USD",
        "city": "Seattle",
    }


@pytest.fixture
def validation_error() -> dict[str, Any]:
    """Return a structured error body."""
    return {"errorCode": "ValidationError", "message": "CompanyId required"}


@pytest.fixture
def page_body() -> Callable[..., dict[str, Any]]:
    """Return a builder for query response bodies."""

    def build(
        records: list[dict[str, Any]],
        page_size: int,
        page_number: int,
        total_count: int,
    ) -> dict[str, Any]:
        return {
            "records": records,
            "totalCount": total_count,
            "pageSize": page_size,
            "pageNumber": page_number,
        }

    return build
