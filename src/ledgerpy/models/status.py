"""Status of the current credential."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ledgerpy.models.common import LedgerModel


class StatusModel(LedgerModel):
    """Who the credential belongs to and whether it is logged in."""

    user_name: str | None = None
    account_name: str | None = None
    account_company_id: UUID | None = None
    user_id: UUID | None = None
    group_key: UUID | None = None
    logged_in: bool | None = None
    error_message: str | None = None
    roles: list[str] | None = None
    last_logged_in: datetime | None = None
    api_key_id: UUID | None = None
    user_status: str | None = None
    environment: str | None = None
    version: str | None = None
