"""Attachment records."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ledgerpy.models.common import LedgerModel


class AttachmentModel(LedgerModel):
    """A file stored against another record."""

    attachment_id: UUID | None = None
    group_key: UUID | None = None
    table_key: str | None = None
    object_key: UUID | None = None
    file_name: str | None = None
    file_ext: str | None = None
    attachment_type_id: UUID | None = None
    attachment_type: str | None = None
    is_archived: bool | None = None
    origin_attachment_id: UUID | None = None
    view_internal: bool | None = None
    view_external: bool | None = None
    erp_key: str | None = None
    app_enrollment_id: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
