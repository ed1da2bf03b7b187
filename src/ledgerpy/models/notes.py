"""Note records."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ledgerpy.models.common import LedgerModel


class NoteModel(LedgerModel):
    """A text note attached to another record, identified by table and object key."""

    note_id: UUID | None = None
    group_key: UUID | None = None
    table_key: str | None = None
    object_key: UUID | None = None
    title: str | None = None
    note_text: str | None = None
    note_type: str | None = None
    is_archived: bool | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    created_user_name: str | None = None
    app_enrollment_id: UUID | None = None
    recipient_name: str | None = None
    activity_id: UUID | None = None
