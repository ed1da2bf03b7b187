"""Custom field definitions and values."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ledgerpy.models.common import Amount, LedgerModel


class CustomFieldDefinitionModel(LedgerModel):
    """Describes a custom field that can be set on records of one table."""

    custom_field_definition_id: UUID | None = None
    group_key: UUID | None = None
    table_key: str | None = None
    app_enrollment_id: UUID | None = None
    custom_field_label: str | None = None
    data_type: str | None = None
    sort_order: int | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None


class CustomFieldValueModel(LedgerModel):
    """The value of one custom field on one record.

    Identified by the pair (``custom_field_definition_id``, ``record_key``).
    """

    group_key: UUID | None = None
    custom_field_definition_id: UUID | None = None
    record_key: UUID | None = None
    string_value: str | None = None
    numeric_value: Amount | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    custom_field_definition: CustomFieldDefinitionModel | None = None
