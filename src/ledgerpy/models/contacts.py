"""Contact records and accounting profile contact links."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ledgerpy.models.attachments import AttachmentModel
from ledgerpy.models.common import LedgerModel
from ledgerpy.models.custom_fields import (
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from ledgerpy.models.notes import NoteModel


class ContactModel(LedgerModel):
    """A person who works at a company."""

    contact_id: UUID | None = None
    company_id: UUID | None = None
    group_key: UUID | None = None
    erp_key: str | None = None
    contact_name: str | None = None
    contact_code: str | None = None
    title: str | None = None
    role_code: str | None = None
    email_address: str | None = None
    phone: str | None = None
    fax: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    city: str | None = None
    state_region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    is_active: bool | None = None
    webpage_url: str | None = None
    picture_url: str | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    notes: list[NoteModel] | None = None
    attachments: list[AttachmentModel] | None = None
    custom_field_definitions: list[CustomFieldDefinitionModel] | None = None
    custom_field_values: list[CustomFieldValueModel] | None = None


class AccountingProfileContactModel(LedgerModel):
    """Link between an accounting profile and one of its contacts."""

    accounting_profile_contact_id: UUID | None = None
    accounting_profile_id: UUID | None = None
    contact_id: UUID | None = None
    is_primary: bool | None = None
    group_key: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None


class AccountingProfileContactResultModel(LedgerModel):
    """Accounting profile contact link expanded with the contact's details."""

    accounting_profile_contact_id: UUID | None = None
    accounting_profile_id: UUID | None = None
    contact_id: UUID | None = None
    is_primary: bool | None = None
    group_key: UUID | None = None
    contact_name: str | None = None
    title: str | None = None
    role_code: str | None = None
    email_address: str | None = None
    phone: str | None = None
    address1: str | None = None
    city: str | None = None
    state_region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
