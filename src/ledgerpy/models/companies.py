"""Company records."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ledgerpy.models.attachments import AttachmentModel
from ledgerpy.models.common import LedgerModel
from ledgerpy.models.contacts import ContactModel
from ledgerpy.models.custom_fields import (
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from ledgerpy.models.notes import NoteModel


class CompanyModel(LedgerModel):
    """A business entity: a customer, a vendor, or the account's own company."""

    company_id: UUID | None = None
    company_name: str | None = None
    erp_key: str | None = None
    company_type: str | None = None
    company_status: str | None = None
    parent_company_id: UUID | None = None
    enterprise_id: UUID | None = None
    group_key: UUID | None = None
    is_active: bool | None = None
    default_currency_code: str | None = None
    company_logo_url: str | None = None
    primary_contact_id: UUID | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    city: str | None = None
    state_region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    time_zone: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    tax_id: str | None = None
    duns_number: str | None = None
    ap_email_address: str | None = None
    ar_email_address: str | None = None
    domain_name: str | None = None
    description: str | None = None
    website: str | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    contacts: list[ContactModel] | None = None
    notes: list[NoteModel] | None = None
    attachments: list[AttachmentModel] | None = None
    custom_field_definitions: list[CustomFieldDefinitionModel] | None = None
    custom_field_values: list[CustomFieldValueModel] | None = None
