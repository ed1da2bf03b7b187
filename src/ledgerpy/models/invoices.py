"""Invoice records."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from ledgerpy.models.attachments import AttachmentModel
from ledgerpy.models.common import Amount, LedgerModel
from ledgerpy.models.custom_fields import (
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from ledgerpy.models.notes import NoteModel


class InvoiceModel(LedgerModel):
    """A bill sent from one company to another."""

    group_key: UUID | None = None
    invoice_id: UUID | None = None
    company_id: UUID | None = None
    customer_id: UUID | None = None
    erp_key: str | None = None
    purchase_order_code: str | None = None
    reference_code: str | None = None
    salesperson_code: str | None = None
    salesperson_name: str | None = None
    invoice_type_code: str | None = None
    invoice_status_code: str | None = None
    terms_code: str | None = None
    special_terms: str | None = None
    currency_code: str | None = None
    total_amount: Amount | None = None
    sales_tax_amount: Amount | None = None
    discount_amount: Amount | None = None
    outstanding_balance_amount: Amount | None = None
    invoice_date: date | None = None
    discount_date: date | None = None
    posted_date: date | None = None
    invoice_closed_date: date | None = None
    payment_due_date: date | None = None
    imported_date: date | None = None
    ship_date: date | None = None
    is_voided: bool | None = None
    in_dispute: bool | None = None
    currency_rate: Amount | None = None
    base_currency_total_amount: Amount | None = None
    base_currency_outstanding_balance_amount: Amount | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    notes: list[NoteModel] | None = None
    attachments: list[AttachmentModel] | None = None
    custom_field_definitions: list[CustomFieldDefinitionModel] | None = None
    custom_field_values: list[CustomFieldValueModel] | None = None


class InvoiceSummaryModel(LedgerModel):
    """Condensed invoice row returned by the invoice summary view."""

    group_key: UUID | None = None
    customer_id: UUID | None = None
    invoice_id: UUID | None = None
    invoice_number: str | None = None
    invoice_date: date | None = None
    customer_name: str | None = None
    status: str | None = None
    payment_due_date: date | None = None
    invoice_amount: Amount | None = None
    outstanding_balance: Amount | None = None
    invoice_type_code: str | None = None
    newest_activity: date | None = None
    days_past_due: int | None = None
    payment_numbers: list[str] | None = None
    payment_ids: list[UUID] | None = None
