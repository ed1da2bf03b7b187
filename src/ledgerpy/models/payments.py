"""Payment records and the payment views."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from ledgerpy.models.attachments import AttachmentModel
from ledgerpy.models.common import Amount, LedgerModel
from ledgerpy.models.custom_fields import (
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from ledgerpy.models.invoices import InvoiceModel
from ledgerpy.models.notes import NoteModel


class PaymentAppliedModel(LedgerModel):
    """The portion of a payment applied to one invoice."""

    group_key: UUID | None = None
    payment_applied_id: UUID | None = None
    invoice_id: UUID | None = None
    payment_id: UUID | None = None
    apply_to_invoice_date: date | None = None
    payment_applied_amount: Amount | None = None
    erp_key: str | None = None
    entry_number: int | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    invoice: InvoiceModel | None = None


class PaymentModel(LedgerModel):
    """Money sent from one company to another.

    A single payment may settle several invoices, or be made ahead of any
    invoice as a deposit. ``unapplied_amount`` holds the part that is not yet
    applied to an invoice.
    """

    group_key: UUID | None = None
    payment_id: UUID | None = None
    company_id: UUID | None = None
    erp_key: str | None = None
    payment_type: str | None = None
    tender_type: str | None = None
    is_open: bool | None = None
    memo_text: str | None = None
    payment_date: date | None = None
    post_date: date | None = None
    payment_amount: Amount | None = None
    unapplied_amount: Amount | None = None
    currency_code: str | None = None
    reference_code: str | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    is_voided: bool | None = None
    in_dispute: bool | None = None
    currency_rate: Amount | None = None
    base_currency_payment_amount: Amount | None = None
    base_currency_unapplied_amount: Amount | None = None
    service_fabric_status: str | None = None
    applications: list[PaymentAppliedModel] | None = None
    notes: list[NoteModel] | None = None
    attachments: list[AttachmentModel] | None = None
    custom_field_definitions: list[CustomFieldDefinitionModel] | None = None
    custom_field_values: list[CustomFieldValueModel] | None = None


class PaymentSummaryModel(LedgerModel):
    """Condensed payment row returned by the payment summary view."""

    group_key: UUID | None = None
    payment_id: UUID | None = None
    memo_text: str | None = None
    reference_code: str | None = None
    customer_name: str | None = None
    customer_id: UUID | None = None
    payment_type: str | None = None
    payment_date: date | None = None
    payment_amount: Amount | None = None
    unapplied_amount: Amount | None = None
    invoice_count: int | None = None
    total_payments_applied: Amount | None = None
    invoice_list: list[str] | None = None
    invoice_id_list: list[UUID] | None = None
    is_open: bool | None = None


class PaymentDetailModel(LedgerModel):
    """Payment row joined with the paying customer's contact details."""

    group_key: UUID | None = None
    payment_id: UUID | None = None
    customer_id: UUID | None = None
    customer_name: str | None = None
    memo_text: str | None = None
    reference_code: str | None = None
    primary_contact: str | None = None
    email: str | None = None
    payment_amount: Amount | None = None
    unapplied_amount: Amount | None = None
    payment_type: str | None = None
    payment_date: date | None = None
    post_date: date | None = None
    phone: str | None = None
    fax: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    city: str | None = None
    state_region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None


class PaymentDetailHeaderModel(LedgerModel):
    """Aggregated payment figures for the whole account."""

    group_key: UUID | None = None
    customer_count: int | None = None
    amount_collected: Amount | None = None
    unapplied_amount: Amount | None = None
    paid_invoice_count: int | None = None
    open_invoice_count: int | None = None
