"""Transactions: invoices, payments and credit memos in one ledger view."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from ledgerpy.models.common import Amount, LedgerModel


class TransactionModel(LedgerModel):
    group_key: UUID | None = None
    company_id: UUID | None = None
    transaction_id: UUID | None = None
    transaction_type: str | None = None
    transaction_status: str | None = None
    reference_number: str | None = None
    transaction_date: date | None = None
    due_date: date | None = None
    days_past_due: int | None = None
    currency_code: str | None = None
    total_amount: Amount | None = None
    outstanding_amount: Amount | None = None
    is_voided: bool | None = None
    in_dispute: bool | None = None
    created: datetime | None = None
    modified: datetime | None = None


class TransactionSummaryTotalModel(LedgerModel):
    total_invoices_open: int | None = None
    total_invoices_past_due: int | None = None
    total_invoice_amount: Amount | None = None
    total_invoice_amount_past_due: Amount | None = None
    total_credit_memo_amount: Amount | None = None
    total_payment_amount: Amount | None = None
