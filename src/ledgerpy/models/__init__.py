"""Data models for API records."""

from ledgerpy.models.attachments import AttachmentModel
from ledgerpy.models.common import (
    ActionResultModel,
    Amount,
    DeleteResultModel,
    ErrorResult,
    FetchResult,
    LedgerModel,
    SummaryAgingTotalsModel,
    SummaryFetchResult,
    wire_data,
)
from ledgerpy.models.companies import CompanyModel
from ledgerpy.models.contacts import (
    AccountingProfileContactModel,
    AccountingProfileContactResultModel,
    ContactModel,
)
from ledgerpy.models.custom_fields import (
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from ledgerpy.models.invoices import InvoiceModel, InvoiceSummaryModel
from ledgerpy.models.notes import NoteModel
from ledgerpy.models.payments import (
    PaymentAppliedModel,
    PaymentDetailHeaderModel,
    PaymentDetailModel,
    PaymentModel,
    PaymentSummaryModel,
)
from ledgerpy.models.status import StatusModel
from ledgerpy.models.transactions import (
    TransactionModel,
    TransactionSummaryTotalModel,
)

__all__ = [
    "AccountingProfileContactModel",
    "AccountingProfileContactResultModel",
    "ActionResultModel",
    "Amount",
    "AttachmentModel",
    "CompanyModel",
    "ContactModel",
    "CustomFieldDefinitionModel",
    "CustomFieldValueModel",
    "DeleteResultModel",
    "ErrorResult",
    "FetchResult",
    "InvoiceModel",
    "InvoiceSummaryModel",
    "LedgerModel",
    "NoteModel",
    "PaymentAppliedModel",
    "PaymentDetailHeaderModel",
    "PaymentDetailModel",
    "PaymentModel",
    "PaymentSummaryModel",
    "StatusModel",
    "SummaryAgingTotalsModel",
    "SummaryFetchResult",
    "TransactionModel",
    "TransactionSummaryTotalModel",
    "wire_data",
]
