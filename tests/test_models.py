"""Tests for resource models."""

import json
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from ledgerpy.models import (
    CompanyModel,
    CustomFieldValueModel,
    FetchResult,
    NoteModel,
    PaymentModel,
    SummaryFetchResult,
    TransactionModel,
    TransactionSummaryTotalModel,
)


class TestRoundTrip:
    """Test that records survive parse and dump unchanged."""

    def test_payment(self, mock_payment: dict):
        """Test a flat payment record."""
        payment = PaymentModel.model_validate(mock_payment)
        assert payment.payment_id == UUID(mock_payment["paymentId"])
        assert payment.to_payload() == mock_payment

    def test_payment_with_nested_collections(self, payment_id: str):
        """Test a payment with applications and notes."""
        data = {
            "paymentId": payment_id,
            "paymentAmount": 250.75,
            "memoText": None,
            "applications": [
                {
                    "paymentAppliedId": "33333333-3333-3333-3333-333333333333",
                    "paymentAppliedAmount": 250.75,
                    "applyToInvoiceDate": "2024-02-01",
                    "invoice": {
                        "invoiceId": "44444444-4444-4444-4444-444444444444",
                        "totalAmount": 300.0,
                        "invoiceDate": "2024-01-01",
                    },
                }
            ],
            "notes": [],
        }
        payment = PaymentModel.model_validate(data)
        assert payment.applications[0].invoice.total_amount == Decimal("300")
        assert payment.to_payload() == data

    def test_unknown_fields_are_kept(self, mock_company: dict):
        """Test that fields the model does not declare survive."""
        data = {**mock_company, "companyClassificationCodeDefId": "X1"}
        company = CompanyModel.model_validate(data)
        assert company.model_extra == {"companyClassificationCodeDefId": "X1"}
        assert company.to_payload() == data

    def test_fetch_result(self, mock_payment: dict):
        """Test a page of records."""
        data = {
            "records": [mock_payment],
            "totalCount": 1,
            "pageSize": 200,
            "pageNumber": 0,
        }
        page = FetchResult[PaymentModel].model_validate(data)
        assert isinstance(page.records[0], PaymentModel)
        assert page.to_payload() == data

    def test_summary_fetch_result(self):
        """Test a page of transactions with its summary."""
        data = {
            "records": [{"transactionType": "Invoice", "totalAmount": 10.0}],
            "totalCount": 1,
            "pageSize": 200,
            "pageNumber": 0,
            "summary": {"totalInvoicesOpen": 1, "totalInvoiceAmount": 10.0},
            "agingSummary": [{"bucket": "0-30", "totalOutstandingAmount": 10.0}],
        }
        page = SummaryFetchResult[
            TransactionModel, TransactionSummaryTotalModel
        ].model_validate(data)
        assert page.summary.total_invoices_open == 1
        assert page.aging_summary[0].bucket == "0-30"
        assert page.to_payload() == data


class TestFieldPresence:
    """Test the difference between omitted and null fields."""

    def test_omitted_fields_are_not_dumped(self):
        value = CustomFieldValueModel(string_value="Gold")
        assert value.to_payload() == {"stringValue": "Gold"}

    def test_explicit_null_is_dumped(self):
        value = CustomFieldValueModel(string_value=None)
        assert value.to_payload() == {"stringValue": None}

    def test_populate_by_alias_or_name(self):
        by_alias = PaymentModel.model_validate({"isOpen": False})
        by_name = PaymentModel(is_open=False)
        assert by_alias.is_open is False
        assert by_alias.to_payload() == by_name.to_payload()

    def test_amounts_stay_decimal(self):
        payment = PaymentModel(payment_amount=Decimal("100.00"))
        assert payment.to_payload() == {"paymentAmount": Decimal("100.00")}


class TestWireFidelity:
    """Test records parsed from wire text against what they dump back."""

    def test_high_precision_amounts(self, payment_id: str):
        """Test amounts beyond float precision, including extras."""
        text = (
            '{"paymentId": "%s", "paymentAmount": 12345678901234567.89,'
            ' "currencyRate": 0.000000012345678901, "futureAmount": 1.10}'
        ) % payment_id
        data = json.loads(text, parse_float=Decimal)
        payment = PaymentModel.model_validate(data)
        assert payment.payment_amount == Decimal("12345678901234567.89")
        assert payment.to_payload() == data

    def test_timestamp_without_fraction(self, payment_id: str):
        """Test that whole-second UTC timestamps come back unchanged."""
        data = {"paymentId": payment_id, "created": "2024-01-15T10:00:00Z"}
        assert PaymentModel.model_validate(data).to_payload() == data

    def test_timestamp_fraction_is_normalized(self):
        """Test that fractional seconds are written with six digits."""
        note = NoteModel.model_validate({"created": "2024-01-15T10:00:00.123Z"})
        assert note.created == datetime(2024, 1, 15, 10, 0, 0, 123000, timezone.utc)
        assert note.to_payload() == {"created": "2024-01-15T10:00:00.123000Z"}

    def test_normalized_timestamp_is_stable(self):
        """Test that a dumped timestamp parses back to the same dump."""
        once = NoteModel.model_validate({"created": "2024-01-15T10:00:00.5Z"})
        twice = NoteModel.model_validate(once.to_payload())
        assert twice.to_payload() == once.to_payload()
        assert twice.created == once.created

    def test_service_fabric_status_is_declared(self):
        """Test that the payment status field is a real field, not an extra."""
        payment = PaymentModel.model_validate({"serviceFabricStatus": "PAID"})
        assert payment.service_fabric_status == "PAID"
        assert payment.model_extra == {}
