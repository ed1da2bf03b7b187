"""Asynchronous client for the accounting platform API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping, Sequence
from pathlib import Path
from typing import Any, BinaryIO, ClassVar, Generic, TypeVar
from uuid import UUID

import httpx

from ledgerpy.auth import resolve_auth
from ledgerpy.client_base import (
    ClientConfig,
    RequestDescriptor,
    Resource,
    build_envelope,
    describe_request,
    next_page_number,
    prepare_attachment,
    query_params,
)
from ledgerpy.envelope import Failure, LedgerResponse
from ledgerpy.exceptions import LedgerTransportError
from ledgerpy.models import (
    AccountingProfileContactModel,
    AccountingProfileContactResultModel,
    ActionResultModel,
    AttachmentModel,
    CompanyModel,
    ContactModel,
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
    DeleteResultModel,
    FetchResult,
    InvoiceModel,
    InvoiceSummaryModel,
    LedgerModel,
    NoteModel,
    PaymentDetailHeaderModel,
    PaymentDetailModel,
    PaymentModel,
    PaymentSummaryModel,
    StatusModel,
    SummaryFetchResult,
    TransactionModel,
    TransactionSummaryTotalModel,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=LedgerModel)


class AsyncLedgerClient:
    """Asynchronous client for the accounting platform API.

    Every call returns a ``Success`` or ``Failure`` envelope. Only transport
    faults raise, as ``LedgerTransportError``.
    """

    def __init__(
        self,
        *,
        bearer_token: str | None = None,
        api_key: str | None = None,
        environment: str = ClientConfig.DEFAULT_ENVIRONMENT,
        base_url: str | None = None,
        timeout: float = ClientConfig.DEFAULT_TIMEOUT,
        app_name: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            bearer_token: Pre-obtained bearer token
            api_key: Platform API key
            environment: "sbx" or "prd", ignored when base_url is given
            base_url: Explicit API address
            timeout: Request timeout in seconds
            app_name: Name of the calling application, sent for diagnostics
            transport: httpx transport to send requests through

        Raises:
            ValueError: If not exactly one credential is provided, or the
                environment is unknown
        """
        self.config = ClientConfig.resolve(
            environment=environment,
            base_url=base_url,
            timeout=timeout,
            app_name=app_name,
        )
        self.auth = resolve_auth(bearer_token=bearer_token, api_key=api_key)
        self.client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=self.config.default_headers(),
            transport=transport,
        )

        self.accounting_profile_contacts = AsyncAccountingProfileContactsClient(self)
        self.attachments = AsyncAttachmentsClient(self)
        self.companies = AsyncCompaniesClient(self)
        self.contacts = AsyncContactsClient(self)
        self.custom_field_definitions = AsyncCustomFieldDefinitionsClient(self)
        self.custom_field_values = AsyncCustomFieldValuesClient(self)
        self.invoices = AsyncInvoicesClient(self)
        self.notes = AsyncNotesClient(self)
        self.payments = AsyncPaymentsClient(self)
        self.transactions = AsyncTransactionsClient(self)

    async def __aenter__(self) -> AsyncLedgerClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    def prepare(self, descriptor: RequestDescriptor) -> httpx.Request:
        """Build the httpx request for a descriptor, credentials included."""
        return self.client.build_request(
            method=descriptor.method,
            url=descriptor.path,
            params=descriptor.params or None,
            content=descriptor.content,
            files=descriptor.files,
            headers={**descriptor.headers, **self.auth.get_headers()},
        )

    async def execute(
        self,
        method: str,
        path_template: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        model: Any = None,
        files: Any = None,
    ) -> LedgerResponse[Any]:
        """Send one request and wrap the outcome in an envelope.

        Args:
            method: HTTP method
            path_template: API path with ``{name}`` placeholders
            path_params: Values for the placeholders
            params: Query parameters; ``None`` values are left out
            body: JSON body (models, mappings or sequences of them)
            model: Type to parse a successful body into
            files: Multipart payload

        Returns:
            ``Success`` or ``Failure``

        Raises:
            LedgerTransportError: If no HTTP response was received
        """
        descriptor = describe_request(
            method, path_template, path_params, params, body, files
        )
        request = self.prepare(descriptor)
        logger.debug("%s %s", request.method, request.url)

        try:
            response = await self.client.send(request)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            raise LedgerTransportError(
                f"{request.method} {request.url} failed: {exc}", request=request
            ) from exc

        envelope = build_envelope(response, model)
        if isinstance(envelope, Failure):
            logger.debug(
                "%s %s -> %s %s",
                request.method,
                request.url,
                response.status_code,
                envelope.error_code or envelope.kind.value,
            )
        else:
            logger.debug(
                "%s %s -> %s", request.method, request.url, response.status_code
            )
        return envelope

    async def ping(self) -> LedgerResponse[StatusModel]:
        """Check the credential and report who it belongs to."""
        return await self.execute("GET", "/api/v1/Status", model=StatusModel)


class AsyncResourceClient(Generic[M]):
    """Base for clients bound to one API collection."""

    resource: ClassVar[Resource]

    def __init__(self, client: AsyncLedgerClient) -> None:
        self._client = client

    async def _fetch(
        self,
        path: str,
        model: Any,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LedgerResponse[Any]:
        return await self._client.execute(
            "GET",
            path,
            params=query_params(filter, include, order, page_size, page_number),
            model=model,
        )


class AsyncRetrieveMixin(AsyncResourceClient[M]):
    async def retrieve(
        self, id: UUID | str, include: str | None = None
    ) -> LedgerResponse[M]:
        """Retrieve one record by its identifier.

        Args:
            id: Platform identifier of the record
            include: Comma separated collections to fetch with the record
        """
        return await self._client.execute(
            "GET",
            self.resource.record_path,
            path_params={"id": id},
            params={"include": include},
            model=self.resource.model,
        )


class AsyncUpdateMixin(AsyncResourceClient[M]):
    async def update(
        self, id: UUID | str, body: M | Mapping[str, Any]
    ) -> LedgerResponse[M]:
        """Change the given fields of a record, leaving the others alone.

        Args:
            id: Platform identifier of the record
            body: Field names and new values, or a model with only those set
        """
        return await self._client.execute(
            "PATCH",
            self.resource.record_path,
            path_params={"id": id},
            body=body,
            model=self.resource.model,
        )


class AsyncDeleteMixin(AsyncResourceClient[M]):
    delete_model: ClassVar[type[LedgerModel]] = ActionResultModel

    async def delete(self, id: UUID | str) -> LedgerResponse[Any]:
        """Delete (or archive) a record."""
        return await self._client.execute(
            "DELETE",
            self.resource.record_path,
            path_params={"id": id},
            model=self.delete_model,
        )


class AsyncCreateMixin(AsyncResourceClient[M]):
    async def create(
        self, records: Sequence[M | Mapping[str, Any]]
    ) -> LedgerResponse[list[M]]:
        """Create one or more records and return them as stored."""
        return await self._client.execute(
            "POST",
            self.resource.path,
            body=list(records),
            model=list[self.resource.model],  # type: ignore[name-defined]
        )


class AsyncQueryMixin(AsyncResourceClient[M]):
    def _page_model(self) -> Any:
        return FetchResult[self.resource.model]  # type: ignore[name-defined]

    async def query(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LedgerResponse[FetchResult[M]]:
        """Query records with filtering, sorting, nested fetch and paging.

        Args:
            filter: Filter expression
            include: Comma separated collections to fetch with each record
            order: Sort expression
            page_size: Records per page, server default when omitted
            page_number: Zero based page number
        """
        return await self._fetch(
            self.resource.path + "/query",
            self._page_model(),
            filter,
            include,
            order,
            page_size,
            page_number,
        )

    async def iter_pages(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int = 0,
    ) -> AsyncIterator[LedgerResponse[FetchResult[M]]]:
        """Yield query responses page by page.

        Stops after the last page or after the first ``Failure``, which is
        yielded like any other response.
        """
        next_page: int | None = page_number
        while next_page is not None:
            response = await self.query(filter, include, order, page_size, next_page)
            yield response
            if isinstance(response, Failure):
                return
            next_page = next_page_number(response.value, next_page)


class AsyncStandardResourceClient(
    AsyncRetrieveMixin[M],
    AsyncUpdateMixin[M],
    AsyncDeleteMixin[M],
    AsyncCreateMixin[M],
    AsyncQueryMixin[M],
):
    pass


class AsyncAccountingProfileContactsClient(
    AsyncRetrieveMixin[AccountingProfileContactModel],
    AsyncDeleteMixin[AccountingProfileContactModel],
    AsyncCreateMixin[AccountingProfileContactModel],
    AsyncQueryMixin[AccountingProfileContactModel],
):
    resource = Resource(
        "/api/v1/profiles/accounting/contacts", AccountingProfileContactModel
    )
    delete_model = DeleteResultModel

    async def query_linked(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LedgerResponse[FetchResult[AccountingProfileContactResultModel]]:
        """Query accounting profile contacts joined with the contact details."""
        return await self._fetch(
            self.resource.path + "/query/models",
            FetchResult[AccountingProfileContactResultModel],
            filter,
            include,
            order,
            page_size,
            page_number,
        )

    async def set_primary(
        self, id: UUID | str
    ) -> LedgerResponse[AccountingProfileContactModel]:
        """Make a secondary contact the primary contact of its profile."""
        return await self._client.execute(
            "PATCH",
            self.resource.record_path + "/primary",
            path_params={"id": id},
            model=AccountingProfileContactModel,
        )


class AsyncAttachmentsClient(
    AsyncRetrieveMixin[AttachmentModel],
    AsyncUpdateMixin[AttachmentModel],
    AsyncDeleteMixin[AttachmentModel],
    AsyncQueryMixin[AttachmentModel],
):
    resource = Resource("/api/v1/Attachments", AttachmentModel)

    async def upload(
        self,
        table_name: str,
        object_id: UUID | str,
        file: Path | str | bytes | BinaryIO,
        attachment_type: str | None = None,
        filename: str | None = None,
    ) -> LedgerResponse[list[AttachmentModel]]:
        """Upload a file and attach it to a record.

        Args:
            table_name: Table of the record, e.g. "Invoices"
            object_id: Identifier of the record
            file: File to upload
            attachment_type: Optional attachment type code
            filename: Optional filename override
        """
        return await self._client.execute(
            "POST",
            self.resource.path,
            params={
                "tableName": table_name,
                "objectId": object_id,
                "attachmentType": attachment_type,
            },
            files=prepare_attachment(file, filename),
            model=list[AttachmentModel],
        )


class AsyncCompaniesClient(AsyncStandardResourceClient[CompanyModel]):
    resource = Resource("/api/v1/Companies", CompanyModel)


class AsyncContactsClient(AsyncStandardResourceClient[ContactModel]):
    resource = Resource("/api/v1/Contacts", ContactModel)


class AsyncCustomFieldDefinitionsClient(
    AsyncStandardResourceClient[CustomFieldDefinitionModel]
):
    resource = Resource(
        "/api/v1/CustomFieldDefinitions", CustomFieldDefinitionModel
    )


class AsyncCustomFieldValuesClient(
    AsyncCreateMixin[CustomFieldValueModel], AsyncQueryMixin[CustomFieldValueModel]
):
    """Custom field values are keyed by definition and record, not one id."""

    resource = Resource("/api/v1/CustomFieldValues", CustomFieldValueModel)
    value_path = resource.path + "/{definition_id}/{record_key}"

    async def retrieve(
        self,
        definition_id: UUID | str,
        record_key: UUID | str,
        include: str | None = None,
    ) -> LedgerResponse[CustomFieldValueModel]:
        return await self._client.execute(
            "GET",
            self.value_path,
            path_params={"definition_id": definition_id, "record_key": record_key},
            params={"include": include},
            model=CustomFieldValueModel,
        )

    async def update(
        self,
        definition_id: UUID | str,
        record_key: UUID | str,
        body: CustomFieldValueModel | Mapping[str, Any],
    ) -> LedgerResponse[CustomFieldValueModel]:
        return await self._client.execute(
            "PATCH",
            self.value_path,
            path_params={"definition_id": definition_id, "record_key": record_key},
            body=body,
            model=CustomFieldValueModel,
        )

    async def delete(
        self, definition_id: UUID | str, record_key: UUID | str
    ) -> LedgerResponse[ActionResultModel]:
        return await self._client.execute(
            "DELETE",
            self.value_path,
            path_params={"definition_id": definition_id, "record_key": record_key},
            model=ActionResultModel,
        )


class AsyncInvoicesClient(AsyncStandardResourceClient[InvoiceModel]):
    resource = Resource("/api/v1/Invoices", InvoiceModel)

    async def query_summary_view(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LedgerResponse[FetchResult[InvoiceSummaryModel]]:
        """Query invoices with summary information per invoice."""
        return await self._fetch(
            self.resource.path + "/views/summary",
            FetchResult[InvoiceSummaryModel],
            filter,
            include,
            order,
            page_size,
            page_number,
        )


class AsyncNotesClient(
    AsyncRetrieveMixin[NoteModel],
    AsyncDeleteMixin[NoteModel],
    AsyncCreateMixin[NoteModel],
    AsyncQueryMixin[NoteModel],
):
    resource = Resource("/api/v1/Notes", NoteModel)


class AsyncPaymentsClient(AsyncStandardResourceClient[PaymentModel]):
    resource = Resource("/api/v1/Payments", PaymentModel)

    async def query_summary_view(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LedgerResponse[FetchResult[PaymentSummaryModel]]:
        """Query payments with the invoices each one was applied to."""
        return await self._fetch(
            self.resource.path + "/views/summary",
            FetchResult[PaymentSummaryModel],
            filter,
            include,
            order,
            page_size,
            page_number,
        )

    async def retrieve_detail_header(self) -> LedgerResponse[PaymentDetailHeaderModel]:
        """Retrieve aggregated payment figures for the account."""
        return await self._client.execute(
            "GET",
            self.resource.path + "/views/detail-header",
            model=PaymentDetailHeaderModel,
        )

    async def query_detail_view(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LedgerResponse[FetchResult[PaymentDetailModel]]:
        """Query payments joined with the paying customer's details."""
        return await self._fetch(
            self.resource.path + "/views/detail",
            FetchResult[PaymentDetailModel],
            filter,
            include,
            order,
            page_size,
            page_number,
        )


class AsyncTransactionsClient(AsyncQueryMixin[TransactionModel]):
    """Read-only ledger view; query pages carry summary and aging totals."""

    resource = Resource("/api/v1/Transactions", TransactionModel)

    def _page_model(self) -> Any:
        return SummaryFetchResult[TransactionModel, TransactionSummaryTotalModel]
