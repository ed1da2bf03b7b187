"""Request pipeline shared by the sync and async clients."""

from __future__ import annotations

import logging
import mimetypes
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, BinaryIO, ClassVar
from urllib.parse import quote

import httpx
import simplejson
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ledgerpy._version import __version__
from ledgerpy.envelope import ErrorKind, Failure, LedgerResponse, Success
from ledgerpy.models import ErrorResult, FetchResult, LedgerModel, wire_data

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


class ClientConfig(BaseModel):
    """Immutable connection settings for a client."""

    model_config = ConfigDict(frozen=True)

    ENVIRONMENTS: ClassVar[dict[str, str]] = {
        "sbx": "https://api.sbx.lockstep.io",
        "prd": "https://api.lockstep.io",
    }
    DEFAULT_ENVIRONMENT: ClassVar[str] = "sbx"
    DEFAULT_TIMEOUT: ClassVar[float] = 30.0

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    app_name: str | None = None

    @classmethod
    def resolve(
        cls,
        *,
        environment: str = DEFAULT_ENVIRONMENT,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        app_name: str | None = None,
    ) -> ClientConfig:
        """Build a config from client constructor arguments.

        Args:
            environment: Key into ``ENVIRONMENTS``, ignored if base_url is given
            base_url: Explicit API address
            timeout: Request timeout in seconds, handed to httpx
            app_name: Optional name of the calling application

        Raises:
            ValueError: If the environment is unknown
        """
        if base_url is None:
            try:
                base_url = cls.ENVIRONMENTS[environment]
            except KeyError:
                raise ValueError(
                    f"Unknown environment {environment!r}, expected one of "
                    f"{sorted(cls.ENVIRONMENTS)} or an explicit base_url"
                ) from None
        return cls(base_url=base_url.rstrip("/"), timeout=timeout, app_name=app_name)

    def default_headers(self) -> dict[str, str]:
        """Client identification headers sent with every request."""
        headers = {
            "User-Agent": f"ledgerpy/{__version__}",
            "Accept": "application/json",
        }
        if self.app_name:
            headers["ApplicationName"] = self.app_name
        return headers


@dataclass(frozen=True)
class RequestDescriptor:
    """A request ready to be handed to httpx."""

    method: str
    path: str
    params: list[tuple[str, str]]
    content: bytes | None = None
    files: Any = None

    @property
    def headers(self) -> dict[str, str]:
        if self.content is None:
            return {}
        return {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Resource:
    """Table entry describing one API collection."""

    path: str
    model: type[LedgerModel]

    @property
    def record_path(self) -> str:
        return self.path + "/{id}"


def render_path(template: str, path_params: Mapping[str, Any] | None = None) -> str:
    """Substitute ``{name}`` placeholders with percent-encoded values.

    Raises:
        KeyError: If the template names a parameter that was not supplied
    """
    encoded = {
        name: quote(str(value), safe="") for name, value in (path_params or {}).items()
    }
    return template.format_map(encoded)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _query_value(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def compose_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Turn optional query parameters into ordered name/value pairs.

    ``None`` means "not provided" and drops the parameter; empty strings,
    zero and ``False`` are sent. Order follows the mapping's insertion order.
    """
    if not params:
        return []
    return [
        (name, _query_value(value))
        for name, value in params.items()
        if value is not None
    ]


def serialize_body(body: Any) -> Any:
    """Convert a request body into JSON-compatible data.

    Models only contribute the fields that were set, so an omitted field is
    left out while an explicit ``None`` is sent as ``null``.
    """
    if body is None:
        return None
    if isinstance(body, LedgerModel):
        return body.to_payload()
    if isinstance(body, BaseModel):
        return wire_data(body.model_dump(by_alias=True, exclude_unset=True))
    if isinstance(body, Mapping):
        return {str(key): serialize_body(value) for key, value in body.items()}
    if isinstance(body, Sequence) and not isinstance(body, (str, bytes)):
        return [serialize_body(item) for item in body]
    return wire_data(body)


def encode_json(data: Any) -> bytes:
    """Encode a request body, writing ``Decimal`` values as exact JSON numbers."""
    return simplejson.dumps(data, use_decimal=True, separators=(",", ":")).encode()


def query_params(
    filter: str | None = None,
    include: str | None = None,
    order: str | None = None,
    page_size: int | None = None,
    page_number: int | None = None,
) -> dict[str, Any]:
    """Standard query parameters, in the order the API documents them."""
    return {
        "filter": filter,
        "include": include,
        "order": order,
        "pageSize": page_size,
        "pageNumber": page_number,
    }


def describe_request(
    method: str,
    path_template: str,
    path_params: Mapping[str, Any] | None = None,
    params: Mapping[str, Any] | None = None,
    body: Any = None,
    files: Any = None,
) -> RequestDescriptor:
    """Assemble everything about a request except credentials and base URL."""
    method = method.upper()
    if method not in HTTP_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")
    return RequestDescriptor(
        method=method,
        path=render_path(path_template, path_params),
        params=compose_query(params),
        content=None if body is None else encode_json(serialize_body(body)),
        files=files,
    )


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def build_envelope(response: httpx.Response, model: Any = None) -> LedgerResponse[Any]:
    """Normalize an HTTP response into a ``Success`` or ``Failure``.

    Args:
        response: Response received from the transport
        model: Type the success body is parsed into, ``None`` to ignore the body

    Returns:
        Response envelope; never raises for any status code or body
    """
    status_code = response.status_code

    if response.is_success:
        if model is None or status_code == 204:
            return Success(value=None, status_code=status_code)
        try:
            value = _adapter(model).validate_python(response.json(parse_float=Decimal))
        except (ValueError, ValidationError) as exc:
            logger.debug("Could not deserialize %s response: %s", status_code, exc)
            return Failure(
                kind=ErrorKind.DESERIALIZATION_ERROR,
                error_code="DeserializationError",
                message=f"Response body could not be parsed: {exc}",
                status_code=status_code,
                raw_body=response.text,
            )
        return Success(value=value, status_code=status_code)

    try:
        error = ErrorResult.model_validate_json(response.content)
    except ValidationError:
        return Failure(
            kind=ErrorKind.UNSTRUCTURED_ERROR,
            message=f"HTTP {status_code} error",
            status_code=status_code,
            raw_body=response.text,
        )
    return Failure(
        kind=ErrorKind.API_ERROR,
        error_code=error.error_code,
        message=error.message,
        status_code=status_code,
        raw_body=response.text,
    )


def next_page_number(page: FetchResult[Any], page_number: int) -> int | None:
    """Return the page to request after ``page``, or ``None`` when done.

    Page boundaries come from the server; nothing is sliced locally.
    """
    records = page.records or []
    if not records:
        return None
    current = page.page_number if page.page_number is not None else page_number
    page_size = page.page_size
    if page_size:
        if len(records) < page_size:
            return None
        total_count = page.total_count
        if total_count is not None and (current + 1) * page_size >= total_count:
            return None
    return current + 1


def prepare_attachment(
    file: Path | str | bytes | BinaryIO,
    filename: str | None = None,
) -> dict[str, tuple[str, bytes, str]]:
    """Prepare a multipart payload for an attachment upload.

    Args:
        file: File path, file path string, raw bytes or file-like object
        filename: Optional filename override

    Returns:
        Mapping suitable for the ``files`` argument of httpx

    Raises:
        FileNotFoundError: If a path was given that does not exist
    """
    if isinstance(file, (Path, str)):
        file_path = Path(file)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        actual_filename = filename or file_path.name
        # Read eagerly so the async client never holds a sync file handle
        file_bytes = file_path.read_bytes()
    elif isinstance(file, bytes):
        actual_filename = filename or "attachment"
        file_bytes = file
    else:
        name = getattr(file, "name", None) or "attachment"
        actual_filename = filename or Path(str(name)).name
        file_bytes = file.read()

    content_type = (
        mimetypes.guess_type(actual_filename)[0] or "application/octet-stream"
    )
    return {"files": (actual_filename, file_bytes, content_type)}
