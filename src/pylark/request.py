"""Skylark API requests: field selection, filters, ordering and execution."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from pylark._config import ClientConfig
from pylark._filters import Filter
from pylark._http import AsyncTransport, SyncTransport
from pylark._logging import logger
from pylark._query import encode
from pylark.exceptions import PylarkURLError, PylarkValidationError
from pylark.field import Field

T = TypeVar("T")


class Order(StrEnum):
    """Sort direction, used as a prefix of the ``order`` parameter."""

    ASCENDING = ""
    DESCENDING = "-"


def _decode(shape: type[T], data: Any) -> T:
    """Validate decoded JSON against the caller's destination type."""
    try:
        return TypeAdapter(shape).validate_python(data)
    except ValidationError as exc:
        name = getattr(shape, "__name__", repr(shape))
        raise PylarkValidationError(f"Failed to validate {name} response: {exc}") from exc


class Request:
    """A single Skylark API call.

    Usage:
        # One person with all of its fields
        person = Request("https://test.com/api/", "person", "pers_123").execute(Person)

        # The whole collection, limited to a few fields
        people = (
            Request("https://test.com/api/", "person")
            .add_field(Field("first_name"))
            .add_field(Field("team_url").with_sub_field(Field("name")))
            .with_filter("salary", Filter.greater_than(10000))
            .order_by(Field("first_name"), Order.DESCENDING)
            .execute()
        )

    Ordering is only supported on root-level fields.
    """

    def __init__(
        self,
        endpoint: str,
        collection: str,
        id: str = "",
        config: ClientConfig | None = None,
    ) -> None:
        if not endpoint.endswith("/"):
            endpoint += "/"
        self.endpoint = endpoint
        self.collection = collection
        self.id = id
        self.config = config or ClientConfig()
        self.transport = SyncTransport()
        self.async_transport = AsyncTransport()
        self._fields: dict[str, Field] = {}
        self._additional_fields: dict[str, str] = {}

    def __repr__(self) -> str:
        return (
            f"Request(endpoint={self.endpoint!r}, collection={self.collection!r}, "
            f"id={self.id!r})"
        )

    # ── Configuration ──────────────────────────────────────────

    def with_config(self, config: ClientConfig) -> Request:
        self.config = config
        return self

    def with_timeout(self, timeout: float | None) -> Request:
        """Set the deadline in seconds the request will be executed with."""
        self.config = self.config.with_timeout(timeout)
        return self

    def with_headers(self, headers: Mapping[str, str]) -> Request:
        """Send ``headers`` in addition to the configured ones."""
        self.config = self.config.with_headers(headers)
        return self

    def with_client(self, client: httpx.Client | httpx.AsyncClient) -> Request:
        """Use a caller-supplied httpx client for the HTTP call.

        The caller stays responsible for closing it.
        """
        if isinstance(client, httpx.AsyncClient):
            self.async_transport = AsyncTransport(client)
        else:
            self.transport = SyncTransport(client)
        return self

    # ── Query building ─────────────────────────────────────────

    def add_field(self, field: Field) -> Request:
        """Add a root field. A request with fields only returns those fields."""
        self._fields[field.name] = field
        return self

    def expand(self, field: Field) -> Request:
        """Expand a root field without listing it as a field to return."""
        field.is_expanded = True
        field.is_included = False
        return self.add_field(field)

    def order_by(self, field: Field, order: Order = Order.ASCENDING) -> Request:
        self._additional_fields["order"] = f"{order.value}{field.name}"
        return self

    def with_filter(self, field_name: str, filter: Filter) -> Request:
        """Filter by a field that is not part of the requested response."""
        self._additional_fields[filter.param_key(field_name)] = filter.value
        return self

    def query_params(self) -> dict[str, str]:
        """Calculate the request's query parameters."""
        params: dict[str, str] = {}
        for field in self._fields.values():
            field.apply(params)
        params.update(self._additional_fields)
        return params

    def to_url(self) -> httpx.URL:
        """Build the absolute URL of this request."""
        raw = f"{self.endpoint}{self.collection}/"
        if self.id:
            raw += f"{self.id}/"
        query = encode(self.query_params())
        if query:
            raw += f"?{query}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise PylarkURLError(f"Invalid request URL {raw!r}: {exc}") from exc
        if not url.is_absolute_url:
            raise PylarkURLError(f"Request URL {raw!r} is not absolute")
        logger.debug("Built request URL %s", url)
        return url

    # ── Execution ──────────────────────────────────────────────

    def execute(self, shape: type[T] | None = None) -> T | Any:
        """Execute the request and return the decoded response.

        With ``shape`` the JSON body is validated into that type, otherwise
        it is returned as decoded.
        """
        url = self.to_url()
        data = self.transport.get(
            url, headers=self.config.headers, timeout=self.config.timeout
        )
        if shape is None:
            return data
        return _decode(shape, data)

    async def execute_async(self, shape: type[T] | None = None) -> T | Any:
        """Async variant of :meth:`execute`."""
        url = self.to_url()
        data = await self.async_transport.get(
            url, headers=self.config.headers, timeout=self.config.timeout
        )
        if shape is None:
            return data
        return _decode(shape, data)
