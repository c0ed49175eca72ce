"""Canonical HTTP status table: the single source of truth for every lookup."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from ..api import schema_registry
from ..api.schema_registry import SchemaValidationError
from ..domain.errors import DuplicateStatusError, StatusConfigurationError
from ..domain.models import StatusRecord

_LOG = logging.getLogger(__name__)

STATUS_RECORD_SCHEMA = "status_record_v0.1"

STATUS_ENTRIES: tuple[tuple[int, str, str], ...] = (
    # 2xx Success
    (200, "OK", "The request has succeeded"),
    (
        201,
        "CREATED",
        "The request has been fulfilled and resulted in a new resource",
    ),
    (202, "ACCEPTED", "The request has been accepted for processing"),
    (
        204,
        "NO_CONTENT",
        "The server successfully processed the request but returns no content",
    ),
    (
        206,
        "PARTIAL_CONTENT",
        "The server is delivering only part of the resource due to a range "
        "header sent by the client",
    ),
    # 3xx Redirection
    (
        301,
        "MOVED_PERMANENTLY",
        "The requested resource has been permanently moved",
    ),
    (
        302,
        "FOUND",
        "The requested resource temporarily resides under a different URI",
    ),
    (
        304,
        "NOT_MODIFIED",
        "The resource has not been modified since last requested",
    ),
    (
        307,
        "TEMPORARY_REDIRECT",
        "The request should be repeated with another URI but future requests "
        "should still use the original URI",
    ),
    (
        308,
        "PERMANENT_REDIRECT",
        "The request and all future requests should be repeated using another URI",
    ),
    # 4xx Client Error
    (
        400,
        "BAD_REQUEST",
        "The server cannot process the request due to client error",
    ),
    (
        401,
        "UNAUTHORIZED",
        "Authentication is required and has failed or not been provided",
    ),
    (
        403,
        "FORBIDDEN",
        "The server understood the request but refuses to authorize it",
    ),
    (404, "NOT_FOUND", "The requested resource could not be found"),
    (
        405,
        "METHOD_NOT_ALLOWED",
        "The request method is not allowed for this resource",
    ),
    (
        406,
        "NOT_ACCEPTABLE",
        "The requested resource is capable of generating only content not "
        "acceptable according to the Accept headers",
    ),
    (408, "REQUEST_TIMEOUT", "The server timed out waiting for the request"),
    (
        409,
        "CONFLICT",
        "The request conflicts with the current state of the resource",
    ),
    (410, "GONE", "The requested resource is no longer available"),
    (
        411,
        "LENGTH_REQUIRED",
        "The request did not specify the length of its content which is "
        "required by the requested resource",
    ),
    (
        412,
        "PRECONDITION_FAILED",
        "The server does not meet one of the preconditions that the requester "
        "put on the request",
    ),
    (
        413,
        "PAYLOAD_TOO_LARGE",
        "The request is larger than the server is willing or able to process",
    ),
    (
        414,
        "URI_TOO_LONG",
        "The URI provided was too long for the server to process",
    ),
    (
        415,
        "UNSUPPORTED_MEDIA_TYPE",
        "The request entity has a media type which the server or resource "
        "does not support",
    ),
    (
        416,
        "RANGE_NOT_SATISFIABLE",
        "The client has asked for a portion of the file but the server cannot "
        "supply that portion",
    ),
    (
        417,
        "EXPECTATION_FAILED",
        "The server cannot meet the requirements of the Expect request-header "
        "field",
    ),
    (
        418,
        "IM_A_TEAPOT",
        "Any attempt to brew coffee with a teapot should result in the error "
        "code 418 I'm a teapot",
    ),
    (
        422,
        "UNPROCESSABLE_ENTITY",
        "The request was well-formed but contains semantic errors",
    ),
    (
        426,
        "UPGRADE_REQUIRED",
        "The client should switch to a different protocol such as TLS/1.0 "
        "given in the Upgrade header field",
    ),
    (
        428,
        "PRECONDITION_REQUIRED",
        "The origin server requires the request to be conditional",
    ),
    (
        429,
        "TOO_MANY_REQUESTS",
        "The user has sent too many requests in a given amount of time",
    ),
    (
        431,
        "REQUEST_HEADER_FIELDS_TOO_LARGE",
        "The server is unwilling to process the request because either an "
        "individual header field or all the header fields collectively are "
        "too large",
    ),
    (
        451,
        "UNAVAILABLE_FOR_LEGAL_REASONS",
        "A server operator has received a legal demand to deny access to a "
        "resource or to a set of resources that includes the requested resource",
    ),
    # 5xx Server Error
    (
        500,
        "INTERNAL_SERVER_ERROR",
        "The server encountered an unexpected condition",
    ),
    (
        501,
        "NOT_IMPLEMENTED",
        "The server does not support the functionality required",
    ),
    (
        502,
        "BAD_GATEWAY",
        "The server received an invalid response from the upstream server",
    ),
    (503, "SERVICE_UNAVAILABLE", "The server is currently unavailable"),
    (
        504,
        "GATEWAY_TIMEOUT",
        "The server did not receive a timely response from upstream",
    ),
    (
        505,
        "HTTP_VERSION_NOT_SUPPORTED",
        "The server does not support the HTTP protocol version used in the "
        "request",
    ),
    (
        511,
        "NETWORK_AUTHENTICATION_REQUIRED",
        "The client needs to authenticate to gain network access",
    ),
)
"""Registered (status, code, message) triples, in ascending status order."""


def _build_record(status: int, code: str, message: str) -> StatusRecord:
    """Validate one raw entry and wrap it in a record."""

    record = StatusRecord(status=status, code=code, message=message)
    try:
        schema_registry.validate(STATUS_RECORD_SCHEMA, record.to_mapping())
    except SchemaValidationError as exc:
        raise StatusConfigurationError(
            f"Invalid status entry {status!r} {code!r}: {exc.message}"
        ) from exc
    return record


class StatusTable:
    """Ordered, read-only collection of status records.

    Numeric statuses and symbolic codes are unique; registration order is kept
    so every iteration yields the records in the same sequence.
    """

    __slots__ = ("_records", "_by_status")

    def __init__(self, entries: Iterable[tuple[int, str, str]]) -> None:
        records: list[StatusRecord] = []
        by_status: dict[int, StatusRecord] = {}
        seen_codes: set[str] = set()
        for status, code, message in entries:
            record = _build_record(status, code, message)
            if record.status in by_status:
                raise DuplicateStatusError(
                    f"Status {record.status} is registered more than once."
                )
            if record.code in seen_codes:
                raise DuplicateStatusError(
                    f"Status code name {record.code} is registered more than once."
                )
            by_status[record.status] = record
            seen_codes.add(record.code)
            records.append(record)
        self._records = tuple(records)
        self._by_status = by_status
        _LOG.debug("Built status table with %d records", len(self._records))

    def get(self, status: int) -> StatusRecord | None:
        """Return the record for ``status`` or ``None`` when unsupported."""

        if isinstance(status, bool) or not isinstance(status, int):
            return None
        return self._by_status.get(status)

    def all(self) -> tuple[StatusRecord, ...]:
        """Return every record in registration order."""

        return self._records

    def __iter__(self) -> Iterator[StatusRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, status: object) -> bool:
        return self.get(status) is not None  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"StatusTable({len(self._records)} records)"


DEFAULT_STATUS_TABLE = StatusTable(STATUS_ENTRIES)
