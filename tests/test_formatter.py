"""Custom formatter coverage: one transform call per status, shared aliases."""

from __future__ import annotations

import pytest

from http_status_lookup.api.status import create_custom_status, http_status
from http_status_lookup.services.status_table import DEFAULT_STATUS_TABLE, StatusTable


def test_teapot_scenario() -> None:
    custom = create_custom_status(
        lambda status, code, message: {"httpCode": status, "label": code}
    )

    assert custom.imATeapot == {"httpCode": 418, "label": "IM_A_TEAPOT"}


def test_transform_runs_exactly_once_per_status() -> None:
    calls: list[int] = []

    def transform(status: int, code: str, message: str) -> dict[str, object]:
        calls.append(status)
        return {"status": status, "code": code, "message": message}

    custom = create_custom_status(transform)

    assert len(calls) == len(DEFAULT_STATUS_TABLE) == 40
    assert sorted(calls) == sorted(set(calls))
    assert custom[500] is custom.INTERNAL_SERVER_ERROR is custom.internalServerError

    custom.notFound
    custom[404]
    assert len(calls) == 40


def test_payload_matches_direct_transform_call() -> None:
    def transform(status: int, code: str, message: str) -> tuple[int, str, str]:
        return (status, code, message)

    custom = create_custom_status(transform)
    expected = transform(
        500, "INTERNAL_SERVER_ERROR", http_status.internalServerError.message
    )

    for key in (500, "INTERNAL_SERVER_ERROR", "internalServerError"):
        assert custom[key] == expected


def test_nested_response_shape() -> None:
    custom = create_custom_status(
        lambda status, code, message: {
            "response": {"error": code, "message": message},
            "statusCode": status,
        }
    )

    assert custom.internalServerError == {
        "response": {
            "error": "INTERNAL_SERVER_ERROR",
            "message": "The server encountered an unexpected condition",
        },
        "statusCode": 500,
    }
    assert custom.codes() == http_status.codes()


def test_transform_errors_propagate() -> None:
    class Boom(RuntimeError):
        pass

    def transform(status: int, code: str, message: str) -> str:
        if status == 404:
            raise Boom("transform failed")
        return code

    with pytest.raises(Boom):
        create_custom_status(transform)


def test_custom_table_is_honoured() -> None:
    table = StatusTable([(200, "OK", "fine"), (503, "SERVICE_UNAVAILABLE", "down")])

    custom = create_custom_status(lambda status, code, message: message, table)

    assert custom.ok == "fine"
    assert custom[503] == "down"
    assert custom.get(404) is None
    assert len(custom) == 6
