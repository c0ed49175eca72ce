"""Alias projection: one payload, three interchangeable keys."""

from __future__ import annotations

import copy
import pickle
from http import HTTPStatus

import pytest

from http_status_lookup.api.status import http_status
from http_status_lookup.domain.errors import (
    AliasCollisionError,
    DuplicateStatusError,
    StatusConfigurationError,
)
from http_status_lookup.services.alias_projector import (
    camel_case_key,
    project_aliases,
)
from http_status_lookup.services.status_table import DEFAULT_STATUS_TABLE


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("NOT_FOUND", "notFound"),
        ("IM_A_TEAPOT", "imATeapot"),
        ("OK", "ok"),
        ("URI_TOO_LONG", "uriTooLong"),
        ("HTTP_VERSION_NOT_SUPPORTED", "httpVersionNotSupported"),
        ("MOVED_PERMANENTLY", "movedPermanently"),
    ],
)
def test_camel_case_key_derivation(code: str, expected: str) -> None:
    assert camel_case_key(code) == expected


@pytest.mark.parametrize("code", ["not_found", "NOT__FOUND", "_OK", "OK_", ""])
def test_camel_case_key_rejects_non_snake_codes(code: str) -> None:
    with pytest.raises(StatusConfigurationError):
        camel_case_key(code)


def test_every_status_resolves_identically_under_all_keys() -> None:
    for record in DEFAULT_STATUS_TABLE.all():
        camel = camel_case_key(record.code)

        assert http_status[record.status] is record
        assert http_status[record.code] is record
        assert http_status[camel] is record
        assert getattr(http_status, record.code) is record
        assert getattr(http_status, camel) is record
        assert http_status[record.status].status == record.status


def test_not_found_scenario() -> None:
    assert http_status.notFound.to_mapping() == {
        "status": 404,
        "code": "NOT_FOUND",
        "message": "The requested resource could not be found",
    }
    assert http_status[404] is http_status.NOT_FOUND is http_status.notFound


def test_repeated_reads_return_the_same_value() -> None:
    assert http_status[404] is http_status[404]
    assert http_status.get(404) is http_status.get(404)


def test_unknown_keys_are_absent() -> None:
    assert http_status.get(999) is None
    assert http_status.get("notAStatus") is None
    assert http_status.get("404") is None
    assert http_status.get(True) is None
    assert 999 not in http_status
    assert True not in http_status
    assert [] not in http_status

    with pytest.raises(KeyError):
        http_status[999]
    with pytest.raises(AttributeError):
        http_status.notAStatus


def test_collection_is_read_only() -> None:
    with pytest.raises(AttributeError):
        http_status.notFound = None  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del http_status.notFound
    with pytest.raises(TypeError):
        http_status[404] = None  # type: ignore[index]


def test_records_codes_and_keys() -> None:
    records = http_status.records()

    assert records == DEFAULT_STATUS_TABLE.all()
    assert http_status.codes() == tuple(r.status for r in records)
    assert len(http_status) == 3 * len(records)
    assert http_status.keys_for(404) == ("notFound", "NOT_FOUND", 404)
    assert {"notFound", "NOT_FOUND", 404} <= set(http_status)
    assert "imATeapot" in dir(http_status)


def test_projection_never_copies_payloads() -> None:
    payload = object()

    collection = project_aliases([(204, "NO_CONTENT", payload)])

    assert collection[204] is payload
    assert collection.NO_CONTENT is payload
    assert collection.noContent is payload
    assert collection.records() == (payload,)


def test_duplicate_status_fails_fast() -> None:
    with pytest.raises(DuplicateStatusError):
        project_aliases([(200, "OK", "a"), (200, "FINE", "b")])


def test_duplicate_code_fails_fast() -> None:
    with pytest.raises(AliasCollisionError):
        project_aliases([(200, "OK", "a"), (201, "OK", "b")])


def test_camel_key_collision_fails_fast() -> None:
    """Distinct symbolic codes may still derive the same camel key."""

    with pytest.raises(AliasCollisionError) as excinfo:
        project_aliases([(200, "X_1", "a"), (201, "X1", "b")])

    assert "'x1'" in str(excinfo.value)


@pytest.mark.parametrize("status", ["200", True, 200.0])
def test_non_integer_status_is_rejected(status: object) -> None:
    with pytest.raises(StatusConfigurationError):
        project_aliases([(status, "OK", "a")])  # type: ignore[list-item]


@pytest.mark.parametrize("key", [[], {}, 404.0, 404.5, None, b"404", (404,)])
def test_foreign_key_types_are_absent(key: object) -> None:
    """Only integers and strings can name a status; anything else is absent."""

    assert http_status.get(key) is None  # type: ignore[arg-type]
    assert key not in http_status
    with pytest.raises(KeyError):
        http_status[key]  # type: ignore[index]


def test_integer_enum_keys_resolve() -> None:
    assert http_status.get(HTTPStatus.NOT_FOUND) is http_status.notFound
    assert HTTPStatus.IM_A_TEAPOT in http_status


def test_copies_share_the_collection() -> None:
    assert copy.copy(http_status) is http_status
    assert copy.deepcopy(http_status) is http_status
    assert copy.deepcopy({"statuses": http_status})["statuses"] is http_status


def test_pickle_round_trip_keeps_aliases() -> None:
    restored = pickle.loads(pickle.dumps(http_status))

    assert restored == http_status
    assert restored.codes() == http_status.codes()
    assert restored[404] is restored.NOT_FOUND is restored.notFound
    assert restored.notFound == http_status.notFound


def test_moved_permanently_uses_derived_key() -> None:
    assert http_status.movedPermanently is http_status[301]
    assert http_status.get("moved") is None
