"""Project per-status payloads under their three interchangeable lookup keys.

Every status is published as

1. its lower-camel-case key (``notFound``),
2. its upper-snake-case symbolic code (``NOT_FOUND``),
3. its numeric status (``404``),

and all three keys hold the very same payload object.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, TypeVar, Union

from ..domain.errors import (
    AliasCollisionError,
    DuplicateStatusError,
    StatusConfigurationError,
)

_LOG = logging.getLogger(__name__)

T = TypeVar("T")

StatusKey = Union[int, str]
"""Any of the three key forms accepted by a collection."""

SYMBOLIC_CODE_PATTERN = re.compile(r"^[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*$")
"""Upper-snake-case symbolic code, e.g. ``IM_A_TEAPOT``."""


def camel_case_key(code: str) -> str:
    """Derive the lower-camel-case key for a symbolic code.

    ``NOT_FOUND`` becomes ``notFound`` and ``IM_A_TEAPOT`` becomes
    ``imATeapot``.
    """

    if not SYMBOLIC_CODE_PATTERN.match(code):
        raise StatusConfigurationError(
            f"Symbolic code {code!r} is not upper-snake-case."
        )
    head, *tail = code.split("_")
    return head.lower() + "".join(part.capitalize() for part in tail)


def _is_status_key(key: object) -> bool:
    """Only strings and non-bool integers can name a status."""

    if isinstance(key, bool):
        return False
    return isinstance(key, (int, str))


class AliasedStatusCollection(Mapping[StatusKey, T]):
    """Read-only mapping exposing each payload under three keys.

    Lookups by subscription follow the mapping contract and raise
    :class:`KeyError` for unknown keys; :meth:`get` returns ``None`` instead.
    String keys that are valid identifiers are also reachable as attributes.
    """

    __slots__ = ("_entries", "_payloads", "_keys_by_status")

    def __init__(
        self,
        entries: Mapping[StatusKey, T],
        payloads: Mapping[int, T],
        keys_by_status: Mapping[int, tuple[str, str, int]],
    ) -> None:
        object.__setattr__(self, "_entries", MappingProxyType(dict(entries)))
        object.__setattr__(self, "_payloads", MappingProxyType(dict(payloads)))
        object.__setattr__(
            self, "_keys_by_status", MappingProxyType(dict(keys_by_status))
        )

    def __getitem__(self, key: StatusKey) -> T:
        if not _is_status_key(key):
            raise KeyError(key)
        return self._entries[key]

    def __iter__(self) -> Iterator[StatusKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return _is_status_key(key) and key in self._entries

    def __getattr__(self, name: str) -> T:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._entries[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!s} has no status {name!r}"
            ) from None

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__!s} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__!s} is read-only")

    def __dir__(self) -> list[str]:
        names = [key for key in self._entries if isinstance(key, str)]
        return sorted(set(super().__dir__()) | set(names))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._payloads)} statuses)"

    def __copy__(self) -> "AliasedStatusCollection[T]":
        return self

    def __deepcopy__(
        self, memo: dict[int, object]
    ) -> "AliasedStatusCollection[T]":
        return self

    def __reduce__(self) -> tuple[object, tuple[list[tuple[int, str, T]]]]:
        entries = [
            (status, keys[1], self._payloads[status])
            for status, keys in self._keys_by_status.items()
        ]
        return project_aliases, (entries,)

    def records(self) -> tuple[T, ...]:
        """Return each payload once, in the order the statuses were projected."""

        return tuple(self._payloads.values())

    def codes(self) -> tuple[int, ...]:
        """Return the numeric statuses covered by this collection."""

        return tuple(self._payloads)

    def keys_for(self, status: int) -> tuple[str, str, int]:
        """Return the camel, snake and numeric keys of one status."""

        return self._keys_by_status[status]


def project_aliases(
    entries: Iterable[tuple[int, str, T]],
) -> AliasedStatusCollection[T]:
    """Build a collection from ``(status, code, payload)`` triples.

    Each payload is stored as-is under all three keys, never copied. A
    repeated status raises :class:`DuplicateStatusError`; a key produced twice
    raises :class:`AliasCollisionError`.
    """

    aliased: dict[StatusKey, T] = {}
    payloads: dict[int, T] = {}
    keys_by_status: dict[int, tuple[str, str, int]] = {}
    owners: dict[StatusKey, int] = {}

    for status, code, payload in entries:
        if isinstance(status, bool) or not isinstance(status, int):
            raise StatusConfigurationError(
                f"Status for {code!r} must be an integer, got {status!r}."
            )
        if status in payloads:
            raise DuplicateStatusError(
                f"Status {status} is projected more than once."
            )
        keys = (camel_case_key(code), code, status)
        for key in keys:
            if key in owners:
                raise AliasCollisionError(
                    f"Key {key!r} of status {status} collides with status "
                    f"{owners[key]}."
                )
            owners[key] = status
            aliased[key] = payload
        payloads[status] = payload
        keys_by_status[status] = keys

    _LOG.debug(
        "Projected %d statuses under %d keys", len(payloads), len(aliased)
    )
    return AliasedStatusCollection(aliased, payloads, keys_by_status)
