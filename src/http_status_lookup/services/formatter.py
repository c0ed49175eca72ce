"""Re-render the status table into a caller-defined record shape."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .alias_projector import AliasedStatusCollection, project_aliases
from .status_table import DEFAULT_STATUS_TABLE, StatusTable

_LOG = logging.getLogger(__name__)

T = TypeVar("T")

StatusFormatter = Callable[[int, str, str], T]
"""Transform receiving ``(status, code, message)`` and returning any value."""


def create_custom_status(
    transform: StatusFormatter[T],
    table: StatusTable = DEFAULT_STATUS_TABLE,
) -> AliasedStatusCollection[T]:
    """
    Build a collection whose payloads are produced by ``transform``.

    Args:
        transform: Called exactly once per status with its numeric status,
            symbolic code and message. Whatever it raises propagates.
        table: Source records; the canonical table unless overridden.

    Returns:
        A collection where ``custom.notFound``, ``custom.NOT_FOUND`` and
        ``custom[404]`` are the one object ``transform`` returned for 404.
    """

    formatted = []
    for record in table.all():
        payload = transform(record.status, record.code, record.message)
        formatted.append((record.status, record.code, payload))
    _LOG.debug("Formatted %d statuses with %r", len(formatted), transform)
    return project_aliases(formatted)
