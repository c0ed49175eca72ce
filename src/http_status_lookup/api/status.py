"""Default English status lookups.

    >>> from http_status_lookup.api.status import http_status
    >>> http_status.notFound.status
    404
    >>> http_status[404] is http_status.NOT_FOUND is http_status.notFound
    True

Camel keys are derived from the symbolic code, so 301 is
``http_status.movedPermanently`` (there is no shorter ``moved`` key).
"""

from __future__ import annotations

from ..domain.models import StatusRecord
from ..services.alias_projector import AliasedStatusCollection, project_aliases
from ..services.formatter import StatusFormatter, create_custom_status
from ..services.status_table import DEFAULT_STATUS_TABLE

STATUS_TABLE = DEFAULT_STATUS_TABLE

http_status: AliasedStatusCollection[StatusRecord] = project_aliases(
    (record.status, record.code, record) for record in STATUS_TABLE.all()
)
"""Every supported status, reachable by camel key, snake code or number."""

__all__ = [
    "STATUS_TABLE",
    "AliasedStatusCollection",
    "StatusFormatter",
    "StatusRecord",
    "create_custom_status",
    "http_status",
]
