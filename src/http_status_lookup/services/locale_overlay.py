"""Overlay localized messages onto an aliased status collection."""

from __future__ import annotations

import dataclasses
import logging
from typing import Mapping

from ..domain.errors import IncompleteLocaleError, StatusConfigurationError
from ..domain.models import StatusRecord
from .alias_projector import AliasedStatusCollection, project_aliases

_LOG = logging.getLogger(__name__)


def localize_record(record: StatusRecord, message: str) -> StatusRecord:
    """Return a copy of ``record`` carrying ``message``."""

    if not isinstance(message, str) or not message.strip():
        raise StatusConfigurationError(
            f"Localized message for status {record.status} must be a "
            "non-empty string."
        )
    return dataclasses.replace(record, message=message)


def localize_statuses(
    base: AliasedStatusCollection[StatusRecord],
    messages: Mapping[int, str],
) -> AliasedStatusCollection[StatusRecord]:
    """
    Return a collection identical to ``base`` except for every message.

    ``messages`` must map exactly the statuses of ``base``; a missing or an
    extra status raises :class:`IncompleteLocaleError` rather than mixing
    languages or inventing statuses.
    """

    base_codes = base.codes()
    missing = [status for status in base_codes if status not in messages]
    unknown = sorted(set(messages) - set(base_codes))
    if missing or unknown:
        details = []
        if missing:
            details.append(f"missing {', '.join(map(str, missing))}")
        if unknown:
            details.append(f"unknown {', '.join(map(str, unknown))}")
        raise IncompleteLocaleError(
            "Locale messages do not match the base statuses: "
            f"{'; '.join(details)}."
        )

    localized = []
    for record in base.records():
        overlaid = localize_record(record, messages[record.status])
        localized.append((record.status, record.code, overlaid))
    _LOG.debug("Localized %d statuses", len(localized))
    return project_aliases(localized)
