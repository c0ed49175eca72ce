"""Lazy access to the localized status collections."""

from __future__ import annotations

import importlib
import logging

from ..domain.models import StatusRecord
from ..services.alias_projector import AliasedStatusCollection

_LOG = logging.getLogger(__name__)

LOCALE_PACKAGE = "http_status_lookup.locales"

DEFAULT_LOCALE = "en"
"""Locale returned when none is requested."""

SUPPORTED_LOCALES = ("en", "de", "es", "ja")
"""Locales shipped with a complete message catalog."""

_LOCALIZED: dict[str, AliasedStatusCollection[StatusRecord]] = {}


def get_localized_status(
    locale: str = DEFAULT_LOCALE,
) -> AliasedStatusCollection[StatusRecord]:
    """Return the status collection for ``locale``.

    Each locale module is imported on first request only.
    """

    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale: {locale!r}")
    if locale not in _LOCALIZED:
        module = importlib.import_module(f"{LOCALE_PACKAGE}.{locale}")
        _LOCALIZED[locale] = module.http_status
        _LOG.debug("Loaded %r status collection", locale)
    return _LOCALIZED[locale]


__all__ = ["DEFAULT_LOCALE", "SUPPORTED_LOCALES", "get_localized_status"]
