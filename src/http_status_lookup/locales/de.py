"""German status lookups.

    >>> from http_status_lookup.locales.de import http_status
    >>> http_status.FORBIDDEN.message
    'Der Server verstand die Anfrage, verweigert aber die Autorisierung'
"""

from __future__ import annotations

from ..api.status import http_status as _base
from ..services.locale_overlay import localize_statuses
from .catalog import load_messages

LOCALE = "de"

http_status = localize_statuses(_base, load_messages(LOCALE))
