"""Japanese status lookups."""

from __future__ import annotations

from ..api.status import http_status as _base
from ..services.locale_overlay import localize_statuses
from .catalog import load_messages

LOCALE = "ja"

http_status = localize_statuses(_base, load_messages(LOCALE))
