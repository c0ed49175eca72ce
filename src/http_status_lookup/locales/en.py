"""English status lookups built from the ``en`` catalog.

Same text as :data:`http_status_lookup.api.status.http_status`, but built as a
locale so it goes through the same overlay as every translation.
"""

from __future__ import annotations

from ..api.status import http_status as _base
from ..services.locale_overlay import localize_statuses
from .catalog import load_messages

LOCALE = "en"

http_status = localize_statuses(_base, load_messages(LOCALE))
