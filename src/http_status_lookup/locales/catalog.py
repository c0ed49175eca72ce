"""Loader for the JSON message catalogs shipped with each locale."""

from __future__ import annotations

import json
from pathlib import Path

from ..api import schema_registry
from ..api.schema_registry import SchemaValidationError
from ..domain.errors import StatusConfigurationError

MESSAGES_DIR = Path(__file__).resolve().parent / "messages"
LOCALE_MESSAGES_SCHEMA = "locale_messages_v0.1"


def _catalog_path(locale: str) -> Path:
    return MESSAGES_DIR / f"{locale}.json"


def load_messages(locale: str) -> dict[int, str]:
    """Return the validated ``status -> message`` mapping of ``locale``."""

    path = _catalog_path(locale)
    with path.open("r", encoding="utf-8") as handle:
        catalog = json.load(handle)
    try:
        schema_registry.validate(LOCALE_MESSAGES_SCHEMA, catalog)
    except SchemaValidationError as exc:
        raise StatusConfigurationError(
            f"Message catalog {path.name} is invalid: {exc.message}"
        ) from exc
    if catalog["locale"] != locale:
        raise StatusConfigurationError(
            f"Message catalog {path.name} declares locale {catalog['locale']!r}."
        )
    return {int(status): message for status, message in catalog["messages"].items()}
