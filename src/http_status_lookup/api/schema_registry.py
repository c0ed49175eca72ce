"""Registry of the JSON schemas (and their examples) shipped with the package."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft7Validator, ValidationError

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
SCHEMA_DIR = PACKAGE_ROOT / "schemas"
EXAMPLE_DIR = SCHEMA_DIR / "examples"

SchemaValidationError = ValidationError
"""Alias for jsonschema.ValidationError, so callers never import jsonschema."""

SCHEMA_FILES = {
    "status_record_v0.1": "status_record_schema_v0.1.json",
    "locale_messages_v0.1": "locale_messages_schema_v0.1.json",
}

EXAMPLE_FILES = {
    "status_record_example_min": "status_record_example_min.json",
    "locale_messages_example_min": "locale_messages_example_min.json",
}

_LOADED: dict[Path, Mapping[str, Any]] = {}
_VALIDATORS: dict[str, Draft7Validator] = {}


def _load(directory: Path, filename: str) -> Mapping[str, Any]:
    """Read a registry JSON file once; later calls reuse the parsed document."""

    path = directory / filename
    if path not in _LOADED:
        with path.open("r", encoding="utf-8") as handle:
            _LOADED[path] = json.load(handle)
    return _LOADED[path]


def get_schema(name: str) -> Mapping[str, Any]:
    """Return the JSON schema registered as ``name``."""

    return _load(SCHEMA_DIR, SCHEMA_FILES[name])


def get_example(name: str) -> Mapping[str, Any]:
    return _load(EXAMPLE_DIR, EXAMPLE_FILES[name])


def validate(name: str, instance: Any) -> None:
    """Validate ``instance`` against a named schema, raising on the first error."""

    validator = _VALIDATORS.get(name)
    if validator is None:
        validator = _VALIDATORS[name] = Draft7Validator(get_schema(name))
    validator.validate(instance)
