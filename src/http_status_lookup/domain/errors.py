"""Errors raised while building status tables and their projections."""

from __future__ import annotations


class StatusConfigurationError(ValueError):
    """Raised when status data is malformed; always a data-authoring defect."""


class DuplicateStatusError(StatusConfigurationError):
    """Raised when two entries share a numeric status or a symbolic code."""


class AliasCollisionError(StatusConfigurationError):
    """Raised when two entries would be published under the same lookup key."""


class IncompleteLocaleError(StatusConfigurationError):
    """Raised when a locale catalog does not cover exactly the base codes."""
