"""Exceptions raised at the edges of the catalog engine.

The engine functions themselves are total; these only surface from
configuration loading and from caller input that names something unknown.
"""

from __future__ import annotations


class ModelShelfError(Exception):
    """Base class for modelshelf errors."""


class RuntimeConfigError(ModelShelfError):
    """Raised when a prebuilt runtime config cannot be read or parsed."""


class InvalidSortKeyError(ModelShelfError, ValueError):
    """Raised when a sort key string names no known key."""


class UnknownVariantError(ModelShelfError, KeyError):
    """Raised when a variant pick names a model outside the group."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class InvalidRecordError(ModelShelfError, ValueError):
    """Raised when a record payload names an unknown family or size category."""
