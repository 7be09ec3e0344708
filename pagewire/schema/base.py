"""Shared schemas for common kinds of page state.

Components that produce or consume filters and selections should use or
extend these so they stay compatible with each other.
"""

from collections.abc import Mapping

from pagewire.models.schema import ObjectSchema, Schema

from . import types as t

FilterStateSchema = t.object_({
    "search": t.optional(t.string()),
    "status": t.optional(t.array(t.string())),
})

SelectionStateSchema = t.object_({
    "rows": t.array(t.string()),
})


def extend_filter_schema(additional_fields: Mapping[str, Schema]) -> ObjectSchema:
    """Filter state with additional fields."""
    return t.extend(FilterStateSchema, additional_fields)
