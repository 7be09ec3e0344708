"""Schema construction and parsing.

Usage:
    from pagewire.schema import types as t, parse_schema

    filters = t.object_({"search": t.string()})
    same = parse_schema({"search": "string"})
"""

from . import types
from .base import FilterStateSchema, SelectionStateSchema, extend_filter_schema
from .parser import SchemaParser, parse_contract, parse_schema

__all__ = [
    "types",
    "FilterStateSchema",
    "SelectionStateSchema",
    "extend_filter_schema",
    "SchemaParser",
    "parse_contract",
    "parse_schema",
]
