"""Builders for schema descriptors.

Component authors declare contract schemas with these helpers instead of
instantiating the descriptor models directly::

    from pagewire.schema import types as t

    FilterState = t.object_({
        "search": t.string(),
        "status": t.optional(t.array(t.string())),
    })
"""

from collections.abc import Iterable, Mapping

from pagewire.models.enums import PrimitiveType
from pagewire.models.schema import (
    AnySchema,
    ArraySchema,
    LiteralSchema,
    LiteralValue,
    ObjectSchema,
    OptionalSchema,
    PrimitiveSchema,
    RecordSchema,
    Schema,
    UnionSchema,
    UnknownSchema,
)


def string() -> PrimitiveSchema:
    return PrimitiveSchema(type=PrimitiveType.STRING)


def number() -> PrimitiveSchema:
    return PrimitiveSchema(type=PrimitiveType.NUMBER)


def integer() -> PrimitiveSchema:
    return PrimitiveSchema(type=PrimitiveType.INTEGER)


def boolean() -> PrimitiveSchema:
    return PrimitiveSchema(type=PrimitiveType.BOOLEAN)


def null() -> PrimitiveSchema:
    return PrimitiveSchema(type=PrimitiveType.NULL)


def any_() -> AnySchema:
    return AnySchema()


def unknown() -> UnknownSchema:
    return UnknownSchema()


def literal(value: LiteralValue) -> LiteralSchema:
    return LiteralSchema(value=value)


def array(items: Schema) -> ArraySchema:
    return ArraySchema(items=items)


def record(values: Schema) -> RecordSchema:
    return RecordSchema(values=values)


def optional(schema: Schema) -> OptionalSchema:
    """Mark an object property as optional."""
    if isinstance(schema, OptionalSchema):
        return schema
    return OptionalSchema(inner=schema)


def union(*variants: Schema) -> UnionSchema:
    return UnionSchema(variants=tuple(variants))


def enum(*values: LiteralValue) -> UnionSchema:
    """Union of literals, e.g. ``enum("active", "blocked")``."""
    return UnionSchema(variants=tuple(literal(v) for v in values))


def nullable(schema: Schema) -> UnionSchema:
    return union(schema, null())


def object_(
    properties: Mapping[str, Schema] | None = None,
    required: Iterable[str] | None = None,
) -> ObjectSchema:
    """Build an object schema.

    Unless ``required`` is given, every property not wrapped with
    :func:`optional` is required.
    """
    properties = dict(properties or {})
    if required is None:
        required = [name for name, prop in properties.items() if not prop.is_optional]
    return ObjectSchema(properties=properties, required=frozenset(required))


def extend(base: ObjectSchema, properties: Mapping[str, Schema]) -> ObjectSchema:
    """Return ``base`` with extra properties; same-named properties are replaced."""
    merged = {**base.properties, **properties}
    required = {name for name in base.required if name not in properties}
    required.update(name for name, prop in properties.items() if not prop.is_optional)
    return ObjectSchema(properties=merged, required=frozenset(required))
