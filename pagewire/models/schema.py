"""Schema descriptors for component contracts.

A schema descriptor is a plain, recursive description of the shape of a
value. Descriptors are frozen pydantic models discriminated by ``kind`` so
they can be built in code, parsed from YAML/JSON documents and dumped back
without losing structure. Two descriptors are only ever compared
structurally.
"""

import json
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import PrimitiveType

__all__ = [
    "AnySchema",
    "ArraySchema",
    "LiteralSchema",
    "LiteralValue",
    "ObjectSchema",
    "OptionalSchema",
    "PrimitiveSchema",
    "RecordSchema",
    "Schema",
    "UnionSchema",
    "UnknownSchema",
    "unwrap_optional",
]

LiteralValue = bool | int | float | str


class BaseSchema(BaseModel):
    """Common configuration for all schema nodes."""

    model_config = ConfigDict(frozen=True)

    @property
    def is_optional(self) -> bool:
        return False

    def describe(self) -> str:
        """Short human-readable rendering of the schema."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.describe()


class AnySchema(BaseSchema):
    """Top type: accepts and is accepted by everything."""

    kind: Literal["any"] = "any"

    def describe(self) -> str:
        return "any"


class UnknownSchema(BaseSchema):
    """Top type that is only assignable to other top types."""

    kind: Literal["unknown"] = "unknown"

    def describe(self) -> str:
        return "unknown"


class PrimitiveSchema(BaseSchema):
    """A string, number, integer, boolean or null value."""

    kind: Literal["primitive"] = "primitive"
    type: PrimitiveType

    def describe(self) -> str:
        return self.type.value


class LiteralSchema(BaseSchema):
    """A single constant value."""

    kind: Literal["literal"] = "literal"
    value: LiteralValue

    @property
    def primitive(self) -> PrimitiveType:
        """Primitive type the literal value belongs to."""
        if isinstance(self.value, bool):
            return PrimitiveType.BOOLEAN
        if isinstance(self.value, int):
            return PrimitiveType.INTEGER
        if isinstance(self.value, float):
            return PrimitiveType.NUMBER
        return PrimitiveType.STRING

    def describe(self) -> str:
        return json.dumps(self.value)


class ArraySchema(BaseSchema):
    """A homogeneous list."""

    kind: Literal["array"] = "array"
    items: "Schema"

    def describe(self) -> str:
        inner = self.items.describe()
        if isinstance(unwrap_optional(self.items), UnionSchema):
            inner = f"({inner})"
        return f"{inner}[]"


class RecordSchema(BaseSchema):
    """A mapping from string keys to values of one schema."""

    kind: Literal["record"] = "record"
    values: "Schema"

    def describe(self) -> str:
        return f"Record<string, {self.values.describe()}>"


class UnionSchema(BaseSchema):
    """A value matching at least one variant (enumerations are unions of literals)."""

    kind: Literal["union"] = "union"
    variants: tuple["Schema", ...] = Field(min_length=1)

    def describe(self) -> str:
        return " | ".join(variant.describe() for variant in self.variants)


class OptionalSchema(BaseSchema):
    """Marks a property as not required, whatever the object's required set says."""

    kind: Literal["optional"] = "optional"
    inner: "Schema"

    @property
    def is_optional(self) -> bool:
        return True

    def describe(self) -> str:
        return f"{self.inner.describe()}?"


class ObjectSchema(BaseSchema):
    """A record with named properties, some of them required."""

    kind: Literal["object"] = "object"
    properties: dict[str, "Schema"] = Field(default_factory=dict)
    required: frozenset[str] = frozenset()

    @model_validator(mode="after")
    def validate_required(self) -> "ObjectSchema":
        unknown = self.required - set(self.properties)
        if unknown:
            raise ValueError(
                f"required names unknown properties: {', '.join(sorted(unknown))}"
            )
        return self

    def is_required(self, name: str) -> bool:
        """A property is required when listed in ``required`` and not wrapped as optional."""
        prop = self.properties.get(name)
        return prop is not None and name in self.required and not prop.is_optional

    def describe(self) -> str:
        if not self.properties:
            return "{}"
        parts = []
        for name, prop in self.properties.items():
            marker = "" if self.is_required(name) else "?"
            parts.append(f"{name}{marker}: {unwrap_optional(prop).describe()}")
        return "{" + ", ".join(parts) + "}"


Schema = Annotated[
    Union[
        ObjectSchema,
        ArraySchema,
        RecordSchema,
        UnionSchema,
        LiteralSchema,
        PrimitiveSchema,
        OptionalSchema,
        AnySchema,
        UnknownSchema,
    ],
    Field(discriminator="kind"),
]

for _model in (ArraySchema, RecordSchema, UnionSchema, OptionalSchema, ObjectSchema):
    _model.model_rebuild()


def unwrap_optional(schema: BaseSchema) -> BaseSchema:
    """Strip any number of optional wrappers."""
    while isinstance(schema, OptionalSchema):
        schema = schema.inner
    return schema
