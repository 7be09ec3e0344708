"""
Schema document parser.

Parses the schema documents found in YAML/JSON contract files into schema
descriptors. Three levels of verbosity are accepted:

- shorthand strings: ``"string"``, ``"number[]"``, ``"integer?"``
- shorthand objects: ``{"search?": "string", "status": "string[]"}``
- full nodes: ``{"type": "object", "properties": {...}, "required": [...]}``,
  ``{"enum": [...]}``, ``{"const": ...}``, ``{"anyOf": [...]}`` or a dumped
  descriptor carrying its ``kind``.

A shorthand object may itself have a property called ``type`` or ``kind``
(``{"id": "string", "type": "string"}``). A mapping is only read as a node
when it holds nothing but node keys; mixing node keywords that are not
shorthand types with other keys is rejected as ambiguous.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from pagewire.common.exceptions import SchemaError
from pagewire.models.contract import ComponentContract
from pagewire.models.enums import SchemaKind
from pagewire.models.schema import BaseSchema, Schema

from . import types as t

_SCHEMA_ADAPTER: TypeAdapter[Schema] = TypeAdapter(Schema)

# Keys a full node (or a dumped descriptor) may carry
NODE_KEYS = frozenset({
    "type", "kind", "properties", "required", "items", "values", "enum", "const",
    "anyOf", "oneOf", "optional", "value", "variants", "inner",
})

# Keywords that make a mapping a node candidate
MARKER_KEYWORDS = ("enum", "const", "anyOf", "oneOf")

SCHEMA_KINDS = frozenset(kind.value for kind in SchemaKind)

PRIMITIVE_NAMES: dict[str, Any] = {
    "string": t.string,
    "str": t.string,
    "number": t.number,
    "float": t.number,
    "integer": t.integer,
    "int": t.integer,
    "boolean": t.boolean,
    "bool": t.boolean,
    "null": t.null,
    "any": t.any_,
    "unknown": t.unknown,
}

NODE_TYPES = frozenset({"object", "array", "record", *PRIMITIVE_NAMES})


def _split_shorthand(spec: str) -> tuple[str, int, bool]:
    """Split ``"integer[]?"`` into its base name, array depth and optional flag."""
    text = spec.strip()
    is_optional = text.endswith("?")
    if is_optional:
        text = text[:-1].rstrip()

    depth = 0
    while text.endswith("[]"):
        text = text[:-2].rstrip()
        depth += 1
    return text, depth, is_optional


def _names_node_type(value: Any) -> bool:
    if isinstance(value, str):
        return value in NODE_TYPES
    if isinstance(value, list):
        return bool(value) and all(isinstance(v, str) and v in NODE_TYPES for v in value)
    return False


def _reads_as_property(value: Any) -> bool:
    """Whether ``value`` would parse as a property schema of a shorthand object."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, str) and _split_shorthand(value)[0] in PRIMITIVE_NAMES


class SchemaParser:
    """Parse schema documents into validated schema descriptors."""

    @classmethod
    def parse(cls, spec: Any, path: str = "$") -> Schema:
        """
        Parse any schema document format.

        Examples:
            >>> SchemaParser.parse("string[]")
            ArraySchema(items=PrimitiveSchema(type='string'))

            >>> SchemaParser.parse({"search?": "string", "page": "integer"})
            ObjectSchema(properties={...}, required=frozenset({'page'}))

        Raises:
            SchemaError: If the document does not describe a schema
        """
        if isinstance(spec, BaseSchema):
            return spec
        if isinstance(spec, str):
            return cls._from_shorthand(spec, path)
        if isinstance(spec, Mapping):
            if cls._is_node(spec, path):
                return cls._from_node(spec, path)
            return cls._from_properties(spec, None, path)
        raise SchemaError(
            f"Invalid schema at {path}: expected string or mapping, got {type(spec).__name__}",
            path=path,
        )

    @classmethod
    def parse_contract(cls, data: Mapping[str, Any]) -> ComponentContract:
        """Parse a contract document ``{id, provides, consumes}``."""
        if not isinstance(data, Mapping):
            raise SchemaError("Contract document must be a mapping")
        contract_id = data.get("id", data.get("$id"))
        if not contract_id:
            raise SchemaError("Contract document is missing 'id'")

        sections: dict[str, dict[str, Schema]] = {}
        for section in ("provides", "consumes"):
            entries = data.get(section) or {}
            if not isinstance(entries, Mapping):
                raise SchemaError(f"Contract '{contract_id}': '{section}' must be a mapping")
            sections[section] = {
                name: cls.parse(spec, f"{contract_id}.{section}.{name}")
                for name, spec in entries.items()
            }

        try:
            return ComponentContract(id=contract_id, **sections)
        except ValidationError as e:
            raise SchemaError(f"Invalid contract '{contract_id}': {e}") from e

    @classmethod
    def _is_node(cls, spec: Mapping[str, Any], path: str) -> bool:
        """Tell a full schema node from a shorthand object.

        Raises:
            SchemaError: If node keywords are mixed with properties and the
                keywords cannot be read as properties themselves
        """
        markers = {key: spec[key] for key in MARKER_KEYWORDS if key in spec}
        kind = spec.get("kind")
        if isinstance(kind, str) and kind in SCHEMA_KINDS:
            markers["kind"] = kind
        if _names_node_type(spec.get("type")):
            markers["type"] = spec["type"]
        if not markers:
            return False

        extra = [str(key) for key in spec if key not in NODE_KEYS]
        if not extra:
            return True
        if all(_reads_as_property(value) for value in markers.values()):
            return False
        raise SchemaError(
            f"Ambiguous schema at {path}: node keywords "
            f"({', '.join(sorted(markers))}) mixed with properties ({', '.join(extra)})",
            path=path,
        )

    @classmethod
    def _from_shorthand(cls, spec: str, path: str) -> Schema:
        text, depth, is_optional = _split_shorthand(spec)

        factory = PRIMITIVE_NAMES.get(text)
        if factory is None:
            raise SchemaError(f"Unknown type '{spec}' at {path}", path=path)

        schema = factory()
        for _ in range(depth):
            schema = t.array(schema)
        return t.optional(schema) if is_optional else schema

    @classmethod
    def _from_node(cls, spec: Mapping[str, Any], path: str) -> Schema:
        if "kind" in spec:
            try:
                return _SCHEMA_ADAPTER.validate_python(dict(spec))
            except ValidationError as e:
                raise SchemaError(f"Invalid schema at {path}: {e}", path=path) from e

        schema = cls._build_node(spec, path)
        return t.optional(schema) if spec.get("optional") else schema

    @classmethod
    def _build_node(cls, spec: Mapping[str, Any], path: str) -> Schema:
        variants = spec.get("anyOf", spec.get("oneOf"))
        if variants is not None:
            if not isinstance(variants, list) or not variants:
                raise SchemaError(f"anyOf at {path} must be a non-empty list", path=path)
            return t.union(*(cls.parse(v, f"{path}|{i}") for i, v in enumerate(variants)))

        if "enum" in spec:
            values = spec["enum"]
            if not isinstance(values, list) or not values:
                raise SchemaError(f"enum at {path} must be a non-empty list", path=path)
            return cls._literal_union(values, path)

        if "const" in spec:
            return cls._literal_union([spec["const"]], path)

        type_name = spec.get("type")
        if isinstance(type_name, list):
            return t.union(*(cls.parse({**spec, "type": name}, path) for name in type_name))

        if type_name == "object":
            return cls._from_properties(spec.get("properties") or {}, spec.get("required"), path)
        if type_name == "array":
            if "items" not in spec:
                raise SchemaError(f"Array at {path} is missing 'items'", path=path)
            return t.array(cls.parse(spec["items"], f"{path}[]"))
        if type_name == "record":
            if "values" not in spec:
                raise SchemaError(f"Record at {path} is missing 'values'", path=path)
            return t.record(cls.parse(spec["values"], f"{path}{{}}"))
        if isinstance(type_name, str) and type_name in PRIMITIVE_NAMES:
            return PRIMITIVE_NAMES[type_name]()

        raise SchemaError(f"Unknown type '{type_name}' at {path}", path=path)

    @classmethod
    def _from_properties(
        cls, properties: Mapping[str, Any], required: Any, path: str
    ) -> Schema:
        if not isinstance(properties, Mapping):
            raise SchemaError(f"properties at {path} must be a mapping", path=path)

        parsed: dict[str, Schema] = {}
        for raw_name, prop_spec in properties.items():
            name = str(raw_name)
            if name.endswith("?"):
                name = name[:-1]
                prop = t.optional(cls.parse(prop_spec, f"{path}.{name}"))
            else:
                prop = cls.parse(prop_spec, f"{path}.{name}")
            parsed[name] = prop

        if required is not None:
            if not isinstance(required, list):
                raise SchemaError(f"required at {path} must be a list", path=path)
            unknown = set(required) - set(parsed)
            if unknown:
                raise SchemaError(
                    f"required at {path} names unknown properties: {', '.join(sorted(unknown))}",
                    path=path,
                )
        return t.object_(parsed, required)

    @classmethod
    def _literal_union(cls, values: list[Any], path: str) -> Schema:
        for value in values:
            if value is None:
                continue
            if not isinstance(value, bool | int | float | str):
                raise SchemaError(f"Unsupported literal {value!r} at {path}", path=path)
        variants = [t.null() if v is None else t.literal(v) for v in values]
        if len(variants) == 1:
            return variants[0]
        return t.union(*variants)


def parse_schema(spec: Any) -> Schema:
    """Parse a schema document; see :class:`SchemaParser`."""
    return SchemaParser.parse(spec)


def parse_contract(data: Mapping[str, Any]) -> ComponentContract:
    """Parse a contract document; see :meth:`SchemaParser.parse_contract`."""
    return SchemaParser.parse_contract(data)
