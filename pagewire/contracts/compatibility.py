"""Structural compatibility between provides and consumes schemas.

A provides schema satisfies a consumes schema when every property the
consumer requires is present in the provider with an assignable type.
Object schemas get a per-property report; any other pair of schemas is
decided by a single structural assignability check.

Usage:
    from pagewire.contracts import check_schema_compatibility

    result = check_schema_compatibility(provider_schema, consumer_schema)
    if not result.compatible:
        print(result.summary)
"""

from pagewire.models.compatibility import CompatibilityResult, PropertyCompatibility
from pagewire.models.enums import BLOCKING_STATUSES, PrimitiveType, PropertyStatus
from pagewire.models.schema import (
    AnySchema,
    ArraySchema,
    BaseSchema,
    LiteralSchema,
    ObjectSchema,
    PrimitiveSchema,
    RecordSchema,
    UnionSchema,
    UnknownSchema,
    unwrap_optional,
)

COMPATIBLE_SUMMARY = "Schemas are compatible"
NON_OBJECT_INCOMPATIBLE_SUMMARY = "Schemas are not compatible (non-object comparison)"

__all__ = [
    "check_schema_compatibility",
    "is_assignable",
    "is_schema_compatible",
]


def check_schema_compatibility(
    provides_schema: BaseSchema, consumes_schema: BaseSchema
) -> CompatibilityResult:
    """Check if a provides schema satisfies a consumes schema.

    Args:
        provides_schema: Schema declared by the provider component
        consumes_schema: Schema declared by the consumer component

    Returns:
        Detailed compatibility result
    """
    provides = unwrap_optional(provides_schema)
    consumes = unwrap_optional(consumes_schema)

    if not isinstance(provides, ObjectSchema) or not isinstance(consumes, ObjectSchema):
        compatible = is_assignable(provides, consumes)
        return CompatibilityResult(
            compatible=compatible,
            details=(),
            summary=COMPATIBLE_SUMMARY if compatible else NON_OBJECT_INCOMPATIBLE_SUMMARY,
        )

    return _compare_object_schemas(provides, consumes)


def is_schema_compatible(provides_schema: BaseSchema, consumes_schema: BaseSchema) -> bool:
    """Boolean form of :func:`check_schema_compatibility`, for filtering."""
    return check_schema_compatibility(provides_schema, consumes_schema).compatible


def _compare_object_schemas(
    provides: ObjectSchema, consumes: ObjectSchema
) -> CompatibilityResult:
    details: list[PropertyCompatibility] = []

    for name, consumes_prop in consumes.properties.items():
        required = consumes.is_required(name)
        provides_prop = provides.properties.get(name)

        if provides_prop is None:
            if required:
                details.append(PropertyCompatibility(
                    property=name,
                    status=PropertyStatus.MISSING,
                    message=f'Required property "{name}" is missing from provides schema',
                ))
            else:
                details.append(PropertyCompatibility(
                    property=name,
                    status=PropertyStatus.OPTIONAL_MISSING,
                    message=f'Optional property "{name}" is not provided',
                ))
            continue

        # Declared by the provider counts as present, optional or not
        if is_assignable(provides_prop, consumes_prop):
            details.append(PropertyCompatibility(property=name, status=PropertyStatus.COMPATIBLE))
        else:
            details.append(PropertyCompatibility(
                property=name,
                status=PropertyStatus.INCOMPATIBLE,
                message=(
                    f'Type mismatch for "{name}": expected '
                    f"{unwrap_optional(consumes_prop).describe()}, "
                    f"got {unwrap_optional(provides_prop).describe()}"
                ),
            ))

    blocking = [d for d in details if d.status in BLOCKING_STATUSES]
    if blocking:
        summary = "Incompatible: " + "; ".join(d.message or d.property for d in blocking)
    else:
        summary = COMPATIBLE_SUMMARY

    return CompatibilityResult(compatible=not blocking, details=tuple(details), summary=summary)


def is_assignable(source: BaseSchema, target: BaseSchema) -> bool:
    """Decide whether every value of ``source`` is a valid value of ``target``.

    Optional wrappers are ignored at this level; object comparison handles
    property optionality itself.
    """
    source = unwrap_optional(source)
    target = unwrap_optional(target)

    if isinstance(target, AnySchema | UnknownSchema):
        return True
    if isinstance(source, AnySchema):
        return True

    # A union source must fit as a whole, so each variant has to
    if isinstance(source, UnionSchema):
        return all(is_assignable(variant, target) for variant in source.variants)
    if isinstance(target, UnionSchema):
        return any(is_assignable(source, variant) for variant in target.variants)

    if isinstance(source, UnknownSchema):
        return False

    if isinstance(source, LiteralSchema):
        if isinstance(target, LiteralSchema):
            return source.primitive == target.primitive and source.value == target.value
        if isinstance(target, PrimitiveSchema):
            return _primitive_fits(source.primitive, target.type)
        return False

    if isinstance(source, PrimitiveSchema):
        return isinstance(target, PrimitiveSchema) and _primitive_fits(source.type, target.type)

    if isinstance(source, ArraySchema):
        return isinstance(target, ArraySchema) and is_assignable(source.items, target.items)

    if isinstance(source, RecordSchema):
        if isinstance(target, RecordSchema):
            return is_assignable(source.values, target.values)
        if isinstance(target, ObjectSchema):
            return all(
                not target.is_required(name) and is_assignable(source.values, prop)
                for name, prop in target.properties.items()
            )
        return False

    if isinstance(source, ObjectSchema):
        if isinstance(target, ObjectSchema):
            return _object_assignable(source, target)
        if isinstance(target, RecordSchema):
            return all(
                is_assignable(prop, target.values) for prop in source.properties.values()
            )
        return False

    return False


def _object_assignable(source: ObjectSchema, target: ObjectSchema) -> bool:
    for name, target_prop in target.properties.items():
        source_prop = source.properties.get(name)
        if source_prop is None:
            if target.is_required(name):
                return False
            continue
        if target.is_required(name) and not source.is_required(name):
            return False
        if not is_assignable(source_prop, target_prop):
            return False
    return True


def _primitive_fits(source: PrimitiveType, target: PrimitiveType) -> bool:
    if source == target:
        return True
    return source == PrimitiveType.INTEGER and target == PrimitiveType.NUMBER
