"""Unit tests for pagewire.contracts.compatibility.

Covers the per-property object comparison, the non-object assignability
fallback and the summary strings reported to page editors.
"""

import pytest

from pagewire.contracts import check_schema_compatibility, is_assignable, is_schema_compatible
from pagewire.models import PropertyStatus
from pagewire.schema import FilterStateSchema
from pagewire.schema import types as t


class TestObjectCompatibility:
    """Test suite for object-to-object comparison."""

    def test_identical_objects_are_compatible(self, strict_filter_schema):
        """Verify a schema is compatible with itself and every property is reported."""
        # Act
        result = check_schema_compatibility(strict_filter_schema, strict_filter_schema)

        # Assert
        assert result.compatible is True
        assert result.summary == "Schemas are compatible"
        assert [d.property for d in result.details] == ["search", "status"]
        assert all(d.status == PropertyStatus.COMPATIBLE for d in result.details)

    def test_missing_required_property_is_blocking(self, strict_filter_schema):
        """Verify a required consumer property absent from the provider is 'missing'."""
        # Arrange
        consumes = t.extend(strict_filter_schema, {"page": t.number()})

        # Act
        result = check_schema_compatibility(strict_filter_schema, consumes)

        # Assert
        assert result.compatible is False
        detail = result.get_detail("page")
        assert detail is not None
        assert detail.status == PropertyStatus.MISSING
        assert detail.message == 'Required property "page" is missing from provides schema'
        assert result.summary == (
            'Incompatible: Required property "page" is missing from provides schema'
        )

    def test_missing_optional_property_is_not_blocking(self, strict_filter_schema):
        """Verify an optional consumer property may be absent from the provider."""
        # Arrange
        consumes = t.extend(strict_filter_schema, {"page": t.optional(t.number())})

        # Act
        result = check_schema_compatibility(strict_filter_schema, consumes)

        # Assert
        assert result.compatible is True
        assert result.get_detail("page").status == PropertyStatus.OPTIONAL_MISSING
        assert result.blocking == []

    def test_extra_provided_properties_are_ignored(self):
        """Verify providers may supply more than the consumer asks for."""
        # Arrange
        provides = t.object_({"search": t.string(), "sort": t.string(), "page": t.integer()})
        consumes = t.object_({"search": t.string()})

        # Act
        result = check_schema_compatibility(provides, consumes)

        # Assert
        assert result.compatible is True
        assert [d.property for d in result.details] == ["search"]

    def test_type_mismatch_reports_both_types(self):
        """Verify a present but non-assignable property is 'incompatible'."""
        # Arrange
        provides = t.object_({"page": t.string()})
        consumes = t.object_({"page": t.number()})

        # Act
        result = check_schema_compatibility(provides, consumes)

        # Assert
        detail = result.get_detail("page")
        assert result.compatible is False
        assert detail.status == PropertyStatus.INCOMPATIBLE
        assert detail.message == 'Type mismatch for "page": expected number, got string'

    def test_optionally_provided_property_satisfies_required_consume(self):
        """Verify a declared provider property is compared by type, optional or not."""
        # Arrange
        provides = t.object_({"search": t.optional(t.string())})
        consumes = t.object_({"search": t.string()})
        mistyped = t.object_({"search": t.optional(t.number())})

        # Act
        result = check_schema_compatibility(provides, consumes)
        mismatch = check_schema_compatibility(mistyped, consumes)

        # Assert
        assert result.compatible is True
        assert result.get_detail("search").status == PropertyStatus.COMPATIBLE
        assert mismatch.compatible is False
        assert mismatch.get_detail("search").message == (
            'Type mismatch for "search": expected string, got number'
        )

    def test_filter_state_provider_satisfies_required_search(self):
        """Verify the shared filter schema feeds consumers that require 'search'."""
        # Arrange
        consumes = t.object_({"search": t.string()})

        # Act & Assert
        assert is_schema_compatible(FilterStateSchema, consumes) is True

    def test_optional_consumer_accepts_optional_provider(self):
        """Verify optional-to-optional properties are compared by their inner types."""
        # Act
        result = check_schema_compatibility(FilterStateSchema, FilterStateSchema)

        # Assert
        assert result.compatible is True
        assert all(d.status == PropertyStatus.COMPATIBLE for d in result.details)

    def test_summary_joins_all_blocking_messages(self):
        """Verify the summary lists every blocking detail in consumer order."""
        # Arrange
        provides = t.object_({"a": t.string()})
        consumes = t.object_({"a": t.boolean(), "b": t.string()})

        # Act
        result = check_schema_compatibility(provides, consumes)

        # Assert
        assert result.summary == (
            'Incompatible: Type mismatch for "a": expected boolean, got string; '
            'Required property "b" is missing from provides schema'
        )

    def test_nested_objects_are_compared_structurally(self):
        """Verify nested object properties use structural assignability."""
        # Arrange
        provides = t.object_({"range": t.object_({"from": t.string(), "to": t.string()})})
        consumes = t.object_({"range": t.object_({"from": t.string()})})
        wrong = t.object_({"range": t.object_({"from": t.integer()})})

        # Act & Assert
        assert is_schema_compatible(provides, consumes) is True
        assert is_schema_compatible(provides, wrong) is False

    def test_to_dict_is_serializable(self, strict_filter_schema):
        """Verify compatibility results serialize to plain data."""
        # Arrange
        consumes = t.extend(strict_filter_schema, {"page": t.number()})

        # Act
        data = check_schema_compatibility(strict_filter_schema, consumes).to_dict()

        # Assert
        assert data["compatible"] is False
        assert {"property": "page", "status": "missing",
                "message": 'Required property "page" is missing from provides schema'} in data["details"]
        assert {"property": "search", "status": "compatible"} in data["details"]


class TestNonObjectCompatibility:
    """Test suite for the direct assignability fallback."""

    def test_non_object_comparison_has_no_details(self):
        """Verify non-object schemas produce a bare result."""
        # Act
        ok = check_schema_compatibility(t.array(t.string()), t.array(t.string()))
        bad = check_schema_compatibility(t.string(), t.number())

        # Assert
        assert ok.compatible is True
        assert ok.details == ()
        assert bad.compatible is False
        assert bad.details == ()
        assert bad.summary == "Schemas are not compatible (non-object comparison)"

    def test_object_against_primitive_is_incompatible(self, strict_filter_schema):
        """Verify mixing an object and a primitive falls back and fails."""
        # Act
        result = check_schema_compatibility(strict_filter_schema, t.string())

        # Assert
        assert result.compatible is False
        assert result.details == ()

    @pytest.mark.parametrize(
        "source,target,expected",
        [
            (t.string(), t.string(), True),
            (t.integer(), t.number(), True),
            (t.number(), t.integer(), False),
            (t.boolean(), t.string(), False),
            (t.null(), t.null(), True),
            (t.array(t.integer()), t.array(t.number()), True),
            (t.array(t.string()), t.array(t.number()), False),
            (t.array(t.string()), t.string(), False),
            (t.record(t.string()), t.record(t.string()), True),
            (t.record(t.integer()), t.record(t.string()), False),
        ],
    )
    def test_primitive_and_container_assignability(self, source, target, expected):
        """Verify primitive kinds must match, and containers compare element-wise."""
        assert is_assignable(source, target) is expected

    def test_value_fits_union_if_it_fits_one_variant(self):
        """Verify a non-union source needs to match a single variant of a union target."""
        # Arrange
        target = t.union(t.string(), t.number())

        # Act & Assert
        assert is_assignable(t.string(), target) is True
        assert is_assignable(t.integer(), target) is True
        assert is_assignable(t.boolean(), target) is False

    def test_union_source_must_fit_as_a_whole(self):
        """Verify every variant of a union source must be assignable to the target."""
        # Arrange
        source = t.union(t.string(), t.number())

        # Act & Assert
        assert is_assignable(source, t.string()) is False
        assert is_assignable(source, t.union(t.number(), t.string(), t.boolean())) is True

    def test_literals_match_identical_literals_or_their_primitive(self):
        """Verify literal assignability rules."""
        # Act & Assert
        assert is_assignable(t.literal("active"), t.literal("active")) is True
        assert is_assignable(t.literal("active"), t.literal("blocked")) is False
        assert is_assignable(t.literal("active"), t.string()) is True
        assert is_assignable(t.literal("active"), t.enum("active", "blocked")) is True
        assert is_assignable(t.literal(1), t.literal(True)) is False
        assert is_assignable(t.string(), t.literal("active")) is False

    def test_enum_source_fits_wider_enum_only(self):
        """Verify enumerations are compared as unions of literals."""
        # Arrange
        narrow = t.enum("active", "blocked")
        wide = t.enum("active", "blocked", "archived")

        # Act & Assert
        assert is_assignable(narrow, wide) is True
        assert is_assignable(wide, narrow) is False
        assert is_assignable(narrow, t.string()) is True

    def test_any_and_unknown(self):
        """Verify top types: 'any' goes both ways, 'unknown' only accepts."""
        # Act & Assert
        assert is_assignable(t.string(), t.any_()) is True
        assert is_assignable(t.any_(), t.number()) is True
        assert is_assignable(t.string(), t.unknown()) is True
        assert is_assignable(t.unknown(), t.string()) is False
        assert is_assignable(t.unknown(), t.any_()) is True
        assert is_assignable(t.unknown(), t.union(t.string(), t.unknown())) is True
        assert is_assignable(t.unknown(), t.nullable(t.string())) is False

    def test_nullable_accepts_null(self):
        """Verify nullable() is a union with null."""
        # Arrange
        target = t.nullable(t.string())

        # Act & Assert
        assert is_assignable(t.null(), target) is True
        assert is_assignable(t.string(), target) is True
        assert is_assignable(target, t.string()) is False

    def test_object_and_record_interplay(self):
        """Verify objects fit records of a common value type and vice versa for optional targets."""
        # Arrange
        obj = t.object_({"a": t.string(), "b": t.string()})
        rec = t.record(t.string())

        # Act & Assert
        assert is_assignable(obj, rec) is True
        assert is_assignable(t.object_({"a": t.number()}), rec) is False
        assert is_assignable(rec, t.object_({"a": t.optional(t.string())})) is True
        assert is_assignable(rec, t.object_({"a": t.string()})) is False

    def test_optional_wrappers_are_ignored_at_top_level(self):
        """Verify top-level optional markers do not affect the check."""
        # Act
        result = check_schema_compatibility(t.optional(t.string()), t.string())

        # Assert
        assert result.compatible is True
