"""Unit tests for the field-processing components."""

import pytest

from datatypes.exceptions import RequiredFieldMissingError
from datatypes.value_objects import (
    FieldMap,
    FieldSchema,
    GuardedFields,
    RequiredFields,
    ValueObject,
    cast,
    on_update,
    rule,
)


class TestComponents:
    """Test the small components on their own."""

    def test_required_fields(self):
        """Test validation and membership."""
        required = RequiredFields(("a", "b"))
        required.validate({"a": 1, "b": None})
        assert "a" in required
        with pytest.raises(RequiredFieldMissingError, match="'b'"):
            required.validate({"a": 1})

    def test_guarded_fields(self):
        """Test guarded names are removed."""
        assert GuardedFields(("secret",)).remove({"a": 1, "secret": 2}) == {"a": 1}

    def test_field_map(self):
        """Test aliases are translated and other keys kept."""
        assert FieldMap({"zip": "postcode"}).translate({"zip": 1, "city": 2}) == {
            "postcode": 1,
            "city": 2,
        }


class TestFieldSchema:
    """Test schema collection over a class hierarchy."""

    def test_collects_registrations_in_definition_order(self):
        """Test casts, rules and hooks are collected base first."""

        class Base(ValueObject):
            fields = ("a",)
            guarded = ("a",)

            @cast("a")
            def _cast_a(self, value):
                self.a = value

            @rule
            def _rule_one(self, values):
                return values

        class Child(Base):
            fields = ("b", "a")
            maps = {"bee": "b"}

            @rule
            def _rule_two(self, values):
                return values

            @on_update
            def _updated(self):
                pass

        schema = FieldSchema.build(Child)
        assert schema.fields == ("a", "b")
        assert schema.casts == {"a": "_cast_a"}
        assert schema.rules == ("_rule_one", "_rule_two")
        assert schema.hooks.update == ("_updated",)
        assert "a" in schema.guarded
        assert schema.field_map.aliases == {"bee": "b"}

    def test_override_keeps_registration(self):
        """Test overriding a registered method by name replaces its behaviour."""

        class Base(ValueObject):
            fields = ("a",)

            @cast("a")
            def _cast_a(self, value):
                self.a = value

        class Child(Base):
            def _cast_a(self, value):
                self.a = value * 2

        assert Child({"a": 2}).a == 4
        assert Base({"a": 2}).a == 2
