"""
Unit tests for the value object field pipeline.

Tests loading order, required fields, rules, casts, aliases, guarded
fields, serialization, mass assignment and pickling.
"""

import json
import pickle

import pytest

from datatypes.exceptions import InvalidArgumentError, RequiredFieldMissingError
from datatypes.scalar import ImmutableString, ReadonlyInteger
from datatypes.value_objects import ValueObject, cast, on_load, rule
from tests.helpers import Address, Profile, User


class TestLoading:
    """Test construction from a field mapping."""

    def test_required_field_missing(self):
        """Test omitting a required field names the field."""
        with pytest.raises(RequiredFieldMissingError, match="'name'") as exc_info:
            Profile({})
        assert exc_info.value.field_name == "name"
        assert exc_info.value.code == 422

    def test_required_checked_before_rules(self):
        """Test rules never see input missing a required field."""
        calls = []

        class Tracked(ValueObject):
            fields = ("a",)
            required = ("a",)

            @rule
            def _track(self, values):
                calls.append(values)
                return values

        with pytest.raises(RequiredFieldMissingError):
            Tracked({})
        assert calls == []

    def test_casts_assign_typed_attributes(self):
        """Test casts turn raw values into wrappers."""
        address = Address({"street": "  Main St  ", "postcode": "ab1 2cd"})
        assert isinstance(address.street, ImmutableString)
        assert address.street == "Main St"
        assert address.postcode == "AB1 2CD"

    def test_keyword_arguments(self):
        """Test fields may be passed as keyword arguments."""
        assert Profile(name="Ada").name == "Ada"

    def test_fields_without_cast_are_ignored(self):
        """Test unknown input keys do not become attributes."""
        profile = Profile({"name": "Ada", "unknown": 1})
        assert not hasattr(profile, "unknown")

    def test_undeclared_fields_default_to_none(self):
        """Test every declared field exists after loading."""
        address = Address({"street": "Main St"})
        assert address.postcode is None

    def test_mutable_defaults_are_not_shared(self):
        """Test each record gets its own copy of a default value."""

        class Tagged(ValueObject):
            fields = ("tags", "meta")
            defaults = {"tags": [], "meta": {"seen": []}}

        first = Tagged({})
        second = Tagged({})
        first.tags.append("x")
        first.meta["seen"].append(1)

        assert second.tags == []
        assert second.meta == {"seen": []}
        assert Tagged.defaults == {"tags": [], "meta": {"seen": []}}

    def test_rule_must_return_mapping(self):
        """Test a rule returning nothing is reported by name."""

        class Forgetful(ValueObject):
            fields = ("name",)

            @rule
            def _lower_name(self, values):
                values["name"] = values.get("name", "").lower()

        with pytest.raises(TypeError, match="Forgetful._lower_name"):
            Forgetful({"name": "Ada"})

    def test_aliases(self):
        """Test input aliases are mapped before processing."""
        address = Address({"street": "Main St", "zip": "x1"})
        assert address.postcode == "X1"

    def test_alias_satisfies_required(self):
        """Test an alias of a required field counts as supplied."""
        user = User({"full_name": "ada lovelace"})
        assert user.name == "Ada Lovelace"

    def test_rules_compose_in_order(self):
        """Test each rule receives the previous rule's output."""
        user = User({"name": "  grace hopper  "})
        assert user.name == "Grace Hopper"

    def test_on_load_runs_once_in_order(self):
        """Test on-load hooks run in definition order."""

        class Hooked(ValueObject):
            fields = ("a",)

            def __init__(self, *args, **kwargs):
                self.log = []
                super().__init__(*args, **kwargs)

            @on_load
            def _first(self):
                self.log.append("first")

            @on_load
            def _second(self):
                self.log.append("second")

        assert Hooked({}).log == ["first", "second"]

    def test_subclass_extends_declarations(self):
        """Test subclasses add to their base's fields and casts."""

        class Base(ValueObject):
            fields = ("a",)

            @cast("a")
            def _cast_a(self, value):
                self.a = int(value)

        class Child(Base):
            fields = ("b",)
            required = ("b",)

            @cast("b")
            def _cast_b(self, value):
                self.b = str(value)

        child = Child({"a": "1", "b": 2})
        assert child.to_dict() == {"a": 1, "b": "2"}
        with pytest.raises(RequiredFieldMissingError):
            Child({"a": 1})


class TestSerialization:
    """Test to_dict, get_attributes and json_serialize."""

    @pytest.fixture
    def user(self):
        return User(
            {
                "id": 7,
                "name": "ada",
                "email": "ada@example.com",
                "age": 36,
                "address": {"street": "Main St", "postcode": "ab1"},
            }
        )

    def test_to_dict_includes_nested(self, user):
        """Test nested records are converted to dicts."""
        assert user.to_dict() == {
            "id": 7,
            "email": "ada@example.com",
            "name": "Ada",
            "age": 36,
            "address": {"street": "Main St", "postcode": "AB1"},
        }

    def test_get_attributes_first_level_only(self, user):
        """Test nested records are left out."""
        attributes = user.get_attributes()
        assert "address" not in attributes
        assert attributes["age"] == 36

    def test_json_serialize_is_json_compatible(self, user):
        """Test the output can be dumped as JSON, scalar wrappers as strings."""
        data = json.loads(json.dumps(user.json_serialize()))
        assert data["age"] == "36"
        assert data["name"] == "Ada"
        assert data["address"] == {"street": "Main St", "postcode": "AB1"}
        assert user.to_dict()["age"] == 36

    def test_json_serialize_removes_guarded(self):
        """Test guarded fields are excluded only from JSON output."""

        class Secret(ValueObject):
            fields = ("login", "password")
            guarded = ("password",)

            @cast("login")
            def _cast_login(self, value):
                self.login = value

            @cast("password")
            def _cast_password(self, value):
                self.password = value

        secret = Secret({"login": "ada", "password": "hunter2"})
        assert secret.json_serialize() == {"login": "ada"}
        assert secret.to_dict()["password"] == "hunter2"

    def test_primitive_conversion_of_collections(self):
        """Test lists and dicts are converted item by item."""

        class Bag(ValueObject):
            fields = ("items",)

            @cast("items")
            def _cast_items(self, value):
                self.items = [ReadonlyInteger(v) for v in value]

        bag = Bag({"items": [1, 2]})
        assert bag.json_serialize() == {"items": ["1", "2"]}
        assert bag.to_dict() == {"items": [1, 2]}

    def test_pickle_round_trip(self, user):
        """Test pickling reloads through the pipeline."""
        restored = pickle.loads(pickle.dumps(user))
        assert restored == user
        assert isinstance(restored.address, Address)
        assert isinstance(restored.age, ReadonlyInteger)

    def test_equality(self):
        """Test records of the same type compare by content."""
        assert Profile(name="a") == Profile(name="a")
        assert Profile(name="a") != Profile(name="b")


class TestSetAttributes:
    """Test mass assignment."""

    def test_updates_and_casts(self):
        """Test values are mapped, ruled and cast."""
        user = User({"name": "ada"})
        user.set_attributes({"full_name": "  grace  ", "age": 40})
        assert user.name == "Grace"
        assert user.age == 40

    def test_nested_value_object_receives_mapping(self):
        """Test a nested record is updated in place."""
        user = User({"name": "ada", "address": {"street": "Main St"}})
        address = user.address
        user.set_attributes({"address": {"zip": "zz9"}})
        assert user.address is address
        assert address.postcode == "ZZ9"
        assert address.street == "Main St"

    def test_empty_mapping_rejected(self):
        """Test an empty mapping is rejected."""
        with pytest.raises(InvalidArgumentError):
            Profile(name="a").set_attributes({})

    def test_non_string_keys_rejected(self):
        """Test keys must be strings."""
        with pytest.raises(InvalidArgumentError, match="must be strings"):
            Profile(name="a").set_attributes({1: "x"})

    def test_returns_self(self):
        """Test mass assignment can be chained."""
        profile = Profile(name="a")
        assert profile.set_attributes({"name": "b"}) is profile
