"""
Base class for value objects built from a field mapping.

Loading runs, in order: alias translation, required-field validation,
rules, casts and on-load hooks. Serialization walks the declared
``fields`` of the type.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from datatypes.exceptions import InvalidArgumentError
from datatypes.scalar.base import ScalarValue
from datatypes.value_objects.fields import FieldSchema

logger = logging.getLogger(__name__)

_PRIMITIVES = (str, int, float, bool, type(None))


def to_primitive(value: Any, nested: bool = True) -> Any:
    """
    Convert an attribute value into JSON-compatible data.

    Args:
        value: Attribute value
        nested: Use ``to_dict`` (guarded fields kept) for nested value
            objects and native values for scalar wrappers; otherwise
            ``json_serialize`` and the string form
    """
    if isinstance(value, _PRIMITIVES):
        return value
    if isinstance(value, ScalarValue):
        return value.value if nested else str(value)
    if isinstance(value, ValueObject):
        return value.to_dict() if nested else value.json_serialize()
    if hasattr(value, "json_serialize"):
        return value.json_serialize()
    if isinstance(value, Mapping):
        return {str(key): to_primitive(item, nested) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_primitive(item, nested) for item in value]
    return str(value)


def _is_composite(value: Any) -> bool:
    return isinstance(value, ValueObject) or (
        hasattr(value, "json_serialize") and not isinstance(value, ScalarValue)
    )


class ValueObject:
    """
    A record built once from a mapping of field name to raw value.

    Subclasses declare:
        fields: Attribute names, serialized in this order
        required: Names that must be present in the input
        guarded: Names left out of ``json_serialize``
        maps: Input alias to attribute name
        defaults: Initial attribute values

    Each declaration extends those of the base classes. Typed attributes
    are assigned by methods registered with ``@cast``.
    """

    fields: ClassVar[tuple[str, ...]] = ()
    required: ClassVar[tuple[str, ...]] = ()
    guarded: ClassVar[tuple[str, ...]] = ()
    maps: ClassVar[dict[str, str]] = {}
    defaults: ClassVar[dict[str, Any]] = {}

    _schema: ClassVar[FieldSchema] = FieldSchema()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._schema = FieldSchema.build(cls)

    def __init__(self, values: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self._load({**(values or {}), **kwargs})

    def _load(self, values: Mapping[str, Any]) -> None:
        schema = self._schema
        for name in schema.fields:
            setattr(self, name, copy.deepcopy(schema.defaults.get(name)))

        mapped = schema.field_map.translate(values)
        schema.required.validate(mapped)
        mapped = schema.apply_rules(self, mapped)
        schema.apply_casts(self, mapped)
        schema.hooks.trigger_load(self)

        logger.debug(
            "Value object loaded",
            extra={"value_object": type(self).__name__, "fields": sorted(mapped)},
        )

    def set_attributes(self, values: Mapping[str, Any]) -> "ValueObject":
        """
        Mass-assign fields and trigger the on-update hooks.

        Nested value objects receive their sub-mapping through their own
        ``set_attributes``.

        Raises:
            InvalidArgumentError: If the mapping is empty or has non-string keys
        """
        if not values:
            raise InvalidArgumentError("Supplied fields must be a non-empty mapping.")
        for key in values:
            if not isinstance(key, str):
                raise InvalidArgumentError(
                    f"Field names must be strings, got {type(key).__name__}.", {"field": repr(key)}
                )

        schema = self._schema
        mapped = schema.apply_rules(self, schema.field_map.translate(values))

        remaining = {}
        for name, value in mapped.items():
            current = getattr(self, name, None)
            if isinstance(current, ValueObject) and isinstance(value, Mapping):
                current.set_attributes(value)
            else:
                remaining[name] = value

        schema.apply_casts(self, remaining)
        schema.hooks.trigger_update(self)

        logger.debug(
            "Attributes assigned",
            extra={"value_object": type(self).__name__, "fields": sorted(mapped)},
        )
        return self

    def to_dict(self) -> dict[str, Any]:
        """All declared fields as primitives, nested records included."""
        return {name: to_primitive(getattr(self, name, None)) for name in self._schema.fields}

    def get_attributes(self) -> dict[str, Any]:
        """First-level declared fields as primitives, without nested records or collections."""
        attributes = {}
        for name in self._schema.fields:
            value = getattr(self, name, None)
            if not _is_composite(value):
                attributes[name] = to_primitive(value)
        return attributes

    def json_serialize(self) -> dict[str, Any]:
        """Declared fields as JSON-compatible data, guarded fields removed."""
        data = {
            name: to_primitive(getattr(self, name, None), nested=False)
            for name in self._schema.fields
        }
        return self._schema.guarded.remove(data)

    def __getstate__(self) -> dict[str, Any]:
        return {name: value for name, value in self.to_dict().items() if value is not None}

    def __setstate__(self, state: Mapping[str, Any]) -> None:
        self._load(state)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
