"""
Field-processing components for value objects.

Casts, rules and event hooks are registered with decorators when a class
is defined. ``FieldSchema.build`` walks the class hierarchy from the most
basic class down and collects everything in definition order, so a
subclass extends the declarations of its bases and may override a
registered method by reusing its name.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from datatypes.exceptions import RequiredFieldMissingError

F = TypeVar("F", bound=Callable[..., Any])

_CAST_MARKER = "__datatypes_cast__"
_RULE_MARKER = "__datatypes_rule__"
_LOAD_MARKER = "__datatypes_on_load__"
_UPDATE_MARKER = "__datatypes_on_update__"


def cast(field_name: str) -> Callable[[F], F]:
    """
    Register a method as the cast of ``field_name``.

    The method receives the raw value and assigns the typed attribute.

    Example:
        @cast("name")
        def _cast_name(self, value: str) -> None:
            self.name = ImmutableString(value).trim()
    """

    def decorator(func: F) -> F:
        setattr(func, _CAST_MARKER, field_name)
        return func

    return decorator


def rule(func: F) -> F:
    """Register a method that takes the field mapping and returns it, possibly modified."""
    setattr(func, _RULE_MARKER, True)
    return func


def on_load(func: F) -> F:
    """Register a method to run once the value object has been loaded."""
    setattr(func, _LOAD_MARKER, True)
    return func


def on_update(func: F) -> F:
    """Register a method to run after an update-triggering operation."""
    setattr(func, _UPDATE_MARKER, True)
    return func


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))


@dataclass(frozen=True)
class RequiredFields:
    """Names that must be present in the input mapping."""

    names: tuple[str, ...] = ()

    def validate(self, values: Mapping[str, Any]) -> None:
        for name in self.names:
            if name not in values:
                raise RequiredFieldMissingError(name)

    def __contains__(self, name: object) -> bool:
        return name in self.names


@dataclass(frozen=True)
class GuardedFields:
    """Names excluded from JSON output."""

    names: tuple[str, ...] = ()

    def remove(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {key: value for key, value in data.items() if key not in self.names}

    def __contains__(self, name: object) -> bool:
        return name in self.names


@dataclass(frozen=True)
class FieldMap:
    """Input aliases translated to attribute names before processing."""

    aliases: Mapping[str, str] = field(default_factory=dict)

    def translate(self, values: Mapping[str, Any]) -> dict[str, Any]:
        return {self.aliases.get(key, key): value for key, value in values.items()}


@dataclass(frozen=True)
class EventHooks:
    """Names of the on-load and on-update methods, in registration order."""

    load: tuple[str, ...] = ()
    update: tuple[str, ...] = ()

    def trigger_load(self, instance: Any) -> None:
        for name in self.load:
            getattr(instance, name)()

    def trigger_update(self, instance: Any) -> None:
        for name in self.update:
            getattr(instance, name)()


@dataclass(frozen=True)
class FieldSchema:
    """Everything a value object type declares about its fields."""

    fields: tuple[str, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    required: RequiredFields = field(default_factory=RequiredFields)
    guarded: GuardedFields = field(default_factory=GuardedFields)
    field_map: FieldMap = field(default_factory=FieldMap)
    hooks: EventHooks = field(default_factory=EventHooks)
    casts: Mapping[str, str] = field(default_factory=dict)
    rules: tuple[str, ...] = ()

    @classmethod
    def build(cls, owner: type) -> "FieldSchema":
        """Collect declarations and registered methods over ``owner``'s MRO."""
        fields: list[str] = []
        defaults: dict[str, Any] = {}
        required: list[str] = []
        guarded: list[str] = []
        aliases: dict[str, str] = {}
        casts: dict[str, str] = {}
        rules: dict[str, None] = {}
        load: dict[str, None] = {}
        update: dict[str, None] = {}

        for klass in reversed(owner.__mro__):
            namespace = vars(klass)
            fields.extend(namespace.get("fields", ()))
            defaults.update(namespace.get("defaults", {}))
            required.extend(namespace.get("required", ()))
            guarded.extend(namespace.get("guarded", ()))
            aliases.update(namespace.get("maps", {}))

            for name, attribute in namespace.items():
                if not callable(attribute):
                    continue
                if hasattr(attribute, _CAST_MARKER):
                    casts[getattr(attribute, _CAST_MARKER)] = name
                if getattr(attribute, _RULE_MARKER, False):
                    rules[name] = None
                if getattr(attribute, _LOAD_MARKER, False):
                    load[name] = None
                if getattr(attribute, _UPDATE_MARKER, False):
                    update[name] = None

        return cls(
            fields=_unique(fields),
            defaults=defaults,
            required=RequiredFields(_unique(required)),
            guarded=GuardedFields(_unique(guarded)),
            field_map=FieldMap(aliases),
            hooks=EventHooks(tuple(load), tuple(update)),
            casts=casts,
            rules=tuple(rules),
        )

    def apply_rules(self, instance: Any, values: dict[str, Any]) -> dict[str, Any]:
        for name in self.rules:
            values = getattr(instance, name)(values)
            if not isinstance(values, Mapping):
                raise TypeError(
                    f"Rule '{type(instance).__name__}.{name}' must return a mapping, "
                    f"got {type(values).__name__}"
                )
        return values

    def apply_casts(self, instance: Any, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            method = self.casts.get(key)
            if method is not None:
                getattr(instance, method)(value)
