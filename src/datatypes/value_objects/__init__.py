"""Value objects, entities and the field-processing pipeline."""

from .aggregate import Aggregate
from .attributes import HasActive, HasAlias, HasEmail, HasHits, HasName, HasOrdering, HasTitle
from .entity import Entity
from .fields import (
    EventHooks,
    FieldMap,
    FieldSchema,
    GuardedFields,
    RequiredFields,
    cast,
    on_load,
    on_update,
    rule,
)
from .value_object import ValueObject, to_primitive

__all__ = [
    "ValueObject",
    "Entity",
    "Aggregate",
    "cast",
    "rule",
    "on_load",
    "on_update",
    "FieldSchema",
    "FieldMap",
    "RequiredFields",
    "GuardedFields",
    "EventHooks",
    "to_primitive",
    "HasActive",
    "HasAlias",
    "HasEmail",
    "HasHits",
    "HasName",
    "HasOrdering",
    "HasTitle",
]
