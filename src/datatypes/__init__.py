"""
Datatypes: scalar wrappers, linear collections and value objects.
"""

import logging

from .collections import EntityCollection, PaginatedCollection, Queue, SortInfo, Stack, Store
from .scalar import (
    ImmutableFloat,
    ImmutableInteger,
    ImmutableString,
    MutableFloat,
    MutableInteger,
    MutableString,
    NumberFormatter,
    ReadonlyBoolean,
    ReadonlyFloat,
    ReadonlyInteger,
    ReadonlyString,
)
from .value_objects import Aggregate, Entity, ValueObject, cast, on_load, on_update, rule

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "ImmutableString",
    "MutableString",
    "ReadonlyString",
    "ImmutableInteger",
    "MutableInteger",
    "ReadonlyInteger",
    "ImmutableFloat",
    "MutableFloat",
    "ReadonlyFloat",
    "ReadonlyBoolean",
    "NumberFormatter",
    "Stack",
    "Queue",
    "EntityCollection",
    "PaginatedCollection",
    "SortInfo",
    "Store",
    "ValueObject",
    "Entity",
    "Aggregate",
    "cast",
    "rule",
    "on_load",
    "on_update",
]
