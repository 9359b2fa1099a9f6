"""Scalar wrappers: strings, integers, floats and booleans."""

from .boolean import ReadonlyBoolean
from .formatting import NumberFormatter
from .numeric import (
    BaseFloat,
    BaseInteger,
    ImmutableFloat,
    ImmutableInteger,
    MutableFloat,
    MutableInteger,
    ReadonlyFloat,
    ReadonlyInteger,
)
from .string import BaseString, ImmutableString, MutableString, ReadonlyString

__all__ = [
    "BaseString",
    "ReadonlyString",
    "ImmutableString",
    "MutableString",
    "BaseInteger",
    "ReadonlyInteger",
    "ImmutableInteger",
    "MutableInteger",
    "BaseFloat",
    "ReadonlyFloat",
    "ImmutableFloat",
    "MutableFloat",
    "ReadonlyBoolean",
    "NumberFormatter",
]
