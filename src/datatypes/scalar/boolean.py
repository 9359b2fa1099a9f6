"""Boolean wrapper."""

from typing import Any, Self

from datatypes.exceptions import EmptyInputError
from datatypes.scalar.base import ScalarValue
from datatypes.scalar.numeric import ReadonlyInteger
from datatypes.scalar.string import ReadonlyString

TRUE_STRINGS = frozenset({"1", "true", "yes"})


class ReadonlyBoolean(ScalarValue):
    """Read-only wrapper around a bool.

    String form is always ``'true'`` or ``'false'``.
    """

    native_types = (bool,)
    family = "boolean"
    variant = "readonly"

    @classmethod
    def _validate(cls, value: Any) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"{cls.__name__} requires a bool, got {type(value).__name__}")
        return value

    @classmethod
    def from_string(cls, value: str) -> Self:
        """'1', 'true' and 'yes' (any case) are true; anything else is false."""
        if not value.strip():
            raise EmptyInputError("Cannot create a boolean from an empty string.")
        return cls(value.lower() in TRUE_STRINGS)

    @classmethod
    def from_integer(cls, value: int) -> Self:
        return cls(value > 0)

    @classmethod
    def from_float(cls, value: float) -> Self:
        return cls(value > 0)

    @property
    def value(self) -> bool:
        return self._value

    def equals(self, other: "ReadonlyBoolean") -> bool:
        if not isinstance(other, ReadonlyBoolean):
            raise TypeError(f"Cannot compare {type(self).__name__} and {type(other).__name__}")
        return self._value is other._value

    def equals_native(self, value: bool) -> bool:
        return self._value is value

    def to_string(self) -> ReadonlyString:
        return ReadonlyString(str(self))

    def to_integer(self) -> ReadonlyInteger:
        return ReadonlyInteger(1 if self._value else 0)

    def __bool__(self) -> bool:
        return self._value

    def __str__(self) -> str:
        return "true" if self._value else "false"


ReadonlyBoolean.kind = ReadonlyBoolean
