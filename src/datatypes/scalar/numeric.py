"""
Integer and float wrappers.

Each kind comes in three variants: Readonly (queries and conversions
only), Immutable (arithmetic returns a new instance) and Mutable
(arithmetic updates the instance and returns it).
"""

import sys
from typing import TYPE_CHECKING, Any, Self

from datatypes.exceptions import EmptyInputError, InvalidArgumentError
from datatypes.scalar.arithmetic import ArithmeticMixin
from datatypes.scalar.base import ComparableScalar

if TYPE_CHECKING:
    from datatypes.scalar.boolean import ReadonlyBoolean
    from datatypes.scalar.formatting import NumberFormatter
    from datatypes.scalar.string import BaseString


class NumericValue(ComparableScalar):
    """Comparisons and conversions shared by integer and float wrappers."""

    @classmethod
    def from_string(cls, value: str) -> Self:
        """
        Parse a number from text.

        Raises:
            EmptyInputError: If the text is blank
            InvalidArgumentError: If the text is not a number of this kind
        """
        stripped = value.strip()
        if not stripped:
            raise EmptyInputError("Cannot create a number from an empty string.")
        try:
            return cls(cls._parse(stripped))
        except ValueError as e:
            raise InvalidArgumentError(
                f"'{value}' is not a valid {cls.family}.", {"value": value}
            ) from e

    @classmethod
    def _parse(cls, value: str) -> Any:
        raise NotImplementedError

    def _other_native(self, other: object) -> Any:
        if not isinstance(other, self.kind):
            raise TypeError(f"Cannot compare {type(self).__name__} and {type(other).__name__}")
        return other.value

    def _native_only(self, value: object) -> Any:
        if isinstance(value, bool) or not isinstance(value, self.native_types):
            raise TypeError(f"Cannot compare {type(self).__name__} and {type(value).__name__}")
        return value

    def is_bigger(self, other: "NumericValue") -> bool:
        return self._value > self._other_native(other)

    def is_bigger_native(self, value: int | float) -> bool:
        return self._value > self._native_only(value)

    def is_smaller(self, other: "NumericValue") -> bool:
        return self._value < self._other_native(other)

    def is_smaller_native(self, value: int | float) -> bool:
        return self._value < self._native_only(value)

    def equals(self, other: "NumericValue") -> bool:
        return self._value == self._other_native(other)

    def equals_native(self, value: int | float) -> bool:
        return self._value == self._native_only(value)

    def is_negative(self) -> bool:
        return self._value < 0

    def format(self, formatter: "NumberFormatter | None" = None) -> "BaseString":
        """
        Format the number for display.

        Args:
            formatter: Locale-aware formatter; a default one is created if omitted

        Returns:
            A string wrapper of the same variant as this number
        """
        if formatter is None:
            from datatypes.scalar.formatting import NumberFormatter

            formatter = NumberFormatter()
        return self._sibling("string")(formatter.format(self._value))  # type: ignore[return-value]

    def to_readonly(self) -> "NumericValue":
        return self._sibling(self.family, "readonly")(self._value)  # type: ignore[return-value]

    def to_string(self) -> "BaseString":
        return self._sibling("string")(str(self._value))  # type: ignore[return-value]

    def to_boolean(self) -> "ReadonlyBoolean":
        from datatypes.scalar.boolean import ReadonlyBoolean

        return ReadonlyBoolean(self._value > 0)

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)


class BaseInteger(NumericValue):
    native_types = (int,)
    family = "integer"

    @classmethod
    def _validate(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{cls.__name__} requires an int, got {type(value).__name__}")
        return value

    @classmethod
    def _parse(cls, value: str) -> int:
        return int(value)

    @classmethod
    def max(cls) -> int:
        return sys.maxsize

    @classmethod
    def min(cls) -> int:
        return -sys.maxsize - 1

    @classmethod
    def from_integer(cls, value: int) -> Self:
        return cls(value)

    @classmethod
    def from_float(cls, value: float) -> Self:
        """Create from a float, truncating toward zero."""
        return cls(int(value))

    @property
    def value(self) -> int:
        return self._value

    def to_float(self) -> "BaseFloat":
        return self._sibling("float")(float(self._value))  # type: ignore[return-value]

    def __index__(self) -> int:
        return self._value


BaseInteger.kind = BaseInteger


class BaseFloat(NumericValue):
    native_types = (int, float)
    family = "float"

    @classmethod
    def _validate(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{cls.__name__} requires a float, got {type(value).__name__}")
        return float(value)

    @classmethod
    def _parse(cls, value: str) -> float:
        return float(value)

    @classmethod
    def max(cls) -> float:
        return sys.float_info.max

    @classmethod
    def min(cls) -> float:
        return sys.float_info.min

    @classmethod
    def from_float(cls, value: float) -> Self:
        return cls(value)

    @classmethod
    def from_integer(cls, value: int) -> Self:
        return cls(float(value))

    @property
    def value(self) -> float:
        return self._value

    def to_integer(self) -> BaseInteger:
        """Convert to an integer wrapper, truncating toward zero."""
        return self._sibling("integer")(int(self._value))  # type: ignore[return-value]


BaseFloat.kind = BaseFloat


class _IntegerArithmetic(ArithmeticMixin):
    def _quotient(self, dividend: int, divisor: int) -> int:
        # truncate toward zero
        quotient = abs(dividend) // abs(divisor)
        return quotient if (dividend < 0) == (divisor < 0) else -quotient


class _FloatArithmetic(ArithmeticMixin):
    def _quotient(self, dividend: float, divisor: float) -> float:
        return dividend / divisor


class ReadonlyInteger(BaseInteger):
    variant = "readonly"


class ImmutableInteger(_IntegerArithmetic, BaseInteger):
    variant = "immutable"

    def _apply(self, value: int) -> Self:
        return type(self)(value)

    def to_mutable(self) -> "MutableInteger":
        return MutableInteger(self._value)


class MutableInteger(_IntegerArithmetic, BaseInteger):
    variant = "mutable"

    __hash__ = None  # type: ignore[assignment]

    def _apply(self, value: int) -> Self:
        self._replace(value)
        return self

    def to_immutable(self) -> ImmutableInteger:
        return ImmutableInteger(self._value)


class ReadonlyFloat(BaseFloat):
    variant = "readonly"


class ImmutableFloat(_FloatArithmetic, BaseFloat):
    variant = "immutable"

    def _apply(self, value: float) -> Self:
        return type(self)(value)

    def to_mutable(self) -> "MutableFloat":
        return MutableFloat(self._value)


class MutableFloat(_FloatArithmetic, BaseFloat):
    variant = "mutable"

    __hash__ = None  # type: ignore[assignment]

    def _apply(self, value: float) -> Self:
        self._replace(value)
        return self

    def to_immutable(self) -> ImmutableFloat:
        return ImmutableFloat(self._value)
