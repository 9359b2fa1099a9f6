"""
ArithmeticMixin for numeric wrappers.

Operations accept a wrapper of the same kind or a raw native number and
hand the computed value to ``_apply``, which decides whether a new
instance is built or the current one is updated.
"""

from abc import ABC, abstractmethod
from typing import Any, Self

from datatypes.exceptions import DivisionByZeroError


class ArithmeticMixin(ABC):
    """
    Mixin class that provides arithmetic operations for numeric wrappers.

    Classes using this mixin must also derive from ScalarValue.
    """

    _value: Any

    @abstractmethod
    def _apply(self, value: Any) -> Self:
        """
        Produce the result of an operation yielding ``value``.

        Args:
            value: The computed native value

        Returns:
            A new instance, or this instance updated
        """
        pass

    @abstractmethod
    def _quotient(self, dividend: Any, divisor: Any) -> Any:
        """Divide two native values of this kind."""
        pass

    def _operand(self, other: object, operation: str) -> Any:
        native = self._native(other)  # type: ignore[attr-defined]
        if native is NotImplemented:
            raise TypeError(f"Cannot {operation} {type(self).__name__} and {type(other).__name__}")
        return native

    def add(self, other: object) -> Self:
        """Add another number."""
        return self._apply(self._value + self._operand(other, "add"))

    def subtract(self, other: object) -> Self:
        """Subtract another number."""
        return self._apply(self._value - self._operand(other, "subtract"))

    def multiply(self, other: object) -> Self:
        """Multiply by another number."""
        return self._apply(self._value * self._operand(other, "multiply"))

    def divide(self, other: object) -> Self:
        """
        Divide by another number.

        Raises:
            DivisionByZeroError: If the divisor is zero
        """
        divisor = self._operand(other, "divide")
        if divisor == 0:
            raise DivisionByZeroError()
        return self._apply(self._quotient(self._value, divisor))
