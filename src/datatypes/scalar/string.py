"""
String wrappers.

``ReadonlyString`` only answers queries. ``ImmutableString`` transforms
return a new instance; ``MutableString`` transforms replace the held value
and return the same instance, so calls can be chained either way.
"""

from abc import ABC, abstractmethod
from typing import Any, Self

from datatypes.scalar import text
from datatypes.scalar.base import ScalarValue


class BaseString(ScalarValue):
    """Query operations shared by every string variant."""

    native_types = (str,)
    family = "string"

    @classmethod
    def _validate(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{cls.__name__} requires a str, got {type(value).__name__}")
        return value

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value)

    @property
    def value(self) -> str:
        return self._value

    def length(self) -> int:
        return len(self._value)

    def word_count(self) -> int:
        return text.word_count(self._value)

    def equals(self, other: "BaseString") -> bool:
        if not isinstance(other, BaseString):
            raise TypeError(f"Cannot compare {type(self).__name__} and {type(other).__name__}")
        return self._value == other._value

    def index_of(self, search: str, start: int = 0) -> int | None:
        """
        Find the first position of ``search``.

        Args:
            search: Non-empty text to look for
            start: Position to start from; negative counts from the end

        Returns:
            The character position, or None when absent

        Raises:
            EmptyInputError: If search is empty
            OutOfRangeError: If ``|start|`` exceeds the length
        """
        return text.index_of(self._value, search, start)

    def contains(self, search: str) -> bool:
        return text.contains(self._value, search)

    def starts_with(self, search: str) -> bool:
        return text.starts_with(self._value, search)

    def ends_with(self, search: str) -> bool:
        return text.ends_with(self._value, search)

    def count(self, search: str, start: int = 0, length: int | None = None) -> int:
        """Count occurrences of ``search`` in the window given by start and length."""
        return text.count(self._value, search, start, length)

    def to_readonly(self) -> "ReadonlyString":
        return ReadonlyString(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __contains__(self, search: str) -> bool:
        return self.contains(search)


BaseString.kind = BaseString


class ReadonlyString(BaseString):
    """String wrapper without transformations."""

    variant = "readonly"


class StringTransformsMixin(ABC):
    """
    Text transformations for writable string variants.

    Classes using this mixin decide what a transformation produces through
    ``_apply``.
    """

    _value: str

    @abstractmethod
    def _apply(self, value: str) -> Self:
        """Produce the result of a transformation yielding ``value``."""
        pass

    def trim(self) -> Self:
        return self._apply(text.trim(self._value))

    def trim_left(self) -> Self:
        return self._apply(text.trim_left(self._value))

    def trim_right(self) -> Self:
        return self._apply(text.trim_right(self._value))

    def to_upper(self) -> Self:
        return self._apply(text.to_upper(self._value))

    def to_upper_first(self) -> Self:
        return self._apply(text.to_upper_first(self._value))

    def to_upper_words(self, delimiters: str = text.WORD_DELIMITERS) -> Self:
        return self._apply(text.to_upper_words(self._value, delimiters))

    def to_lower(self) -> Self:
        return self._apply(text.to_lower(self._value))

    def to_lower_first(self) -> Self:
        return self._apply(text.to_lower_first(self._value))

    def pad_left(self, length: int, pad: str = " ") -> Self:
        """Pad on the left up to ``length`` characters; no-op if already that long."""
        return self._apply(text.pad_left(self._value, length, pad))

    def pad_left_extra(self, length: int, pad: str = " ") -> Self:
        """Add exactly ``length`` characters on the left."""
        return self._apply(text.pad_left_extra(self._value, length, pad))

    def pad_right(self, length: int, pad: str = " ") -> Self:
        return self._apply(text.pad_right(self._value, length, pad))

    def pad_right_extra(self, length: int, pad: str = " ") -> Self:
        return self._apply(text.pad_right_extra(self._value, length, pad))

    def sub_string(self, start: int, length: int | None = None) -> Self:
        return self._apply(text.sub_string(self._value, start, length))

    def sub_left(self, length: int) -> Self:
        return self._apply(text.sub_left(self._value, length))

    def sub_right(self, length: int) -> Self:
        return self._apply(text.sub_right(self._value, length))

    def reverse(self) -> Self:
        return self._apply(text.reverse(self._value))

    def replace(self, search: str, replacement: str) -> Self:
        return self._apply(text.replace(self._value, search, replacement))


class ImmutableString(StringTransformsMixin, BaseString):
    """String wrapper whose transformations return new instances."""

    variant = "immutable"

    def _apply(self, value: str) -> Self:
        return type(self)(value)

    def to_mutable(self) -> "MutableString":
        return MutableString(self._value)


class MutableString(StringTransformsMixin, BaseString):
    """String wrapper whose transformations change it in place."""

    variant = "mutable"

    __hash__ = None  # type: ignore[assignment]

    def _apply(self, value: str) -> Self:
        self._replace(value)
        return self

    def to_immutable(self) -> ImmutableString:
        return ImmutableString(self._value)
