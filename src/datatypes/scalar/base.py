"""Base classes for scalar wrappers."""

from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, ClassVar

# (family, variant) -> concrete wrapper class
_VARIANTS: dict[tuple[str, str], type["ScalarValue"]] = {}


class ScalarValue(ABC):
    """Abstract base class for all scalar wrappers.

    A wrapper holds exactly one native value whose type never changes after
    construction. Provides:
    - Attribute freezing (the held value is only replaced through ``_replace``)
    - Equality against wrappers of the same kind and against raw natives
    - Lookup of sibling wrappers of the same variant for conversions
    """

    __slots__ = ()

    # Wrapper kind that equality and ordering are defined within
    kind: ClassVar[type["ScalarValue"]]
    native_types: ClassVar[tuple[type, ...]]
    family: ClassVar[str] = ""
    variant: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "variant" in cls.__dict__:
            _VARIANTS[(cls.family, cls.variant)] = cls

    def __init__(self, value: Any) -> None:
        self._value = self._validate(value)

    @classmethod
    @abstractmethod
    def _validate(cls, value: Any) -> Any:
        """Check the native value and return it in canonical form."""
        pass

    @property
    def value(self) -> Any:
        """Get the held native value."""
        return self._value

    @classmethod
    def _sibling(cls, family: str, variant: str | None = None) -> type["ScalarValue"]:
        """Get the wrapper class of ``family`` sharing this class's variant."""
        key = (family, variant or cls.variant)
        if key not in _VARIANTS:
            raise LookupError(f"No {key[1]} {family} wrapper is registered")
        return _VARIANTS[key]

    def _replace(self, value: Any) -> None:
        object.__setattr__(self, "_value", self._validate(value))

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, name):
            raise AttributeError(f"Cannot modify scalar attribute '{name}'")
        super().__setattr__(name, value)

    def _native(self, other: object) -> Any:
        """Return the native value behind ``other``, or NotImplemented."""
        if isinstance(other, ScalarValue):
            return other._value if isinstance(other, self.kind) else NotImplemented
        if isinstance(other, bool) and bool not in self.native_types:
            return NotImplemented
        if isinstance(other, self.native_types):
            return other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        native = self._native(other)
        if native is NotImplemented:
            return NotImplemented
        return bool(self._value == native)

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)


@total_ordering
class ComparableScalar(ScalarValue):
    """Scalar wrapper ordered by its native value.

    Only ``__lt__`` is defined here; @total_ordering derives the rest.
    """

    __slots__ = ()

    def __lt__(self, other: object) -> bool:
        native = self._native(other)
        if native is NotImplemented:
            return NotImplemented
        return bool(self._value < native)
