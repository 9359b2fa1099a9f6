"""Reusable field declarations for value objects and entities."""

import re
from typing import Any

from datatypes.exceptions import EmptyInputError, InvalidEmailError, NonNegativeNumberError
from datatypes.scalar.boolean import ReadonlyBoolean
from datatypes.scalar.string import ImmutableString
from datatypes.value_objects.fields import cast
from datatypes.value_objects.value_object import ValueObject

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _non_negative(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{name}' must be an int, got {type(value).__name__}")
    if value < 0:
        raise NonNegativeNumberError(f"'{name}' cannot be negative.", {"name": name})
    return value


class HasActive(ValueObject):
    fields = ("active",)
    defaults = {"active": False}

    @cast("active")
    def _cast_active(self, value: Any) -> None:
        if isinstance(value, str):
            value = ReadonlyBoolean.from_string(value).value
        elif isinstance(value, ReadonlyBoolean):
            value = value.value
        elif not isinstance(value, bool):
            value = ReadonlyBoolean.from_float(float(value)).value
        self.active = value

    def is_active(self) -> bool:
        return self.active


class HasTitle(ValueObject):
    fields = ("title",)

    @cast("title")
    def _cast_title(self, value: str) -> None:
        title = ImmutableString(str(value)).trim()
        if title.length() == 0:
            raise EmptyInputError("The title must be a non-empty string.", {"name": "title"})
        self.title = title


class HasName(ValueObject):
    fields = ("name",)
    defaults = {"name": ""}

    @cast("name")
    def _cast_name(self, value: str) -> None:
        if not isinstance(value, str) or len(value.strip()) == 0:
            raise EmptyInputError("The name must be a non-empty string.", {"name": "name"})
        self.name = value


class HasAlias(ValueObject):
    """URL-friendly alias: trimmed, lower-cased, spaces replaced by underscores."""

    fields = ("alias",)
    defaults = {"alias": ""}

    @cast("alias")
    def _cast_alias(self, value: str) -> None:
        alias = value.strip().lower().replace(" ", "_")
        if len(alias) == 0:
            raise EmptyInputError("The alias must be a non-empty string.", {"name": "alias"})
        self.alias = alias


class HasEmail(ValueObject):
    fields = ("email",)

    @cast("email")
    def _cast_email(self, value: str) -> None:
        email = value.strip()
        if not EMAIL_PATTERN.match(email):
            raise InvalidEmailError(f"'{value}' is not a valid email address.", {"email": value})
        self.email = ImmutableString(email)


class HasHits(ValueObject):
    fields = ("hits",)
    defaults = {"hits": 0}

    @cast("hits")
    def _cast_hits(self, value: int) -> None:
        self.hits = _non_negative("hits", value)


class HasOrdering(ValueObject):
    fields = ("ordering",)
    defaults = {"ordering": 0}

    @cast("ordering")
    def _cast_ordering(self, value: int) -> None:
        self.ordering = _non_negative("ordering", value)
