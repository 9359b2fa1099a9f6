"""
Text operations shared by every string wrapper variant.

All functions are pure: they take the raw ``str`` held by a wrapper and
return a new raw value (or a query result). Positions and lengths count
characters, not bytes.
"""

import re

from datatypes.exceptions import EmptyInputError, InvalidLengthError, OutOfRangeError

TRIM_CHARACTERS = " \t\n\r\0\x0b"
WORD_DELIMITERS = " \t\r\n\f\v"

_WORD_PATTERN = re.compile(r"[^\W\d_]+(?:['-][^\W\d_]+)*")


def require_non_empty(value: str, name: str) -> None:
    """Raise EmptyInputError when ``value`` is the empty string."""
    if len(value) == 0:
        raise EmptyInputError(f"The parameter '{name}' must be a non-empty string.", {"name": name})


def validate_start_and_length(value: str, start: int, length: int | None = None) -> None:
    """
    Check that a start/length window fits inside ``value``.

    Negative ``start`` counts from the end and negative ``length`` omits
    characters from the end, as in :func:`sub_string`.

    Raises:
        OutOfRangeError: If ``|start|`` exceeds the length, or if the window
            asks for more characters than are available.
    """
    size = len(value)
    if abs(start) > size:
        raise OutOfRangeError(
            f"Start position {start} is outside a value of length {size}.",
            {"start": start, "size": size},
        )
    if length is None:
        return
    if (start >= 0 and size - start < abs(length)) or (start < 0 and abs(length) > abs(start)):
        raise OutOfRangeError(
            f"Length {length} from position {start} exceeds a value of length {size}.",
            {"start": start, "length": length, "size": size},
        )


def word_count(value: str) -> int:
    return len(_WORD_PATTERN.findall(value))


def index_of(value: str, search: str, start: int = 0) -> int | None:
    """Return the first position of ``search`` at or after ``start``, or None."""
    require_non_empty(search, "search")
    if start != 0:
        validate_start_and_length(value, start)
    position = value.find(search, start)
    return None if position < 0 else position


def contains(value: str, search: str) -> bool:
    require_non_empty(search, "search")
    return search in value


def starts_with(value: str, search: str) -> bool:
    require_non_empty(search, "search")
    return value.startswith(search)


def ends_with(value: str, search: str) -> bool:
    require_non_empty(search, "search")
    return value.endswith(search)


def count(value: str, search: str, start: int = 0, length: int | None = None) -> int:
    """Count non-overlapping occurrences of ``search`` inside the window."""
    require_non_empty(search, "search")
    return sub_string(value, start, length or None).count(search)


def trim(value: str, characters: str = TRIM_CHARACTERS) -> str:
    return value.strip(characters)


def trim_left(value: str, characters: str = TRIM_CHARACTERS) -> str:
    return value.lstrip(characters)


def trim_right(value: str, characters: str = TRIM_CHARACTERS) -> str:
    return value.rstrip(characters)


def to_upper(value: str) -> str:
    return value.upper()


def to_lower(value: str) -> str:
    return value.lower()


def to_upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def to_lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def to_upper_words(value: str, delimiters: str = WORD_DELIMITERS) -> str:
    """Upper-case the first character and every character following a delimiter."""
    characters = []
    capitalize = True
    for character in value:
        characters.append(character.upper() if capitalize else character)
        capitalize = character in delimiters
    return "".join(characters)


def _padding(needed: int, pad: str) -> str:
    repeats = needed // len(pad) + 1
    return (pad * repeats)[:needed]


def _validate_pad(length: int, pad: str) -> None:
    if length < 1:
        raise InvalidLengthError(f"Pad length must be at least 1, got {length}.", {"length": length})
    require_non_empty(pad, "pad")


def pad_left(value: str, length: int, pad: str = " ") -> str:
    """Pad on the left up to a total of ``length`` characters."""
    _validate_pad(length, pad)
    return _padding(length - len(value), pad) + value


def pad_right(value: str, length: int, pad: str = " ") -> str:
    """Pad on the right up to a total of ``length`` characters."""
    _validate_pad(length, pad)
    return value + _padding(length - len(value), pad)


def pad_left_extra(value: str, length: int, pad: str = " ") -> str:
    """Add exactly ``length`` padding characters on the left."""
    _validate_pad(length, pad)
    return pad_left(value, len(value) + length, pad)


def pad_right_extra(value: str, length: int, pad: str = " ") -> str:
    """Add exactly ``length`` padding characters on the right."""
    _validate_pad(length, pad)
    return pad_right(value, len(value) + length, pad)


def sub_string(value: str, start: int, length: int | None = None) -> str:
    """
    Extract a portion of ``value``.

    Args:
        value: Source text
        start: First position; negative counts from the end
        length: Characters to take; negative omits that many from the end

    Raises:
        OutOfRangeError: If the window falls outside ``value``
    """
    validate_start_and_length(value, start, length)

    begin = start if start >= 0 else len(value) + start
    if length is None:
        return value[begin:]
    end = begin + length if length >= 0 else len(value) + length
    return value[begin : max(begin, end)]


def sub_left(value: str, length: int) -> str:
    if length < 1:
        raise InvalidLengthError(f"Length must be at least 1, got {length}.", {"length": length})
    return sub_string(value, 0, length)


def sub_right(value: str, length: int) -> str:
    if length < 1:
        raise InvalidLengthError(f"Length must be at least 1, got {length}.", {"length": length})
    return sub_string(value, -length)


def reverse(value: str) -> str:
    return value[::-1]


def replace(value: str, search: str, replacement: str) -> str:
    require_non_empty(search, "search")
    return value.replace(search, replacement)
