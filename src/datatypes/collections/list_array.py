"""
Capacity-aware list base for the linear string collections.

Elements are held as ``ImmutableString`` wrappers. A capacity of ``-1``
means the list is unbounded; any other value is a hard limit enforced on
every push.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Self

from datatypes.config import UNBOUNDED_CAPACITY, get_config
from datatypes.exceptions import (
    EmptyInputError,
    OutOfRangeError,
    ParameterOutOfRangeError,
    PositiveIntegerError,
)
from datatypes.scalar.string import BaseString, ImmutableString

logger = logging.getLogger(__name__)


class AbstractListArray(ABC):
    """Ordered list of non-blank strings with an optional maximum capacity."""

    def __init__(
        self, initial: Iterable[str | BaseString] | None = None, capacity: int | None = None
    ) -> None:
        self._items: deque[ImmutableString] = deque()
        self._capacity = UNBOUNDED_CAPACITY
        if capacity is None:
            capacity = get_config().default_capacity
        if capacity != UNBOUNDED_CAPACITY:
            self.allocate(capacity)
        for element in initial or ():
            self.push(element)

    def count(self) -> int:
        return len(self._items)

    def to_list(self) -> list[ImmutableString]:
        return list(self._items)

    def clear(self) -> None:
        self._items = deque()
        logger.debug("List cleared", extra={"collection": type(self).__name__})

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def capacity(self) -> int:
        return self._capacity

    def has_max_capacity(self) -> bool:
        """Whether a capacity limit is set."""
        return self._capacity != UNBOUNDED_CAPACITY

    def is_full(self) -> bool:
        return self.has_max_capacity() and len(self._items) >= self._capacity

    def allocate(self, capacity: int) -> None:
        """
        Set the maximum number of elements.

        Raises:
            PositiveIntegerError: If capacity is less than 1
            OutOfRangeError: If capacity is below the current size
        """
        if capacity < 1:
            raise PositiveIntegerError(
                "Supplied capacity must be a positive integer.", {"capacity": capacity}
            )
        if capacity < len(self._items):
            raise OutOfRangeError(
                "Supplied capacity cannot be less than the current number of elements.",
                {"capacity": capacity, "count": len(self._items)},
            )
        self._capacity = capacity
        logger.debug(
            "Capacity allocated",
            extra={"collection": type(self).__name__, "capacity": capacity},
        )

    def push(self, element: str | BaseString) -> Self:
        """
        Add an element and return the collection for chaining.

        Raises:
            EmptyInputError: If the element is blank
            ParameterOutOfRangeError: If the collection is full
        """
        raw = element.value if isinstance(element, BaseString) else element
        if not isinstance(raw, str):
            raise TypeError(f"{type(self).__name__} only holds strings, got {type(raw).__name__}")
        if len(raw.strip()) == 0:
            raise EmptyInputError("Supplied element must be a non-empty string.", {"name": "element"})
        if self.is_full():
            logger.warning(
                "Push rejected, capacity reached",
                extra={"collection": type(self).__name__, "capacity": self._capacity},
            )
            raise ParameterOutOfRangeError(
                f"{type(self).__name__} is full (capacity {self._capacity}).",
                {"name": "element", "capacity": self._capacity},
            )
        self._items.append(ImmutableString(raw))
        return self

    @abstractmethod
    def peek(self) -> ImmutableString | None:
        pass

    @abstractmethod
    def pop(self) -> ImmutableString | None:
        pass

    def copy(self) -> Self:
        """Return a new collection with the same elements and capacity."""
        clone = type(self)(capacity=self._capacity)
        clone._items = deque(self._items)
        return clone

    def json_serialize(self) -> list[str]:
        return [item.value for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ImmutableString]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.json_serialize()!r}, capacity={self._capacity})"
