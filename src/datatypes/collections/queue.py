"""FIFO queue of strings."""

from datatypes.collections.list_array import AbstractListArray
from datatypes.scalar.string import ImmutableString


class Queue(AbstractListArray):
    """First in, first out."""

    def peek(self) -> ImmutableString | None:
        """Return the oldest element without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[0]

    def pop(self) -> ImmutableString | None:
        """Remove and return the oldest element, or None if empty."""
        if not self._items:
            return None
        return self._items.popleft()
