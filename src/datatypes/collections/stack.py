"""LIFO stack of strings."""

from datatypes.collections.list_array import AbstractListArray
from datatypes.scalar.string import ImmutableString


class Stack(AbstractListArray):
    """Last in, first out."""

    def peek(self) -> ImmutableString | None:
        """Return the top element without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[-1]

    def pop(self) -> ImmutableString | None:
        """Remove and return the top element, or None if empty."""
        if not self._items:
            return None
        return self._items.pop()
