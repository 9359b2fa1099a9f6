"""
Associative store of string values.

Names are trimmed and lower-cased. When the store has a context, every
key is namespaced as ``context.name``.
"""

from datatypes.exceptions import EmptyInputError


class Store:
    """Key/value store with an optional context namespace."""

    def __init__(self, context: str | None = None) -> None:
        if context is not None and not context.strip():
            raise EmptyInputError("Supplied context must be a non-empty string.", {"name": "context"})
        self._context = context
        self._store: dict[str, str] = {}

    @property
    def context(self) -> str | None:
        return self._context

    @staticmethod
    def _sanitize(name: str) -> str:
        cleaned = name.strip().lower()
        if not cleaned:
            raise EmptyInputError("Supplied name must be a non-empty string.", {"name": "name"})
        return cleaned

    def _key(self, name: str) -> str:
        name = self._sanitize(name)
        return name if self._context is None else f"{self._context}.{name}"

    def values(self) -> dict[str, str]:
        return dict(self._store)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._store.get(self._key(name), default)

    def has(self, name: str) -> bool:
        return self._key(name) in self._store

    def set(self, name: str, value: str) -> bool:
        self._store[self._key(name)] = value
        return True

    def add(self, name: str, value: str) -> bool:
        """Set only if the name is not present yet."""
        if self.has(name):
            return False
        return self.set(name, value)

    def edit(self, name: str, value: str) -> bool:
        """Set only if the name is already present."""
        if not self.has(name):
            return False
        return self.set(name, value)

    def delete(self, name: str) -> bool:
        if not self.has(name):
            return False
        del self._store[self._key(name)]
        return True

    def json_serialize(self) -> dict[str, str]:
        return self.values()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(name.strip()) and self.has(name)
