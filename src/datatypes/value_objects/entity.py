"""
Entity base: a value object identified by a positive integer ID, with
tracking of which first-level attributes changed since loading.
"""

from typing import Any

from datatypes.exceptions import PositiveIntegerError
from datatypes.value_objects.fields import cast, on_load
from datatypes.value_objects.value_object import ValueObject


class Entity(ValueObject):
    """Value object with an ``id`` and dirty-state tracking.

    An entity loaded without an ``id`` is new. For a new entity, required
    fields always count as dirty so they are included in an insert.
    """

    fields = ("id",)

    id: int | None

    @cast("id")
    def _cast_id(self, value: Any) -> None:
        if value is None:
            self.id = None
            return
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise PositiveIntegerError(
                f"Entity id must be a positive integer, got {value!r}.", {"id": repr(value)}
            )
        self.id = value

    @on_load
    def _snapshot_state(self) -> None:
        self._initial_state = self.get_attributes()

    def get_id(self) -> int | None:
        return self.id

    def is_new(self) -> bool:
        return self.id is None

    def get_original(self) -> dict[str, Any]:
        """First-level attributes as they were when loaded or last reset."""
        return dict(self._initial_state)

    def get_dirty(self) -> dict[str, Any]:
        """Attributes that changed since loading, with their current values."""
        dirty = {}
        for name, value in self.get_attributes().items():
            changed = name not in self._initial_state or self._initial_state[name] != value
            if changed or (self.is_new() and name in self._schema.required):
                dirty[name] = value
        return dirty

    def is_dirty(self) -> bool:
        return bool(self.get_dirty())

    def reset_state(self) -> None:
        """Take the current attributes as the new original state."""
        self._initial_state = self.get_attributes()

    def trigger_update(self) -> None:
        """Run the registered on-update hooks."""
        self._schema.hooks.trigger_update(self)
